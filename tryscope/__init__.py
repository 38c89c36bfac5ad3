"""
tryscope - exceptions as values, resources as scopes.

Building blocks for replacing try/except control flow with data and for
acquiring several resources with guaranteed, ordered release.

Architecture:
- Either (Left | Right) is the value every operation returns
- classify decides ordinary / checked / fatal via a ClassifyPolicy
- lift reifies raising code into Either (sync) or LazyCoroResult (async)
- scope runs acquire → body → release with suppressed-failure aggregation
"""

# Core types
from ._types import MAX_RESOURCES, AsyncCloseable, Closeable, Effect, Kind, Predicate, Thunk
from .either import Either, Left, Right, left, right

# Helpers
from ._helpers import NO_OP, NO_OP_CHECKED, identity, repeat_effect

# Classification
from . import classify
from .classify import DEFAULT_POLICY, ClassifyPolicy, first_match, matches_any, where

# Lift helpers (reification)
from . import lift
from .lift import (
    call,
    reified,
    reify,
    reify_async,
    reify_classifiable,
    reify_effect,
    reify_effect_classifiable,
    unchecked,
)

# Writer journal
from . import writer
from .writer import Log, WriterResult

# Scoped acquisition
from . import scope
from .scope import (
    Scope,
    ScopeEvent,
    using,
    using_async,
    using_nested,
    using_nested_unsafe,
    using_unsafe,
    using_writer,
)

# Errors
from ._errors import (
    AbsentSideError,
    CheckedError,
    ScopeArityError,
    WrappedCheckedError,
    add_suppressed,
    suppressed,
)

__all__ = (
    # Types
    "AsyncCloseable",
    "Closeable",
    "Effect",
    "Kind",
    "MAX_RESOURCES",
    "Predicate",
    "Thunk",
    # Either
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    # Helpers
    "NO_OP",
    "NO_OP_CHECKED",
    "identity",
    "repeat_effect",
    # Classify
    "classify",
    "DEFAULT_POLICY",
    "ClassifyPolicy",
    "first_match",
    "matches_any",
    "where",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "call",
    "reified",
    "reify",
    "reify_async",
    "reify_classifiable",
    "reify_effect",
    "reify_effect_classifiable",
    "unchecked",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    # Scope
    "scope",
    "Scope",
    "ScopeEvent",
    "using",
    "using_async",
    "using_nested",
    "using_nested_unsafe",
    "using_unsafe",
    "using_writer",
    # Errors
    "AbsentSideError",
    "CheckedError",
    "ScopeArityError",
    "WrappedCheckedError",
    "add_suppressed",
    "suppressed",
)
