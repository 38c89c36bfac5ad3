from .arena import AsyncScope, Scope, ScopeAction, ScopeEvent, check_arity
from .using import (
    run_scope,
    settle,
    using,
    using_nested,
    using_nested_unsafe,
    using_unsafe,
    using_writer,
)
from .using_async import using_async

__all__ = (
    "AsyncScope",
    "Scope",
    "ScopeAction",
    "ScopeEvent",
    "check_arity",
    "run_scope",
    "settle",
    "using",
    "using_async",
    "using_nested",
    "using_nested_unsafe",
    "using_unsafe",
    "using_writer",
)
