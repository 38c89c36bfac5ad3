"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from tryscope import lift as L   # Recommended (balance)
    from tryscope import lift as _   # Minimal
    from tryscope import lift        # Explicit (for clarity)

Architecture:
- L.reify*    - try/except -> Either / Optional
- L.up.*      - подъем значений в Either
- L.down.*    - опускание Either в значение / kungfu Result
- L.call()    - вызов функций с лифтингом
- L.lazy.*    - мост в LazyCoroResult

Examples:
    from tryscope import lift as L

    # Reification
    quotient = L.reify(lambda: a // b)
    missing = L.reify_effect(lambda: cache.evict(key), KeyError)

    # Вызов функций
    parsed = L.call(int, raw)

    # Опускание
    value = L.down.unsafe(parsed)
    result = L.down.to_result(parsed)

    # Декораторы
    @L.reified(KeyError)
    def lookup(key): ...

    @L.unchecked
    def load(path): ...
"""

from __future__ import annotations

# Import namespaces
from . import down as down_ns
from . import lazy as lazy_ns
from . import up as up_ns

# Reification - the core of the namespace
from .reify import reify, reify_classifiable, reify_effect, reify_effect_classifiable

# From up namespace - подъем значений
from .up import fail, from_result, optional, pure

# From call namespace - вызов функций
from .call import call, reified, unchecked

# From down namespace - опускание
from .down import or_else, to_result, unsafe

# From lazy namespace - async
from .lazy import reify_async, to_lazy

# Namespace aliases для явного использования
up = up_ns
down = down_ns
lazy = lazy_ns

__all__ = (
    # Namespaces (L.up.*, L.down.*, L.lazy.*)
    "up",
    "down",
    "lazy",
    # Reify
    "reify",
    "reify_classifiable",
    "reify_effect",
    "reify_effect_classifiable",
    # Up
    "pure",
    "fail",
    "from_result",
    "optional",
    # Call
    "call",
    "reified",
    "unchecked",
    # Down
    "to_result",
    "unsafe",
    "or_else",
    # Lazy
    "reify_async",
    "to_lazy",
)
