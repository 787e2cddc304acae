"""Result type for explicit error handling.

Operations that can fail in an expected way return ``Ok(value)`` or
``Err(error)`` instead of raising, so callers decide how each failure is
handled:

    match await provider.get_attach_items():
        case Ok(items):
            ...
        case Err(UnsupportedPlatform(name=name)):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
