"""Boundary Protocols — contracts between the engine and its collaborators.

Invariants:
    - Items are read ONLY through get(property_name, default) — no attribute magic
    - Every collaborator, and the engine itself, exposes .state + .subscribe()
    - Subscription.cancel() stops delivery and is safe to call more than once

Design Decisions:
    - Protocol over ABC: structural subtyping, plain dicts already satisfy PropertyReader
    - Listeners receive the new state, but the engine re-reads every collaborator's
      current .state instead of trusting the argument (values read at processing time)
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class PropertyReader(Protocol):
    """Structural contract for items: read a named property or fall back to default."""
    def get(self, property_name: str, default: Any = None, /) -> Any: ...


class Subscription(Protocol):
    """Handle returned by subscribe(); cancelling it stops notifications."""
    def cancel(self) -> None: ...


class Observable(Protocol[T_co]):
    """Current-value snapshot plus change notifications."""

    @property
    def state(self) -> T_co: ...

    def subscribe(self, listener: Callable[[Any], None]) -> Subscription: ...
