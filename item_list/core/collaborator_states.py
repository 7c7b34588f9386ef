"""Collaborator States — tagged shapes for the filter-conditions and item-source upstreams.

Invariants:
    - Readiness is an explicit tag (initialized / status), never a type check
    - States are frozen: collaborators publish a new value instead of mutating
    - available_conditions is carried for producers and renderers, never read by the engine

Design Decisions:
    - Frozen dataclasses with classmethod constructors for each variant: one
      class per upstream keeps equality and hashing simple
    - has_items() is the default recognizer; engines built over a different
      source shape pass their own predicate
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from item_list.core.domain_types import ConditionKey, SourceStatus

ItemT = TypeVar("ItemT")


@dataclass(frozen=True)
class FilterConditionsState:
    """Filter conditions upstream: uninitialized, or initialized with an active set."""

    initialized: bool = False
    active_conditions: frozenset[ConditionKey] = frozenset()
    available_conditions: dict[str, list[str]] = field(default_factory=dict, compare=False)

    @classmethod
    def uninitialized(cls) -> "FilterConditionsState":
        return cls()

    @classmethod
    def ready(
        cls,
        active_conditions: set[ConditionKey] | frozenset[ConditionKey] = frozenset(),
        available_conditions: dict[str, list[str]] | None = None,
    ) -> "FilterConditionsState":
        return cls(
            initialized=True,
            active_conditions=frozenset(active_conditions),
            available_conditions=dict(available_conditions or {}),
        )


@dataclass(frozen=True)
class ItemSourceState(Generic[ItemT]):
    """Item source upstream — items are only meaningful when status is LOADED."""

    status: SourceStatus = SourceStatus.PENDING
    items: tuple[ItemT, ...] = ()
    error: str | None = None

    @classmethod
    def pending(cls) -> "ItemSourceState[ItemT]":
        return cls()

    @classmethod
    def loaded(cls, items: list[ItemT] | tuple[ItemT, ...]) -> "ItemSourceState[ItemT]":
        return cls(status=SourceStatus.LOADED, items=tuple(items))

    @classmethod
    def failed(cls, error: str) -> "ItemSourceState[ItemT]":
        return cls(status=SourceStatus.FAILED, error=error)


def has_items(state: Any) -> bool:
    """Default source recognizer: only a LOADED ItemSourceState is ready."""
    return getattr(state, "status", None) is SourceStatus.LOADED
