"""Item List State — the three derived-state variants and the two-stage pipeline.

Invariants:
    - Exactly three variants: NoSourceItems, ItemEmptyState, ItemResults
    - ItemResults.items is non-empty and keeps source order
    - Every variant is frozen; a recomputation always builds a fresh instance
    - derive_list_state never returns NoSourceItems: the readiness guard is the
      engine's job, this function assumes ready upstreams

Design Decisions:
    - status tag on every variant so renderers branch on ListStatus, not isinstance
    - Value equality (dataclass eq) lets the engine skip publishing unchanged states
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from item_list.core.collaborator_protocols import PropertyReader
from item_list.core.condition_key import stringify_value
from item_list.core.domain_types import ConditionKey, ListStatus
from item_list.core.filter_stage import filter_items
from item_list.core.search_stage import search_items


@dataclass(frozen=True)
class NoSourceItems:
    """No valid upstream data yet."""
    status: ClassVar[ListStatus] = ListStatus.NO_SOURCE_ITEMS


@dataclass(frozen=True)
class ItemEmptyState:
    """Upstreams are ready but the pipeline produced zero items."""
    status: ClassVar[ListStatus] = ListStatus.EMPTY


@dataclass(frozen=True)
class ItemResults:
    """Non-empty ordered result of the filter + search pipeline."""
    status: ClassVar[ListStatus] = ListStatus.RESULTS
    items: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("ItemResults requires at least one item")


ItemListState = NoSourceItems | ItemEmptyState | ItemResults


def derive_list_state(
    items: Sequence[PropertyReader],
    active_conditions: Iterable[ConditionKey],
    query: str,
    search_properties: Sequence[str],
    stringify: Callable[[object], str] = stringify_value,
) -> ItemEmptyState | ItemResults:
    """Run filter then search over ready upstream values. Pure."""
    filtered = filter_items(items, active_conditions, stringify)
    results = search_items(query, filtered, search_properties)
    if not results:
        return ItemEmptyState()
    return ItemResults(tuple(results))
