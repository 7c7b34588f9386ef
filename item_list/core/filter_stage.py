"""Filter Stage — reduce source items by the active condition set.

Invariants:
    - Pure function: no IO, no subscriptions
    - Empty condition set is identity (every item passes, same order)
    - OR semantics: an item passes if it matches ANY active condition
    - Comparison is stringify(item value) == condition value
    - Missing item property fails that condition silently
    - Malformed condition key raises MalformedConditionKeyError (contract bug, loud)

Design Decisions:
    - Keys decoded once per call, not once per item
    - Missing properties detected with a private sentinel, so a property holding
      None still stringifies to "None" and can be matched deliberately
"""

from collections.abc import Callable, Iterable, Sequence

from item_list.core.collaborator_protocols import PropertyReader
from item_list.core.condition_key import decode, stringify_value
from item_list.core.domain_types import ConditionKey

_MISSING = object()


def _matches_any(
    item: PropertyReader,
    conditions: list[tuple[str, str]],
    stringify: Callable[[object], str],
) -> bool:
    for property_name, expected in conditions:
        value = item.get(property_name, _MISSING)
        if value is not _MISSING and stringify(value) == expected:
            return True
    return False


def filter_items(
    items: Sequence[PropertyReader],
    active_conditions: Iterable[ConditionKey],
    stringify: Callable[[object], str] = stringify_value,
) -> list[PropertyReader]:
    """Keep items matching any active condition. Pure, order-preserving."""
    conditions = [decode(key) for key in active_conditions]
    if not conditions:
        return list(items)
    return [item for item in items if _matches_any(item, conditions, stringify)]
