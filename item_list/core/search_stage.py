"""Search Stage — reduce filtered items by a lowercase substring query.

Invariants:
    - Pure function: no IO, no subscriptions
    - Empty query is identity
    - Empty search_properties is identity regardless of query
    - Match: ANY listed property holds a str whose lowercase form contains query
    - Non-str or missing property values never match (no coercion)

Design Decisions:
    - Only the item side is lowercased: the query producer stores queries lowercase
"""

from collections.abc import Sequence

from item_list.core.collaborator_protocols import PropertyReader


def _matches_query(
    item: PropertyReader, query: str, search_properties: Sequence[str],
) -> bool:
    for property_name in search_properties:
        value = item.get(property_name)
        if isinstance(value, str) and query in value.lower():
            return True
    return False


def search_items(
    query: str,
    items: Sequence[PropertyReader],
    search_properties: Sequence[str],
) -> list[PropertyReader]:
    """Keep items whose searchable properties contain query. Pure, order-preserving."""
    if not query or not search_properties:
        return list(items)
    return [
        item for item in items
        if _matches_query(item, query, search_properties)
    ]
