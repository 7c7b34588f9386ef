"""Item List State tests — state variants and the filter + search pipeline.

Tests cover:
    - Variant status tags and value equality
    - ItemResults rejects an empty item tuple
    - derive_list_state: empty vs results, filter-then-search composition
    - Monotonic narrowing: |search(filter(items))| <= |filter(items)| <= |items|
"""

import pytest

from item_list.core.condition_key import encode
from item_list.core.domain_types import ListStatus
from item_list.core.filter_stage import filter_items
from item_list.core.item_list_state import (
    ItemEmptyState, ItemResults, NoSourceItems, derive_list_state,
)
from item_list.core.search_stage import search_items


A = {"id": "1", "extra": "extraValue1"}
B = {"id": "2", "extra": "extraValue2"}
C = {"id": "3", "extra": "extraValue3"}


# --- Variants -----------------------------------------------------------------

def test_variant_status_tags():
    assert NoSourceItems().status is ListStatus.NO_SOURCE_ITEMS
    assert ItemEmptyState().status is ListStatus.EMPTY
    assert ItemResults((A,)).status is ListStatus.RESULTS


def test_variants_compare_by_value():
    assert NoSourceItems() == NoSourceItems()
    assert ItemEmptyState() == ItemEmptyState()
    assert ItemResults((A, B)) == ItemResults((A, B))
    assert ItemResults((A, B)) != ItemResults((B, A))
    assert NoSourceItems() != ItemEmptyState()


def test_item_results_requires_items():
    with pytest.raises(ValueError):
        ItemResults(())


# --- Pipeline -----------------------------------------------------------------

def test_no_conditions_no_query_returns_all():
    assert derive_list_state([A, B, C], set(), "", []) == ItemResults((A, B, C))


def test_no_matching_condition_is_empty_state():
    state = derive_list_state([A, B, C], {encode("id", "123")}, "", [])
    assert state == ItemEmptyState()


def test_or_conditions_keep_source_order():
    state = derive_list_state([A, B, C], {encode("id", "3"), encode("id", "1")}, "", [])
    assert state == ItemResults((A, C))


def test_query_applied_after_filter():
    conditions = {encode("id", "1"), encode("id", "2"), encode("id", "3")}
    state = derive_list_state([A, B, C], conditions, "value2", ["extra"])
    assert state == ItemResults((B,))


def test_query_cannot_reintroduce_filtered_item():
    state = derive_list_state([A, B, C], {encode("id", "1")}, "value2", ["extra"])
    assert state == ItemEmptyState()


def test_empty_source_is_empty_state():
    assert derive_list_state([], set(), "", []) == ItemEmptyState()


def test_pipeline_narrows_monotonically():
    items = [A, B, C, {"id": "4"}, {"id": "2", "extra": 99}]
    conditions = {encode("id", "2"), encode("id", "4")}
    filtered = filter_items(items, conditions)
    searched = search_items("value", filtered, ["extra"])
    assert len(searched) <= len(filtered) <= len(items)
    assert searched == [B]
