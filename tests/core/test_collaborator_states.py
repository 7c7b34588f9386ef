"""Collaborator States tests — tagged filter-condition and item-source shapes.

Tests cover:
    - FilterConditionsState variants and frozenset normalisation
    - available_conditions excluded from equality
    - ItemSourceState variants and the has_items recognizer
"""

from item_list.core.collaborator_states import (
    FilterConditionsState, ItemSourceState, has_items,
)
from item_list.core.condition_key import encode
from item_list.core.domain_types import SourceStatus


def test_uninitialized_conditions_are_not_initialized():
    state = FilterConditionsState.uninitialized()
    assert not state.initialized
    assert state.active_conditions == frozenset()


def test_ready_conditions_freeze_active_set():
    key = encode("id", "1")
    state = FilterConditionsState.ready({key}, {"id": ["1", "2"]})
    assert state.initialized
    assert state.active_conditions == frozenset({key})
    assert state.available_conditions == {"id": ["1", "2"]}


def test_available_conditions_do_not_affect_equality():
    a = FilterConditionsState.ready(set(), {"id": ["1"]})
    b = FilterConditionsState.ready(set(), {})
    assert a == b


def test_loaded_source_has_items():
    state = ItemSourceState.loaded([{"id": 1}])
    assert state.status is SourceStatus.LOADED
    assert state.items == ({"id": 1},)
    assert has_items(state)


def test_loaded_empty_source_still_has_items_shape():
    assert has_items(ItemSourceState.loaded([]))


def test_pending_and_failed_sources_are_not_ready():
    assert not has_items(ItemSourceState.pending())
    failed = ItemSourceState.failed("timeout")
    assert failed.error == "timeout"
    assert not has_items(failed)


def test_foreign_shapes_are_not_ready():
    assert not has_items(None)
    assert not has_items({"items": [1, 2]})
