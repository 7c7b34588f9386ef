"""Service test fixtures — in-process collaborators and an engine factory.

Invariants:
    - Every test gets fresh StateHolders for all three upstreams
    - Upstreams start unready (uninitialized conditions, pending source, empty query)
    - Engines built through make_engine are closed after the test

Design Decisions:
    - Real StateHolders over mocks: the engine contract is structural, and the
      holder is the same implementation the engine uses for its own output
"""

import pytest

from item_list.core.collaborator_states import FilterConditionsState, ItemSourceState
from item_list.services.item_list_engine import ItemListEngine
from item_list.services.state_holder import StateHolder


@pytest.fixture
def filter_conditions():
    return StateHolder(FilterConditionsState.uninitialized(), name="filter_conditions")


@pytest.fixture
def search_query():
    return StateHolder("", name="search_query")


@pytest.fixture
def source():
    return StateHolder(ItemSourceState.pending(), name="source")


@pytest.fixture
def make_engine(filter_conditions, search_query, source):
    """Factory: build an engine over the fixture holders; closed on teardown."""
    engines = []

    def _make(**kwargs):
        engine = ItemListEngine(filter_conditions, search_query, source, **kwargs)
        engines.append(engine)
        return engine

    yield _make
    for engine in engines:
        engine.close()


@pytest.fixture
def recorded(make_engine):
    """Engine plus the list of states it published, in order."""
    def _make(**kwargs):
        engine = make_engine(**kwargs)
        states = []
        engine.subscribe(states.append)
        return engine, states

    return _make
