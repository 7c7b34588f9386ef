"""Item List Engine — derives the displayed item list from three upstream collaborators.

Invariants:
    - Starts in NoSourceItems, then recomputes once from the current upstream states
      as soon as all three subscriptions are in place
    - After construction, only notifications (or refresh()) trigger recomputation
    - Guard: uninitialized filter conditions OR an unready source -> NoSourceItems,
      whichever collaborator triggered the notification
    - Pipeline: search(query, filter(items, active_conditions)) -> ItemEmptyState | ItemResults
    - Every recomputation reads the CURRENT state of all three collaborators
    - Notifications are processed FIFO; one raised while publishing is queued, never nested
    - Equal consecutive states are not re-published
    - close() attempts to cancel all three subscriptions even when one fails,
      is idempotent, and never leaks a subscription

Design Decisions:
    - Explicit subscription handles per collaborator over a shared event bus:
      each dependency is visible and individually releasable
    - Source readiness via injected is_ready predicate (default has_items) —
      the engine never inspects collaborator types
    - Output exposed through a StateHolder: downstream code subscribes to the
      engine exactly the way the engine subscribes to its upstreams
"""

import logging
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from item_list.config import get_settings
from item_list.core.collaborator_protocols import Observable, PropertyReader, Subscription
from item_list.core.collaborator_states import FilterConditionsState, has_items
from item_list.core.condition_key import stringify_value
from item_list.core.domain_types import UpstreamSource
from item_list.core.errors import MissingCollaboratorError, SubscriptionReleaseError
from item_list.core.item_list_state import (
    ItemListState, ItemResults, NoSourceItems, derive_list_state,
)
from item_list.schemas.engine_options import EngineOptions
from item_list.services.state_holder import HolderSubscription, StateHolder

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=PropertyReader)
SourceT = TypeVar("SourceT")


class ItemListEngine(Generic[ItemT, SourceT]):
    """Reactive derived list over filter conditions, search query and item source."""

    def __init__(
        self,
        filter_conditions: Observable[FilterConditionsState],
        search_query: Observable[str],
        source: Observable[SourceT],
        search_properties: Sequence[str] | None = None,
        *,
        is_ready: Callable[[SourceT], bool] = has_items,
        stringify: Callable[[object], str] = stringify_value,
    ) -> None:
        collaborators = {
            UpstreamSource.FILTER_CONDITIONS: filter_conditions,
            UpstreamSource.SEARCH_QUERY: search_query,
            UpstreamSource.SOURCE: source,
        }
        for name, collaborator in collaborators.items():
            if collaborator is None:
                raise MissingCollaboratorError(name.value)

        if search_properties is None:
            search_properties = get_settings().default_search_properties
        self._options = EngineOptions(search_properties=search_properties)

        self._filter_conditions = filter_conditions
        self._search_query = search_query
        self._source = source
        self._is_ready = is_ready
        self._stringify = stringify

        self._output: StateHolder[ItemListState] = StateHolder(
            NoSourceItems(), name="item_list",
        )
        self._pending: deque[UpstreamSource] = deque()
        self._draining = False
        self._closed = False
        self._subscriptions: dict[UpstreamSource, Subscription] = {}
        self._subscribe_all(collaborators)
        self._initial_recompute()

    # --- Output contract ---------------------------------------------------------

    @property
    def state(self) -> ItemListState:
        return self._output.state

    @property
    def search_properties(self) -> tuple[str, ...]:
        return self._options.search_properties

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Callable[[ItemListState], None]) -> HolderSubscription:
        return self._output.subscribe(listener)

    def refresh(self) -> None:
        """Recompute now from the collaborators' current states."""
        self._enqueue(UpstreamSource.REFRESH)

    # --- Lifecycle ---------------------------------------------------------------

    def close(self) -> None:
        """Release all upstream subscriptions and the output holder. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        failures = self._release_subscriptions()
        self._output.close()
        if failures:
            raise SubscriptionReleaseError(failures)

    def __enter__(self) -> "ItemListEngine[ItemT, SourceT]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --- Wiring ------------------------------------------------------------------

    def _subscribe_all(self, collaborators: dict[UpstreamSource, Observable]) -> None:
        """Acquire one subscription per collaborator; on failure release what was acquired."""
        try:
            for name, collaborator in collaborators.items():
                self._subscriptions[name] = collaborator.subscribe(
                    self._listener_for(name),
                )
        except Exception:
            self._abort()
            raise

    def _initial_recompute(self) -> None:
        """Derive from upstreams that were already ready before subscription."""
        try:
            self._enqueue(UpstreamSource.REFRESH)
        except Exception:
            self._abort()
            raise

    def _abort(self) -> None:
        # Construction failed: never leave a subscription behind
        self._closed = True
        self._release_subscriptions()
        self._output.close()

    def _listener_for(self, name: UpstreamSource) -> Callable[[Any], None]:
        # Notification payload ignored: recompute reads current states instead
        def listener(_state: Any) -> None:
            self._enqueue(name)
        return listener

    def _release_subscriptions(self) -> dict[str, BaseException]:
        failures: dict[str, BaseException] = {}
        while self._subscriptions:
            name, subscription = self._subscriptions.popitem()
            try:
                subscription.cancel()
            except Exception as e:
                logger.warning(
                    "Failed to cancel %s subscription: %s", name.value, e,
                    extra={"collaborator": name.value,
                           "error_code": "SUBSCRIPTION_RELEASE_FAILED"},
                )
                failures[name.value] = e
        return failures

    # --- Recomputation -----------------------------------------------------------

    def _enqueue(self, trigger: UpstreamSource) -> None:
        if self._closed:
            return
        self._pending.append(trigger)
        if self._draining:
            return
        self._draining = True
        try:
            while self._pending:
                self._recompute(self._pending.popleft())
        except Exception:
            self._pending.clear()
            raise
        finally:
            self._draining = False

    def _recompute(self, trigger: UpstreamSource) -> None:
        conditions = self._filter_conditions.state
        source_state = self._source.state

        if not conditions.initialized or not self._is_ready(source_state):
            new_state: ItemListState = NoSourceItems()
        else:
            new_state = derive_list_state(
                source_state.items,
                conditions.active_conditions,
                self._search_query.state,
                self._options.search_properties,
                self._stringify,
            )

        logger.debug(
            "Item list recomputed",
            extra={
                "source": trigger.value,
                "status": new_state.status.value,
                "item_count": (
                    len(new_state.items) if isinstance(new_state, ItemResults) else 0
                ),
            },
        )
        self._publish(new_state)

    def _publish(self, new_state: ItemListState) -> None:
        if new_state == self._output.state:
            return
        self._output.emit(new_state)
