"""State Holder — in-process observable: current value plus change notifications.

Invariants:
    - .state always returns the most recently emitted value
    - Listeners are notified synchronously, in subscription order, on every emit
    - A listener subscribed during a notification is not called for that notification
    - Subscription.cancel() is idempotent; cancelling twice is a no-op
    - After close(), emit() and subscribe() raise HolderClosedError
    - Closing during a notification stops delivery to the remaining listeners

Design Decisions:
    - Explicit listener list over a global event bus: every dependency is a
      visible subscription handle
    - Listener exceptions propagate to the emitter: a failing consumer is a bug
      the producer's caller must see
"""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from item_list.core.errors import HolderClosedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class HolderSubscription:
    """Cancellable handle for one listener registration."""

    def __init__(self, holder: "StateHolder", listener: Callable) -> None:
        self._holder = holder
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._holder._remove(self._listener)


class StateHolder(Generic[T]):
    """Holds one current value and pushes every new value to its listeners."""

    def __init__(self, initial: T, name: str = "state") -> None:
        self._state = initial
        self._name = name
        self._listeners: list[Listener] = []
        self._closed = False

    @property
    def state(self) -> T:
        return self._state

    @property
    def name(self) -> str:
        return self._name

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> HolderSubscription:
        if self._closed:
            raise HolderClosedError(self._name)
        self._listeners.append(listener)
        return HolderSubscription(self, listener)

    def emit(self, state: T) -> None:
        """Replace the current value and notify every listener."""
        if self._closed:
            raise HolderClosedError(self._name)
        self._state = state
        for listener in list(self._listeners):
            # A listener may close the holder mid-delivery
            if self._closed:
                return
            listener(state)

    def close(self) -> None:
        """Drop all listeners. Idempotent."""
        if self._closed:
            return
        self._closed = True
        logger.debug(
            "State holder closed",
            extra={"source": self._name, "listener_count": len(self._listeners)},
        )
        self._listeners.clear()

    def _remove(self, listener: Listener) -> None:
        # Identity, not equality: the same callable may be subscribed twice
        for index, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[index]
                return
