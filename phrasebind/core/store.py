#!/usr/bin/env python3
"""
Store - synchronous state container with ordered change notification.

State is replaced, never mutated: every reducer returns a new object for
any slice it changes and hands back the previous object otherwise.
"""

from collections.abc import Callable, Mapping
from typing import Any

from phrasebind.core.actions import Action, ActionType
from phrasebind.core.logging_utils import setup_logger

__all__ = ["Store", "Subscription", "combine_reducers", "create_store"]

logger = setup_logger(__name__)

Reducer = Callable[[Any, Action], Any]
Listener = Callable[[], None]


class Subscription:
    """Handle for one store listener.

    Closing is idempotent and can happen through ``close()``, by calling the
    handle like an unsubscribe function, or by leaving a ``with`` block.
    """

    def __init__(self, store: "Store", listener: Listener):
        self._store = store
        self.listener = listener
        self.active = True

    def close(self):
        """Stop delivering notifications to the listener."""
        if not self.active:
            return
        self.active = False
        self._store._remove(self)

    __call__ = close

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class Store:
    """Single-threaded state container.

    Features:
    - Synchronous dispatch, listeners notified in subscription order
    - Listener errors are logged and do not stop delivery
    - Subscriptions closed mid-notification are skipped
    """

    def __init__(self, reducer: Reducer, initial_state: Any = None):
        """Initialize store.

        Args:
            reducer: Function(state, action) returning the next state
            initial_state: Optional preloaded state
        """
        self._reducer = reducer
        self._subscriptions: list[Subscription] = []

        # Metrics
        self._actions_dispatched = 0
        self._notifications_sent = 0
        self._listener_errors = 0

        self._state = reducer(initial_state, Action(ActionType.INIT))

    def get_state(self) -> Any:
        """Get the current state snapshot."""
        return self._state

    def dispatch(self, action: Action) -> Action:
        """Apply an action and notify listeners.

        Args:
            action: Action to reduce

        Returns:
            The dispatched action
        """
        self._state = self._reducer(self._state, action)
        self._actions_dispatched += 1

        for subscription in list(self._subscriptions):
            if not subscription.active:
                continue
            self._notify(subscription, action)

        return action

    def subscribe(self, listener: Listener) -> Subscription:
        """Subscribe to state changes.

        Args:
            listener: Callback invoked with no arguments after each dispatch

        Returns:
            Subscription handle
        """
        subscription = Subscription(self, listener)
        self._subscriptions.append(subscription)
        return subscription

    def _remove(self, subscription: Subscription):
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass

    def _notify(self, subscription: Subscription, action: Action):
        """Deliver one notification.

        Args:
            subscription: Subscription to notify
            action: Action that triggered the notification
        """
        self._notifications_sent += 1
        try:
            subscription.listener()
        except Exception as e:
            self._listener_errors += 1
            logger.error(f"Error in store listener for {action.type}: {e}")

    @property
    def listener_count(self) -> int:
        """Number of active subscriptions."""
        return len(self._subscriptions)

    def get_metrics(self) -> dict[str, int]:
        """Get store metrics.

        Returns:
            Dictionary of metrics
        """
        return {
            "actions_dispatched": self._actions_dispatched,
            "notifications_sent": self._notifications_sent,
            "listener_errors": self._listener_errors,
            "listeners": len(self._subscriptions),
        }


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """Combine slice reducers into one reducer over a dict state.

    The previous state object is returned when no slice changed identity.

    Args:
        reducers: Mapping of state key to slice reducer

    Returns:
        Root reducer
    """
    reducers = dict(reducers)

    def root_reducer(state: Mapping[str, Any] | None, action: Action) -> dict[str, Any]:
        state = state if state is not None else {}
        changed = False
        next_state = {}
        for key, reducer in reducers.items():
            previous = state.get(key)
            next_slice = reducer(previous, action)
            next_state[key] = next_slice
            changed = changed or next_slice is not previous
        # Keys without a reducer are carried over untouched
        for key, value in state.items():
            if key not in next_state:
                next_state[key] = value
        if not changed and isinstance(state, dict) and len(state) == len(next_state):
            return state
        return next_state

    return root_reducer


def create_store(reducer: Reducer, initial_state: Any = None) -> Store:
    """Create a store.

    Args:
        reducer: Root reducer
        initial_state: Optional preloaded state

    Returns:
        Store instance
    """
    return Store(reducer, initial_state)
