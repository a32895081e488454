"""Minimal observer plumbing for split view notifications."""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class Subscription:
    """Handle returned by ``Emitter.subscribe``; call ``dispose()`` to unsubscribe."""

    def __init__(self, emitter: "Emitter", listener: Listener) -> None:
        self._emitter = emitter
        self._listener = listener

    def dispose(self) -> None:
        self._emitter.unsubscribe(self._listener)


class Emitter:
    """Fan a notification out to every subscribed listener.

    A failing listener is logged and does not stop the others.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Subscription:
        """Subscribe to this notification."""
        if listener not in self._listeners:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Unsubscribe a listener (no-op when not subscribed)."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def fire(self, *args: Any) -> None:
        for listener in list(self._listeners):
            try:
                listener(*args)
            except Exception as e:
                logger.error(f"Error in {self.name} listener: {e}", exc_info=True)

    def dispose(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
