"""Callback channels for form change notification.

The Form announces snapshots and submissions through these channels.
Delivery is synchronous and in subscription order; a listener that
raises stops delivery and the error propagates to the caller.
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[..., None]


class Channel:
    """Ordered list of listeners called with the same arguments."""

    def __init__(self, name: str = "channel") -> None:
        self.name = name
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Add a listener.

        Returns:
            A callable that removes this listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, *args: Any) -> None:
        """Call every listener with ``args``."""
        logger.debug("%s: emitting to %d listener(s)", self.name, len(self._listeners))
        for listener in list(self._listeners):
            listener(*args)

    def __len__(self) -> int:
        return len(self._listeners)


class SubmitEvent:
    """Host submission event whose default action can be suppressed."""

    def __init__(self) -> None:
        self.default_prevented = False

    def prevent_default(self) -> None:
        """Suppress the host's default submission action."""
        self.default_prevented = True
