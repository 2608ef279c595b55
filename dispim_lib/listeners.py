"""
dispim_lib/listeners.py

Ordered listener registry with synchronous broadcast.

Listeners are plain objects exposing a single notification method (for
example ``update_from_property``). Broadcast runs in registration order over
a snapshot of the list, and a failing listener does not stop the rest.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

_LOGGER = logging.getLogger(__name__)


class ListenerRegistry:
    """
    Insertion-ordered listeners notified through one named method.

    Typical usage:
        registry = ListenerRegistry("update_from_property")
        registry.register(panel)
        registry.notify_all()    # calls panel.update_from_property()
    """

    def __init__(self, method: str, *, logger: Optional[logging.Logger] = None) -> None:
        self._method = method
        self._listeners: list[Any] = []
        self._log = logger or _LOGGER
        self._error_types: set[type] = set()

    @property
    def method(self) -> str:
        return self._method

    def register(self, listener: Any) -> None:
        """Append a listener. The same listener may be registered twice."""
        self._listeners.append(listener)

    def unregister(self, listener: Any) -> bool:
        """Remove the first matching listener. Returns False if it was absent."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._listeners.clear()

    def notify_all(self) -> int:
        """
        Call each listener's notification method in registration order.

        Returns the number of listeners that raised.
        """
        failures = 0
        for listener in list(self._listeners):
            try:
                getattr(listener, self._method)()
            except Exception as exc:  # noqa: BLE001
                failures += 1
                exc_type = type(exc)
                if exc_type not in self._error_types:
                    self._error_types.add(exc_type)
                    self._log.warning("Listener %s failed: %s", self._method, exc_type.__name__)
                self._log.debug("Listener %r failed", listener, exc_info=exc)
        return failures

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._listeners))

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners


__all__ = ["ListenerRegistry"]
