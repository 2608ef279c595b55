"""
dispim_lib/devices.py

Device registry: maps device roles (DeviceKey) to device labels loaded in the
core. Owned by the application and shared with Properties.

Resolution comes in two forms:
- get_device(): lenient, returns None for an unassigned role.
- resolve(): strict, raises DeviceNotFoundError.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .errors import DeviceNotFoundError
from .listeners import ListenerRegistry
from .types import DeviceKey


class Devices:
    """Role to device-label mapping with change notification."""

    def __init__(
        self,
        assignments: Optional[Mapping[DeviceKey, Optional[str]]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or logging.getLogger(__name__)
        self._labels: dict[DeviceKey, str] = {}
        self._listeners = ListenerRegistry("devices_changed", logger=self._log)
        for key, label in (assignments or {}).items():
            if label:
                self._labels[DeviceKey(key)] = label

    def set_device(self, key: DeviceKey, label: Optional[str]) -> None:
        """Assign a device label to a role. None or "" clears the role."""
        key = DeviceKey(key)
        previous = self._labels.get(key)
        if label:
            self._labels[key] = label
        else:
            self._labels.pop(key, None)
        current = self._labels.get(key)
        if current != previous:
            self._log.debug("Device %s: %r -> %r", key.name, previous, current)
            self._listeners.notify_all()

    def get_device(self, key: DeviceKey) -> Optional[str]:
        """Return the label for a role, or None if unassigned."""
        return self._labels.get(key)

    def resolve(self, key: DeviceKey) -> str:
        """Return the label for a role or raise DeviceNotFoundError."""
        label = self._labels.get(key)
        if label is None:
            name = getattr(key, "name", key)
            raise DeviceNotFoundError(f"No device assigned for {name}", device=key)
        return label

    def is_assigned(self, key: DeviceKey) -> bool:
        return key in self._labels

    def assigned(self) -> dict[DeviceKey, str]:
        return dict(self._labels)

    def add_listener(self, listener: Any) -> None:
        """Add a listener implementing devices_changed()."""
        self._listeners.register(listener)

    def remove_listener(self, listener: Any) -> bool:
        return self._listeners.unregister(listener)


__all__ = ["Devices"]
