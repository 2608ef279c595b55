"""
dispim_lib/errors.py

Typed errors for property access.

Every failure the accessor can hit is normalized into one of these before it
reaches the error channel or a Result. The message is user-facing.
"""

from __future__ import annotations

from typing import Any, Optional


class DispimError(Exception):
    """Base exception for dispim_lib failures."""

    def __init__(
        self,
        message: str,
        *,
        device: Any = None,
        key: Any = None,
        label: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.device = device
        self.key = key
        self.label = label

    def __str__(self) -> str:
        return self.message


class DeviceNotFoundError(DispimError):
    """Raised when a device role is not mapped to a device label."""


class PropertyNotFoundError(DispimError):
    """Raised when the core reports that a device has no such property."""


class PropertyAccessError(DispimError):
    """Raised when the core rejects or fails a property call."""


class NullValueError(DispimError):
    """Raised when the core returns no value for a property."""


class PropertyParseError(DispimError):
    """Raised when a property string cannot be read as a number."""

    def __init__(self, message: str, *, value: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.value = value


class UnsupportedValueError(DispimError):
    """Raised when a value of an unsupported type is written."""

    def __init__(self, message: str, *, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.value = value


__all__ = [
    "DeviceNotFoundError",
    "DispimError",
    "NullValueError",
    "PropertyAccessError",
    "PropertyNotFoundError",
    "PropertyParseError",
    "UnsupportedValueError",
]
