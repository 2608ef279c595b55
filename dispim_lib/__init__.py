"""Typed device property access for the diSPIM plugin."""

from __future__ import annotations

from .core import DeviceCore, load_core
from .devices import Devices
from .errors import (
    DeviceNotFoundError,
    DispimError,
    NullValueError,
    PropertyAccessError,
    PropertyNotFoundError,
    PropertyParseError,
    UnsupportedValueError,
)
from .listeners import ListenerRegistry
from .properties import Properties, Result
from .reporting import ErrorReporter, LoggingReporter
from .types import DeviceKey, PropertiesConfig, PropertyKey, PropertyValue

__all__ = [
    "DeviceCore",
    "DeviceKey",
    "DeviceNotFoundError",
    "Devices",
    "DispimError",
    "ErrorReporter",
    "ListenerRegistry",
    "LoggingReporter",
    "NullValueError",
    "Properties",
    "PropertiesConfig",
    "PropertyAccessError",
    "PropertyKey",
    "PropertyNotFoundError",
    "PropertyParseError",
    "PropertyValue",
    "Result",
    "UnsupportedValueError",
    "load_core",
]
