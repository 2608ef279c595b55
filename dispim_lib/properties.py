"""
Typed property access for diSPIM devices.

This is the one place where device properties are read and written. It wraps
the core's string-keyed hasProperty/getProperty/setProperty calls with:
- symbolic keys and values (PropertyKey, PropertyValue)
- device roles resolved through Devices
- structured results (check_exists, write_value, read_*)
- "report and default" helpers for UI code (exists, set_value, get_value_as_*)
- a listener list for panels that refresh from properties
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .core import CoreValue, DeviceCore
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
from .numbers import parse_core_float, parse_core_int
from .reporting import ErrorReporter, LoggingReporter
from .types import DeviceKey, PropertiesConfig, PropertyKey, PropertyValue

T = TypeVar("T")

PropertyInput = Union[str, PropertyValue, int, float]


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    ok: bool
    data: Optional[T] = None
    error: Optional[DispimError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, data=value, error=None)

    @classmethod
    def failure(cls, error: DispimError) -> "Result[T]":
        return cls(ok=False, data=None, error=error)

    def unwrap(self) -> T:
        if self.ok:
            return self.data  # type: ignore[return-value]
        if self.error is not None:
            raise self.error
        raise DispimError("Unknown error.")

    def unwrap_or(self, default: T) -> T:
        if self.ok:
            return self.data  # type: ignore[return-value]
        return default


def _name(obj: Any) -> str:
    return str(getattr(obj, "name", obj))


class Properties:
    """
    Property accessor shared by the plugin's panels.

    Every ``ignore_missing`` flag defaults to False (strict): the device is
    assumed present and a missing one is an error. With ``ignore_missing``
    set, an unassigned device is skipped silently.
    """

    def __init__(
        self,
        devices: Devices,
        core: DeviceCore,
        *,
        config: Optional[PropertiesConfig] = None,
        reporter: Optional[ErrorReporter] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config or PropertiesConfig()
        if logger is None:
            logger = logging.getLogger(self._config.logger_name or __name__)
        self._log = logger
        self._devices = devices
        self._core = core
        self._report: ErrorReporter = reporter or LoggingReporter(self._log)
        self._listeners = ListenerRegistry("update_from_property", logger=self._log)

    @property
    def devices(self) -> Devices:
        return self._devices

    @property
    def core(self) -> DeviceCore:
        return self._core

    @property
    def config(self) -> PropertiesConfig:
        return self._config

    # --- structured API (no reporting) ---

    def check_exists(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False
    ) -> Result[bool]:
        resolved = self._resolve(device, key, ignore_missing)
        if not resolved.ok:
            return Result.failure(resolved.error)
        label = resolved.data
        if label is None:
            return Result.success(False)
        try:
            return Result.success(bool(self._core.hasProperty(label, str(key))))
        except Exception as exc:  # noqa: BLE001
            return Result.failure(
                self._wrap_core_error(
                    PropertyAccessError,
                    f"Couldn't find property {key} in device {label}",
                    exc,
                    device=device,
                    key=key,
                    label=label,
                )
            )

    def write_value(
        self,
        device: DeviceKey,
        key: PropertyKey,
        value: PropertyInput,
        ignore_missing: bool = False,
    ) -> Result[None]:
        resolved = self._resolve(device, key, ignore_missing)
        if not resolved.ok:
            return Result.failure(resolved.error)
        label = resolved.data
        if label is None:
            return Result.success(None)
        coerced = self._coerce(device, key, value)
        if not coerced.ok:
            return Result.failure(coerced.error)
        core_value = coerced.data
        self._log.debug("setProperty %s %s = %r", label, key, core_value)
        try:
            self._core.setProperty(label, str(key), core_value)
        except Exception as exc:  # noqa: BLE001
            return Result.failure(
                self._classify(
                    f"Error setting {_kind(core_value)} property {key} to {core_value} in device {label}",
                    exc,
                    device=device,
                    key=key,
                    label=label,
                )
            )
        return Result.success(None)

    def read_string(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False
    ) -> Result[str]:
        resolved = self._resolve(device, key, ignore_missing)
        if not resolved.ok:
            return Result.failure(resolved.error)
        label = resolved.data
        if label is None:
            return Result.success("")
        try:
            value = self._core.getProperty(label, str(key))
        except Exception as exc:  # noqa: BLE001
            return Result.failure(
                self._classify(
                    f"Could not get property {key} from device {label}",
                    exc,
                    device=device,
                    key=key,
                    label=label,
                )
            )
        self._log.debug("getProperty %s %s -> %r", label, key, value)
        if value is None:
            return Result.failure(
                NullValueError(
                    f"No value for property {key} from device {label}",
                    device=device,
                    key=key,
                    label=label,
                )
            )
        return Result.success(str(value))

    def read_integer(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False
    ) -> Result[int]:
        return self._read_number(device, key, ignore_missing, parse_core_int, 0, "int")

    def read_float(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False
    ) -> Result[float]:
        return self._read_number(device, key, ignore_missing, parse_core_float, 0.0, "float")

    # --- report-and-default API ---

    def exists(self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False) -> bool:
        """Return True if the device has the property. Never raises."""
        return self._unwrap(self.check_exists(device, key, ignore_missing), False)

    def set_value(
        self,
        device: DeviceKey,
        key: PropertyKey,
        value: PropertyInput,
        ignore_missing: bool = False,
    ) -> None:
        """
        Write a property value. Accepts str, PropertyValue, int or float.

        Failures go to the error channel; the call always returns normally.
        An unassigned device under ``ignore_missing`` is skipped before the
        value is checked.
        """
        self._unwrap(self.write_value(device, key, value, ignore_missing), None)

    def get_value_as_string(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False
    ) -> str:
        return self._unwrap(self.read_string(device, key, ignore_missing), "")

    def get_value_as_integer(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False
    ) -> int:
        """Return the property as an int, or 0 after reporting a failure."""
        return self._unwrap(self.read_integer(device, key, ignore_missing), 0)

    def get_value_as_float(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool = False
    ) -> float:
        """Return the property as a float, or 0.0 after reporting a failure."""
        return self._unwrap(self.read_float(device, key, ignore_missing), 0.0)

    # --- listeners ---

    def add_listener(self, listener: Any) -> None:
        """Add a listener implementing update_from_property()."""
        self._listeners.register(listener)

    def remove_listener(self, listener: Any) -> bool:
        return self._listeners.unregister(listener)

    def notify_listeners(self) -> int:
        """Tell each listener, in order, that properties changed."""
        return self._listeners.notify_all()

    # --- internals ---

    def _unwrap(self, result: Result[T], default: T) -> T:
        if result.ok:
            return result.data  # type: ignore[return-value]
        if result.error is not None:
            self._report(result.error)
        return default

    def _resolve(
        self, device: DeviceKey, key: PropertyKey, ignore_missing: bool
    ) -> Result[Optional[str]]:
        if ignore_missing:
            return Result.success(self._devices.get_device(device))
        try:
            return Result.success(self._devices.resolve(device))
        except DeviceNotFoundError:
            return Result.failure(
                DeviceNotFoundError(
                    f"No device assigned for {_name(device)} (property {key})",
                    device=device,
                    key=key,
                )
            )

    def _coerce(self, device: DeviceKey, key: PropertyKey, value: Any) -> Result[CoreValue]:
        if isinstance(value, PropertyValue):
            return Result.success(value.value)
        if isinstance(value, str):
            return Result.success(str(value))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Result.success(value)
        return Result.failure(
            UnsupportedValueError(
                f"Cannot set property {key} to {value!r}: unsupported type {type(value).__name__}",
                device=device,
                key=key,
                value=value,
            )
        )

    def _read_number(
        self,
        device: DeviceKey,
        key: PropertyKey,
        ignore_missing: bool,
        parse: Callable[..., T],
        zero: T,
        kind: str,
    ) -> Result[T]:
        text = self.read_string(device, key, ignore_missing)
        if not text.ok:
            return Result.failure(text.error)
        if ignore_missing and text.data == "":
            return Result.success(zero)
        try:
            value = parse(
                text.data,
                decimal_separator=self._config.decimal_separator,
                grouping_separator=self._config.grouping_separator,
            )
        except ValueError as exc:
            error = PropertyParseError(
                f"Could not parse {kind} value of {text.data!r} for {key} in device {_name(device)}",
                device=device,
                key=key,
                value=text.data,
            )
            error.__cause__ = exc
            return Result.failure(error)
        return Result.success(value)

    def _classify(
        self,
        message: str,
        exc: Exception,
        *,
        device: DeviceKey,
        key: PropertyKey,
        label: str,
    ) -> DispimError:
        """Map a core failure to PropertyNotFoundError or PropertyAccessError."""
        try:
            present = bool(self._core.hasProperty(label, str(key)))
        except Exception:  # noqa: BLE001
            present = True
        error_type = PropertyAccessError if present else PropertyNotFoundError
        return self._wrap_core_error(error_type, message, exc, device=device, key=key, label=label)

    def _wrap_core_error(
        self,
        error_type: type[DispimError],
        message: str,
        exc: Exception,
        **context: Any,
    ) -> DispimError:
        self._log.debug("Core call failed: %s", message, exc_info=exc)
        error = error_type(message, **context)
        error.__cause__ = exc
        return error


def _kind(value: Any) -> str:
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    return "string"


__all__ = ["Properties", "PropertyInput", "Result"]
