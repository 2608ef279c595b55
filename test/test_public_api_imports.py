from __future__ import annotations

import dataclasses
import logging
from enum import Enum

import dispim_lib
from dispim_lib import (
    DeviceCore,
    DeviceKey,
    Devices,
    DispimError,
    Properties,
    PropertiesConfig,
    PropertyKey,
    PropertyValue,
    Result,
)
from dispim_lib import errors as errors_mod


class _Core:
    def hasProperty(self, label, name):
        return True

    def getProperty(self, label, name):
        return "1"

    def setProperty(self, label, name, value):
        return None


def test_public_api_types_are_dataclasses_or_enums() -> None:
    assert dataclasses.is_dataclass(PropertiesConfig)
    assert dataclasses.is_dataclass(Result)
    assert issubclass(PropertyKey, Enum)
    assert issubclass(PropertyValue, Enum)
    assert issubclass(DeviceKey, Enum)


def test_all_exports_resolve() -> None:
    for name in dispim_lib.__all__:
        assert hasattr(dispim_lib, name), name


def test_error_types_share_a_base() -> None:
    for name in errors_mod.__all__:
        assert issubclass(getattr(errors_mod, name), DispimError)


def test_structural_core_protocol() -> None:
    assert isinstance(_Core(), DeviceCore)
    assert not isinstance(object(), DeviceCore)


def test_logger_name_from_config(caplog) -> None:
    config = PropertiesConfig(logger_name="dispim.test")
    props = Properties(Devices(), _Core(), config=config)
    with caplog.at_level(logging.ERROR, logger="dispim.test"):
        props.get_value_as_string(DeviceKey.GALVO_A, PropertyKey.SPIM_STATE)
    assert [rec.name for rec in caplog.records] == ["dispim.test"]
