from __future__ import annotations

import dataclasses

import pytest

from dispim_lib import DeviceKey, PropertiesConfig, PropertyKey, PropertyValue


def test_property_key_string_is_wire_name_and_stable() -> None:
    for key in PropertyKey:
        first = str(key)
        assert first == key.value
        assert str(key) == first
        assert f"{key}" == first


def test_wire_names_are_unique() -> None:
    for enum_cls in (PropertyKey, PropertyValue, DeviceKey):
        values = [member.value for member in enum_cls]
        assert len(values) == len(set(values))


def test_lookup_by_wire_string() -> None:
    assert PropertyKey("BeamEnabled") is PropertyKey.BEAM_ENABLED
    assert PropertyKey("TRIGGER SOURCE") is PropertyKey.TRIGGER_SOURCE
    assert PropertyValue("Yes") is PropertyValue.YES
    assert PropertyValue("Z - save settings to card (partial)") is PropertyValue.DO_SSZ
    with pytest.raises(ValueError):
        PropertyKey("NotAProperty")


def test_selected_wire_names() -> None:
    assert str(PropertyKey.SPIM_LINESCAN_PERIOD) == "SingleAxisXPeriod(ms)"
    assert str(PropertyKey.SA_AMPLITUDE) == "SingleAxisAmplitude(um)"
    assert str(PropertyValue.JS_RIGHT_WHEEL) == "22 - right wheel"
    assert str(PropertyValue.SAM_TRIANGLE) == "1 - Triangle"


def test_config_is_frozen_with_us_defaults() -> None:
    config = PropertiesConfig()
    assert config.decimal_separator == "."
    assert config.grouping_separator == ","
    assert config.logger_name is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.decimal_separator = ","  # type: ignore[misc]
