"""Public types for dispim_lib: property keys, values, device roles and config."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class _WireEnum(str, Enum):
    """Enum whose value is the exact string the device adapter expects."""

    def __str__(self) -> str:
        return self.value


class PropertyKey(_WireEnum):
    """
    Device adapter properties used by the plugin.

    The member name is used in Python code; the value is the property
    name used by the device adapter.
    """

    JOYSTICK_ENABLED = "JoystickEnabled"
    JOYSTICK_INPUT = "JoystickInput"
    JOYSTICK_INPUT_X = "JoystickInputX"
    JOYSTICK_INPUT_Y = "JoystickInputY"
    SPIM_NUM_SIDES = "SPIMNumSides"
    SPIM_NUM_SLICES = "SPIMNumSlices"
    SPIM_NUM_REPEATS = "SPIMNumRepeats"
    SPIM_NUM_SCANS_PER_SLICE = "SPIMNumScansPerSlice"
    SPIM_LINESCAN_PERIOD = "SingleAxisXPeriod(ms)"
    SPIM_DELAY_SIDE = "SPIMDelayBeforeSide(ms)"
    SPIM_DELAY_SLICE = "SPIMDelayBeforeSlice(ms)"
    SPIM_FIRST_SIDE = "SPIMFirstSide"
    SPIM_STATE = "SPIMState"
    SA_AMPLITUDE = "SingleAxisAmplitude(um)"
    SA_OFFSET = "SingleAxisOffset(um)"
    SA_AMPLITUDE_X_DEG = "SingleAxisXAmplitude(deg)"
    SA_OFFSET_X_DEG = "SingleAxisXOffset(deg)"
    SA_OFFSET_X = "SingleAxisXOffset(um)"
    SA_MODE_X = "SingleAxisXMode"
    SA_PATTERN_X = "SingleAxisXPattern"
    SA_AMPLITUDE_Y_DEG = "SingleAxisYAmplitude(deg)"
    SA_OFFSET_Y_DEG = "SingleAxisYOffset(deg)"
    SA_OFFSET_Y = "SingleAxisYOffset(um)"
    AXIS_LETTER = "AxisLetter"
    SERIAL_ONLY_ON_CHANGE = "OnlySendSerialCommandOnChange"
    SERIAL_COMMAND = "SerialCommand"
    SERIAL_COM_PORT = "SerialComPort"
    MAX_DEFLECTION_X = "MaxDeflectionX(deg)"
    MIN_DEFLECTION_X = "MinDeflectionX(deg)"
    BEAM_ENABLED = "BeamEnabled"
    SAVE_CARD_SETTINGS = "SaveCardSettings"
    TRIGGER_SOURCE = "TRIGGER SOURCE"


class PropertyValue(_WireEnum):
    """Enumerable property values, as understood by the device adapter."""

    YES = "Yes"
    NO = "No"
    JS_NONE = "0 - none"
    JS_X = "2 - joystick X"
    JS_Y = "3 - joystick Y"
    JS_RIGHT_WHEEL = "22 - right wheel"
    JS_LEFT_WHEEL = "23 - left wheel"
    SPIM_ARMED = "Armed"
    SPIM_RUNNING = "Running"
    SPIM_IDLE = "Idle"
    SAM_DISABLED = "0 - Disabled"
    SAM_ENABLED = "1 - Enabled"
    SAM_TRIANGLE = "1 - Triangle"
    DO_IT = "Do it"
    DO_SSZ = "Z - save settings to card (partial)"
    INTERNAL = "INTERNAL"
    EXTERNAL = "EXTERNAL"


class DeviceKey(_WireEnum):
    """Device roles the plugin drives. Mapped to device labels by Devices."""

    CAMERA_A = "CameraA"
    CAMERA_B = "CameraB"
    MULTI_CAMERA = "MultiCamera"
    PIEZO_A = "PiezoA"
    PIEZO_B = "PiezoB"
    GALVO_A = "MicromirrorA"
    GALVO_B = "MicromirrorB"
    XY_STAGE = "XYStage"
    LOWER_Z_DRIVE = "LowerZDrive"
    UPPER_Z_DRIVE = "UpperZDrive"


@dataclass(frozen=True, slots=True)
class PropertiesConfig:
    """
    Immutable accessor configuration.

    Core property strings are US-formatted, so the separators default to
    "." and ",". Provide once at construction time.
    """

    decimal_separator: str = "."
    grouping_separator: str = ","
    logger_name: Optional[str] = None
