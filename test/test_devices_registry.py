from __future__ import annotations

import pytest

from dispim_lib import DeviceKey, DeviceNotFoundError, Devices


class _Listener:
    def __init__(self) -> None:
        self.count = 0

    def devices_changed(self) -> None:
        self.count += 1


def test_resolve_assigned_and_unassigned() -> None:
    devices = Devices({DeviceKey.XY_STAGE: "XYStage:XY:31", DeviceKey.PIEZO_B: ""})
    assert devices.resolve(DeviceKey.XY_STAGE) == "XYStage:XY:31"
    assert devices.get_device(DeviceKey.PIEZO_B) is None
    with pytest.raises(DeviceNotFoundError) as excinfo:
        devices.resolve(DeviceKey.PIEZO_B)
    assert excinfo.value.device is DeviceKey.PIEZO_B


def test_set_device_notifies_only_on_change() -> None:
    devices = Devices()
    listener = _Listener()
    devices.add_listener(listener)

    devices.set_device(DeviceKey.CAMERA_A, "HamCam1")
    devices.set_device(DeviceKey.CAMERA_A, "HamCam1")
    assert listener.count == 1

    devices.set_device(DeviceKey.CAMERA_A, None)
    assert listener.count == 2
    assert devices.is_assigned(DeviceKey.CAMERA_A) is False

    devices.set_device(DeviceKey.CAMERA_B, "")
    assert listener.count == 2


def test_assigned_returns_a_copy() -> None:
    devices = Devices({DeviceKey.UPPER_Z_DRIVE: "ZStage:V:37"})
    snapshot = devices.assigned()
    snapshot[DeviceKey.LOWER_Z_DRIVE] = "ZStage:Z:32"
    assert devices.assigned() == {DeviceKey.UPPER_Z_DRIVE: "ZStage:V:37"}


def test_remove_listener() -> None:
    devices = Devices()
    listener = _Listener()
    devices.add_listener(listener)
    assert devices.remove_listener(listener) is True
    devices.set_device(DeviceKey.GALVO_B, "Scanner:CD:33")
    assert listener.count == 0
    assert devices.remove_listener(listener) is False
