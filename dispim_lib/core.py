"""
dispim_lib/core.py

The device-control core contract wrapped by the accessor.

The method names follow the Micro-Manager core (pymmcore / pymmcore-plus
``CMMCore``), so a real core instance satisfies the protocol unchanged.
"""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

CoreValue = Union[str, int, float, bool]


@runtime_checkable
class DeviceCore(Protocol):
    def hasProperty(self, label: str, propName: str) -> bool: ...

    def getProperty(self, label: str, propName: str) -> str: ...

    def setProperty(self, label: str, propName: str, propValue: CoreValue) -> None: ...


def load_core() -> DeviceCore:
    """
    Return the process-wide pymmcore-plus core.

    Requires the ``mmcore`` extra. Prefer passing a core explicitly to
    Properties; this is for applications that already share the singleton.
    """
    from pymmcore_plus import CMMCorePlus

    return CMMCorePlus.instance()


__all__ = ["CoreValue", "DeviceCore", "load_core"]
