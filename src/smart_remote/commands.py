"""Command objects that wrap one device operation each.

A command is bound to its receiver when it is constructed and never rebound.
The remote only ever sees the :class:`Command` capability, so it stays
independent of every concrete device type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from smart_remote.devices import Device, SmartLight, validate_brightness

DeviceAction = Callable[[], None]


class Command(Protocol):
    """Something a remote button can execute."""

    def execute(self) -> None:
        """Perform the wrapped request."""


@dataclass(frozen=True, slots=True, eq=False)
class TurnOnCommand:
    """Switches on whatever device the bound action belongs to."""

    action: DeviceAction

    def execute(self) -> None:
        self.action()


@dataclass(frozen=True, slots=True, eq=False)
class TurnOffCommand:
    action: DeviceAction

    def execute(self) -> None:
        self.action()


@dataclass(frozen=True, slots=True, eq=False)
class ChangeChannelCommand:
    """Device-specific command for TVs."""

    action: DeviceAction

    def execute(self) -> None:
        self.action()


@dataclass(frozen=True, slots=True, eq=False)
class AdjustVolumeCommand:
    """Device-specific command for stereos."""

    action: DeviceAction

    def execute(self) -> None:
        self.action()


@dataclass(frozen=True, slots=True, eq=False)
class AdjustBrightnessCommand:
    """Sets a smart light to a fixed brightness percentage."""

    light: SmartLight
    level: int

    def __post_init__(self) -> None:
        validate_brightness(self.level)

    def execute(self) -> None:
        self.light.adjust_brightness(self.level)


@dataclass(frozen=True, slots=True, eq=False)
class ChangeColorCommand:
    """Sets a smart light to a fixed colour."""

    light: SmartLight
    color: str

    def execute(self) -> None:
        self.light.adjust_color(self.color)


def for_device_on(device: Device) -> TurnOnCommand:
    """Bind the generic turn-on command to ``device``."""
    return TurnOnCommand(device.turn_on)


def for_device_off(device: Device) -> TurnOffCommand:
    """Bind the generic turn-off command to ``device``."""
    return TurnOffCommand(device.turn_off)
