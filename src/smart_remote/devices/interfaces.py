"""Capability shared by every controllable device."""

from typing import Protocol


class Device(Protocol):
    """A receiver that can at least be switched on and off."""

    def turn_on(self) -> None:
        """Power the device on."""

    def turn_off(self) -> None:
        """Power the device off."""
