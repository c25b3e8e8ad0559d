"""Smart light receiver with brightness and colour control."""

from __future__ import annotations

from dataclasses import dataclass, field

from smart_remote.notifications import ConsoleNotificationSink, Notification, NotificationSink

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100


class InvalidBrightnessError(ValueError):
    """Raised when a brightness level falls outside 0-100."""


def validate_brightness(level: int) -> int:
    """Return ``level`` unchanged if it is an integer percentage, else raise."""
    # bool is an int subclass; True/False are not brightness levels
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidBrightnessError(f"Brightness must be an integer, got {level!r}")
    if not MIN_BRIGHTNESS <= level <= MAX_BRIGHTNESS:
        raise InvalidBrightnessError(
            f"Brightness must be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}, got {level}"
        )
    return level


@dataclass(slots=True)
class SmartLight:
    """Dimmable, colour-changing light.

    Brightness is a percentage; colour is a free-form name such as ``"red"``.
    """

    sink: NotificationSink = field(default_factory=ConsoleNotificationSink)
    name: str = "SmartLight"

    def turn_on(self) -> None:
        self._notify("turn_on", f"{self.name} is now on")

    def turn_off(self) -> None:
        self._notify("turn_off", f"{self.name} is now off")

    def adjust_brightness(self, level: int) -> None:
        validate_brightness(level)
        self._notify("adjust_brightness", f"Brightness set to level {level}%", argument=level)

    def adjust_color(self, color: str) -> None:
        self._notify("adjust_color", f"Color changed to: {color}", argument=color)

    def _notify(self, action: str, message: str, argument: int | str | None = None) -> None:
        self.sink.publish(Notification(device=self.name, action=action, message=message, argument=argument))
