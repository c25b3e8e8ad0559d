"""Stereo receiver."""

from __future__ import annotations

from dataclasses import dataclass, field

from smart_remote.notifications import ConsoleNotificationSink, Notification, NotificationSink


@dataclass(slots=True)
class Stereo:
    sink: NotificationSink = field(default_factory=ConsoleNotificationSink)
    name: str = "Stereo"

    def turn_on(self) -> None:
        self._notify("turn_on", f"{self.name} is now on")

    def turn_off(self) -> None:
        self._notify("turn_off", f"{self.name} is now off")

    def adjust_volume(self) -> None:
        self._notify("adjust_volume", "Volume adjusted")

    def _notify(self, action: str, message: str) -> None:
        self.sink.publish(Notification(device=self.name, action=action, message=message))
