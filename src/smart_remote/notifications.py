"""Sinks that receive the observable side effects of device operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from rich import print


@dataclass(frozen=True, slots=True)
class Notification:
    """One device operation, as seen from outside the device."""

    device: str
    action: str
    message: str
    argument: int | str | None = None


class NotificationSink(Protocol):
    """Destination for device notifications."""

    def publish(self, notification: Notification) -> None:
        """Deliver a single notification."""


@dataclass(slots=True)
class RecordingNotificationSink:
    """Keeps notifications in arrival order for later inspection."""

    notifications: list[Notification] = field(default_factory=list)

    def publish(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def clear(self) -> None:
        self.notifications.clear()


class ConsoleNotificationSink:
    """Prints notification messages to the terminal."""

    def publish(self, notification: Notification) -> None:
        print(notification.message)


class LoggingNotificationSink:
    """Emits each notification as a structured log record."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("smart_remote.notifications")

    def publish(self, notification: Notification) -> None:
        self._logger.info(
            "device_notification %s.%s %s",
            notification.device,
            notification.action,
            notification.message,
            extra={
                "device": notification.device,
                "action": notification.action,
                "argument": notification.argument,
                "notification": notification.message,
            },
        )


def build_sink(backend: str) -> NotificationSink:
    """Return the sink registered under ``backend``."""
    normalized = backend.strip().lower()
    if normalized == "console":
        return ConsoleNotificationSink()
    if normalized == "logging":
        return LoggingNotificationSink()
    raise ValueError(f"Unknown notification backend: {backend!r} (expected 'console' or 'logging')")
