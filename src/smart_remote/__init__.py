"""Universal smart-home remote built on bound command objects."""

from smart_remote.commands import (
    AdjustBrightnessCommand,
    AdjustVolumeCommand,
    ChangeChannelCommand,
    ChangeColorCommand,
    Command,
    TurnOffCommand,
    TurnOnCommand,
)
from smart_remote.devices import Device, InvalidBrightnessError, SmartLight, Stereo, TV
from smart_remote.notifications import Notification, NotificationSink, RecordingNotificationSink
from smart_remote.remote import RemoteControl, TriggerStatus

__all__ = [
    "AdjustBrightnessCommand",
    "AdjustVolumeCommand",
    "ChangeChannelCommand",
    "ChangeColorCommand",
    "Command",
    "Device",
    "InvalidBrightnessError",
    "Notification",
    "NotificationSink",
    "RecordingNotificationSink",
    "RemoteControl",
    "SmartLight",
    "Stereo",
    "TV",
    "TriggerStatus",
    "TurnOffCommand",
    "TurnOnCommand",
]
