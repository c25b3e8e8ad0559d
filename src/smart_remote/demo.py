"""Scripted demonstration wiring devices, commands and the remote together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from smart_remote.commands import (
    AdjustBrightnessCommand,
    AdjustVolumeCommand,
    ChangeChannelCommand,
    ChangeColorCommand,
    Command,
    for_device_off,
    for_device_on,
)
from smart_remote.devices import SmartLight, Stereo, TV
from smart_remote.notifications import NotificationSink
from smart_remote.remote import RemoteControl, TriggerStatus

KEY_TAKEAWAYS = (
    "RemoteControl never mentions TV, Stereo, or SmartLight",
    "Same remote controls all devices through the Command capability",
    "New devices can be added without changing RemoteControl",
    "Commands encapsulate requests as objects",
    "Invoker and receivers are fully decoupled",
)

PATTERN_COMPONENTS = (
    ("Command", "Standard API for all commands"),
    ("Concrete commands", "Wrap specific device operations"),
    ("Receivers", "Do the actual work (TV, Stereo, SmartLight)"),
    ("Invoker", "Triggers commands (RemoteControl)"),
    ("Client", "Sets up the system (the demo harness)"),
)


@dataclass(slots=True)
class DemoDevices:
    tv: TV
    stereo: Stereo
    light: SmartLight


@dataclass(slots=True)
class ButtonStep:
    """A button press in the script: what it is called and what it runs."""

    label: str
    command: Command


def build_devices(sink: NotificationSink) -> DemoDevices:
    return DemoDevices(tv=TV(sink=sink), stereo=Stereo(sink=sink), light=SmartLight(sink=sink))


def build_demo_steps(devices: DemoDevices, *, brightness: int = 75, color: str = "red") -> list[ButtonStep]:
    """Return the fixed button sequence used by the demonstration."""
    tv, stereo, light = devices.tv, devices.stereo, devices.light
    return [
        ButtonStep("Turn On TV", for_device_on(tv)),
        ButtonStep("Adjust Stereo Volume", AdjustVolumeCommand(stereo.adjust_volume)),
        ButtonStep("Change TV Channel", ChangeChannelCommand(tv.change_channel)),
        ButtonStep("Turn Off TV", for_device_off(tv)),
        ButtonStep("Turn On SmartLight", for_device_on(light)),
        ButtonStep(f"Change Light Color to {color.capitalize()}", ChangeColorCommand(light, color)),
        ButtonStep(f"Set Brightness to {brightness}%", AdjustBrightnessCommand(light, brightness)),
    ]


def run_demo(
    remote: RemoteControl,
    steps: list[ButtonStep],
    on_step: Callable[[int, ButtonStep], None] | None = None,
) -> list[TriggerStatus]:
    """Program and press the remote once per step, in order."""
    statuses: list[TriggerStatus] = []
    for index, step in enumerate(steps, start=1):
        if on_step is not None:
            on_step(index, step)
        remote.assign(step.command)
        statuses.append(remote.trigger())
    return statuses
