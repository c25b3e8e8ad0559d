import logging

import pytest

from smart_remote.commands import ChangeColorCommand, TurnOnCommand
from smart_remote.devices import SmartLight, TV
from smart_remote.notifications import RecordingNotificationSink
from smart_remote.remote import RemoteControl, TriggerStatus


class SpyCommand:
    def __init__(self) -> None:
        self.executions = 0

    def execute(self) -> None:
        self.executions += 1


def test_trigger_without_command_reports_and_does_nothing(caplog) -> None:
    remote = RemoteControl()

    with caplog.at_level(logging.WARNING, logger="smart_remote.remote"):
        status = remote.trigger()

    assert status == TriggerStatus.NO_COMMAND
    assert remote.is_assigned is False
    assert "no_command_assigned" in caplog.text


def test_assign_replaces_previous_command() -> None:
    remote = RemoteControl()
    old, new = SpyCommand(), SpyCommand()

    remote.assign(old)
    remote.assign(new)
    status = remote.trigger()

    assert status == TriggerStatus.EXECUTED
    assert remote.command is new
    assert old.executions == 0
    assert new.executions == 1


def test_retriggering_executes_each_time() -> None:
    sink = RecordingNotificationSink()
    remote = RemoteControl()
    remote.assign(TurnOnCommand(TV(sink=sink).turn_on))

    remote.trigger()
    remote.trigger()

    assert [n.action for n in sink.notifications] == ["turn_on", "turn_on"]
    assert sink.notifications[0] is not sink.notifications[1]


def test_color_commands_swap_without_touching_previous() -> None:
    sink = RecordingNotificationSink()
    light = SmartLight(sink=sink)
    remote = RemoteControl()

    red = ChangeColorCommand(light, "red")
    remote.assign(red)
    remote.trigger()
    assert [n.argument for n in sink.notifications] == ["red"]

    remote.assign(ChangeColorCommand(light, "blue"))
    remote.trigger()

    assert [n.argument for n in sink.notifications] == ["red", "blue"]
    assert red.color == "red"


def test_device_errors_propagate_from_trigger() -> None:
    class Broken:
        def execute(self) -> None:
            raise RuntimeError("device unplugged")

    remote = RemoteControl()
    remote.assign(Broken())

    with pytest.raises(RuntimeError, match="unplugged"):
        remote.trigger()
