"""Universal remote control (the invoker)."""

from __future__ import annotations

import logging
from enum import Enum

from smart_remote.commands import Command


class TriggerStatus(str, Enum):
    """Outcome of pressing the remote's button."""

    EXECUTED = "executed"
    NO_COMMAND = "no_command"


class RemoteControl:
    """Holds at most one command and executes it on demand.

    The remote knows nothing about devices. Assigning a command replaces the
    previous one; nothing is queued.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._command: Command | None = None
        self._logger = logger or logging.getLogger("smart_remote.remote")

    @property
    def command(self) -> Command | None:
        return self._command

    @property
    def is_assigned(self) -> bool:
        return self._command is not None

    def assign(self, command: Command) -> None:
        """Program the button with ``command``."""
        self._command = command
        self._logger.debug("command_assigned", extra={"command_type": type(command).__name__})

    def trigger(self) -> TriggerStatus:
        """Press the button.

        With nothing assigned this reports the condition and returns
        :attr:`TriggerStatus.NO_COMMAND` instead of raising.
        """
        command = self._command
        if command is None:
            self._logger.warning("no_command_assigned")
            return TriggerStatus.NO_COMMAND

        command.execute()
        self._logger.debug("command_triggered", extra={"command_type": type(command).__name__})
        return TriggerStatus.EXECUTED
