from __future__ import annotations

import importlib
import logging

import pytest


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("smart_remote.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_demo_command_prints_notifications_in_order() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from smart_remote.main import app

    result = typer_testing.CliRunner().invoke(app, ["demo", "--color", "blue", "--brightness", "30"])

    assert result.exit_code == 0
    output = result.stdout
    assert output.index("TV is now on") < output.index("Volume adjusted") < output.index("Channel changed")
    assert "Color changed to: blue" in output
    assert "Brightness set to level 30%" in output
    assert "Key takeaways" in output
    assert "Pattern components" in output
    assert "Invoker: Triggers commands (RemoteControl)" in output


def test_demo_command_rejects_invalid_brightness() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from smart_remote.main import app

    result = typer_testing.CliRunner().invoke(app, ["demo", "--brightness", "150"])

    assert result.exit_code != 0


def test_press_without_command_reports_and_exits_cleanly() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from smart_remote.main import app

    result = typer_testing.CliRunner().invoke(app, ["press"])

    assert result.exit_code == 0
    assert "No command assigned" in result.stdout


def test_demo_logging_backend_logs_one_distinct_line_per_button(caplog) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from smart_remote.config import settings
    from smart_remote.main import app

    with caplog.at_level(logging.INFO, logger="smart_remote.notifications"):
        result = typer_testing.CliRunner().invoke(app, ["demo", "--backend", "logging", "--quiet"])

    assert result.exit_code == 0
    lines = [r.getMessage() for r in caplog.records if r.name == "smart_remote.notifications"]
    assert len(lines) == 7
    assert len(set(lines)) == 7
    assert f"device_notification SmartLight.adjust_color Color changed to: {settings.demo_color}" in lines


def test_start_prints_resolved_settings() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from smart_remote.config import settings
    from smart_remote.main import app

    result = typer_testing.CliRunner().invoke(app, ["start"])

    assert result.exit_code == 0
    assert "'app_name': 'smart-remote'" in result.stdout
    assert f"'notification_backend': '{settings.notification_backend}'" in result.stdout
    assert f"'demo_brightness': {settings.demo_brightness}" in result.stdout
