"""CLI entrypoint for the smart remote demonstration."""

from __future__ import annotations

import logging

import typer
from rich import print

from smart_remote.config import settings
from smart_remote.demo import (
    KEY_TAKEAWAYS,
    PATTERN_COMPONENTS,
    ButtonStep,
    build_demo_steps,
    build_devices,
    run_demo,
)
from smart_remote.devices import InvalidBrightnessError
from smart_remote.notifications import LoggingNotificationSink, build_sink
from smart_remote.remote import RemoteControl, TriggerStatus

app = typer.Typer(help="Smart home universal remote")


@app.callback()
def _configure_logging() -> None:
    logging.basicConfig(level=settings.log_level)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "notification_backend": settings.notification_backend,
            "demo_brightness": settings.demo_brightness,
            "demo_color": settings.demo_color,
        }
    )


@app.command()
def demo(
    backend: str = typer.Option(None, help="Notification backend: console or logging"),
    brightness: int = typer.Option(None, help="Brightness level for the light step (0-100)"),
    color: str = typer.Option(None, help="Colour for the light step"),
    quiet: bool = typer.Option(False, help="Only print device notifications"),
) -> None:
    """Run the scripted button sequence against TV, Stereo and SmartLight."""
    try:
        sink = build_sink(backend or settings.notification_backend)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if isinstance(sink, LoggingNotificationSink):
        # demo output, shown regardless of the root log level
        logging.getLogger("smart_remote.notifications").setLevel(logging.INFO)

    devices = build_devices(sink)
    try:
        steps = build_demo_steps(
            devices,
            brightness=settings.demo_brightness if brightness is None else brightness,
            color=color or settings.demo_color,
        )
    except InvalidBrightnessError as exc:
        raise typer.BadParameter(str(exc)) from exc

    def _announce(index: int, step: ButtonStep) -> None:
        if not quiet:
            print(f"\n[bold]\\[Button {index}][/bold] Programming: {step.label}")

    remote = RemoteControl()
    statuses = run_demo(remote, steps, on_step=_announce)

    if not quiet:
        print("\n[bold]Key takeaways[/bold]")
        for line in KEY_TAKEAWAYS:
            print(f"  - {line}")
        print("\n[bold]Pattern components[/bold]")
        for name, role in PATTERN_COMPONENTS:
            print(f"  - {name}: {role}")
        print({"buttons_pressed": len(statuses), "executed": statuses.count(TriggerStatus.EXECUTED)})


@app.command()
def press() -> None:
    """Press the button of a remote that has not been programmed."""
    status = RemoteControl().trigger()
    if status is TriggerStatus.NO_COMMAND:
        print("No command assigned to this button")


if __name__ == "__main__":
    app()
