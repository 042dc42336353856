"""
Main CLI application using Typer.
"""

import asyncio
import dataclasses
import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..adapters.json_event_source import JsonEventSource
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import SlotAvailabilityError
from ..domain.models import SlotState
from ..services.availability_service import AvailabilityService

app = typer.Typer(
    name="slotavailability",
    help="Show which hourly appointment slots can still be booked",
    add_completion=False
)

console = Console()

SLOT_STYLES = {
    SlotState.AVAILABLE: "green",
    SlotState.TAKEN: "red",
    SlotState.BLOCKED: "yellow",
    SlotState.PAST: "dim",
}

BOOKING_STATUS_STYLES = {
    "pending": "yellow",
    "confirmed": "green",
    "cancelled": "red",
    "completed": "dim",
}


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the given config file, or the default one if it exists.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    return AppConfig()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_service(
    config: AppConfig,
    events_file: Optional[Path],
    gap: Optional[int] = None,
) -> AvailabilityService:
    scheduling = config.scheduling_config()
    if gap is not None:
        if gap < 0:
            raise ValueError(f"--gap must not be negative, got {gap}")
        scheduling = dataclasses.replace(scheduling, required_gap_hours=gap)

    source = JsonEventSource(events_file or config.events_file)
    return AvailabilityService(
        event_source=source,
        config=scheduling,
        timezone=config.timezone,
    )


@app.command()
def slots(
    date: Annotated[str, typer.Argument(help="Date to inspect (YYYY-MM-DD)")],
    events_file: Annotated[Optional[Path], typer.Option("--events", "-e", help="JSON file with bookings. Defaults to the configured file or the bundled sample.")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    now: Annotated[Optional[str], typer.Option("--now", help="Pretend the current time is this ISO 8601 timestamp.")] = None,
    gap: Annotated[Optional[int], typer.Option("--gap", help="Override the required gap (hours) around bookings.")] = None,
):
    """
    Show the status of every slot on a date.
    
    Examples:
    
        slotavailability slots 2025-06-02
        slotavailability slots 2025-06-02 --events bookings.json
        slotavailability slots 2025-06-02 --now "2025-06-02T13:15"
    """
    try:
        config = _load_config(config_file)
        _configure_logging(config.log_level)

        service = _build_service(config, events_file, gap)
        moment = pendulum.parse(now, tz=config.timezone) if now else None

        result = asyncio.run(service.day_availability(date, now=moment))

        rules = service.config
        table = Table(
            title=f"Slots for {date}",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Time", style="bold", no_wrap=True)
        table.add_column("Status", no_wrap=True)
        table.add_column("Details", style="dim")
        table.add_column("Booking")

        for slot in result.slots:
            style = SLOT_STYLES[slot.status]
            booking = ""
            if slot.bound_event is not None:
                booking = f"{slot.bound_event.title} - {slot.bound_event.customer_name}"
            table.add_row(
                slot.time,
                f"[{style}]{slot.status.value}[/{style}]",
                slot.reason or "Book this slot",
                booking,
            )

        console.print()
        console.print(table)
        console.print(
            f"Working hours {rules.work_start_hour}:00 - {rules.work_end_hour}:00, "
            f"{rules.required_gap_hours}-hour gap between bookings"
        )

        if not result.bookable_slots:
            console.print("[yellow]⚠ No bookable slots on this date.[/yellow]")
        else:
            console.print(f"[bold green]✓ {len(result.bookable_slots)} bookable slot(s)[/bold green]")

        for warning in result.warnings:
            console.print(f"[yellow]⚠ {warning}[/yellow]")
        console.print()

    except (FileNotFoundError, ValueError, SlotAvailabilityError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def events(
    date: Annotated[str, typer.Argument(help="Date to list (YYYY-MM-DD)")],
    events_file: Annotated[Optional[Path], typer.Option("--events", "-e", help="JSON file with bookings")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    List the bookings on a date.
    """
    try:
        config = _load_config(config_file)
        _configure_logging(config.log_level)

        service = _build_service(config, events_file)
        day_events = asyncio.run(service.events_for_day(date))

        if not day_events:
            console.print(f"[yellow]No bookings on {date}.[/yellow]")
            return

        table = Table(
            title=f"Bookings on {date}",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("ID", style="dim")
        table.add_column("Time", style="bold")
        table.add_column("Title")
        table.add_column("Customer")
        table.add_column("Status", no_wrap=True)

        for event in day_events:
            status = event.status or "unknown"
            style = BOOKING_STATUS_STYLES.get(status, "dim")
            table.add_row(
                event.id,
                event.clock_text or "-",
                event.title,
                event.customer_name,
                f"[{style}]{status}[/{style}]",
            )

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError, SlotAvailabilityError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]slotavailability[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
