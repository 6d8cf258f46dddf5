"""CLI commands for event RSVP management."""

import asyncio
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID
from zoneinfo import ZoneInfo

import typer
from pydantic import ValidationError

from eventrsvp.config.database import upgrade_db
from eventrsvp.config.settings import settings
from eventrsvp.events.core.csv_export import attendee_csv_filename, build_attendee_csv
from eventrsvp.events.features.create_event.dtos import CreateEventRequest
from eventrsvp.events.repository.read_models import SqlEventReadModel, SqlRsvpReadModel
from eventrsvp.events.repository.write_models import SqlEventWriteModel

app = typer.Typer(help="CLI commands for event RSVP management")


def _parse_field(raw: str) -> dict:
    """Turn ``Name:type`` or ``Name:type:required`` into a custom field."""
    parts = raw.split(":")
    if len(parts) not in (2, 3) or (len(parts) == 3 and parts[2] != "required"):
        raise typer.BadParameter(f"Expected NAME:TYPE[:required], got '{raw}'")
    return {"name": parts[0], "type": parts[1], "required": len(parts) == 3}


def _parse_event_id(event_id: str) -> UUID:
    try:
        return UUID(event_id)
    except ValueError:
        typer.secho(f"Invalid event ID: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)


@app.command()
def migrate():
    """Upgrade the database to the latest migration."""
    asyncio.run(upgrade_db())
    typer.secho("Database is up to date!", fg=typer.colors.GREEN)


@app.command()
def create_event(
    title: str = typer.Option(..., "--title", "-t", help="Event title"),
    description: str = typer.Option(..., "--description", "-d", help="Event description"),
    date: str = typer.Option(..., "--date", help="Event date, e.g. 2026-07-18"),
    time: str = typer.Option(..., "--time", help="Event time, e.g. 18:00"),
    location: str = typer.Option(..., "--location", "-l", help="Where the event takes place"),
    owner: str = typer.Option(..., "--owner", "-o", help="User ID of the event owner"),
    private: bool = typer.Option(False, "--private", help="Hide the event from the public list"),
    fields: list[str] = typer.Option(
        [],
        "--field",
        "-f",
        help="Custom RSVP field as NAME:TYPE[:required], repeatable",
    ),
):
    """Create an event with an optional custom RSVP form."""
    try:
        request = CreateEventRequest(
            title=title,
            description=description,
            date=date,
            time=time,
            location=location,
            is_public=not private,
            custom_fields=[_parse_field(raw) for raw in fields],
        )
    except ValidationError as e:
        for error in e.errors():
            location_name = ".".join(str(part) for part in error["loc"])
            typer.secho(f"  {location_name}: {error['msg']}", fg=typer.colors.RED)
        raise typer.Exit(1)

    event = asyncio.run(
        SqlEventWriteModel().create_event(
            user_id=owner,
            title=request.title,
            description=request.description,
            date=request.date,
            time=request.time,
            location=request.location,
            is_public=request.is_public,
            custom_fields=[f.to_definition() for f in request.custom_fields],
        )
    )

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Event ID: {event.uuid}", fg=typer.colors.CYAN)
    typer.secho(f"  Title: {event.title}", fg=typer.colors.BLUE)
    typer.secho(f"  Visibility: {'public' if event.is_public else 'private'}", fg=typer.colors.BLUE)
    for definition in event.custom_fields:
        required = " (required)" if definition.required else ""
        typer.secho(f"  - {definition.name}: {definition.type.value}{required}", fg=typer.colors.BLUE)


@app.command()
def list_rsvps(
    event_id: str = typer.Argument(..., help="Event UUID"),
):
    """List the RSVPs of an event, newest first."""
    async def _list_rsvps():
        event = await SqlEventReadModel().get_event(_parse_event_id(event_id))
        if not event:
            return None, []
        return event, await SqlRsvpReadModel().list_rsvps(event.uuid)

    event, rsvps = asyncio.run(_list_rsvps())
    if not event:
        typer.secho(f"Event not found: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(f"{event.title}: {len(rsvps)} RSVPs", fg=typer.colors.GREEN)
    for rsvp in rsvps:
        typer.secho(f"  - {rsvp.name} <{rsvp.email}>", fg=typer.colors.BLUE)
        for name, value in rsvp.responses.items():
            typer.secho(f"      {name}: {value}", fg=typer.colors.CYAN)


@app.command()
def export_attendees(
    event_id: str = typer.Argument(..., help="Event UUID"),
    output_dir: Path = typer.Option(
        Path("."),
        "--output-dir",
        "-o",
        help="Directory to write the CSV file into",
    ),
):
    """Write the attendee list of an event to a CSV file."""
    async def _load():
        event = await SqlEventReadModel().get_event(_parse_event_id(event_id))
        if not event:
            return None, []
        return event, await SqlRsvpReadModel().list_rsvps(event.uuid)

    event, rsvps = asyncio.run(_load())
    if not event:
        typer.secho(f"Event not found: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)

    tz = ZoneInfo(settings.export_timezone)
    content = build_attendee_csv(
        event.custom_fields,
        rsvps,
        tz=tz,
        date_format=settings.export_date_format,
    )
    path = output_dir / attendee_csv_filename(event.title, datetime.now(UTC).astimezone(tz).date())
    path.write_text(content, encoding="utf-8")

    typer.secho(f"Exported {len(rsvps)} attendees!", fg=typer.colors.GREEN)
    typer.secho(f"  File: {path}", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
