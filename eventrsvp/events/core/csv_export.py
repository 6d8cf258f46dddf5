"""Attendee list export as CSV."""

import re
from collections.abc import Mapping, Sequence
from datetime import UTC, date, datetime, tzinfo
from typing import Any, Protocol

from eventrsvp.events.dtos import CustomFieldDefinition, FieldType

_NON_SLUG_CHARS = re.compile(r"[^a-zA-Z0-9]")


class AttendeeRow(Protocol):
    name: str
    email: str
    responses: Mapping[str, Any]
    created_at: datetime


def escape_cell(cell: Any) -> str:
    if isinstance(cell, str) and ("," in cell or '"' in cell):
        return '"' + cell.replace('"', '""') + '"'
    return str(cell)


def render_response(definition: CustomFieldDefinition, responses: Mapping[str, Any]) -> Any:
    value = responses.get(definition.name)
    if definition.type == FieldType.CHECKBOX:
        return "Yes" if value else "No"
    if value is None:
        return ""
    return value


def format_rsvp_date(
    created_at: datetime,
    tz: tzinfo | None = None,
    date_format: str | None = None,
) -> str:
    """Render an RSVP timestamp for the export.

    Naive timestamps are read as UTC. Without ``date_format`` the short US
    form is used, e.g. ``3/7/2026, 4:05:09 PM``.
    """
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    if tz is not None:
        created_at = created_at.astimezone(tz)
    if date_format:
        return created_at.strftime(date_format)
    hour = created_at.hour % 12 or 12
    meridiem = "AM" if created_at.hour < 12 else "PM"
    return (
        f"{created_at.month}/{created_at.day}/{created_at.year}, "
        f"{hour}:{created_at.minute:02d}:{created_at.second:02d} {meridiem}"
    )


def build_attendee_csv(
    fields: Sequence[CustomFieldDefinition],
    rsvps: Sequence[AttendeeRow],
    tz: tzinfo | None = None,
    date_format: str | None = None,
) -> str:
    """Serialize RSVPs into a CSV document.

    Columns are Name, Email, each custom field in declaration order, then
    RSVP Date. Rows keep the order of ``rsvps``. Lines are separated by a bare
    ``\\n`` with no trailing newline.
    """
    header = ["Name", "Email", *(definition.name for definition in fields), "RSVP Date"]
    lines = [",".join(escape_cell(cell) for cell in header)]
    for rsvp in rsvps:
        row = [
            rsvp.name,
            rsvp.email,
            *(render_response(definition, rsvp.responses) for definition in fields),
            format_rsvp_date(rsvp.created_at, tz=tz, date_format=date_format),
        ]
        lines.append(",".join(escape_cell(cell) for cell in row))
    return "\n".join(lines)


def attendee_csv_filename(title: str, today: date) -> str:
    slug = _NON_SLUG_CHARS.sub("-", title).lower()
    return f"{slug}-attendees-{today.isoformat()}.csv"
