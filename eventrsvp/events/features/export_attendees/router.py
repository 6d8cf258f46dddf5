import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Response

from eventrsvp.auth import CurrentUser, get_current_user
from eventrsvp.config.settings import settings
from eventrsvp.events.core.csv_export import attendee_csv_filename, build_attendee_csv
from eventrsvp.events.dependencies import (
    ensure_can_manage,
    get_event_read_model,
    get_rsvp_read_model,
    load_event,
)
from eventrsvp.events.repository.read_models import EventReadModel, RsvpReadModel
from eventrsvp.events.urls import EXPORT_ATTENDEES_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass(frozen=True)
class ExportOptions:
    """Rendering choices for one export, resolved per request."""

    today: date
    tz: tzinfo
    date_format: str | None = None


def get_export_options() -> ExportOptions:
    """Dependency resolving export rendering from settings and the clock."""
    tz = ZoneInfo(settings.export_timezone)
    return ExportOptions(
        today=datetime.now(UTC).astimezone(tz).date(),
        tz=tz,
        date_format=settings.export_date_format,
    )


@router.get(EXPORT_ATTENDEES_URL)
async def export_attendees(
    event_id: str,
    user: CurrentUser = Depends(get_current_user),
    options: ExportOptions = Depends(get_export_options),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    rsvp_read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> Response:
    """
    Download the attendee list of an event as CSV, newest RSVP first.
    """
    event = await load_event(event_id, event_read_model)
    ensure_can_manage(user, event)

    rsvps = await rsvp_read_model.list_rsvps(event.uuid)
    content = build_attendee_csv(
        event.custom_fields,
        rsvps,
        tz=options.tz,
        date_format=options.date_format,
    )
    filename = attendee_csv_filename(event.title, options.today)

    logger.info(f"Exported {len(rsvps)} RSVPs of event {event.uuid} for {user.id}")
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
