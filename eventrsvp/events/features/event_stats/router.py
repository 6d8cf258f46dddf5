from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from eventrsvp.auth import CurrentUser, get_current_user
from eventrsvp.config.settings import settings
from eventrsvp.events.core.stats import summarize_rsvps
from eventrsvp.events.dependencies import (
    ensure_can_manage,
    get_event_read_model,
    get_rsvp_read_model,
    load_event,
)
from eventrsvp.events.repository.read_models import EventReadModel, RsvpReadModel
from eventrsvp.events.urls import EVENT_STATS_URL

router = APIRouter()


class EventStatsResponse(BaseModel):
    total_rsvps: int
    rsvps_by_day: dict[str, int]
    unique_days: int
    avg_rsvps_per_day: float
    peak_day: str | None = None
    peak_day_count: int


@router.get(EVENT_STATS_URL, response_model=EventStatsResponse)
async def get_event_stats(
    event_id: str,
    user: CurrentUser = Depends(get_current_user),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    rsvp_read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> EventStatsResponse:
    """Attendance totals and RSVPs per day for an event."""
    event = await load_event(event_id, event_read_model)
    ensure_can_manage(user, event)

    rsvps = await rsvp_read_model.list_rsvps(event.uuid)
    stats = summarize_rsvps(rsvps, tz=ZoneInfo(settings.export_timezone))
    return EventStatsResponse(
        total_rsvps=stats.total_rsvps,
        rsvps_by_day=stats.rsvps_by_day,
        unique_days=stats.unique_days,
        avg_rsvps_per_day=stats.avg_rsvps_per_day,
        peak_day=stats.peak_day,
        peak_day_count=stats.peak_day_count,
    )
