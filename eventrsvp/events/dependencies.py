from uuid import UUID

from fastapi import HTTPException

from eventrsvp.auth import CurrentUser, can_manage_event
from eventrsvp.events.dtos import EventDTO
from eventrsvp.events.repository.read_models import (
    EventReadModel,
    RsvpReadModel,
    SqlEventReadModel,
    SqlRsvpReadModel,
)
from eventrsvp.events.repository.write_models import (
    EventWriteModel,
    RsvpWriteModel,
    SqlEventWriteModel,
    SqlRsvpWriteModel,
)


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


def get_event_write_model() -> EventWriteModel:
    """Dependency to get event write model instance."""
    return SqlEventWriteModel()


def get_rsvp_read_model() -> RsvpReadModel:
    """Dependency to get RSVP read model instance."""
    return SqlRsvpReadModel()


def get_rsvp_write_model() -> RsvpWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRsvpWriteModel()


def parse_id(value: str, detail: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=detail)


async def load_event(event_id: str, read_model: EventReadModel) -> EventDTO:
    """Fetch an event by its path id, 400 on a malformed id and 404 when missing."""
    event = await read_model.get_event(parse_id(event_id, "Invalid event ID"))
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


def ensure_can_manage(user: CurrentUser, event: EventDTO) -> None:
    if not can_manage_event(user, event.user_id):
        raise HTTPException(status_code=403, detail="Unauthorized")
