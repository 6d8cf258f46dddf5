import logging

from fastapi import APIRouter, Depends, HTTPException

from eventrsvp.auth import CurrentUser, get_current_user
from eventrsvp.events.dependencies import (
    ensure_can_manage,
    get_event_read_model,
    get_event_write_model,
    load_event,
)
from eventrsvp.events.dtos import EventNotFoundError
from eventrsvp.events.repository.read_models import EventReadModel
from eventrsvp.events.repository.write_models import EventWriteModel
from eventrsvp.events.schemas import MessageResponse
from eventrsvp.events.urls import EVENT_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete(EVENT_URL, response_model=MessageResponse)
async def delete_event(
    event_id: str,
    user: CurrentUser = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> MessageResponse:
    """Delete an event and every RSVP collected for it."""
    event = await load_event(event_id, read_model)
    ensure_can_manage(user, event)

    try:
        await write_model.delete_event(event.uuid)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")

    logger.info(f"Event {event.uuid} deleted by {user.id}")
    return MessageResponse(message="Event deleted successfully")
