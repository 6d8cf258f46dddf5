import logging

from fastapi import APIRouter, Depends, HTTPException

from eventrsvp.auth import CurrentUser, get_current_user
from eventrsvp.events.dependencies import (
    ensure_can_manage,
    get_event_read_model,
    get_rsvp_read_model,
    get_rsvp_write_model,
    parse_id,
)
from eventrsvp.events.dtos import RsvpNotFoundError
from eventrsvp.events.repository.read_models import EventReadModel, RsvpReadModel
from eventrsvp.events.repository.write_models import RsvpWriteModel
from eventrsvp.events.schemas import MessageResponse
from eventrsvp.events.urls import RSVP_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete(RSVP_URL, response_model=MessageResponse)
async def delete_rsvp(
    rsvp_id: str,
    user: CurrentUser = Depends(get_current_user),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    rsvp_read_model: RsvpReadModel = Depends(get_rsvp_read_model),
    rsvp_write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
) -> MessageResponse:
    """Remove an attendee from an event."""
    rsvp = await rsvp_read_model.get_rsvp(parse_id(rsvp_id, "Invalid RSVP ID"))
    if not rsvp:
        raise HTTPException(status_code=404, detail="RSVP not found")

    event = await event_read_model.get_event(rsvp.event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    ensure_can_manage(user, event)

    try:
        await rsvp_write_model.delete_rsvp(rsvp.uuid)
    except RsvpNotFoundError:
        raise HTTPException(status_code=404, detail="RSVP not found")

    logger.info(f"RSVP {rsvp.uuid} deleted from event {event.uuid} by {user.id}")
    return MessageResponse(message="RSVP deleted successfully")
