from fastapi import APIRouter, Depends, HTTPException

from eventrsvp.auth import CurrentUser, get_current_user
from eventrsvp.events.dependencies import (
    ensure_can_manage,
    get_event_read_model,
    get_rsvp_read_model,
    load_event,
    parse_id,
)
from eventrsvp.events.repository.read_models import EventReadModel, RsvpReadModel
from eventrsvp.events.schemas import RsvpResponse
from eventrsvp.events.urls import ATTENDEES_URL, EVENT_RSVPS_URL, RSVP_URL

router = APIRouter()


@router.get(EVENT_RSVPS_URL, response_model=list[RsvpResponse])
async def list_event_rsvps(
    event_id: str,
    user: CurrentUser = Depends(get_current_user),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    rsvp_read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> list[RsvpResponse]:
    """List an event's RSVPs, newest first."""
    event = await load_event(event_id, event_read_model)
    ensure_can_manage(user, event)

    rsvps = await rsvp_read_model.list_rsvps(event.uuid)
    return [RsvpResponse.from_dto(rsvp) for rsvp in rsvps]


@router.get(ATTENDEES_URL, response_model=list[RsvpResponse])
async def list_attendees(
    user: CurrentUser = Depends(get_current_user),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    rsvp_read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> list[RsvpResponse]:
    """
    List RSVPs across every event the acting user manages, newest first.
    """
    owner = None if user.is_privileged else user.id
    events = await event_read_model.list_events(user_id=owner)

    rsvps = await rsvp_read_model.list_rsvps_for_events([event.uuid for event in events])
    return [RsvpResponse.from_dto(rsvp) for rsvp in rsvps]


@router.get(RSVP_URL, response_model=RsvpResponse)
async def get_rsvp(
    rsvp_id: str,
    user: CurrentUser = Depends(get_current_user),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    rsvp_read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> RsvpResponse:
    """Get one RSVP. Only managers of its event may see it."""
    rsvp = await rsvp_read_model.get_rsvp(parse_id(rsvp_id, "Invalid RSVP ID"))
    if not rsvp:
        raise HTTPException(status_code=404, detail="RSVP not found")

    event = await event_read_model.get_event(rsvp.event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    ensure_can_manage(user, event)

    return RsvpResponse.from_dto(rsvp)
