from fastapi import APIRouter, Depends, HTTPException

from eventrsvp.auth import CurrentUser, can_manage_event, get_current_user, get_optional_user
from eventrsvp.events.dependencies import get_event_read_model, load_event
from eventrsvp.events.repository.read_models import EventReadModel
from eventrsvp.events.schemas import EventResponse
from eventrsvp.events.urls import EVENT_URL, EVENTS_URL, PUBLIC_EVENTS_URL

router = APIRouter()


@router.get(EVENTS_URL, response_model=list[EventResponse])
async def list_events(
    user_id: str | None = None,
    user: CurrentUser = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventResponse]:
    """
    List events, newest first.
    Admins and staff see every event (optionally filtered by owner);
    everyone else only their own.
    """
    if not user.is_privileged:
        if user_id is not None and user_id != user.id:
            raise HTTPException(status_code=403, detail="Unauthorized")
        user_id = user.id

    events = await read_model.list_events(user_id=user_id)
    return [EventResponse.from_dto(event) for event in events]


@router.get(PUBLIC_EVENTS_URL, response_model=list[EventResponse])
async def list_public_events(
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventResponse]:
    """List public events by date. No authentication needed."""
    events = await read_model.list_public_events()
    return [EventResponse.from_dto(event) for event in events]


@router.get(EVENT_URL, response_model=EventResponse)
async def get_event(
    event_id: str,
    user: CurrentUser | None = Depends(get_optional_user),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventResponse:
    """
    Get one event.
    Public events are visible to anyone, private ones only to their managers.
    """
    event = await load_event(event_id, read_model)

    if not event.is_public:
        if user is None:
            raise HTTPException(status_code=401, detail="Unauthorized")
        if not can_manage_event(user, event.user_id):
            raise HTTPException(status_code=403, detail="Unauthorized")

    return EventResponse.from_dto(event)
