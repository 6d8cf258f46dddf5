import logging

from fastapi import APIRouter, Depends

from eventrsvp.auth import CurrentUser, get_current_user
from eventrsvp.events.dependencies import get_event_write_model
from eventrsvp.events.features.create_event.dtos import CreateEventRequest
from eventrsvp.events.repository.write_models import EventWriteModel
from eventrsvp.events.schemas import EventResponse
from eventrsvp.events.urls import EVENTS_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(EVENTS_URL, response_model=EventResponse, status_code=201)
async def create_event(
    request: CreateEventRequest,
    user: CurrentUser = Depends(get_current_user),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """
    Create an event owned by the acting user.
    Custom fields keep the order they are given in.
    """
    event = await write_model.create_event(
        user_id=user.id,
        title=request.title,
        description=request.description,
        date=request.date,
        time=request.time,
        location=request.location,
        is_public=request.is_public,
        custom_fields=[f.to_definition() for f in request.custom_fields],
    )
    logger.info(f"Event {event.uuid} created by {user.id}")
    return EventResponse.from_dto(event)
