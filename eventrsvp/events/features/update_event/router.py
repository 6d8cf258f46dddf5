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
from eventrsvp.events.features.update_event.dtos import UpdateEventRequest
from eventrsvp.events.repository.read_models import EventReadModel
from eventrsvp.events.repository.write_models import EventWriteModel
from eventrsvp.events.schemas import EventResponse
from eventrsvp.events.urls import EVENT_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.put(EVENT_URL, response_model=EventResponse)
async def update_event(
    event_id: str,
    request: UpdateEventRequest,
    user: CurrentUser = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """
    Update an event. Only the fields present in the body change.
    Existing RSVPs are not migrated when custom fields change.
    """
    event = await load_event(event_id, read_model)
    ensure_can_manage(user, event)

    changes = request.model_dump(exclude_unset=True, exclude_none=True, exclude={"custom_fields"})
    if request.custom_fields is not None:
        changes["custom_fields"] = [f.to_definition() for f in request.custom_fields]

    try:
        updated = await write_model.update_event(event.uuid, changes)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")

    logger.info(f"Event {event.uuid} updated by {user.id}: {sorted(changes)}")
    return EventResponse.from_dto(updated)
