import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from eventrsvp.events.core.form_schema import validate_rsvp
from eventrsvp.events.dependencies import get_event_read_model, get_rsvp_write_model, load_event
from eventrsvp.events.dtos import DuplicateRsvpError, RsvpValidationError
from eventrsvp.events.features.submit_rsvp.dtos import FieldErrorResponse, SubmitRsvpResponse
from eventrsvp.events.repository.read_models import EventReadModel
from eventrsvp.events.repository.write_models import RsvpWriteModel
from eventrsvp.events.urls import SUBMIT_RSVP_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(SUBMIT_RSVP_URL, response_model=SubmitRsvpResponse, status_code=201)
async def submit_rsvp(
    event_id: str,
    payload: dict[str, Any] = Body(...),
    read_model: EventReadModel = Depends(get_event_read_model),
    write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
) -> SubmitRsvpResponse:
    """
    Submit an RSVP through the public form.
    The body holds name, email and one key per custom field of the event.
    Every invalid field is reported in a single 422 response.
    """
    event = await load_event(event_id, read_model)

    try:
        normalized = validate_rsvp(event.custom_fields, payload)
    except RsvpValidationError as e:
        logger.info(f"Rejected RSVP for event {event.uuid}: {e}")
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Invalid RSVP",
                "errors": [
                    FieldErrorResponse(field=error.field, message=error.message).model_dump()
                    for error in e.field_errors
                ],
            },
        )

    try:
        rsvp = await write_model.create_rsvp(event.uuid, normalized)
    except DuplicateRsvpError:
        logger.info(f"Duplicate RSVP for event {event.uuid}")
        raise HTTPException(status_code=409, detail="You have already RSVP'd to this event")

    return SubmitRsvpResponse(message="RSVP submitted successfully", rsvp_id=rsvp.uuid)
