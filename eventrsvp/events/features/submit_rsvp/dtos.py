"""DTOs for submit RSVP feature."""

from uuid import UUID

from pydantic import BaseModel


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class SubmitRsvpResponse(BaseModel):
    message: str
    rsvp_id: UUID
