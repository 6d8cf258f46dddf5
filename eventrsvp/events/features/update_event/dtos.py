"""DTOs for update event feature."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from eventrsvp.events.features.create_event.dtos import check_custom_fields
from eventrsvp.events.schemas import CustomFieldSchema


class UpdateEventRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=2)
    description: str | None = Field(default=None, min_length=10)
    date: str | None = Field(default=None, min_length=1)
    time: str | None = Field(default=None, min_length=1)
    location: str | None = Field(default=None, min_length=2)
    is_public: bool | None = None
    custom_fields: Annotated[
        list[CustomFieldSchema] | None, AfterValidator(check_custom_fields)
    ] = None
