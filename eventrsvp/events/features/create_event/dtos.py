"""DTOs for create event feature."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from eventrsvp.events.core.form_schema import check_field_definitions
from eventrsvp.events.dtos import ConfigurationError
from eventrsvp.events.schemas import CustomFieldSchema


def check_custom_fields(fields: list[CustomFieldSchema] | None) -> list[CustomFieldSchema] | None:
    if fields is None:
        return None
    try:
        check_field_definitions([f.to_definition() for f in fields])
    except ConfigurationError as e:
        raise ValueError(str(e))
    return fields


class CreateEventRequest(BaseModel):
    """Request body for creating an event."""

    title: str = Field(min_length=2)
    description: str = Field(min_length=10)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    location: str = Field(min_length=2)
    is_public: bool = True
    custom_fields: Annotated[list[CustomFieldSchema], AfterValidator(check_custom_fields)] = []
