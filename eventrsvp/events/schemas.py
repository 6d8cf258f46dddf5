"""Response bodies shared by the event features."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from eventrsvp.events.dtos import CustomFieldDefinition, EventDTO, FieldType, RsvpDTO


class CustomFieldSchema(BaseModel):
    name: str = Field(min_length=1)
    type: FieldType
    required: bool = False

    def to_definition(self) -> CustomFieldDefinition:
        return CustomFieldDefinition(name=self.name, type=self.type, required=self.required)


class EventResponse(BaseModel):
    uuid: UUID
    title: str
    description: str
    date: str
    time: str
    location: str
    is_public: bool
    user_id: str
    custom_fields: list[CustomFieldSchema]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, event: EventDTO) -> "EventResponse":
        return cls(
            uuid=event.uuid,
            title=event.title,
            description=event.description,
            date=event.date,
            time=event.time,
            location=event.location,
            is_public=event.is_public,
            user_id=event.user_id,
            custom_fields=[
                CustomFieldSchema(name=f.name, type=f.type, required=f.required)
                for f in event.custom_fields
            ],
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class RsvpResponse(BaseModel):
    uuid: UUID
    event_id: UUID
    name: str
    email: str
    responses: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_dto(cls, rsvp: RsvpDTO) -> "RsvpResponse":
        return cls(
            uuid=rsvp.uuid,
            event_id=rsvp.event_id,
            name=rsvp.name,
            email=rsvp.email,
            responses=rsvp.responses,
            created_at=rsvp.created_at,
        )


class MessageResponse(BaseModel):
    message: str
