from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID


class FieldType(str, Enum):
    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    CHECKBOX = "checkbox"


# =============================================================================
# Errors
# =============================================================================


class ConfigurationError(Exception):
    """Raised when an event's custom field declarations cannot be used."""


class EventNotFoundError(Exception):
    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' not found")


class RsvpNotFoundError(Exception):
    def __init__(self, rsvp_id: UUID) -> None:
        self.rsvp_id = rsvp_id
        super().__init__(f"RSVP '{rsvp_id}' not found")


class DuplicateRsvpError(Exception):
    """Raised when the same email RSVPs twice to one event."""

    def __init__(self, event_id: UUID, email: str) -> None:
        self.event_id = event_id
        self.email = email
        super().__init__(f"'{email}' has already RSVP'd to event '{event_id}'")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class RsvpValidationError(Exception):
    """Carries every field-level problem found in one RSVP submission."""

    def __init__(self, field_errors: list[FieldError]) -> None:
        self.field_errors = field_errors
        super().__init__(", ".join(f"{e.field}: {e.message}" for e in field_errors))


# =============================================================================
# DTOs
# =============================================================================


@dataclass(frozen=True)
class CustomFieldDefinition:
    """An extra question an event owner appends to the RSVP form."""

    name: str
    type: FieldType
    required: bool = False

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CustomFieldDefinition":
        try:
            field_type = FieldType(raw.get("type"))
        except ValueError:
            raise ConfigurationError(
                f"Custom field '{raw.get('name')}' has unsupported type '{raw.get('type')}'"
            )
        return cls(name=raw["name"], type=field_type, required=bool(raw.get("required", False)))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type.value, "required": self.required}


@dataclass(frozen=True)
class NormalizedRsvp:
    """A validated submission, coerced and defaulted, ready to be stored."""

    name: str
    email: str
    responses: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EventDTO:
    uuid: UUID
    title: str
    description: str
    date: str
    time: str
    location: str
    is_public: bool
    user_id: str
    custom_fields: list[CustomFieldDefinition]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RsvpDTO:
    uuid: UUID
    event_id: UUID
    name: str
    email: str
    responses: dict[str, Any]
    created_at: datetime


@dataclass(frozen=True)
class EventStatsDTO:
    total_rsvps: int
    rsvps_by_day: dict[str, int]
    unique_days: int
    avg_rsvps_per_day: float
    peak_day: str | None
    peak_day_count: int
