"""Validation of public RSVP submissions against an event's custom fields.

The base form always asks for ``name`` and ``email``; every custom field an
event declares adds one more rule, chosen by the field's type. All rules are
evaluated so the caller can show every problem at once.
"""

import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

from eventrsvp.events.dtos import (
    ConfigurationError,
    CustomFieldDefinition,
    FieldError,
    FieldType,
    NormalizedRsvp,
    RsvpValidationError,
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# Plain decimal or exponent notation; no underscores, hex or words like "inf"
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)

# Custom fields cannot shadow the base form inputs
RESERVED_FIELD_NAMES = frozenset({"name", "email"})

# Sentinel for "this custom field is absent from the normalized record"
_ABSENT = object()


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


def check_field_definitions(fields: Sequence[CustomFieldDefinition]) -> None:
    """Reject field lists that could not be rendered as a form.

    Raises:
        ConfigurationError: a field has an empty or reserved name, a type outside
            ``FieldType``, or shares its name with an earlier field.
    """
    seen: set[str] = set()
    for definition in fields:
        if not definition.name:
            raise ConfigurationError("Custom field names cannot be empty")
        if not isinstance(definition.type, FieldType):
            raise ConfigurationError(
                f"Custom field '{definition.name}' has unsupported type '{definition.type}'"
            )
        if definition.name in RESERVED_FIELD_NAMES:
            raise ConfigurationError(
                f"Custom field '{definition.name}' clashes with the built-in {definition.name} input"
            )
        if definition.name in seen:
            raise ConfigurationError(f"Custom field '{definition.name}' is declared more than once")
        seen.add(definition.name)


def _validate_text(definition: CustomFieldDefinition, value: Any) -> tuple[Any, str | None]:
    if value is None:
        value = ""
    if not isinstance(value, str):
        return _ABSENT, f"{definition.name} must be text"
    if definition.required and not value:
        return _ABSENT, f"{definition.name} is required"
    return value, None


def _validate_email(definition: CustomFieldDefinition, value: Any) -> tuple[Any, str | None]:
    if value is None:
        value = ""
    if not definition.required and value == "":
        return "", None
    if not is_valid_email(value):
        return _ABSENT, f"Please enter a valid email for {definition.name}"
    return value, None


def _parse_number(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not NUMBER_PATTERN.match(value):
            return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def _validate_number(definition: CustomFieldDefinition, value: Any) -> tuple[Any, str | None]:
    if value is None or (isinstance(value, str) and not value.strip()):
        if definition.required:
            return _ABSENT, f"{definition.name} must be a number"
        return _ABSENT, None
    number = _parse_number(value)
    if number is None:
        return _ABSENT, f"{definition.name} must be a number"
    return number, None


def _validate_checkbox(definition: CustomFieldDefinition, value: Any) -> tuple[Any, str | None]:
    if value is None:
        value = False
    if not isinstance(value, bool):
        return _ABSENT, f"{definition.name} must be true or false"
    if definition.required and value is not True:
        return _ABSENT, f"{definition.name} is required"
    return value, None


_VALIDATORS = {
    FieldType.TEXT: _validate_text,
    FieldType.EMAIL: _validate_email,
    FieldType.NUMBER: _validate_number,
    FieldType.CHECKBOX: _validate_checkbox,
}


def validate_rsvp(
    fields: Sequence[CustomFieldDefinition],
    payload: Mapping[str, Any],
) -> NormalizedRsvp:
    """Validate and normalize one RSVP submission.

    Args:
        fields: The event's custom fields, in declaration order.
        payload: Raw submitted values keyed by field name. Always carries
            ``name`` and ``email``; text-like inputs arrive as strings and
            checkboxes as booleans.

    Returns:
        NormalizedRsvp with coerced custom field values. Optional number fields
        left empty are omitted from ``responses``. Keys that are not declared
        fields are dropped.

    Raises:
        RsvpValidationError: one entry per violated field.
        ConfigurationError: a field declares a type this form cannot validate.
    """
    errors: list[FieldError] = []

    name = payload.get("name")
    if not isinstance(name, str) or len(name) < 2:
        errors.append(FieldError(field="name", message="Name is required"))

    email = payload.get("email")
    if not is_valid_email(email):
        errors.append(FieldError(field="email", message="Please enter a valid email address"))

    responses: dict[str, Any] = {}
    for definition in fields:
        validator = _VALIDATORS.get(definition.type)
        if validator is None:
            raise ConfigurationError(
                f"Custom field '{definition.name}' has unsupported type '{definition.type}'"
            )
        value, message = validator(definition, payload.get(definition.name))
        if message is not None:
            errors.append(FieldError(field=definition.name, message=message))
        elif value is not _ABSENT:
            responses[definition.name] = value

    if errors:
        raise RsvpValidationError(errors)

    return NormalizedRsvp(name=name, email=email, responses=responses)
