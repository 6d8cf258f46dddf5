"""Unit tests for RSVP form validation."""

import pytest

from eventrsvp.events.core.form_schema import check_field_definitions, validate_rsvp
from eventrsvp.events.dtos import (
    ConfigurationError,
    CustomFieldDefinition,
    FieldError,
    FieldType,
    RsvpValidationError,
)

BASE_PAYLOAD = {"name": "Jane Doe", "email": "jane@example.com"}


def field(name: str, field_type: FieldType, required: bool = False) -> CustomFieldDefinition:
    return CustomFieldDefinition(name=name, type=field_type, required=required)


def errors_for(fields, payload) -> list[FieldError]:
    with pytest.raises(RsvpValidationError) as exc_info:
        validate_rsvp(fields, payload)
    return exc_info.value.field_errors


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Jo", "email": "a@b.co"},
        {"name": "Jane Doe", "email": "jane.doe+rsvp@mail.example.org"},
    ],
)
def test_valid_base_fields_without_custom_fields(payload):
    result = validate_rsvp([], payload)

    assert result.name == payload["name"]
    assert result.email == payload["email"]
    assert result.responses == {}


def test_short_name_is_rejected():
    errors = errors_for([], {"name": "J", "email": "jane@example.com"})
    assert errors == [FieldError(field="name", message="Name is required")]


@pytest.mark.parametrize("email", ["", "jane", "jane@example", "jane @example.com", "@example.com"])
def test_malformed_email_is_rejected(email):
    errors = errors_for([], {"name": "Jane", "email": email})
    assert errors == [FieldError(field="email", message="Please enter a valid email address")]


def test_missing_base_fields_reported_together():
    errors = errors_for([], {})
    assert [e.field for e in errors] == ["name", "email"]


def test_required_checkbox_must_be_true():
    fields = [field("Terms", FieldType.CHECKBOX, required=True)]

    errors = errors_for(fields, {**BASE_PAYLOAD, "Terms": False})
    assert errors == [FieldError(field="Terms", message="Terms is required")]

    result = validate_rsvp(fields, {**BASE_PAYLOAD, "Terms": True})
    assert result.responses == {"Terms": True}


def test_optional_checkbox_defaults_to_false():
    result = validate_rsvp([field("Newsletter", FieldType.CHECKBOX)], BASE_PAYLOAD)
    assert result.responses == {"Newsletter": False}


def test_checkbox_rejects_non_boolean():
    errors = errors_for([field("Newsletter", FieldType.CHECKBOX)], {**BASE_PAYLOAD, "Newsletter": "yes"})
    assert errors == [FieldError(field="Newsletter", message="Newsletter must be true or false")]


def test_required_number_parses_to_numeric_value():
    fields = [field("Guests", FieldType.NUMBER, required=True)]

    result = validate_rsvp(fields, {**BASE_PAYLOAD, "Guests": "42"})
    assert result.responses == {"Guests": 42}
    assert isinstance(result.responses["Guests"], int)

    result = validate_rsvp(fields, {**BASE_PAYLOAD, "Guests": "2.5"})
    assert result.responses == {"Guests": 2.5}


@pytest.mark.parametrize("value", ["abc", "", "NaN", "inf", "1e400", True, "1_000", "1_0", "0x10", "1e"])
def test_required_number_rejects_non_numeric(value):
    errors = errors_for([field("Guests", FieldType.NUMBER, required=True)], {**BASE_PAYLOAD, "Guests": value})
    assert errors == [FieldError(field="Guests", message="Guests must be a number")]


def test_optional_number_empty_is_absent():
    result = validate_rsvp([field("Age", FieldType.NUMBER)], {**BASE_PAYLOAD, "Age": ""})
    assert "Age" not in result.responses


def test_optional_number_still_checked_when_given():
    errors = errors_for([field("Age", FieldType.NUMBER)], {**BASE_PAYLOAD, "Age": "twelve"})
    assert errors == [FieldError(field="Age", message="Age must be a number")]


def test_required_text_must_be_non_empty():
    errors = errors_for([field("Diet", FieldType.TEXT, required=True)], {**BASE_PAYLOAD, "Diet": ""})
    assert errors == [FieldError(field="Diet", message="Diet is required")]


def test_optional_text_defaults_to_empty_string():
    result = validate_rsvp([field("Diet", FieldType.TEXT)], BASE_PAYLOAD)
    assert result.responses == {"Diet": ""}


def test_optional_email_allows_empty_value():
    result = validate_rsvp([field("Partner email", FieldType.EMAIL)], {**BASE_PAYLOAD, "Partner email": ""})
    assert result.responses == {"Partner email": ""}


def test_email_field_checks_shape():
    errors = errors_for(
        [field("Partner email", FieldType.EMAIL)], {**BASE_PAYLOAD, "Partner email": "nope"}
    )
    assert errors == [FieldError(field="Partner email", message="Please enter a valid email for Partner email")]


def test_required_email_field_rejects_empty():
    errors = errors_for([field("Work email", FieldType.EMAIL, required=True)], BASE_PAYLOAD)
    assert [e.field for e in errors] == ["Work email"]


def test_all_violations_reported_at_once():
    fields = [
        field("Diet", FieldType.TEXT, required=True),
        field("Company", FieldType.TEXT, required=True),
    ]

    errors = errors_for(fields, {**BASE_PAYLOAD, "Diet": "", "Company": ""})

    assert len(errors) == 2
    assert [e.field for e in errors] == ["Diet", "Company"]


def test_errors_follow_base_then_declared_order():
    fields = [
        field("Terms", FieldType.CHECKBOX, required=True),
        field("Guests", FieldType.NUMBER, required=True),
    ]

    errors = errors_for(fields, {"name": "", "email": "bad", "Terms": False, "Guests": "x"})

    assert [e.field for e in errors] == ["name", "email", "Terms", "Guests"]


def test_undeclared_keys_are_dropped():
    result = validate_rsvp([field("Diet", FieldType.TEXT)], {**BASE_PAYLOAD, "Diet": "Vegan", "admin": True})
    assert result.responses == {"Diet": "Vegan"}


def test_validation_is_deterministic():
    fields = [field("Diet", FieldType.TEXT), field("Guests", FieldType.NUMBER)]
    payload = {**BASE_PAYLOAD, "Diet": "None", "Guests": "3"}

    assert validate_rsvp(fields, payload) == validate_rsvp(fields, payload)


def test_unknown_field_type_is_a_configuration_error():
    bogus = CustomFieldDefinition(name="Color", type="colour")  # type: ignore[arg-type]

    with pytest.raises(ConfigurationError):
        validate_rsvp([bogus], BASE_PAYLOAD)


def test_from_dict_rejects_unknown_type():
    with pytest.raises(ConfigurationError):
        CustomFieldDefinition.from_dict({"name": "Color", "type": "colour"})


def test_from_dict_defaults_required_to_false():
    definition = CustomFieldDefinition.from_dict({"name": "Diet", "type": "text"})
    assert definition == CustomFieldDefinition(name="Diet", type=FieldType.TEXT, required=False)


def test_check_field_definitions_rejects_duplicates():
    with pytest.raises(ConfigurationError):
        check_field_definitions([field("Diet", FieldType.TEXT), field("Diet", FieldType.NUMBER)])


def test_check_field_definitions_rejects_empty_name():
    with pytest.raises(ConfigurationError):
        check_field_definitions([field("", FieldType.TEXT)])


def test_check_field_definitions_accepts_distinct_fields():
    check_field_definitions([field("Diet", FieldType.TEXT), field("Guests", FieldType.NUMBER)])


@pytest.mark.parametrize("value, expected", [("+5", 5), (" 7 ", 7), (".5", 0.5), ("1e3", 1000), ("-2.", -2)])
def test_required_number_accepts_plain_notation(value, expected):
    result = validate_rsvp([field("Guests", FieldType.NUMBER, required=True)], {**BASE_PAYLOAD, "Guests": value})
    assert result.responses == {"Guests": expected}


@pytest.mark.parametrize("name", ["name", "email"])
def test_check_field_definitions_rejects_base_field_names(name):
    with pytest.raises(ConfigurationError):
        check_field_definitions([field(name, FieldType.TEXT, required=True)])
