from .csv_export import attendee_csv_filename, build_attendee_csv, format_rsvp_date
from .form_schema import check_field_definitions, validate_rsvp
from .stats import summarize_rsvps

__all__ = [
    "attendee_csv_filename",
    "build_attendee_csv",
    "check_field_definitions",
    "format_rsvp_date",
    "summarize_rsvps",
    "validate_rsvp",
]
