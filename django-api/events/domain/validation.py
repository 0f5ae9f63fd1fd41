"""Validation rules for event payloads."""

from django.utils.dateparse import parse_date, parse_datetime

from common.validation import ValidationResult, is_blank
from events.domain.payloads import EventPayload
from events.domain.value_objects import UNSET


def is_valid_date(value: str) -> bool:
    """True for an ISO 8601 date or date-time naming a real calendar day."""
    value = value.strip()
    try:
        return parse_datetime(value) is not None or parse_date(value) is not None
    except ValueError:
        return False


def _check_optional_text(label: str, value, errors: list[str]) -> None:
    if value is UNSET:
        return
    if not isinstance(value, str):
        errors.append(f"{label} must be a string")
    elif value and not value.strip():
        errors.append(f"{label} cannot be only empty spaces")
    elif value and value.strip() != value:
        errors.append(f"{label} cannot have leading or trailing spaces")


def validate_event(payload: EventPayload) -> ValidationResult:
    """Check an event payload, reporting one error per bad field."""
    errors = []

    if is_blank(payload.title):
        errors.append("Title is required")
    elif payload.title.strip() != payload.title:
        errors.append("Title cannot have leading or trailing spaces")

    _check_optional_text("Description", payload.description, errors)

    if is_blank(payload.date):
        errors.append("Date is required")
    elif not is_valid_date(payload.date):
        errors.append("Date must be a valid date")

    _check_optional_text("Location", payload.location, errors)

    return ValidationResult.from_errors(errors)
