"""Validation rules for signup and login payloads.

Validators never raise on malformed input: a missing or wrongly typed field
is reported as a violation like any other.
"""

import re
from collections.abc import Callable

from accounts.domain.payloads import LoginPayload, SignupPayload
from accounts.domain.value_objects import normalize_email
from common.validation import ValidationResult, is_blank

PASSWORD_MIN_LENGTH = 6
# bcrypt only accepts inputs up to 72 bytes.
PASSWORD_MAX_BYTES = 72

EMAIL_PATTERN = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@(([^<>()\[\]\.,;:\s@\"]+\.)+[^<>()\[\]\.,;:\s@\"]{2,})$",
    re.IGNORECASE,
)


def is_valid_email(value: object) -> bool:
    return not is_blank(value) and EMAIL_PATTERN.match(value.strip()) is not None


def validate_signup(
    payload: SignupPayload,
    email_in_use: Callable[[str], bool] | None = None,
) -> ValidationResult:
    """Check a signup payload.

    ``email_in_use`` receives the normalized email once it is syntactically
    valid. The check is best-effort: the store's uniqueness constraint is what
    actually prevents duplicates.
    """
    errors = []

    if not is_valid_email(payload.email):
        errors.append("Valid email is required")
    elif email_in_use is not None and email_in_use(normalize_email(payload.email)):
        errors.append("Email is already in use")

    if is_blank(payload.password):
        errors.append("Password must not be empty")
    elif len(payload.password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    elif len(payload.password.encode()) > PASSWORD_MAX_BYTES:
        errors.append(f"Password must be at most {PASSWORD_MAX_BYTES} bytes long")

    if is_blank(payload.name):
        errors.append("Name is required")

    return ValidationResult.from_errors(errors)


def validate_login(payload: LoginPayload) -> ValidationResult:
    """Check presence only, so a failure says nothing about the account."""
    errors = []
    if is_blank(payload.email):
        errors.append("Email is required")
    if is_blank(payload.password):
        errors.append("Password is required")
    return ValidationResult.from_errors(errors)
