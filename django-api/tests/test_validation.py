"""Unit tests for payload validators.

Run with: pytest tests/test_validation.py -v
"""

import pytest

from accounts.domain import LoginPayload, SignupPayload
from accounts.domain.validation import validate_login, validate_signup
from common.errors import ValidationFailedError
from common.validation import ValidationResult
from events.domain import EventPayload
from events.domain.validation import validate_event


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_no_errors_is_valid(self):
        assert ValidationResult().is_valid

    def test_raise_if_invalid_carries_every_error(self):
        result = ValidationResult.from_errors(["a", "b"])
        with pytest.raises(ValidationFailedError) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.errors == ("a", "b")


class TestValidateSignup:
    """Tests for signup validation."""

    def test_valid_payload(self):
        result = validate_signup(SignupPayload(email="ann@example.com", password="secret1", name="Ann"))
        assert result.is_valid
        assert result.errors == ()

    def test_empty_payload_reports_every_field(self):
        result = validate_signup(SignupPayload())
        assert not result.is_valid
        assert result.errors == (
            "Valid email is required",
            "Password must not be empty",
            "Name is required",
        )

    @pytest.mark.parametrize("email", ["", "   ", "ann", "ann@", "ann@example", "a b@example.com", 42])
    def test_malformed_email(self, email):
        result = validate_signup(SignupPayload(email=email, password="secret1", name="Ann"))
        assert result.errors == ("Valid email is required",)

    def test_email_is_trimmed_before_pattern_check(self):
        result = validate_signup(SignupPayload(email="  ann@example.com ", password="secret1", name="Ann"))
        assert result.is_valid

    def test_email_in_use_receives_normalized_email(self):
        seen = []

        def email_in_use(email):
            seen.append(email)
            return True

        result = validate_signup(
            SignupPayload(email=" Ann@Example.com", password="secret1", name="Ann"),
            email_in_use=email_in_use,
        )
        assert seen == ["ann@example.com"]
        assert result.errors == ("Email is already in use",)

    def test_email_in_use_not_called_for_malformed_email(self):
        def email_in_use(email):
            raise AssertionError("should not be called")

        result = validate_signup(SignupPayload(email="nope", password="secret1", name="Ann"), email_in_use)
        assert result.errors == ("Valid email is required",)

    def test_short_password(self):
        result = validate_signup(SignupPayload(email="ann@example.com", password="12345", name="Ann"))
        assert result.errors == ("Password must be at least 6 characters long",)

    def test_password_over_bcrypt_limit(self):
        result = validate_signup(SignupPayload(email="ann@example.com", password="x" * 80, name="Ann"))
        assert result.errors == ("Password must be at most 72 bytes long",)

    def test_password_limit_counts_bytes(self):
        """Multi-byte characters count by their encoded size."""
        assert validate_signup(SignupPayload(email="ann@example.com", password="x" * 72, name="Ann")).is_valid
        result = validate_signup(SignupPayload(email="ann@example.com", password="\u00e9" * 37, name="Ann"))
        assert result.errors == ("Password must be at most 72 bytes long",)

    @pytest.mark.parametrize("password", [None, "", "      ", 123456])
    def test_blank_password(self, password):
        result = validate_signup(SignupPayload(email="ann@example.com", password=password, name="Ann"))
        assert result.errors == ("Password must not be empty",)

    @pytest.mark.parametrize("name", [None, "", "   ", ["Ann"]])
    def test_blank_name(self, name):
        result = validate_signup(SignupPayload(email="ann@example.com", password="secret1", name=name))
        assert result.errors == ("Name is required",)


class TestValidateLogin:
    """Tests for login validation."""

    def test_presence_only(self):
        """Login accepts any non-blank strings; no format or length rules."""
        assert validate_login(LoginPayload(email="not-an-email", password="x")).is_valid

    def test_missing_fields(self):
        result = validate_login(LoginPayload(email=" ", password=None))
        assert result.errors == ("Email is required", "Password is required")


class TestValidateEvent:
    """Tests for event validation."""

    def test_minimal_valid_event(self):
        assert validate_event(EventPayload(title="Meetup", date="2025-01-01")).is_valid

    def test_full_valid_event(self):
        payload = EventPayload(
            title="Meetup",
            description="Monthly meetup",
            date="2025-01-01T18:30:00",
            location="Hall",
        )
        assert validate_event(payload).is_valid

    def test_missing_required_fields(self):
        result = validate_event(EventPayload())
        assert result.errors == ("Title is required", "Date is required")

    def test_empty_title_is_required_error(self):
        result = validate_event(EventPayload(title="", date="2025-01-01"))
        assert result.errors == ("Title is required",)

    def test_padded_title_is_whitespace_error(self):
        """A title with surrounding spaces is reported as such, not as missing."""
        result = validate_event(EventPayload(title=" a ", date="2025-01-01"))
        assert result.errors == ("Title cannot have leading or trailing spaces",)

    def test_all_whitespace_title_is_required_error(self):
        result = validate_event(EventPayload(title="   ", date="2025-01-01"))
        assert result.errors == ("Title is required",)

    @pytest.mark.parametrize("date", ["tomorrow", "2025-13-01", "2025-02-30", "2025-01-01T25:00:00"])
    def test_invalid_date(self, date):
        result = validate_event(EventPayload(title="Meetup", date=date))
        assert result.errors == ("Date must be a valid date",)

    @pytest.mark.parametrize("date", [None, "", "  ", 20250101])
    def test_missing_date(self, date):
        result = validate_event(EventPayload(title="Meetup", date=date))
        assert result.errors == ("Date is required",)

    @pytest.mark.parametrize(
        ("field", "label"),
        [("description", "Description"), ("location", "Location")],
    )
    class TestOptionalText:
        """Description and location share the same rules."""

        def _validate(self, field, value):
            return validate_event(EventPayload(title="Meetup", date="2025-01-01", **{field: value}))

        def test_empty_string_is_allowed(self, field, label):
            assert self._validate(field, "").is_valid

        def test_non_string(self, field, label):
            assert self._validate(field, None).errors == (f"{label} must be a string",)
            assert self._validate(field, 5).errors == (f"{label} must be a string",)

        def test_only_spaces(self, field, label):
            assert self._validate(field, "   ").errors == (f"{label} cannot be only empty spaces",)

        def test_padded(self, field, label):
            assert self._validate(field, " text").errors == (
                f"{label} cannot have leading or trailing spaces",
            )

    def test_errors_accumulate_in_field_order(self):
        payload = EventPayload(title=" t", description=" ", date="nope", location=3)
        assert validate_event(payload).errors == (
            "Title cannot have leading or trailing spaces",
            "Description cannot be only empty spaces",
            "Date must be a valid date",
            "Location must be a string",
        )
