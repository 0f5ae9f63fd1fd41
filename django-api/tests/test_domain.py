"""Unit tests for domain primitives and payloads.

Run with: pytest tests/test_domain.py -v
"""

import pytest

from accounts.domain import AccountId, SignupPayload, normalize_email
from events.domain import UNSET, EventId, EventPayload


class TestAccountId:
    """Tests for AccountId value object."""

    def test_from_value_accepts_int(self):
        assert AccountId.from_value(7) == AccountId(7)

    def test_from_value_normalizes_numeric_string(self):
        """A numeric string and an int name the same account."""
        assert AccountId.from_value(" 7 ") == AccountId.from_value(7)

    @pytest.mark.parametrize("value", ["abc", "", "1.5", True])
    def test_from_value_rejects_non_numeric(self, value):
        with pytest.raises(ValueError):
            AccountId.from_value(value)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_integer(self):
        assert EventId.from_string("42") == EventId(42)

    def test_from_string_invalid_integer(self):
        """EventId.from_string raises ValueError for non-numeric ids."""
        with pytest.raises(ValueError):
            EventId.from_string("not-an-id")


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  Ann@Example.COM ") == "ann@example.com"


def test_signup_payload_ignores_non_mapping_data():
    assert SignupPayload.from_data(["email"]) == SignupPayload()


class TestEventPayload:
    """Tests for EventPayload."""

    def test_missing_fields_are_unset(self):
        payload = EventPayload.from_data({"title": "Meetup"})
        assert payload.title == "Meetup"
        assert payload.date is UNSET
        assert payload.provided() == {"title": "Meetup"}

    def test_explicit_null_is_kept(self):
        """A null description counts as provided."""
        payload = EventPayload.from_data({"description": None})
        assert payload.provided() == {"description": None}

    def test_unknown_keys_are_dropped(self):
        assert EventPayload.from_data({"owner": 3, "title": "x"}).provided() == {"title": "x"}

    def test_merged_onto_overrides_only_provided_fields(self):
        base = EventPayload(title="Meetup", date="2025-01-01")
        merged = EventPayload(location="Hall").merged_onto(base)
        assert merged == EventPayload(title="Meetup", date="2025-01-01", location="Hall")

    def test_unset_is_falsy_singleton(self):
        assert not UNSET
        assert type(UNSET)() is UNSET
