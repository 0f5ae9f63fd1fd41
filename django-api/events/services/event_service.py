"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from accounts.domain import AccountId
from common.errors import ConstraintViolation, RecordNotFound
from events.domain import Event, EventId, EventPayload
from events.domain.errors import (
    AlreadyRegisteredError,
    EventNotFoundError,
    RegistrationNotFoundError,
)
from events.domain.validation import validate_event
from events.services.authorization import ensure_owner
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("description", "location")


def normalize_fields(fields: dict) -> dict:
    """Trim provided values; optional fields that end up empty become None."""
    normalized = {}
    for name, value in fields.items():
        if name in OPTIONAL_FIELDS:
            normalized[name] = (value.strip() or None) if value else None
        else:
            normalized[name] = value.strip()
    return normalized


class EventService:
    """Service for event operations."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def list(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None."""
        return self._store.get_event(event_id)

    def get_or_raise(self, event_id: EventId) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError()
        return event

    def create(self, payload: EventPayload, owner_id: AccountId) -> Event:
        """Validate, normalize and store a new event owned by ``owner_id``.

        Raises:
            ValidationFailedError: If the payload breaks any event rule.
        """
        validate_event(payload).raise_if_invalid()
        fields = normalize_fields(
            {
                "title": payload.title,
                "description": payload.description,
                "date": payload.date,
                "location": payload.location,
            }
        )
        event = self._store.insert_event(fields, AccountId.from_value(owner_id))
        logger.info("Event %s created by account %s", event.id, event.owner_id)
        return event

    def update(self, event_id: EventId, payload: EventPayload, caller_id) -> Event:
        """Apply the fields present in ``payload`` to an event the caller owns.

        An empty payload returns the event unchanged.

        Raises:
            EventNotFoundError: If the event does not exist.
            ForbiddenError: If the caller is not the owner.
            ValidationFailedError: If the merged event breaks any rule.
        """
        existing = self.get_or_raise(event_id)
        ensure_owner(caller_id, existing.owner_id, action="edit")

        changes = payload.provided()
        if not changes:
            return existing

        validate_event(payload.merged_onto(EventPayload.from_event(existing))).raise_if_invalid()
        try:
            event = self._store.update_event_fields(event_id, normalize_fields(changes), updated_at=self._clock())
        except RecordNotFound:
            raise EventNotFoundError() from None
        logger.info("Event %s updated (%s)", event_id, ", ".join(sorted(changes)))
        return event

    def delete(self, event_id: EventId, caller_id) -> None:
        """Remove an event the caller owns.

        Raises:
            EventNotFoundError: If the event does not exist.
            ForbiddenError: If the caller is not the owner.
        """
        existing = self.get_or_raise(event_id)
        ensure_owner(caller_id, existing.owner_id, action="delete")
        if not self._store.delete_event(event_id):
            raise EventNotFoundError()
        logger.info("Event %s deleted", event_id)

    def register(self, event_id: EventId, account_id: AccountId) -> None:
        """Register an account for an event.

        Raises:
            EventNotFoundError: If the event does not exist.
            AlreadyRegisteredError: If the account is already registered.
        """
        self.get_or_raise(event_id)
        try:
            self._store.add_registration(event_id, AccountId.from_value(account_id))
        except ConstraintViolation:
            raise AlreadyRegisteredError() from None
        logger.info("Account %s registered for event %s", account_id, event_id)

    def unregister(self, event_id: EventId, account_id: AccountId) -> None:
        """Remove an account's registration for an event.

        Raises:
            EventNotFoundError: If the event does not exist.
            RegistrationNotFoundError: If the account was not registered.
        """
        self.get_or_raise(event_id)
        if not self._store.remove_registration(event_id, AccountId.from_value(account_id)):
            raise RegistrationNotFoundError()
        logger.info("Account %s unregistered from event %s", account_id, event_id)
