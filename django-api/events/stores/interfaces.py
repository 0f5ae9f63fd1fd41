"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from accounts.domain import AccountId
from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def insert_event(self, fields: dict, owner_id: AccountId) -> Event:
        """Persist a new event with already-normalized fields."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def update_event_fields(self, event_id: EventId, changes: dict, updated_at: datetime) -> Event:
        """Overwrite the given fields and updated_at; return the refreshed event.

        Raises RecordNotFound if the event does not exist.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Return False if nothing was deleted."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by id ascending."""
        ...

    @abstractmethod
    def add_registration(self, event_id: EventId, account_id: AccountId) -> None:
        """Record a registration.

        Raises ConstraintViolation if the account is already registered.
        """
        ...

    @abstractmethod
    def remove_registration(self, event_id: EventId, account_id: AccountId) -> bool:
        """Delete a registration. Return False if there was none."""
        ...
