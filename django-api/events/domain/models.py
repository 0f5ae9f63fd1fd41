"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from accounts.domain import AccountId
from events.domain.value_objects import EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str | None
    date: str
    location: str | None
    owner_id: AccountId
    created_at: datetime
    updated_at: datetime
