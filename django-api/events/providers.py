"""Process-wide EventService built on the Django ORM store."""

from functools import lru_cache

from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


@lru_cache(maxsize=1)
def get_event_service() -> EventService:
    return EventService(store=DjangoEventStore())
