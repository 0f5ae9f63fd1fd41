from events.domain.models import Event
from events.domain.payloads import EventPayload
from events.domain.value_objects import UNSET, EventId

__all__ = [
    "Event",
    "EventId",
    "EventPayload",
    "UNSET",
]
