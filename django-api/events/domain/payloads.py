"""Structured event payloads.

A field the client did not send is ``UNSET``; an explicit ``null`` is kept as
``None`` so validation can reject it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Self

from events.domain.models import Event
from events.domain.value_objects import UNSET

EVENT_FIELDS = ("title", "description", "date", "location")


@dataclass(frozen=True)
class EventPayload:
    title: Any = UNSET
    description: Any = UNSET
    date: Any = UNSET
    location: Any = UNSET

    @classmethod
    def from_data(cls, data: object) -> Self:
        if not isinstance(data, Mapping):
            return cls()
        return cls(**{name: data[name] for name in EVENT_FIELDS if name in data})

    @classmethod
    def from_event(cls, event: Event) -> Self:
        """Payload describing a stored event; missing optional fields are UNSET."""
        return cls(
            title=event.title,
            description=UNSET if event.description is None else event.description,
            date=event.date,
            location=UNSET if event.location is None else event.location,
        )

    def provided(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def merged_onto(self, base: "EventPayload") -> "EventPayload":
        return replace(base, **self.provided())
