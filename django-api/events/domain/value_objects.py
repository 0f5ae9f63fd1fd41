"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Store-assigned identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse a path segment. Raises ValueError if it is not an integer."""
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


class _Unset:
    """Marker for an event field the client did not send."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()
