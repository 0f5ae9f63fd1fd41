"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class AccountId:
    """Store-assigned identifier for an Account."""

    value: int

    @classmethod
    def from_value(cls, value: object) -> Self:
        """Normalize an int or numeric string.

        Raises ValueError for anything else, including booleans.
        """
        if isinstance(value, bool):
            raise ValueError("Account id must be numeric")
        if isinstance(value, AccountId):
            return cls(value=value.value)
        return cls(value=int(str(value).strip()))

    def __str__(self) -> str:
        return str(self.value)


def normalize_email(email: str) -> str:
    """Lower-case and trim an email for storage and comparison."""
    return email.strip().lower()
