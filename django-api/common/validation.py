"""Validation result shared by the payload validators."""

from dataclasses import dataclass
from typing import Self

from common.errors import ValidationFailedError


@dataclass(frozen=True)
class ValidationResult:
    """Every rule a payload violated, in the order the rules were checked."""

    errors: tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: list[str]) -> Self:
        return cls(errors=tuple(errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_if_invalid(self) -> None:
        """Raise ValidationFailedError carrying all errors, if any."""
        if self.errors:
            raise ValidationFailedError(self.errors)


def is_blank(value: object) -> bool:
    """True when value is not a string or holds only whitespace."""
    return not isinstance(value, str) or not value.strip()
