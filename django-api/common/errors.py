"""Domain error codes shared by the accounts and events modules."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_SUBJECT = "INVALID_SUBJECT"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    details: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationFailedError(DomainError):
    """Raised when a payload violates one or more validation rules."""

    def __init__(self, errors) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Validation failed",
            details=tuple(errors),
        )

    @property
    def errors(self) -> tuple[str, ...]:
        return self.details


class InternalError(DomainError):
    """Raised when persistence fails for a reason the caller cannot fix."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL,
            message="Internal server error",
        )


class StoreError(Exception):
    """Base class for errors reported by store implementations."""


class ConstraintViolation(StoreError):
    """A write was rejected by a uniqueness constraint."""


class RecordNotFound(StoreError):
    """The record addressed by a write does not exist."""
