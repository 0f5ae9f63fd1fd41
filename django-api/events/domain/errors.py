"""Domain errors for the events module."""

from common.errors import DomainError, ErrorCode


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class ForbiddenError(DomainError):
    """Raised when the caller does not own the event it tries to change."""

    def __init__(self, action: str = "modify") -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message=f"You are not authorized to {action} this event",
        )


class AlreadyRegisteredError(DomainError):
    """Raised when an account registers twice for the same event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="Already registered for this event",
        )


class RegistrationNotFoundError(DomainError):
    """Raised when unregistering from an event the account is not registered for."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message="Registration not found",
        )
