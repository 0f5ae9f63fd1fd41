"""Domain errors for the accounts module."""

from common.errors import DomainError, ErrorCode


class DuplicateEmailError(DomainError):
    """Raised when signing up with an email that is already registered."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EMAIL,
            message="Email already exists",
        )


class InvalidCredentialsError(DomainError):
    """Raised for an unknown email or a wrong password alike."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password",
        )


class InvalidSubjectError(DomainError):
    """Raised when a token is requested without an account id or email."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SUBJECT,
            message="Account must have id and email to generate token",
        )


class InvalidTokenError(DomainError):
    """Raised when a token is malformed or its signature does not match."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TOKEN,
            message="Invalid token",
        )


class TokenExpiredError(DomainError):
    """Raised when a token's expiry has passed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOKEN_EXPIRED,
            message="Token has expired",
        )
