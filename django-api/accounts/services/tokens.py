"""Signed, time-limited identity tokens.

Tokens are HS256 JWTs carrying the account id (``sub``), the email and an
expiry. They are stateless: nothing can invalidate one before ``exp``.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt

from accounts.domain.errors import InvalidSubjectError, InvalidTokenError, TokenExpiredError
from accounts.domain.models import Identity
from accounts.domain.value_objects import AccountId

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and verifies identity tokens signed with a shared secret."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, account_id, email: str | None, ttl: timedelta | None = None) -> str:
        """Return a token for the account.

        Raises:
            InvalidSubjectError: If account_id or email is missing.
        """
        if account_id is None or account_id == "" or not email:
            raise InvalidSubjectError()
        try:
            subject = AccountId.from_value(account_id)
        except ValueError:
            raise InvalidSubjectError() from None

        now = self._clock()
        payload = {
            "sub": str(subject),
            "email": email,
            "iat": now,
            "exp": now + (ttl if ttl is not None else self._ttl),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Identity:
        """Return the identity carried by a token.

        Raises:
            TokenExpiredError: If the embedded expiry has passed.
            InvalidTokenError: If the token is malformed or wrongly signed.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "email", "exp"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.PyJWTError:
            raise InvalidTokenError() from None

        # Expiry is checked against the service clock, not the wall clock.
        expires_at = claims["exp"]
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            raise InvalidTokenError()
        if expires_at <= self._clock().timestamp():
            raise TokenExpiredError()

        email = claims["email"]
        if not isinstance(email, str) or not email:
            raise InvalidTokenError()
        try:
            account_id = AccountId.from_value(claims["sub"])
        except ValueError:
            raise InvalidTokenError() from None
        return Identity(account_id=account_id, email=email)
