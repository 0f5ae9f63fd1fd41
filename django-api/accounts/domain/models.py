"""Domain models representing persisted account state.

Django ORM models are in accounts/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from accounts.domain.value_objects import AccountId


@dataclass(frozen=True)
class Account:
    """Domain representation of an Account. Never carries the password hash."""

    id: AccountId
    email: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Credentials:
    """An account together with its stored password hash."""

    account: Account
    password_hash: str

    def __repr__(self) -> str:
        return f"Credentials(account={self.account!r})"


@dataclass(frozen=True)
class Identity:
    """Claims recovered from a verified token."""

    account_id: AccountId
    email: str


@dataclass(frozen=True)
class AuthResult:
    """An account and the token issued for it."""

    account: Account
    token: str
