"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from accounts.domain import Account, Credentials


class AccountStore(ABC):
    """Interface for account persistence operations."""

    @abstractmethod
    def insert_account(self, email: str, name: str, password_hash: str) -> Account:
        """Persist a new account.

        Raises ConstraintViolation if the email is already taken.
        """
        ...

    @abstractmethod
    def find_account_by_email(self, email: str) -> Credentials | None:
        """Return the account holding an already-normalized email, or None."""
        ...
