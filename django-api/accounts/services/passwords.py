"""Password hashing and verification.

Uses bcrypt for password hashing with automatic salting and a fixed work
factor.
"""

import bcrypt

DEFAULT_ROUNDS = 10


class PasswordHasher:
    """One-way salted password hashing."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password with bcrypt (auto-salted)."""
        return bcrypt.hashpw(plaintext.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, plaintext: str, digest: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(plaintext.encode(), digest.encode())
        except (ValueError, TypeError, AttributeError):
            return False
