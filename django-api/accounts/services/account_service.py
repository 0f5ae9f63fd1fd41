"""Account service - signup and login orchestration.

Services:
- Depend only on interfaces (stores) and injected collaborators
- Validate payloads before touching the store
- Map store failures to domain errors
"""

import logging

from accounts.domain.errors import DuplicateEmailError, InvalidCredentialsError
from accounts.domain.models import AuthResult
from accounts.domain.payloads import LoginPayload, SignupPayload
from accounts.domain.validation import validate_login, validate_signup
from accounts.domain.value_objects import normalize_email
from accounts.services.passwords import PasswordHasher
from accounts.services.tokens import TokenService
from accounts.stores.interfaces import AccountStore
from common.errors import ConstraintViolation

logger = logging.getLogger(__name__)


class AccountService:
    """Service for signup and login."""

    def __init__(self, store: AccountStore, hasher: PasswordHasher, tokens: TokenService) -> None:
        self._store = store
        self._hasher = hasher
        self._tokens = tokens

    def email_in_use(self, email: str) -> bool:
        return self._store.find_account_by_email(normalize_email(email)) is not None

    def signup(self, payload: SignupPayload) -> AuthResult:
        """Register a new account and issue its first token.

        Raises:
            ValidationFailedError: If the payload breaks any signup rule.
            DuplicateEmailError: If the store already holds the email.
        """
        validate_signup(payload, email_in_use=self.email_in_use).raise_if_invalid()

        password_hash = self._hasher.hash(payload.password)
        try:
            account = self._store.insert_account(
                email=normalize_email(payload.email),
                name=payload.name.strip(),
                password_hash=password_hash,
            )
        except ConstraintViolation:
            raise DuplicateEmailError() from None

        logger.info("Registered account %s", account.id)
        token = self._tokens.issue(account.id, account.email)
        return AuthResult(account=account, token=token)

    def login(self, payload: LoginPayload) -> AuthResult:
        """Check credentials and issue a token.

        Raises:
            ValidationFailedError: If email or password is missing.
            InvalidCredentialsError: If the email is unknown or the password is wrong.
        """
        validate_login(payload).raise_if_invalid()

        credentials = self._store.find_account_by_email(normalize_email(payload.email))
        if credentials is None or not self._hasher.verify(payload.password, credentials.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        account = credentials.account
        logger.info("Login: account %s", account.id)
        return AuthResult(account=account, token=self._tokens.issue(account.id, account.email))
