"""Bearer token authentication for DRF views."""

from dataclasses import dataclass

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from accounts.domain import AccountId, Identity
from accounts.domain.errors import InvalidTokenError, TokenExpiredError
from accounts.providers import get_token_service

KEYWORD = "Bearer"


@dataclass(frozen=True)
class AuthenticatedAccount:
    """The ``request.user`` of a request carrying a valid token."""

    identity: Identity

    is_authenticated = True
    is_anonymous = False

    @property
    def id(self) -> AccountId:
        return self.identity.account_id

    @property
    def email(self) -> str:
        return self.identity.email


class BearerTokenAuthentication(BaseAuthentication):
    """Authenticate with ``Authorization: Bearer <token>``.

    Requests without the header stay anonymous; permission classes decide
    whether that is acceptable.
    """

    def authenticate(self, request):
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != KEYWORD.lower().encode():
            return None
        if len(parts) != 2:
            raise exceptions.AuthenticationFailed("Invalid authorization header")

        try:
            token = parts[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed("Invalid token") from None

        try:
            identity = get_token_service().verify(token)
        except TokenExpiredError as exc:
            raise exceptions.AuthenticationFailed(exc.message) from None
        except InvalidTokenError as exc:
            raise exceptions.AuthenticationFailed(exc.message) from None
        return AuthenticatedAccount(identity=identity), token

    def authenticate_header(self, request) -> str:
        return KEYWORD
