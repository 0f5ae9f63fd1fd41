"""Process-wide service instances built from Django settings.

Each getter builds its object on first use and then returns the same one.
Tests call ``cache_clear`` on a getter after overriding settings.
"""

from datetime import timedelta
from functools import lru_cache

from django.conf import settings

from accounts.services.account_service import AccountService
from accounts.services.passwords import PasswordHasher
from accounts.services.tokens import TokenService
from accounts.stores.django_store import DjangoAccountStore


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    return TokenService(
        secret=settings.TOKEN_SECRET,
        ttl=timedelta(seconds=settings.TOKEN_TTL_SECONDS),
    )


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.PASSWORD_HASH_ROUNDS)


@lru_cache(maxsize=1)
def get_account_service() -> AccountService:
    return AccountService(
        store=DjangoAccountStore(),
        hasher=get_password_hasher(),
        tokens=get_token_service(),
    )
