"""Pytest configuration and shared fixtures."""

import itertools
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from accounts.domain import Account, AccountId, Credentials
from accounts.providers import get_account_service, get_password_hasher, get_token_service
from accounts.services.account_service import AccountService
from accounts.services.passwords import PasswordHasher
from accounts.services.tokens import TokenService
from accounts.stores.interfaces import AccountStore
from common.errors import ConstraintViolation, RecordNotFound
from events.domain import Event, EventId
from events.providers import get_event_service
from events.services.event_service import EventService
from events.stores.interfaces import EventStore

TOKEN_SECRET = "unit-test-token-secret-with-32-bytes!"


class Clock:
    """A clock that moves one second forward every time it is read."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


class InMemoryAccountStore(AccountStore):
    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._ids = itertools.count(1)
        self.rows: dict[str, Credentials] = {}

    def insert_account(self, email: str, name: str, password_hash: str) -> Account:
        if email in self.rows:
            raise ConstraintViolation(email)
        account = Account(id=AccountId(next(self._ids)), email=email, name=name, created_at=self._clock())
        self.rows[email] = Credentials(account=account, password_hash=password_hash)
        return account

    def find_account_by_email(self, email: str) -> Credentials | None:
        return self.rows.get(email)


class InMemoryEventStore(EventStore):
    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._ids = itertools.count(1)
        self.rows: dict[int, Event] = {}
        self.registrations: set[tuple[int, int]] = set()

    def insert_event(self, fields: dict, owner_id: AccountId) -> Event:
        now = self._clock()
        event = Event(
            id=EventId(next(self._ids)),
            title=fields["title"],
            description=fields.get("description"),
            date=fields["date"],
            location=fields.get("location"),
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        self.rows[event.id.value] = event
        return event

    def get_event(self, event_id: EventId) -> Event | None:
        return self.rows.get(event_id.value)

    def update_event_fields(self, event_id: EventId, changes: dict, updated_at: datetime) -> Event:
        if event_id.value not in self.rows:
            raise RecordNotFound(str(event_id))
        event = replace(self.rows[event_id.value], updated_at=updated_at, **changes)
        self.rows[event_id.value] = event
        return event

    def delete_event(self, event_id: EventId) -> bool:
        return self.rows.pop(event_id.value, None) is not None

    def list_events(self) -> list[Event]:
        return [self.rows[key] for key in sorted(self.rows)]

    def add_registration(self, event_id: EventId, account_id: AccountId) -> None:
        key = (event_id.value, account_id.value)
        if key in self.registrations:
            raise ConstraintViolation(str(key))
        self.registrations.add(key)

    def remove_registration(self, event_id: EventId, account_id: AccountId) -> bool:
        key = (event_id.value, account_id.value)
        if key not in self.registrations:
            return False
        self.registrations.remove(key)
        return True


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_providers():
    """Service singletons are rebuilt from settings for every test."""
    providers = [get_token_service, get_password_hasher, get_account_service, get_event_service]
    for provider in providers:
        provider.cache_clear()
    yield
    for provider in providers:
        provider.cache_clear()


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_secret() -> str:
    return TOKEN_SECRET


@pytest.fixture
def token_service(token_secret: str) -> TokenService:
    return TokenService(secret=token_secret)


@pytest.fixture
def account_store(clock: Clock) -> InMemoryAccountStore:
    return InMemoryAccountStore(clock)


@pytest.fixture
def account_service(account_store, hasher, token_service) -> AccountService:
    return AccountService(store=account_store, hasher=hasher, tokens=token_service)


@pytest.fixture
def event_store(clock: Clock) -> InMemoryEventStore:
    return InMemoryEventStore(clock)


@pytest.fixture
def event_service(event_store, clock) -> EventService:
    return EventService(store=event_store, clock=clock)


@pytest.fixture
def signup(api_client: APIClient):
    """Sign up through the API and return (account id, token)."""

    def _signup(email: str = "ann@example.com", password: str = "secret1", name: str = "Ann"):
        response = api_client.post(
            "/users/signup",
            {"email": email, "password": password, "name": name},
            format="json",
        )
        assert response.status_code == 201, response.data
        return response.data["user"]["id"], response.data["token"]

    return _signup


@pytest.fixture
def authed_client():
    """Return an APIClient sending the given bearer token."""

    def _authed_client(token: str) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client

    return _authed_client
