"""Django ORM implementation of the EventStore."""

from datetime import datetime

from django.db import DatabaseError, IntegrityError, transaction

from accounts.domain import AccountId
from common.errors import ConstraintViolation, InternalError, RecordNotFound
from events import models
from events.domain import Event, EventId
from events.stores.interfaces import EventStore

WRITABLE_FIELDS = frozenset({"title", "description", "date", "location"})


def to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.pk),
        title=row.title,
        description=row.description,
        date=row.date,
        location=row.location,
        owner_id=AccountId(value=row.owner_id),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """SQL-backed event store using Django ORM."""

    def insert_event(self, fields: dict, owner_id: AccountId) -> Event:
        values = {name: value for name, value in fields.items() if name in WRITABLE_FIELDS}
        try:
            row = models.Event.objects.create(owner_id=owner_id.value, **values)
        except DatabaseError as exc:
            raise InternalError() from exc
        return to_domain(row)

    def get_event(self, event_id: EventId) -> Event | None:
        try:
            row = models.Event.objects.filter(pk=event_id.value).first()
        except DatabaseError as exc:
            raise InternalError() from exc
        return None if row is None else to_domain(row)

    def update_event_fields(self, event_id: EventId, changes: dict, updated_at: datetime) -> Event:
        values = {name: value for name, value in changes.items() if name in WRITABLE_FIELDS}
        try:
            updated = models.Event.objects.filter(pk=event_id.value).update(updated_at=updated_at, **values)
        except DatabaseError as exc:
            raise InternalError() from exc
        if not updated:
            raise RecordNotFound(f"event {event_id}")
        event = self.get_event(event_id)
        if event is None:
            raise RecordNotFound(f"event {event_id}")
        return event

    def delete_event(self, event_id: EventId) -> bool:
        try:
            deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        except DatabaseError as exc:
            raise InternalError() from exc
        return deleted > 0

    def list_events(self) -> list[Event]:
        try:
            return [to_domain(row) for row in models.Event.objects.order_by("id")]
        except DatabaseError as exc:
            raise InternalError() from exc

    def add_registration(self, event_id: EventId, account_id: AccountId) -> None:
        try:
            with transaction.atomic():
                models.Registration.objects.create(event_id=event_id.value, account_id=account_id.value)
        except IntegrityError as exc:
            raise ConstraintViolation(str(exc)) from exc
        except DatabaseError as exc:
            raise InternalError() from exc

    def remove_registration(self, event_id: EventId, account_id: AccountId) -> bool:
        try:
            deleted, _ = models.Registration.objects.filter(
                event_id=event_id.value, account_id=account_id.value
            ).delete()
        except DatabaseError as exc:
            raise InternalError() from exc
        return deleted > 0
