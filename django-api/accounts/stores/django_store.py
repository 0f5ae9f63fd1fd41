"""Django ORM implementation of the AccountStore."""

from django.db import DatabaseError, IntegrityError, transaction

from accounts import models
from accounts.domain import Account, AccountId, Credentials
from accounts.stores.interfaces import AccountStore
from common.errors import ConstraintViolation, InternalError


def to_domain(row: models.Account) -> Account:
    return Account(
        id=AccountId(value=row.pk),
        email=row.email,
        name=row.name,
        created_at=row.created_at,
    )


class DjangoAccountStore(AccountStore):
    """SQL-backed account store using Django ORM."""

    def insert_account(self, email: str, name: str, password_hash: str) -> Account:
        try:
            with transaction.atomic():
                row = models.Account.objects.create(
                    email=email, name=name, password_hash=password_hash
                )
        except IntegrityError as exc:
            raise ConstraintViolation(str(exc)) from exc
        except DatabaseError as exc:
            raise InternalError() from exc
        return to_domain(row)

    def find_account_by_email(self, email: str) -> Credentials | None:
        try:
            row = models.Account.objects.filter(email=email).first()
        except DatabaseError as exc:
            raise InternalError() from exc
        if row is None:
            return None
        return Credentials(account=to_domain(row), password_hash=row.password_hash)
