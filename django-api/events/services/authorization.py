"""Ownership checks for event mutations."""

from accounts.domain import AccountId
from events.domain.errors import ForbiddenError


def _normalize(identifier) -> AccountId | None:
    if identifier is None:
        return None
    try:
        return AccountId.from_value(identifier)
    except (TypeError, ValueError):
        return None


def is_owner(caller_id, owner_id) -> bool:
    """True iff both identifiers normalize to the same account id."""
    caller = _normalize(caller_id)
    owner = _normalize(owner_id)
    return caller is not None and owner is not None and caller == owner


def ensure_owner(caller_id, owner_id, action: str = "modify") -> None:
    """Raise ForbiddenError unless the caller owns the resource."""
    if not is_owner(caller_id, owner_id):
        raise ForbiddenError(action)
