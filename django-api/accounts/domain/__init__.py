from accounts.domain.models import Account, AuthResult, Credentials, Identity
from accounts.domain.payloads import LoginPayload, SignupPayload
from accounts.domain.value_objects import AccountId, normalize_email

__all__ = [
    "Account",
    "AuthResult",
    "Credentials",
    "Identity",
    "AccountId",
    "SignupPayload",
    "LoginPayload",
    "normalize_email",
]
