"""Structured request payloads.

Fields hold whatever the client sent; validation decides what is acceptable.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self


def _as_mapping(data: object) -> Mapping:
    return data if isinstance(data, Mapping) else {}


@dataclass(frozen=True)
class SignupPayload:
    email: Any = None
    password: Any = None
    name: Any = None

    @classmethod
    def from_data(cls, data: object) -> Self:
        data = _as_mapping(data)
        return cls(
            email=data.get("email"),
            password=data.get("password"),
            name=data.get("name"),
        )

    def __repr__(self) -> str:
        return f"SignupPayload(email={self.email!r}, name={self.name!r})"


@dataclass(frozen=True)
class LoginPayload:
    email: Any = None
    password: Any = None

    @classmethod
    def from_data(cls, data: object) -> Self:
        data = _as_mapping(data)
        return cls(email=data.get("email"), password=data.get("password"))

    def __repr__(self) -> str:
        return f"LoginPayload(email={self.email!r})"
