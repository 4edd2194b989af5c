"""User domain model and role (de)serialization."""

import enum
from dataclasses import dataclass
from typing import Optional

from twodo.core.exceptions import CorruptedDataError

USERNAME_MAX_LENGTH = 20


class Role(str, enum.Enum):
    """Roles a user can hold."""
    USER = "User"
    ADMIN = "Admin"


_ROLE_BY_NAME = {role.value: role for role in Role}


def role_to_string(role: Role) -> str:
    if not isinstance(role, Role):
        raise CorruptedDataError("Invalid role enum", details={"role": repr(role)})
    return role.value


def string_to_role(role_str: str) -> Role:
    try:
        return _ROLE_BY_NAME[role_str]
    except (KeyError, TypeError):
        raise CorruptedDataError("Invalid role string", details={"role": role_str}) from None


@dataclass
class User:
    """
    A registered user.

    Attributes:
        username: Unique login name (1-20 characters)
        role: USER or ADMIN
        password: Raw credential while in a flow, transformed once handed to the store
        id: Assigned by the store on insert; None means never persisted
    """
    username: str
    role: Role = Role.USER
    password: str = ""
    id: Optional[int] = None

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role.value}')>"
