"""Validation rules for usernames and passwords.

Rules run in a fixed order and stop at the first failure, so exactly one
AuthErr is reported per call.
"""

import re

from twodo.core.exceptions import AuthErr
from twodo.core.result import Err, Ok, Result
from twodo.domain.repositories.base import BaseRepository
from twodo.domain.models.user import USERNAME_MAX_LENGTH, User

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};:\",<.>/?"

UPPER_CASE_PATTERN = re.compile(r"[A-Z]")
LOWER_CASE_PATTERN = re.compile(r"[a-z]")
NUMBER_PATTERN = re.compile(r"[0-9]")
SPECIAL_CHARACTER_PATTERN = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

PASSWORD_RULES = (
    (UPPER_CASE_PATTERN, AuthErr.MissingUpperCase),
    (LOWER_CASE_PATTERN, AuthErr.MissingLowerCase),
    (NUMBER_PATTERN, AuthErr.MissingNumber),
    (SPECIAL_CHARACTER_PATTERN, AuthErr.MissingSpecialCharacter),
)


def validate_username(name: str, store: BaseRepository[User]) -> Result[None, AuthErr]:
    if not name or len(name) > USERNAME_MAX_LENGTH:
        return Err(AuthErr.InvalidNameLength)

    if store.find_by_unique_column(name).is_ok():
        return Err(AuthErr.AlreadyExistingName)

    return Ok(None)


def validate_password(password: str) -> Result[None, AuthErr]:
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        return Err(AuthErr.InvalidPasswordLength)

    for pattern, error in PASSWORD_RULES:
        if not pattern.search(password):
            return Err(error)

    return Ok(None)
