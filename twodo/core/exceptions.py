"""
Error codes and fatal exceptions for the application.

Expected failures are reported as closed enumerations inside a Result.
Infrastructure failures (unusable database, corrupted rows) raise AppError
subclasses and are handled once, at the top level.
"""

import enum
from typing import Any, Dict, Optional


class StoreError(enum.Enum):
    """Failure of a single store operation."""

    SelectFailure = "select_failure"
    InsertFailure = "insert_failure"
    UpdateFailure = "update_failure"
    DeleteFailure = "delete_failure"


class AuthErr(enum.Enum):
    """Failure of a signup or login step."""

    InvalidNameLength = "invalid_name_length"
    AlreadyExistingName = "already_existing_name"
    InvalidPasswordLength = "invalid_password_length"
    MissingUpperCase = "missing_upper_case"
    MissingLowerCase = "missing_lower_case"
    MissingNumber = "missing_number"
    MissingSpecialCharacter = "missing_special_character"
    UserNotFound = "user_not_found"
    AllTriesExhausted = "all_tries_exhausted"
    StoreError = "store_error"

    @property
    def message(self) -> str:
        return AUTH_ERROR_MESSAGES[self]


AUTH_ERROR_MESSAGES: Dict[AuthErr, str] = {
    AuthErr.InvalidNameLength: "Username must be between 1 and 20 characters long.",
    AuthErr.AlreadyExistingName: "This username is already taken.",
    AuthErr.InvalidPasswordLength: "Password must be between 8 and 20 characters long.",
    AuthErr.MissingUpperCase: "Password must contain at least one uppercase letter.",
    AuthErr.MissingLowerCase: "Password must contain at least one lowercase letter.",
    AuthErr.MissingNumber: "Password must contain at least one digit.",
    AuthErr.MissingSpecialCharacter: "Password must contain at least one special character.",
    AuthErr.UserNotFound: "No user with this username exists.",
    AuthErr.AllTriesExhausted: "Too many wrong passwords. Login aborted.",
    AuthErr.StoreError: "The user could not be saved. Please try again later.",
}


class AppError(Exception):
    """Base class for fatal application errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StoreUnavailableError(AppError):
    """The backing database cannot be opened, initialized or used."""
    def __init__(self, message: str = "Database unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class CorruptedDataError(AppError):
    """A persisted value violates an invariant that correct writes never break."""
    def __init__(self, message: str = "Corrupted data", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ConfigurationError(AppError):
    """Settings could not be loaded or failed validation."""
    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
