import pytest

from twodo.application.services.validation import validate_password, validate_username
from twodo.core.exceptions import AuthErr
from twodo.core.result import Err, Ok
from twodo.domain.models.user import Role, User


@pytest.mark.parametrize(
    "password, expected",
    [
        ("short1!", Err(AuthErr.InvalidPasswordLength)),
        ("Waytoolongpassword123!", Err(AuthErr.InvalidPasswordLength)),
        ("alllowercase1!", Err(AuthErr.MissingUpperCase)),
        ("ALLUPPERCASE1!", Err(AuthErr.MissingLowerCase)),
        ("NoDigitsHere!", Err(AuthErr.MissingNumber)),
        ("NoSpecial123", Err(AuthErr.MissingSpecialCharacter)),
        ("Valid123!", Ok(None)),
    ],
)
def test_password_policy(password, expected):
    assert validate_password(password) == expected


def test_password_length_bounds_are_inclusive():
    assert validate_password("Abcde1!x") == Ok(None)  # 8
    assert validate_password("Abcdefghijklmnop12!x") == Ok(None)  # 20


def test_password_rules_stop_at_first_failure():
    # missing everything but length: the uppercase rule reports first
    assert validate_password("        ") == Err(AuthErr.MissingUpperCase)


@pytest.mark.parametrize("special", list("!@#$%^&*()_+-=[]{};:\",<.>/?"))
def test_every_special_character_is_accepted(special):
    assert validate_password(f"Abcdef1{special}") == Ok(None)


def test_username_empty(user_store):
    assert validate_username("", user_store) == Err(AuthErr.InvalidNameLength)


def test_username_too_long(user_store):
    assert validate_username("x" * 21, user_store) == Err(AuthErr.InvalidNameLength)
    assert validate_username("x" * 20, user_store) == Ok(None)


def test_username_already_taken(user_store):
    assert validate_username("alice", user_store) == Ok(None)
    assert user_store.add(User("alice", Role.USER, "x")).is_ok()
    assert validate_username("alice", user_store) == Err(AuthErr.AlreadyExistingName)
