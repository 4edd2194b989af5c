import pytest

from twodo.application.services.authentication import AuthenticationFlow
from twodo.core.exceptions import AuthErr
from twodo.core.result import Err, Ok
from twodo.domain.models.user import Role, User

from doubles import ScriptedInput

PASSWORD = "Valid123!"


@pytest.fixture()
def bob(user_store, hasher):
    user = User("bob", Role.USER, hasher.hash(PASSWORD))
    assert user_store.add(user).is_ok()
    return user


def _flow(store, hasher, output, lines, secrets, max_attempts=3):
    return AuthenticationFlow(store, ScriptedInput(lines, secrets), output, hasher, max_attempts)


def test_login_with_correct_password(user_store, hasher, output, bob):
    assert _flow(user_store, hasher, output, ["bob"], [PASSWORD]).login() == Ok(bob)
    assert output.errors == []


def test_login_unknown_user(user_store, hasher, output, bob):
    inputs = ScriptedInput(["alice"], [PASSWORD])
    flow = AuthenticationFlow(user_store, inputs, output, hasher, 3)

    assert flow.login() == Err(AuthErr.UserNotFound)
    assert inputs.secrets == [PASSWORD]


@pytest.mark.parametrize("max_attempts", [1, 3, 5])
def test_all_tries_exhausted_on_final_attempt(user_store, hasher, output, bob, max_attempts):
    inputs = ScriptedInput(["bob"], ["wrong"] * max_attempts)
    flow = AuthenticationFlow(user_store, inputs, output, hasher, max_attempts)

    assert flow.login() == Err(AuthErr.AllTriesExhausted)
    assert inputs.secrets == []
    assert len(output.errors) == max_attempts - 1


@pytest.mark.parametrize("max_attempts", [1, 3, 5])
def test_correct_password_on_last_attempt_succeeds(user_store, hasher, output, bob, max_attempts):
    secrets = ["wrong"] * (max_attempts - 1) + [PASSWORD]
    assert _flow(user_store, hasher, output, ["bob"], secrets, max_attempts).login() == Ok(bob)


def test_retry_reports_remaining_tries(user_store, hasher, output, bob):
    _flow(user_store, hasher, output, ["bob"], ["wrong", "wrong", PASSWORD]).login()
    assert output.errors == ["Wrong password. 2 tries left.", "Wrong password. 1 try left."]


def test_authentication_steps(user_store, hasher, output, bob):
    flow = _flow(user_store, hasher, output, [], [])
    assert flow.authenticate_username("bob") == Ok(bob)
    assert flow.authenticate_username("nobody") == Err(AuthErr.UserNotFound)
    assert flow.authenticate_password(bob, PASSWORD) is True
    assert flow.authenticate_password(bob, "wrong") is False


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_max_attempts_must_be_positive(user_store, hasher, output, max_attempts):
    with pytest.raises(ValueError):
        _flow(user_store, hasher, output, [], [], max_attempts)
