import pytest

from twodo.core.exceptions import StoreError
from twodo.core.result import Err, Ok, UnwrapError


def test_ok_holds_value():
    result = Ok(5)
    assert result.is_ok() and not result.is_err()
    assert result.unwrap() == 5
    assert result.unwrap_or(0) == 5
    with pytest.raises(UnwrapError):
        result.unwrap_err()


def test_err_holds_error():
    result = Err(StoreError.SelectFailure)
    assert result.is_err() and not result.is_ok()
    assert result.unwrap_err() is StoreError.SelectFailure
    assert result.unwrap_or("fallback") == "fallback"
    with pytest.raises(UnwrapError):
        result.unwrap()


def test_map_only_touches_matching_variant():
    assert Ok(2).map(lambda v: v * 10) == Ok(20)
    assert Ok(2).map_err(str) == Ok(2)
    assert Err("boom").map(lambda v: v * 10) == Err("boom")
    assert Err("boom").map_err(str.upper) == Err("BOOM")


def test_pattern_matching():
    def describe(result):
        match result:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"

    assert describe(Ok(1)) == "ok 1"
    assert describe(Err("x")) == "err x"
