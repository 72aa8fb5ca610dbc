import pytest

import gerr
from gerr.demo.safe_div import safe_div, safe_reciprocal
from gerr.result import Try, make_try


def test_success() -> None:
    result = make_try(5)
    assert result
    assert result.is_success() and not result.is_failure()
    assert result.value == 5
    assert result.error is None


def test_failure() -> None:
    err = gerr.new("div 0")
    result: Try[int] = Try.failure(err)
    assert not result
    assert result.is_failure()
    assert result.error is err
    assert result.value is None


def test_failure_requires_error() -> None:
    with pytest.raises(ValueError):
        Try.failure(None)  # type: ignore[arg-type]


def test_success_may_hold_none() -> None:
    assert Try.success(None).is_success()


def test_assign_switches_state() -> None:
    result = make_try(1)
    err = gerr.new("boom")

    result.assign(err)
    assert result.is_failure()
    assert result.value is None

    result.assign(2)
    assert result.is_success()
    assert result.value == 2

    other: Try[int] = Try.failure(err)
    result.assign(other)
    assert result.error is err


def test_clear() -> None:
    result = make_try("x")
    result.clear_value()
    assert result.value is None
    result.error = gerr.new("e")
    result.clear_error()
    assert result.is_success()


@pytest.mark.parametrize(
    "a, b, expected",
    [(0, 10, 0), (10, 5, 2)],
)
def test_safe_div_success(a: int, b: int, expected: int) -> None:
    result = safe_div(a, b)
    assert result
    assert result.value == expected


def test_safe_div_by_zero() -> None:
    result = safe_div(10, 0)
    assert not result
    assert gerr.string(result.error) == "div 0"


def test_safe_reciprocal_wraps_error() -> None:
    assert safe_reciprocal(4).value == 0.25
    result = safe_reciprocal(0)
    assert gerr.string(result.error) == "1/0:div 0"
