import random

import pytest

import gerr
from gerr.demo.arguments import check_argument_value, check_arguments
from gerr.demo.fake_api import (
    ErrArgumentNeg,
    ErrArgumentZero,
    ErrLERandNum1,
    ErrLERandNum2,
    FakeApi,
    RandContext,
    describe,
)


class StubRandom:
    """Hand out a fixed sequence of draws."""

    def __init__(self, draws: list[int]) -> None:
        self.draws = list(draws)

    def randint(self, a: int, b: int) -> int:
        return self.draws.pop(0)


def test_check_argument_value() -> None:
    assert check_argument_value("12") is None
    err = check_argument_value("abc")
    assert err is not None
    assert gerr.string(err).startswith("conv exception: invalid literal")


def test_check_arguments_counts_args() -> None:
    err = check_arguments([])
    assert gerr.string(err) == "argc(0) != 1"
    assert gerr.code(err) == -1


def test_check_arguments_wraps_value_error() -> None:
    err = check_arguments(["abc"])
    chain = list(gerr.iter_chain(err))
    assert len(chain) == 2
    assert gerr.string(err).startswith("check_argument_value('abc'):conv exception")
    assert check_arguments(["42"]) is None


def test_fake_api_argument_errors() -> None:
    api = FakeApi(StubRandom([]))
    assert api.call(-1) is ErrArgumentNeg.new()
    assert api.call(0) is ErrArgumentZero.new()
    assert gerr.code(api.call(-3)) == 1000001


def test_fake_api_first_draw_error() -> None:
    err = FakeApi(StubRandom([3, 1])).call(2)
    found = gerr.as_kind(err, ErrLERandNum1)
    assert found is not None
    assert found.context() == RandContext(3, 1)
    assert err.message() == "Random num is illegal, rand val1: 3, rand val2: 1"


def test_fake_api_second_draw_error() -> None:
    err = FakeApi(StubRandom([0, 2])).call(1)
    found = gerr.as_kind(err, ErrLERandNum2)
    assert found is not None
    assert found.context() == RandContext(0, 2)
    assert gerr.string(err) == (
        "1000002:random num is illegal, rand val1: 0, rand val2: 2"
    )


def test_fake_api_success() -> None:
    assert FakeApi(StubRandom([0, 0])).call(1) is None


def test_fake_api_with_real_rng() -> None:
    api = FakeApi(random.Random(1), rand_max=0)
    assert api.call(1) is None


@pytest.mark.parametrize(
    "err, expected",
    [
        (None, "Nothing happened"),
        (ErrLERandNum1.new(RandContext(1, 2)), "ErrLERandNum, rand val1: 1; 2"),
        (ErrArgumentZero.new(), "I don't care arg zero error"),
        (gerr.new(123, "dummy"), "I don't care a dummy error"),
        (ErrArgumentNeg.new(), "1000001:Argument is negative"),
    ],
)
def test_describe(err: gerr.Error, expected: str) -> None:
    assert describe(err) == expected
