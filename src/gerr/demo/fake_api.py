"""A fake remote API reporting failures through declared error kinds."""

from __future__ import annotations

import random
from dataclasses import dataclass

from loguru import logger

import gerr
from gerr.kinds import BareKind, ContextKind


class ErrArgumentZero(BareKind, message="Argument is zero"): ...


class ErrArgumentNeg(BareKind, code=1000001, message="Argument is negative"): ...


@dataclass(frozen=True, slots=True)
class RandContext:
    rand_num1: int
    rand_num2: int


class ErrLERandNum1(
    ContextKind[RandContext],
    message="Random num is illegal, rand val1: {0}, rand val2: {1}",
): ...


ErrLERandNum2 = gerr.define_code_context_error(
    "ErrLERandNum2",
    1000002,
    RandContext,
    "random num is illegal, rand val1: {rand_num1}, rand val2: {rand_num2}",
)


class FakeApi:
    def __init__(self, rng: random.Random, rand_max: int = 3) -> None:
        self.rng = rng
        self.rand_max = rand_max

    def call(self, x: int) -> gerr.Error:
        if x < 0:
            return ErrArgumentNeg.new()
        if x == 0:
            return ErrArgumentZero.new()
        r1 = self.rng.randint(0, self.rand_max)
        r2 = self.rng.randint(0, self.rand_max)
        logger.debug("FakeApi.call({}) drew {} and {}", x, r1, r2)
        if x <= r1:
            return ErrLERandNum1.new(RandContext(r1, r2))
        if x <= r2:
            return ErrLERandNum2.new({"rand_num1": r1, "rand_num2": r2})
        return None


def describe(err: gerr.Error) -> str:
    """Turn a :meth:`FakeApi.call` result into a line of output."""
    if err is None:
        return "Nothing happened"
    rand_err = gerr.as_kind(err, ErrLERandNum1)
    if rand_err is not None:
        ctx = rand_err.context()
        return f"ErrLERandNum, rand val1: {ctx.rand_num1}; {ctx.rand_num2}"
    if gerr.is_kind(err, ErrArgumentZero):
        return "I don't care arg zero error"
    if gerr.is_code(123, err):
        return "I don't care a dummy error"
    return str(err)
