"""Pair a computed value with an error.

``Try`` is truthy on success::

    def safe_div(a: int, b: int) -> Try[int]:
        if b == 0:
            return Try.failure(gerr.new("div 0"))
        return Try.success(a // b)

    result = safe_div(10, 0)
    if not result:
        print(gerr.string(result.error))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from gerr.node import Error, ErrorNode

T = TypeVar("T")


@dataclass(slots=True)
class Try(Generic[T]):
    value: T | None = None
    error: Error = None

    @classmethod
    def success(cls, value: T) -> Try[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorNode) -> Try[T]:
        if error is None:
            raise ValueError("Try.failure() requires an error")
        return cls(error=error)

    def __bool__(self) -> bool:
        return self.is_success()

    def is_success(self) -> bool:
        return self.error is None

    def is_failure(self) -> bool:
        return self.error is not None

    def clear_value(self) -> None:
        self.value = None

    def clear_error(self) -> None:
        self.error = None

    def assign(self, other: T | ErrorNode | Try[T]) -> None:
        """Switch to *other*: an error, a value, or another ``Try``."""
        if isinstance(other, Try):
            self.value = other.value
            self.error = other.error
        elif isinstance(other, ErrorNode):
            self.clear_value()
            self.error = other
        else:
            self.clear_error()
            self.value = other


def make_try(value: T) -> Try[T]:
    return Try.success(value)
