from __future__ import annotations

import gerr
from gerr.result import Try


def safe_div(a: int, b: int) -> Try[int]:
    if b == 0:
        return Try.failure(gerr.new("div 0"))
    return Try.success(a // b)


def safe_reciprocal(a: int) -> Try[float]:
    result = safe_div(1, a)
    if not result:
        return Try.failure(gerr.wrap(result.error, "1/{}", a))
    return Try.success(1 / a)
