"""Walk and inspect cause chains.

None of these functions raise: a ``None`` error is a valid input and yields
``False``, ``None``, ``0`` or ``"<NIL>"``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from gerr.node import ErrorLike

K = TypeVar("K")

NIL = "<NIL>"
EMPTY = "<EMPTY>"
DELIMITER = ":"


def iter_chain(err: ErrorLike | None) -> Iterator[ErrorLike]:
    """Yield *err* and then each of its causes down to the root."""
    node = err
    while node is not None:
        yield node
        node = node.cause()


def as_kind(err: ErrorLike | None, kind: type[K]) -> K | None:
    """Return the first error in the chain that is a *kind*."""
    for node in iter_chain(err):
        if isinstance(node, kind):
            return node
    return None


def is_kind(err: ErrorLike | None, kind: type[K]) -> bool:
    """Tell whether any error in the chain is a *kind*."""
    return as_kind(err, kind) is not None


def as_code(code: int, err: ErrorLike | None) -> ErrorLike | None:
    """Return the first error in the chain carrying *code*."""
    for node in iter_chain(err):
        if node.code() == code:
            return node
    return None


def is_code(code: int, err: ErrorLike | None) -> bool:
    """Tell whether any error in the chain carries *code*."""
    return as_code(code, err) is not None


def code(err: ErrorLike | None, default: int = -1) -> int:
    """Return the first non-zero code in the chain.

    ``0`` means no error at all; *default* is returned for an error chain
    without any code.
    """
    if err is None:
        return 0
    for node in iter_chain(err):
        value = node.code()
        if value != 0:
            return value
    return default


def _segment(node: ErrorLike) -> str:
    value = node.code()
    text = node.message()
    if value != 0 and text:
        return f"{value}{DELIMITER}{text}"
    if value != 0:
        return str(value)
    if text:
        return text
    # Neither code nor message; should not happen in correct use.
    return EMPTY


def string(err: ErrorLike | None) -> str:
    """Render the chain from the outermost error down to the root cause.

    Each error renders as ``code:message``, dropping a zero code or an empty
    message. Example: ``wrap(new("inner"), 7, "outer")`` gives
    ``"7:outer:inner"``.
    """
    if err is None:
        return NIL
    return DELIMITER.join(_segment(node) for node in iter_chain(err))
