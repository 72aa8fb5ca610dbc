"""Error node capability shared by every error representation."""

from __future__ import annotations

from typing import Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class ErrorLike(Protocol):
    """Structural form of an error node.

    Anything exposing these three queries can sit in a cause chain and be
    inspected by :mod:`gerr.chain`.
    """

    def code(self) -> int:  # pragma: no cover - protocol definition
        """Return the error code, ``0`` when there is none."""

    def message(self) -> str | None:  # pragma: no cover - protocol definition
        """Return the error message, ``None`` when there is none."""

    def cause(self) -> ErrorLike | None:  # pragma: no cover - protocol definition
        """Return the parent error, ``None`` for a root cause."""


class ErrorNode:
    """Base type of all error nodes.

    Subclasses override any of :meth:`code`, :meth:`message` and
    :meth:`cause`. A node must never change what these return once it is
    constructed, so nodes can be shared freely between chains and threads.

    Example::

        class UinError(ErrorNode):
            def __init__(self, uin: int) -> None:
                self.uin = uin

            def message(self) -> str | None:
                return "bad uin"

        def check(uin: int) -> Error:
            if uin == 0:
                return gerr.make(UinError, uin)
            return None
    """

    __slots__ = ()

    def code(self) -> int:
        return 0

    def message(self) -> str | None:
        return None

    def cause(self) -> Error:
        return None

    def as_error(self) -> ErrorNode:
        return self

    def __str__(self) -> str:
        from gerr.chain import string

        return string(self)


# ``None`` means no error occurred.
Error: TypeAlias = ErrorNode | None
