"""Built-in node shapes picked by :mod:`gerr.factory`.

Each shape stores only the parts it reports, so a leaf never carries an
empty cause slot and a code-only wrapper never carries a message. Usually
there is no need to touch these directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import override

from gerr.node import Error, ErrorNode


@dataclass(frozen=True, slots=True, eq=False)
class MessageError(ErrorNode):
    """Leaf holding only a message."""

    error_message: str

    @override
    def message(self) -> str | None:
        return self.error_message


@dataclass(frozen=True, slots=True, eq=False)
class CodeMessageError(ErrorNode):
    """Leaf holding a code and a message."""

    error_code: int
    error_message: str

    @override
    def code(self) -> int:
        return self.error_code

    @override
    def message(self) -> str | None:
        return self.error_message


@dataclass(frozen=True, slots=True, eq=False)
class CodeCauseError(ErrorNode):
    """Wrapper adding only a code on top of its cause."""

    error_code: int
    error_cause: Error

    @override
    def code(self) -> int:
        return self.error_code

    @override
    def cause(self) -> Error:
        return self.error_cause


@dataclass(frozen=True, slots=True, eq=False)
class MessageCauseError(ErrorNode):
    """Wrapper adding only a message on top of its cause."""

    error_message: str
    error_cause: Error

    @override
    def message(self) -> str | None:
        return self.error_message

    @override
    def cause(self) -> Error:
        return self.error_cause


@dataclass(frozen=True, slots=True, eq=False)
class CodeMessageCauseError(ErrorNode):
    """Wrapper adding a code and a message on top of its cause."""

    error_code: int
    error_message: str
    error_cause: Error

    @override
    def code(self) -> int:
        return self.error_code

    @override
    def message(self) -> str | None:
        return self.error_message

    @override
    def cause(self) -> Error:
        return self.error_cause
