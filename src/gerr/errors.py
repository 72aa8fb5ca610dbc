from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class GerrError(Exception):
    """Base error for faults raised by the library itself.

    These signal programmer errors (bad templates, bad declarations, bad
    context values). Error *values* built by the library are never raised.

    Attributes:
        message: Human-readable message describing the error.
        code: Optional machine-readable code.
        context: Optional structured context for diagnostics.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(frozen=True, slots=True, kw_only=True)
class MessageFormatError(GerrError):
    template: str
    error: Exception
    message: str = field(init=False)
    code: str = field(init=False, default="GERR_MESSAGE_FORMAT")
    context: dict[str, Any] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Can't render message template {self.template!r}: {self.error}",
        )
        object.__setattr__(
            self, "context", {"template": self.template, "error": repr(self.error)}
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class KindDeclarationError(GerrError):
    kind: str
    reason: str
    message: str = field(init=False)
    code: str = field(init=False, default="GERR_KIND_DECLARATION")
    context: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "message", f"Invalid error kind {self.kind}: {self.reason}"
        )
        object.__setattr__(self, "context", {"kind": self.kind, "reason": self.reason})


@dataclass(frozen=True, slots=True, kw_only=True)
class ContextValidationError(GerrError):
    kind: str
    error: Exception
    message: str = field(init=False)
    code: str = field(init=False, default="GERR_CONTEXT_VALIDATION")
    context: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "message", f"Invalid context for error kind {self.kind}"
        )
        object.__setattr__(
            self, "context", {"kind": self.kind, "error": repr(self.error)}
        )
