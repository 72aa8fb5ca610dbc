"""Build error nodes and layer them into chains.

Example::

    def check_argument(arg: str) -> gerr.Error:
        try:
            int(arg)
        except ValueError as exc:
            return gerr.new("conv exception: {}", exc)
        return None

    err = check_argument(value)
    if err is not None:
        return gerr.wrap(err, 2001, "check_argument({!r})", value)
"""

from __future__ import annotations

from typing import Any, TypeVar

from loguru import logger

from gerr.error_utils import log_and_wrap
from gerr.errors import MessageFormatError
from gerr.node import Error, ErrorNode
from gerr.shapes import (
    CodeCauseError,
    CodeMessageCauseError,
    CodeMessageError,
    MessageCauseError,
    MessageError,
)

N = TypeVar("N", bound=ErrorNode)


def _is_code(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_template(template: object) -> str:
    if not isinstance(template, str):
        raise TypeError(
            f"error message must be str, got {type(template).__name__}"
        )
    return template


def format_message(template: str, *args: Any, **kwargs: Any) -> str:
    """Render *template* eagerly with ``str.format``.

    A template without values is returned verbatim, braces included.
    """
    if not args and not kwargs:
        return template
    try:
        return template.format(*args, **kwargs)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as exc:
        log_and_wrap(exc, MessageFormatError(template=template, error=exc))


def make(node_type: type[N], *args: Any, **kwargs: Any) -> N:
    """Construct a custom node type and hand it out as an error."""
    if not (isinstance(node_type, type) and issubclass(node_type, ErrorNode)):
        raise TypeError(f"{node_type!r} is not an ErrorNode subclass")
    return node_type(*args, **kwargs)


def new(code_or_message: int | str, *args: Any) -> ErrorNode:
    """Create a root error.

    ``new(message, *values)`` gives a message-only error,
    ``new(code, message, *values)`` one with a code as well.
    """
    if _is_code(code_or_message):
        if not args:
            raise TypeError("new(code, message, ...) requires a message")
        template, *values = args
        return CodeMessageError(
            code_or_message, format_message(_check_template(template), *values)
        )
    template = _check_template(code_or_message)
    return MessageError(format_message(template, *args))


def wrap(cause: Error, code_or_message: int | str, *args: Any) -> ErrorNode:
    """Layer a new error on top of *cause*.

    Accepted forms: ``wrap(cause, message, *values)``, ``wrap(cause, code)``
    and ``wrap(cause, code, message, *values)``.

    Wrapping ``None`` yields the equivalent root error instead.
    """
    if cause is None:
        logger.warning("wrap() called without a cause, creating a root error")

    if not _is_code(code_or_message):
        message = format_message(_check_template(code_or_message), *args)
        if cause is None:
            return MessageError(message)
        return MessageCauseError(message, cause)

    if not args:
        return CodeCauseError(code_or_message, cause)

    template, *values = args
    message = format_message(_check_template(template), *values)
    if cause is None:
        return CodeMessageError(code_or_message, message)
    return CodeMessageCauseError(code_or_message, message, cause)
