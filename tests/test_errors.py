import logging

import pytest
from loguru import logger

from gerr.error_utils import log_and_wrap
from gerr.errors import (
    ContextValidationError,
    GerrError,
    KindDeclarationError,
    MessageFormatError,
)


def test_gerr_error_str() -> None:
    err = GerrError("msg", code="X", context={"foo": "bar"})
    assert str(err) == "msg"
    assert err.code == "X" and err.context == {"foo": "bar"}


def test_message_format_error_message_and_context() -> None:
    cause = IndexError("Replacement index 1 out of range")
    error = MessageFormatError(template="{} {}", error=cause)
    assert error.message.startswith("Can't render message template '{} {}'")
    assert error.code == "GERR_MESSAGE_FORMAT"
    assert error.context == {"template": "{} {}", "error": repr(cause)}
    assert isinstance(error, GerrError)


def test_kind_declaration_error_message_and_context() -> None:
    error = KindDeclarationError(kind="ErrX", reason="code must be int")
    assert error.message == "Invalid error kind ErrX: code must be int"
    assert error.context == {"kind": "ErrX", "reason": "code must be int"}


def test_context_validation_error_message() -> None:
    error = ContextValidationError(kind="ErrX", error=ValueError("bad"))
    assert error.message == "Invalid context for error kind ErrX"
    assert error.code == "GERR_CONTEXT_VALIDATION"


def test_log_and_wrap_logs_and_raises(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)
    logger.enable("gerr")
    sink_id = logger.add(caplog.handler, level="ERROR", format="{message}")
    cause = ValueError("collaborator boom")
    try:
        with pytest.raises(KindDeclarationError) as exc:
            try:
                raise cause
            except ValueError as e:
                log_and_wrap(e, KindDeclarationError(kind="ErrX", reason="boom"))
    finally:
        logger.remove(sink_id)
    assert exc.value.__cause__ is cause
    assert "collaborator boom" in caplog.text
