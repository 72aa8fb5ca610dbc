from __future__ import annotations

import traceback
from typing import NoReturn

from loguru import logger

from gerr.errors import GerrError


def _format_tail(exc: BaseException, *, limit: int = 6) -> str:
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(tb[-limit:])


def log_and_wrap(exc: BaseException, wrapped: GerrError) -> NoReturn:
    """Log a short traceback of *exc* and raise *wrapped* chained to it."""
    formatted_tb = _format_tail(exc)
    logger.opt(exception=exc).error("{}\n{}", wrapped.message, formatted_tb)
    raise wrapped from exc
