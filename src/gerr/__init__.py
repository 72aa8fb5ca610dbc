"""Chainable error values.

Functions return an :data:`Error`: ``None`` when everything went fine, an
error node otherwise. Callers add context with :func:`wrap` instead of
logging at every layer, and inspect the final chain with :func:`is_kind`,
:func:`as_kind`, :func:`is_code`, :func:`code` or :func:`string`.
"""

from loguru import logger

from gerr.chain import as_code, as_kind, code, is_code, is_kind, iter_chain, string
from gerr.factory import format_message, make, new, wrap
from gerr.kinds import (
    BareKind,
    ContextKind,
    define_code_context_error,
    define_code_error,
    define_context_error,
    define_error,
)
from gerr.node import Error, ErrorLike, ErrorNode
from gerr.result import Try, make_try

logger.disable("gerr")

__all__ = [
    "BareKind",
    "ContextKind",
    "Error",
    "ErrorLike",
    "ErrorNode",
    "Try",
    "as_code",
    "as_kind",
    "code",
    "define_code_context_error",
    "define_code_error",
    "define_context_error",
    "define_error",
    "format_message",
    "is_code",
    "is_kind",
    "iter_chain",
    "make",
    "make_try",
    "new",
    "string",
    "wrap",
]
