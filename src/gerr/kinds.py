"""Declare named error kinds.

A kind is a class of error nodes sharing a message template, an optional
fixed code and, optionally, a context type carried by every instance.

Kinds without context::

    class ErrArgumentZero(BareKind, message="Argument is zero"): ...
    class ErrArgumentNeg(BareKind, code=1000001, message="Argument is negative"): ...

    ErrArgumentZero.new()          # shared instance, no allocation
    ErrArgumentZero.new(cause)     # fresh instance wrapping ``cause``

Kinds with context render their message from the context right away::

    @dataclass(frozen=True)
    class RandContext:
        first: int
        second: int

    class ErrRand(ContextKind[RandContext], code=1000002,
                  message="random num is illegal: {0}, {1}"): ...

    err = ErrRand.new(RandContext(1, 2))
    gerr.as_kind(err, ErrRand).context().first

The same kinds can be declared with :func:`define_error`,
:func:`define_code_error`, :func:`define_context_error` and
:func:`define_code_context_error`.
"""

from __future__ import annotations

import copy
import dataclasses
import functools
import sys
import threading
import types
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Self, TypeVar, get_args, get_origin, override

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from gerr.error_utils import log_and_wrap
from gerr.errors import ContextValidationError, KindDeclarationError, MessageFormatError
from gerr.factory import format_message
from gerr.node import Error, ErrorNode

C = TypeVar("C")


def _declare(cls: type[Any], message: object, code: object) -> None:
    if message is not None:
        if not isinstance(message, str):
            raise KindDeclarationError(
                kind=cls.__qualname__, reason="message template must be str"
            )
        cls._template = message
    elif cls._template is None:
        raise KindDeclarationError(
            kind=cls.__qualname__, reason="no message template declared"
        )
    if code is not None:
        if not isinstance(code, int) or isinstance(code, bool):
            raise KindDeclarationError(kind=cls.__qualname__, reason="code must be int")
        cls._code = code


@dataclass(frozen=True, eq=False)
class BareKind(ErrorNode):
    """Base of kinds without context.

    Declare with the ``message`` and optional ``code`` class keywords.
    """

    error_cause: Error = None

    _code: ClassVar[int] = 0
    _template: ClassVar[str | None] = None
    _instance: ClassVar[BareKind | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init_subclass__(
        cls, *, message: str | None = None, code: int | None = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        _declare(cls, message, code)
        cls._instance = None
        cls._instance_lock = threading.Lock()

    def __post_init__(self) -> None:
        if self._template is None:
            raise KindDeclarationError(
                kind=type(self).__qualname__, reason="no message template declared"
            )

    @classmethod
    def new(cls, cause: Error = None) -> Self:
        """Return the shared instance, or a fresh one wrapping *cause*."""
        if cause is not None:
            return cls(error_cause=cause)
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                instance = cls._instance
                if instance is None:
                    instance = cls()
                    cls._instance = instance
                    logger.debug("Created shared instance of {}", cls.__qualname__)
        return instance

    @override
    def code(self) -> int:
        return self._code

    @override
    def message(self) -> str | None:
        return self._template

    @override
    def cause(self) -> Error:
        return self.error_cause


@functools.cache
def _adapter_for(context_type: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(context_type)


def _lookup(context: Any, name: str) -> Any:
    if isinstance(context, Mapping):
        return context[name]
    return getattr(context, name)


def _context_values(
    context: Any, fields: tuple[str, ...] | None
) -> tuple[tuple[Any, ...], dict[str, Any]]:
    """Split *context* into positional and named template values."""
    if fields is not None:
        values = tuple(_lookup(context, name) for name in fields)
        return values, dict(zip(fields, values))
    if dataclasses.is_dataclass(context) and not isinstance(context, type):
        names = [f.name for f in dataclasses.fields(context)]
    elif isinstance(context, BaseModel):
        names = list(type(context).model_fields)
    elif isinstance(context, Mapping):
        named = {k: v for k, v in context.items() if isinstance(k, str)}
        return tuple(context.values()), named
    elif isinstance(context, tuple):
        names = getattr(context, "_fields", None)
        if names is None:
            return context, {}
    else:
        return (context,), {}
    values = tuple(getattr(context, name) for name in names)
    return values, dict(zip(names, values))


def _context_type_from_bases(cls: type[Any]) -> Any:
    for base in types.get_original_bases(cls):
        origin = get_origin(base)
        if isinstance(origin, type) and issubclass(origin, ContextKind):
            args = get_args(base)
            if args and not isinstance(args[0], TypeVar):
                return args[0]
    return None


def _checked_context_type(cls: type[Any], context: Any) -> type[Any] | None:
    """Return the class new contexts are checked against, ``None`` for any."""
    if context is Any or context is object:
        return None
    if not isinstance(context, type):
        raise KindDeclarationError(
            kind=cls.__qualname__, reason="context type must be a class"
        )
    try:
        isinstance(None, context)
    except TypeError:
        raise KindDeclarationError(
            kind=cls.__qualname__,
            reason=f"context type {context.__qualname__} can't be used with isinstance()",
        ) from None
    return context


@dataclass(frozen=True, eq=False)
class ContextKind(ErrorNode, Generic[C]):
    """Base of kinds carrying a context value.

    Declare with the ``message`` class keyword and optionally ``code``,
    ``context`` (the context type, otherwise taken from ``ContextKind[T]``)
    and ``fields`` (attribute names fed to the template, in order).
    """

    error_context: C
    error_message: str
    error_cause: Error = None

    _code: ClassVar[int] = 0
    _template: ClassVar[str | None] = None
    _context_type: ClassVar[type[Any] | None] = None
    _fields: ClassVar[tuple[str, ...] | None] = None

    def __init_subclass__(
        cls,
        *,
        message: str | None = None,
        code: int | None = None,
        context: type[Any] | None = None,
        fields: tuple[str, ...] | list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        _declare(cls, message, code)
        if context is None:
            context = _context_type_from_bases(cls)
        if context is not None:
            cls._context_type = _checked_context_type(cls, context)
        if fields is not None:
            cls._fields = tuple(fields)

    @classmethod
    def new(cls, context: C | Any, cause: Error = None) -> Self:
        """Create an instance for *context*, optionally wrapping *cause*."""
        value = copy.deepcopy(cls._coerce(context))
        return cls(error_context=value, error_message=cls.render(value), error_cause=cause)

    @classmethod
    def render(cls, context: C) -> str:
        """Render the kind's template against *context*."""
        if cls._template is None:
            raise KindDeclarationError(
                kind=cls.__qualname__, reason="no message template declared"
            )
        try:
            values, named = _context_values(context, cls._fields)
        except (AttributeError, KeyError) as exc:
            log_and_wrap(exc, MessageFormatError(template=cls._template, error=exc))
        return format_message(cls._template, *values, **{"context": context, **named})

    @classmethod
    def _coerce(cls, context: Any) -> Any:
        context_type = cls._context_type
        if context_type is None or isinstance(context, context_type):
            return context
        try:
            return _adapter_for(context_type).validate_python(context)
        except ValidationError as exc:
            log_and_wrap(exc, ContextValidationError(kind=cls.__qualname__, error=exc))

    def context(self) -> C:
        return self.error_context

    @override
    def code(self) -> int:
        return self._code

    @override
    def message(self) -> str | None:
        return self.error_message

    @override
    def cause(self) -> Error:
        return self.error_cause


def _new_kind(name: str, base: type[Any], module: str | None, **declaration: Any) -> Any:
    if not name.isidentifier():
        raise KindDeclarationError(kind=name, reason="name must be an identifier")
    kind = types.new_class(name, (base,), declaration)
    if module is None:
        getframe = getattr(sys, "_getframe", None)
        if getframe is None:
            module = "__main__"
        else:
            module = getframe(2).f_globals.get("__name__", "__main__")
    kind.__module__ = module
    return kind


def define_error(name: str, message: str, *, module: str | None = None) -> type[BareKind]:
    """Declare a kind with a fixed message and no code.

    Pass *module* to set the kind's ``__module__``; otherwise it is taken
    from the calling frame where the interpreter exposes one.
    """
    return _new_kind(name, BareKind, module, message=message)


def define_code_error(
    name: str, code: int, message: str, *, module: str | None = None
) -> type[BareKind]:
    """Declare a kind with a fixed code and message."""
    return _new_kind(name, BareKind, module, code=code, message=message)


def define_context_error(
    name: str,
    context_type: type[Any],
    message: str,
    *,
    fields: tuple[str, ...] | list[str] | None = None,
    module: str | None = None,
) -> type[ContextKind[Any]]:
    """Declare a kind whose message is rendered from a context value."""
    return _new_kind(
        name, ContextKind, module, context=context_type, message=message, fields=fields
    )


def define_code_context_error(
    name: str,
    code: int,
    context_type: type[Any],
    message: str,
    *,
    fields: tuple[str, ...] | list[str] | None = None,
    module: str | None = None,
) -> type[ContextKind[Any]]:
    """Declare a coded kind whose message is rendered from a context value."""
    return _new_kind(
        name,
        ContextKind,
        module,
        code=code,
        context=context_type,
        message=message,
        fields=fields,
    )
