"""Validate command line arguments, wrapping errors on the way up."""

from __future__ import annotations

from collections.abc import Sequence

import gerr


def check_argument_value(arg: str) -> gerr.Error:
    try:
        int(arg)
    except ValueError as exc:
        return gerr.new("conv exception: {}", exc)
    return None


def check_arguments(args: Sequence[str]) -> gerr.Error:
    if len(args) != 1:
        return gerr.new("argc({}) != 1", len(args))
    err = check_argument_value(args[0])
    if err is not None:
        return gerr.wrap(err, "check_argument_value({!r})", args[0])
    return None
