from __future__ import annotations

import sys
from collections.abc import Callable

import typer
from dependency_injector.wiring import Provide, inject
from loguru import logger

import gerr
from gerr.demo.arguments import check_arguments
from gerr.demo.fake_api import FakeApi, describe
from gerr.demo.safe_div import safe_div

from .config import Settings
from .container import AppContainer, build_container

app = typer.Typer(
    name="gerr",
    help="Demo programs for chainable error values",
)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.enable("gerr")


def entry_point(func: Callable[[], int]) -> int:
    settings = Settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    container.wire(modules=[__name__])
    try:
        return func()
    finally:
        container.unwire()


@inject
def _check_args(
    args: list[str],
    settings: Settings = Provide[AppContainer.settings],
) -> int:
    err = check_arguments(args)
    if err is None:
        typer.echo(f"Got argument: {args[0]}")
        return 0
    typer.echo(f"Check arguments fail! {err}", err=True)
    return gerr.code(err, settings.default_exit_code)


@inject
def _fake_api(
    start: int,
    stop: int,
    api: FakeApi = Provide[AppContainer.fake_api],
) -> int:
    for i in range(start, stop):
        typer.echo(f"Handling {i}:")
        typer.echo(describe(api.call(i)))
    return 0


def _safe_div(dividend: int, divisor: int) -> int:
    result = safe_div(dividend, divisor)
    if result:
        typer.echo(f"No error, result = {result.value}")
        return 0
    typer.echo(f"Error occurs: {gerr.string(result.error)}", err=True)
    return 1


@app.command("check-args", help="Validate that exactly one integer argument is given")
def check_args(args: list[str] = typer.Argument(None)) -> None:
    code = entry_point(lambda: _check_args(args or []))
    raise typer.Exit(code)


@app.command("fake-api", help="Call the fake API for every x in [START, STOP)")
def fake_api(
    start: int = typer.Option(-1, "--start", help="First argument passed to the API"),
    stop: int = typer.Option(5, "--stop", help="Stop before this argument"),
) -> None:
    raise typer.Exit(entry_point(lambda: _fake_api(start, stop)))


@app.command("safe-div", help="Divide DIVIDEND by DIVISOR without raising")
def safe_div_cmd(dividend: int, divisor: int) -> None:
    raise typer.Exit(entry_point(lambda: _safe_div(dividend, divisor)))


@app.callback()
def root() -> None:
    """Root command for gerr."""


def main() -> None:  # pragma: no cover - CLI entry point
    """Entrypoint for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
