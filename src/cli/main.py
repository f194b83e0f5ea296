"""CLI de catr (Typer).

Responsabilidades:
- Resolver argumentos + settings en un `InvocationConfig`.
- Actuar como borde de errores: cada `CatrError` se imprime en stderr y se
  traduce a un código de salida.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError

from cli.logging_setup import configure_logging
from cli.ui_components import build_error_console, print_fatal, print_open_error
from core.config import AppSettings
from core.domain.errors import CatrError, UsageError
from core.domain.models import InvocationConfig
from core.services.line_emitter import LineEmitter

__version__ = "0.1.0"

app = typer.Typer(
    add_completion=False,
    help="Concatenate FILE(s) to standard output. With no FILE, or when FILE is -, read standard input.",
)

_console = build_error_console()

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"catr {__version__}")
        raise typer.Exit()


def _usage_message(exc: ValidationError) -> str:
    messages = [str(err.get("msg", "")).removeprefix("Value error, ") for err in exc.errors()]
    return "; ".join(m for m in messages if m) or str(exc)


def load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        raise UsageError(f"invalid configuration: {_usage_message(exc)}") from exc


def resolve_config(
    files: list[str] | None,
    *,
    number: bool = False,
    number_nonblank: bool = False,
    separate: bool | None = None,
    strict: bool = False,
    settings: AppSettings | None = None,
) -> InvocationConfig:
    """Construye la configuración de la invocación o lanza `UsageError`."""

    settings = settings or load_settings()
    try:
        return InvocationConfig(
            sources=files or [],
            number_all_lines=number,
            number_nonblank_lines=number_nonblank,
            separate_sources=settings.separate_sources if separate is None else separate,
            strict=strict,
            number_width=settings.number_width,
        )
    except ValidationError as exc:
        raise UsageError(_usage_message(exc)) from exc


@app.command()
def cat(
    files: list[str] | None = typer.Argument(
        None,
        metavar="[FILE]...",
        help="Input file(s); '-' reads standard input.",
        show_default=False,
    ),
    number: bool = typer.Option(False, "--number", "-n", help="Number all output lines."),
    number_nonblank: bool = typer.Option(
        False, "--number-nonblank", "-b", help="Number non-blank output lines."
    ),
    separate: bool | None = typer.Option(
        None,
        "--separate/--no-separate",
        help="Print a blank line between sources (default: CATR_SEPARATE_SOURCES).",
        show_default=False,
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 if any source could not be opened."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Concatenate files and print on the standard output."""

    try:
        settings = load_settings()
        configure_logging("DEBUG" if verbose else settings.log_level)

        config = resolve_config(
            files,
            number=number,
            number_nonblank=number_nonblank,
            separate=separate,
            strict=strict,
            settings=settings,
        )
        logger.debug("Resolved %s", config)

        emitter = LineEmitter(
            config,
            settings=settings,
            on_open_error=lambda err: print_open_error(_console, err),
        )
        result = emitter.run()
    except CatrError as exc:
        print_fatal(_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    if config.strict and not result.ok:
        logger.debug("%d source(s) failed to open", len(result.open_failures))
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
