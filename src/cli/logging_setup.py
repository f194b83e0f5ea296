"""Configuración de logging para la CLI.

Los registros van siempre a stderr (RichHandler) para no mezclarse con el
texto concatenado en stdout.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from cli.ui_components import build_error_console


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configura el logger raíz al nivel indicado.

    Args:
        level: nombre de nivel ("DEBUG", "WARNING", ...) o número.
    """

    handler = RichHandler(
        console=build_error_console(),
        show_path=False,
        show_time=False,
        markup=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
