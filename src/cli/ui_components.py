"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles de presentación.
- stdout queda reservado al texto concatenado; todo lo demás va por la
  consola de errores (stderr).
"""

from __future__ import annotations

from rich.console import Console

from core.domain.errors import CatrError, OpenError


def build_error_console() -> Console:
    """Consola Rich ligada a stderr.

    Sin markup/highlight/emoji: los identificadores de fuente son rutas
    arbitrarias y deben imprimirse tal cual, en una sola línea.
    """

    return Console(
        stderr=True,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def print_open_error(console: Console, error: OpenError) -> None:
    """`<identificador>: <causa>`, una línea por fuente fallida."""

    console.print(str(error), style="yellow")


def print_fatal(console: Console, error: CatrError) -> None:
    console.print(str(error), style="bold red")
