"""Taxonomía de errores del dominio.

Reglas:
- Los errores de I/O crudos (`OSError`, `UnicodeDecodeError`) se envuelven en
  `OpenError`/`ReadError` en cuanto aparecen; nunca cruzan el borde de las
  fuentes.
- Solo `UsageError` y `ReadError` son fatales. `OpenError` se reporta y la
  ejecución continúa con la siguiente fuente.
"""

from __future__ import annotations


class CatrError(Exception):
    """Base de todos los errores reportables al usuario."""

    exit_code: int = 1


class UsageError(CatrError):
    """Combinación inválida de flags, detectada antes de cualquier I/O."""


def _describe(cause: BaseException) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause) or cause.__class__.__name__


class OpenError(CatrError):
    """Una fuente no pudo abrirse para lectura."""

    def __init__(self, source: str, cause: BaseException) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"{source}: {_describe(cause)}")


class ReadError(CatrError):
    """Una fuente abierta produjo datos de línea inválidos durante la lectura."""

    def __init__(self, source: str, cause: BaseException) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"{source}: {_describe(cause)}")
