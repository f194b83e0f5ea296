"""Fuentes de líneas concretas: stdin y ficheros.

Por qué un adaptador:
- Es el único lugar que toca `open()`/`sys.stdin`; el servicio solo ve
  `core.interfaces.line_source.LineSource`.
- Los errores de I/O crudos se envuelven aquí en `OpenError`/`ReadError`.

Lectura en bytes:
- Se parte solo por `\\n` (y se quita un `\\r` final), sin newlines universales.
- Cada línea se decodifica por separado: una línea inválida aborta, pero las
  anteriores ya se emitieron.
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from core.domain.errors import OpenError, ReadError
from core.domain.models import STDIN_SENTINEL
from core.interfaces.line_source import LineSource

logger = logging.getLogger(__name__)


def _read_line(stream: BinaryIO, identifier: str, encoding: str) -> str | None:
    try:
        raw = stream.readline()
    except OSError as exc:
        raise ReadError(identifier, exc) from exc
    if not raw:
        return None
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ReadError(identifier, exc) from exc


class StdinLineSource(LineSource):
    """Lee de la entrada estándar del proceso (`sys.stdin.buffer`).

    `close` no cierra `sys.stdin`: '-' puede aparecer varias veces en la
    misma invocación.
    """

    def __init__(self, stream: BinaryIO | None = None, *, encoding: str = "utf-8") -> None:
        self.identifier = STDIN_SENTINEL
        self._stream = stream
        self._encoding = encoding

    def next_line(self) -> str | None:
        stream = self._stream if self._stream is not None else sys.stdin.buffer
        return _read_line(stream, self.identifier, self._encoding)

    def close(self) -> None:
        self._stream = None


class FileLineSource(LineSource):
    """Fichero abierto en modo binario con buffer."""

    def __init__(self, path: str, *, encoding: str = "utf-8") -> None:
        self.identifier = path
        self._encoding = encoding
        try:
            self._stream: BinaryIO = open(path, "rb")  # noqa: SIM115
        except OSError as exc:
            raise OpenError(path, exc) from exc

    def next_line(self) -> str | None:
        return _read_line(self._stream, self.identifier, self._encoding)

    def close(self) -> None:
        self._stream.close()


def open_source(identifier: str, *, encoding: str = "utf-8") -> LineSource:
    """Resuelve un identificador a una fuente abierta.

    - '-' siempre tiene éxito y devuelve stdin.
    - Cualquier otro valor se trata como ruta de fichero.
    """

    if identifier == STDIN_SENTINEL:
        logger.debug("Reading from standard input (encoding=%s)", encoding)
        return StdinLineSource(encoding=encoding)
    logger.debug("Opening %s (encoding=%s)", identifier, encoding)
    return FileLineSource(identifier, encoding=encoding)
