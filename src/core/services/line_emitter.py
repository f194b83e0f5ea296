"""Bucle de emisión de líneas.

Este módulo concentra todo el comportamiento de `catr`: abrir cada fuente en
orden, formatear cada línea según el modo de numeración y escribirla en la
salida. La CLI solo resuelve la configuración y traduce los errores a
códigos de salida, así que el servicio es reutilizable desde tests u otros
entry-points sin efectos secundarios de presentación.
"""

from __future__ import annotations

import logging
import sys
from contextlib import closing
from dataclasses import dataclass, field
from typing import Callable, TextIO

from adapters.line_sources import open_source
from core.config import AppSettings
from core.domain.errors import OpenError
from core.domain.models import InvocationConfig, LineCounter, NumberingMode
from core.interfaces.line_source import LineSource

logger = logging.getLogger(__name__)

SourceOpener = Callable[..., LineSource]


@dataclass
class EmitResult:
    """Resumen de una ejecución."""

    sources_processed: list[str] = field(default_factory=list)
    open_failures: list[OpenError] = field(default_factory=list)
    lines_written: int = 0

    @property
    def ok(self) -> bool:
        return not self.open_failures


def format_line(
    line: str,
    mode: NumberingMode,
    counter: LineCounter,
    *,
    width: int = 6,
) -> str:
    """Formatea una línea (sin terminador) y actualiza `counter`.

    Devuelve la línea de salida completa, terminador incluido.
    """

    if mode is NumberingMode.ALL:
        counter.total_line_number += 1
        return f"{counter.total_line_number:>{width}}\t{line}\n"
    if mode is NumberingMode.NONBLANK:
        if not line:
            return "\n"
        counter.nonblank_line_number += 1
        return f"{counter.nonblank_line_number:>{width}}\t{line}\n"
    return f"{line}\n"


def _default_open_error_reporter(error: OpenError) -> None:
    sys.stderr.write(f"{error}\n")
    sys.stderr.flush()


class LineEmitter:
    """Concatena fuentes hacia `out` aplicando el modo de numeración activo.

    - Un `OpenError` se reporta con `on_open_error` y la ejecución sigue.
    - Un `ReadError` se propaga; la fuente en curso se cierra igualmente.
    """

    def __init__(
        self,
        config: InvocationConfig,
        *,
        settings: AppSettings | None = None,
        out: TextIO | None = None,
        opener: SourceOpener = open_source,
        on_open_error: Callable[[OpenError], None] | None = None,
    ) -> None:
        self._config = config
        self._settings = settings or AppSettings()
        self._out = out
        self._opener = opener
        self._on_open_error = on_open_error or _default_open_error_reporter

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self) -> EmitResult:
        result = EmitResult()
        sources = self._config.sources
        last_index = len(sources) - 1

        for index, identifier in enumerate(sources):
            try:
                source = self._opener(identifier, encoding=self._settings.encoding)
            except OpenError as exc:
                logger.debug("Skipping %s: %s", identifier, exc.cause)
                self.out.flush()
                self._on_open_error(exc)
                result.open_failures.append(exc)
                continue

            with closing(source):
                result.lines_written += self.emit_source(source)
            result.sources_processed.append(identifier)

            if self._config.separate_sources and index < last_index:
                self.out.write("\n")

        self.out.flush()
        return result

    def emit_source(self, source: LineSource) -> int:
        """Emite todas las líneas de `source`; devuelve cuántas se escribieron."""

        counter = LineCounter()
        mode = self._config.mode
        width = self._config.number_width
        out = self.out
        written = 0

        while True:
            line = source.next_line()
            if line is None:
                break
            out.write(format_line(line, mode, counter, width=width))
            written += 1

        logger.debug(
            "%s: %d lines (%d numbered non-blank)",
            source.identifier,
            written,
            counter.nonblank_line_number,
        )
        return written
