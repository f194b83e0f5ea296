"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta en el borde (la invocación) y documentación
  autocontenida (Field) sin acoplar el Core a la CLI.

Nota:
- `LineCounter` es estado transitorio por fuente y se muta en cada línea;
  por eso es una dataclass y no un modelo validado.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

STDIN_SENTINEL = "-"


class NumberingMode(str, Enum):
    """Política de formateo activa para cada línea."""

    PLAIN = "plain"
    ALL = "all"
    NONBLANK = "nonblank"


class InvocationConfig(BaseModel):
    """Petición de ejecución ya resuelta (fuentes + modo de numeración)."""

    model_config = ConfigDict(frozen=True)

    sources: list[str] = Field(
        default_factory=lambda: [STDIN_SENTINEL],
        description="Identificadores de fuente en orden ('-' es stdin).",
    )
    number_all_lines: bool = Field(
        default=False,
        description="Numerar todas las líneas.",
    )
    number_nonblank_lines: bool = Field(
        default=False,
        description="Numerar solo las líneas no vacías.",
    )
    separate_sources: bool = Field(
        default=False,
        description="Línea en blanco tras cada fuente procesada que no sea la última.",
    )
    strict: bool = Field(
        default=False,
        description="Terminar con código 1 si alguna fuente no pudo abrirse.",
    )
    number_width: int = Field(
        default=6,
        ge=1,
        description="Ancho del campo de numeración.",
    )

    @field_validator("sources", mode="before")
    @classmethod
    def _default_to_stdin(cls, value: object) -> object:
        if value is None:
            return [STDIN_SENTINEL]
        if isinstance(value, (list, tuple)) and not value:
            return [STDIN_SENTINEL]
        return value

    @model_validator(mode="after")
    def _check_exclusive_modes(self) -> "InvocationConfig":
        if self.number_all_lines and self.number_nonblank_lines:
            raise ValueError(
                "the argument '--number' cannot be used with '--number-nonblank'"
            )
        return self

    @property
    def mode(self) -> NumberingMode:
        if self.number_all_lines:
            return NumberingMode.ALL
        if self.number_nonblank_lines:
            return NumberingMode.NONBLANK
        return NumberingMode.PLAIN


@dataclass(slots=True)
class LineCounter:
    """Contadores por fuente; se crean a cero al empezar cada fuente."""

    total_line_number: int = 0
    nonblank_line_number: int = 0
