"""Contrato de fuentes de líneas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que stdin y ficheros (o dobles de test) sean intercambiables sin
  acoplar el servicio de emisión a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """Contrato mínimo para una fuente legible línea a línea.

    Reglas de diseño:
    - `next_line` devuelve la línea sin terminador, o `None` al final.
    - Fallos de decodificación/lectura se elevan como `ReadError`.
    """

    identifier: str

    def next_line(self) -> str | None:
        """Devuelve la siguiente línea (sin terminador) o `None` si no hay más."""

        ...

    def close(self) -> None:
        ...
