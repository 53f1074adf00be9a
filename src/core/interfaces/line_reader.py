"""Contrato del lector de líneas."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineReader(Protocol):
    """Lee exactamente una línea de texto.

    Reglas de diseño:
    - Bloquea hasta tener una línea completa o fin de entrada, sin timeout.
    - Devuelve la línea con su terminador; recortar es cosa del parser.
    - Lanza `core.errors.InputReadFailure` si la lectura falla.
    """

    def read_line(self) -> str:
        ...
