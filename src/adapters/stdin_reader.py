"""Lector de una línea desde stdin (o cualquier stream de texto).

Por qué un adaptador:
- Traduce los fallos de I/O a `InputReadFailure` para que el Core no tenga
  que conocer `OSError` ni codificaciones.
- Resuelve `sys.stdin` en el momento de leer, no al construirse, así los
  runners de test que sustituyen stdin funcionan sin configuración extra.
"""

from __future__ import annotations

import sys
from typing import TextIO

from core.errors import InputReadFailure
from core.interfaces.line_reader import LineReader


class StreamLineReader(LineReader):
    """Lee exactamente una línea del stream dado o de `sys.stdin`."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        if stream is None:
            raise InputReadFailure()
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            # ValueError: lectura sobre un stream ya cerrado.
            raise InputReadFailure() from exc
        if line == "":
            # Fin de entrada sin ninguna línea.
            raise InputReadFailure()
        return line


def build_line_reader() -> LineReader:
    return StreamLineReader()
