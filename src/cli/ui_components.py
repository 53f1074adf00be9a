"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La salida del juego es texto plano con formato fijo: sin markup ni
  resaltado, para que stdout sea idéntico con o sin terminal.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def build_console(*, stderr: bool = False) -> Console:
    """Consola sin resaltado automático (los números no se colorean)."""

    return Console(stderr=stderr, highlight=False)


def print_line(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def configure_logging(level: str) -> None:
    """Envía los logs a stderr vía Rich; stdout queda reservado al juego."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=build_console(stderr=True), show_path=False)],
        force=True,
    )
