"""Errores del Core.

Por qué una jerarquía propia:
- Solo existen dos fallos reconocidos (lectura y parseo) y ambos son fatales.
- La CLI captura únicamente `GuessRoundError` y traduce a código de salida,
  sin que el Core sepa nada de Typer ni de la consola.
"""

from __future__ import annotations


class GuessRoundError(Exception):
    """Error fatal de la ronda con un mensaje fijo para el usuario."""

    message: str = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InputReadFailure(GuessRoundError):
    """No se pudo leer la línea de entrada (error del stream o fin de entrada)."""

    message = "Failed to read line"


class ParseFailure(GuessRoundError):
    """El texto recortado no es un entero en base 10 válido."""

    message = "Please type a number!"
