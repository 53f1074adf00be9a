"""Resultado de la comparación entre guess y secret.

Vive en el dominio para que servicio, CLI y tests compartan una única
fuente de verdad para los tres mensajes fijos.
"""

from __future__ import annotations

from enum import Enum


class Outcome(str, Enum):
    """Los tres resultados posibles de una ronda."""

    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    WIN = "win"

    @classmethod
    def from_comparison(cls, guess: int, secret: int) -> "Outcome":
        """Ordenación estándar de enteros: exactamente un resultado por par."""

        if guess < secret:
            return cls.TOO_SMALL
        if guess > secret:
            return cls.TOO_BIG
        return cls.WIN

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[Outcome, str] = {
    Outcome.TOO_SMALL: "Too small!",
    Outcome.TOO_BIG: "Too big!",
    Outcome.WIN: "You win!",
}
