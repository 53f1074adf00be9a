"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta del rango del secreto y del resultado de la ronda.
- `RoundResult` es inmutable: se crea una vez por ejecución y no se reutiliza.

Nota:
- Estos modelos describen *qué* es una ronda, no *cómo* se juega.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.outcome import Outcome


class SecretRange(BaseModel):
    """Rango cerrado [low, high] del que se extrae el secreto.

    Equivale al rango semiabierto [1, 101): ambos extremos son alcanzables.
    """

    model_config = ConfigDict(frozen=True)

    low: int = Field(
        default=1,
        description="Límite inferior (inclusivo).",
    )
    high: int = Field(
        default=100,
        description="Límite superior (inclusivo).",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "SecretRange":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high


class RoundResult(BaseModel):
    """Lo ocurrido en una ronda completada."""

    model_config = ConfigDict(frozen=True)

    secret: int = Field(
        ...,
        description="Número secreto generado en esta ejecución.",
    )
    guess: int = Field(
        ...,
        ge=0,
        description="Número introducido por el jugador, ya parseado.",
    )
    outcome: Outcome = Field(
        ...,
        description="Resultado de comparar guess con secret.",
    )
