"""Contrato de la fuente de aleatoriedad.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Un `random.Random` ya lo cumple; los tests usan una fuente fija.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Produce enteros uniformes en un rango cerrado.

    No requiere calidad criptográfica.
    """

    def randint(self, low: int, high: int) -> int:
        """Devuelve un entero en [low, high], ambos inclusivos."""

        ...
