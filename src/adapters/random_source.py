"""Fuente de aleatoriedad por hilo.

Por qué un `threading.local`:
- Cada hilo obtiene su propio `random.Random`, sembrado desde el sistema
  operativo (`os.urandom`) la primera vez que se usa.
- No es criptográfico; para un juego basta con uniformidad.
"""

from __future__ import annotations

import random
import threading

from core.interfaces.random_source import RandomSource


class ThreadLocalRandomSource(RandomSource):
    """Implementa `RandomSource` con un generador por hilo."""

    def __init__(self) -> None:
        self._local = threading.local()

    def _rng(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            # Random() sin semilla usa os.urandom si está disponible.
            rng = random.Random()
            self._local.rng = rng
        return rng

    def randint(self, low: int, high: int) -> int:
        return self._rng().randint(low, high)


def build_random_source() -> RandomSource:
    return ThreadLocalRandomSource()
