"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2 y enums).
- El dominio no conoce stdin, Typer ni Rich: solo conceptos del juego.
"""

from core.domain.models import RoundResult, SecretRange
from core.domain.outcome import Outcome

__all__ = [
	"Outcome",
	"RoundResult",
	"SecretRange",
]
