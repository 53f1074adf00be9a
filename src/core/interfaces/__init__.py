"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el servicio depende de abstracciones y los
  tests pueden fijar el secreto y la entrada sin tocar estado global.
"""

from core.interfaces.line_reader import LineReader
from core.interfaces.random_source import RandomSource

__all__ = [
	"LineReader",
	"RandomSource",
]
