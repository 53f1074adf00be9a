"""Orquestación de una ronda de adivinanza.

Este módulo contiene toda la lógica del juego: generar, leer, parsear,
comparar e informar. No imprime directamente; cada línea de salida pasa por
el callback `emit`, así la CLI decide cómo se renderiza y los tests pueden
capturarla sin tocar stdout.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from core.domain.models import RoundResult, SecretRange
from core.domain.outcome import Outcome
from core.errors import ParseFailure
from core.interfaces.line_reader import LineReader
from core.interfaces.random_source import RandomSource

logger = logging.getLogger(__name__)

GREETING = "Guess the number!"
PROMPT = "Please input your guess."

# Entero sin signo de 32 bits: "+" opcional y solo dígitos ASCII.
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
MAX_GUESS = 2**32 - 1


def parse_guess(text: str) -> int:
    """Recorta espacios (incluido el salto de línea) y parsea en base 10.

    Acepta solo enteros no negativos que caben en 32 bits sin signo.
    Lanza `ParseFailure` para texto vacío, no numérico o fuera de rango.
    """

    trimmed = text.strip()
    if not _UNSIGNED_RE.fullmatch(trimmed):
        raise ParseFailure()
    value = int(trimmed)
    if value > MAX_GUESS:
        raise ParseFailure()
    return value


def compare_guess(guess: int, secret: int) -> Outcome:
    return Outcome.from_comparison(guess, secret)


def play_round(
    *,
    random_source: RandomSource,
    line_reader: LineReader,
    emit: Callable[[str], None],
    secret_range: SecretRange | None = None,
    reveal_secret: bool = True,
) -> RoundResult:
    """Juega una única ronda, sin reintentos.

    Orden de salida en el camino feliz:
    1) saludo
    2) secreto (diagnóstico, salvo `reveal_secret=False`)
    3) prompt
    4) eco del intento
    5) uno de los tres mensajes de `Outcome`

    `InputReadFailure` y `ParseFailure` se propagan sin capturar; el llamador
    decide cómo terminar el proceso.
    """

    secret_range = secret_range or SecretRange()

    emit(GREETING)

    secret = random_source.randint(secret_range.low, secret_range.high)
    logger.debug("Secret drawn: %d (range %d..%d)", secret, secret_range.low, secret_range.high)
    if reveal_secret:
        emit(f"The secret number is: {secret}")

    emit(PROMPT)
    line = line_reader.read_line()

    try:
        guess = parse_guess(line)
    except ParseFailure:
        logger.debug("Rejected guess input: %r", line)
        raise

    emit(f"You guessed: {guess}")

    outcome = compare_guess(guess, secret)
    logger.debug("Guess %d vs secret %d -> %s", guess, secret, outcome.value)
    emit(outcome.message)

    return RoundResult(secret=secret, guess=guess, outcome=outcome)
