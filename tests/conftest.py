from __future__ import annotations

import pytest

from core.config import AppSettings
from core.errors import InputReadFailure


class FixedRandomSource:
    """Devuelve siempre el mismo valor y registra los rangos pedidos."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


class ListLineReader:
    """Entrega líneas preparadas; sin líneas restantes simula fin de entrada."""

    def __init__(self, *lines: str) -> None:
        self._lines = list(lines)
        self.reads = 0

    def read_line(self) -> str:
        self.reads += 1
        if not self._lines:
            raise InputReadFailure()
        return self._lines.pop(0)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # Sin .env de usuario, sin .env del proyecto y sin variables heredadas.
    monkeypatch.setitem(AppSettings.model_config, "env_file", (".env",))
    monkeypatch.chdir(tmp_path)
    for var in ("GUESS_ROUND_LOG_LEVEL", "GUESS_ROUND_REVEAL_SECRET"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def emitted() -> list[str]:
    return []
