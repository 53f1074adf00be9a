"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- La CLI no acepta flags: el único ajuste posible llega por entorno o `.env`.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Carpeta `guess-round` donde vive el `.env` de usuario.

    Se consulta además del `.env` del proyecto; sirve para fijar, por ejemplo,
    `GUESS_ROUND_REVEAL_SECRET=false` una sola vez para todas las partidas.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "guess-round"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "guess-round"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "guess-round"
    return Path.home() / ".config" / "guess-round"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y servicio.

    El rango del secreto no es configurable a propósito: 1..100 fijo.
    """

    model_config = SettingsConfigDict(
        env_prefix="GUESS_ROUND_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    reveal_secret: bool = Field(
        default=True,
        description="Imprime el número secreto antes de pedir el intento.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value!r}")
        return name


def describe_settings_errors(exc: ValidationError) -> list[str]:
    """Una línea por campo inválido, nombrando la variable de entorno."""

    prefix = AppSettings.model_config.get("env_prefix", "")
    lines = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        lines.append(f"Invalid configuration: {prefix}{field.upper()}: {error['msg']}")
    return lines
