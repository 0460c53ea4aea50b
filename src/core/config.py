"""Configuración de codekit.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar el Core:
  la conversión y la validación nunca leen configuración, solo la CLI.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "codekit"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "codekit"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "codekit"
    return Path.home() / ".config" / "codekit"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la CLI.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEKIT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en las salidas tipo tabla.",
    )
    charset_case_sensitive: bool = Field(
        default=True,
        description="Valor por defecto de `validate charset` sin --ignore-case.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level
