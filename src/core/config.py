"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (catálogo, error log) lean config de forma consistente.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# El formato de archivo depende de este separador: no es configurable.
RECORD_DELIMITER = ":"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "libtrack"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "libtrack"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "libtrack"
    return Path.home() / ".config" / "libtrack"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIBTRACK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    catalog_suffix: str = Field(
        default=".txt",
        min_length=1,
        description="Sufijo obligatorio del archivo de catálogo.",
    )
    isbn_pattern: str = Field(
        default=r"\d[\d-]*[\dXx]?",
        min_length=1,
        description="Regex (full match) que identifica un argumento como búsqueda por ISBN.",
    )
    sort_case_sensitive: bool = Field(
        default=True,
        description="Ordenar por título distinguiendo mayúsculas (False usa casefold).",
    )
    error_log_name: str = Field(
        default="errors.log",
        min_length=1,
        description="Nombre del log de errores, junto al catálogo.",
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Encoding del catálogo en disco.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(TRACE|DEBUG|INFO|SUCCESS|WARNING|ERROR|CRITICAL)$",
        description="Nivel del log de diagnóstico (stderr).",
    )

    @field_validator("isbn_pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regex: {exc}") from exc
        return value


def load_settings() -> AppSettings:
    """Construye `AppSettings` resolviendo el .env de usuario en el momento de la llamada.

    `model_config.env_file` se fija al importar; aquí se recalcula por si
    `XDG_CONFIG_HOME`/`HOME` cambiaron desde entonces.
    """

    return AppSettings(_env_file=(".env", str(get_user_env_file())))
