"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/export) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INDEX_URL = "https://api.flutter.dev/flutter/cupertino/CupertinoIcons-class.html"
DEFAULT_DETAIL_BASE_URL = "https://api.flutter.dev/flutter/"

# Entradas del índice que describen la fuente, no iconos.
RESERVED_NAMES: frozenset[str] = frozenset({"iconFont", "iconFontPackage"})


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "flutter-icons"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "flutter-icons"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "flutter-icons"
    return Path.home() / ".config" / "flutter-icons"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLUTTER_ICONS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    index_url: str = Field(
        default=DEFAULT_INDEX_URL,
        min_length=8,
        description="Página índice con la sección de constantes de CupertinoIcons.",
    )
    detail_base_url: str = Field(
        default=DEFAULT_DETAIL_BASE_URL,
        min_length=8,
        description="Base sobre la que se resuelven los enlaces relativos del índice.",
    )
    output_path: Path = Field(
        default=Path("icons.json"),
        description="Fichero JSON de salida (se sobrescribe en cada ejecución).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="flutter-icons/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )
    max_concurrency: int = Field(
        default=16,
        ge=1,
        le=500,
        description="Máximo de páginas de detalle descargadas en paralelo.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("detail_base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        # Los enlaces del índice cuelgan de la base completa, incluido su último segmento.
        return value if value.endswith("/") else value + "/"
