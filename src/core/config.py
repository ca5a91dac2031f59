"""Configuración del cliente.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El Core solo necesita `base_url`; el resto lo consume el adaptador HTTP.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "todo-api-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "todo-api-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "todo-api-client"
    return Path.home() / ".config" / "todo-api-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Variables reconocidas (prefijo `TODO_API_`):
    - `TODO_API_BASE_URL` (obligatoria)
    - `TODO_API_HTTP_TIMEOUT_SECONDS`
    - `TODO_API_USER_AGENT`
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_API_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        ...,
        min_length=1,
        description="Endpoint base del servicio de tareas (p.ej. https://host/api).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="todo-api-client/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )
