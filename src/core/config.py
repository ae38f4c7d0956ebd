"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Todas tienen valores por defecto: el programa funciona sin entorno alguno.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Los flags de la CLI tienen prioridad sobre estos valores.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOTQUAD_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    strict_zero_padding: bool = Field(
        default=False,
        description="Rechazar segmentos con ceros a la izquierda ('01.2.3.4').",
    )
    token_count: int = Field(
        default=3,
        ge=1,
        le=1_000,
        description="Tokens que consume el driver; el primero se imprime sin validar.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (stderr).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level
