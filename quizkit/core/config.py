from __future__ import annotations

from typing import Any
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    # Лише змінні оточення з префіксом QUIZKIT_; .env читається тільки явно
    # через Settings(_env_file=...), чужі ключі ігноруються
    model_config = SettingsConfigDict(
        env_prefix="QUIZKIT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Загальні налаштування
    APP_NAME: str = "quizkit"
    APP_ENV: str = Field(
        "dev",
        description="Application environment: dev|staging|prod",
    )
    LOG_LEVEL: str = Field(
        "INFO",
        description="loguru level name",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _parse_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            level = v.strip().upper()
            if level not in _LOG_LEVELS:
                raise ValueError(f"unknown log level: {v!r}")
            return level
        return v


settings = Settings()
