# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SARIFDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"  # "text" or "json"

    # Output
    encode_indent: int = 2  # 0 writes compact JSON

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("encode_indent")
    @classmethod
    def _check_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("encode_indent must not be negative")
        return v


def get_settings() -> Settings:
    return Settings()
