"""
Settings for the TickTick task client.

Values are read from environment variables prefixed with ``TICKTICK_``
or from a local ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticktick_tasks.constants import DEFAULT_TIMEOUT, TICKTICK_API_BASE_V1

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class TickTickSettings(BaseSettings):
    """Runtime configuration."""

    access_token: str = ""
    api_base_url: str = TICKTICK_API_BASE_V1
    timeout: float = DEFAULT_TIMEOUT
    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TICKTICK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> TickTickSettings:
    return TickTickSettings()
