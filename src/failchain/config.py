from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MESSAGE = "An internal error has occurred. Please contact the developer."


class Settings(BaseSettings):
    default_message: str = Field(default=DEFAULT_MESSAGE, min_length=1)
    call_stack_depth: int = Field(default=32, ge=0)
    log_level: str = Field(default="ERROR")

    model_config = SettingsConfigDict(
        env_prefix="FAILCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()


def reset_settings() -> None:
    get_settings.cache_clear()
