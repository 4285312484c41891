from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream service
    CURRCONV_BASE_URL: str = "https://free.currconv.com"
    CURRCONV_API_VERSION: str = "v7"
    # NOTE: API key must be provided in env or .env
    CURRCONV_API_KEY: str = ""

    # HTTP client; unset keeps httpx's default timeout
    HTTP_TIMEOUT_SEC: Optional[float] = None

    LOG_LEVEL: str = Field("info")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
