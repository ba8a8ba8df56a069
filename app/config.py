from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Upstream AI gateway
    lovable_api_key: Optional[str] = Field(
        default=None,
        validation_alias="LOVABLE_API_KEY",
        description="Bearer credential for the AI gateway. Checked on every generation request.",
    )
    upstream_url: str = Field(
        "https://ai.gateway.lovable.dev/v1/chat/completions",
        validation_alias="UPSTREAM_URL",
    )
    upstream_model: str = Field("google/gemini-2.5-flash-image-preview", validation_alias="UPSTREAM_MODEL")

    # Logging
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()


def load_settings() -> Settings:
    """Parse a fresh Settings instance for a single request.

    Environment changes made after startup, such as a rotated
    ``LOVABLE_API_KEY``, apply from the next request on.
    """

    return Settings()
