from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the PropertyData MCP server.

    All values are loaded from environment variables with `PROPERTYDATA_` prefix.
    You can also use a `.env` file in the working directory during development.
    Only the API key is required; everything else has a default.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROPERTYDATA_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    # PropertyData
    api_key: str

    # General
    log_level: str = "INFO"
    transport: str = "stdio"  # "stdio" or "http"
    server_host: str = "0.0.0.0"
    server_port: int = 8000

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be empty")
        return value

    @field_validator("transport")
    @classmethod
    def _known_transport(cls, value: str) -> str:
        value = value.lower()
        if value not in ("stdio", "http"):
            raise ValueError(f"Unsupported transport '{value}' (expected 'stdio' or 'http')")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from environment."""
    return Settings()  # type: ignore[call-arg]
