"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - PORT env var overrides the listen port (default 8080)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # API
    service_name: str = "roman-numeral-api"
    version: str = "1.0.0"
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
