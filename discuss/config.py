"""Client configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseModel):
    """Remote API configuration."""

    # All comment endpoints hang off this URL (e.g. {base_url}/comments)
    base_url: str = "http://localhost:3000/api"


class TransportSettings(BaseModel):
    """HTTP transport behaviour.

    The discussion core enforces no timeouts of its own; these apply to the
    underlying HTTP client only.
    """

    timeout_seconds: float = 10.0

    # Reads (list/detail/statistics) are retried up to this many times on
    # network errors and 5xx/429 responses. Mutations are never retried.
    max_read_retries: int = Field(default=3, ge=0)


class ThreadSettings(BaseModel):
    """Comment thread rendering."""

    # Replies are offered while depth < max_depth. Deeper comments still render.
    max_depth: int = Field(default=5, ge=0)


class CacheSettings(BaseModel):
    """How long fetched views stay fresh before a read refetches them."""

    list_stale_seconds: float = 120.0
    detail_stale_seconds: float = 300.0
    statistics_stale_seconds: float = 300.0


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Client settings.

    Set environment variables to override, using ``__`` for nested values:

        API__BASE_URL=https://news.example.com/api
        THREADS__MAX_DEPTH=3
        CACHE__LIST_STALE_SECONDS=30
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    api: APISettings = APISettings()
    transport: TransportSettings = TransportSettings()
    threads: ThreadSettings = ThreadSettings()
    cache: CacheSettings = CacheSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
