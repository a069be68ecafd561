"""Client configuration via environment variables."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from tubefeed.constants import (
    API_BASE_URL,
    CLIENT_NAME,
    CLIENT_VERSION,
    DEFAULT_GL,
    DEFAULT_HL,
    DEFAULT_USER_AGENT,
    HTTP_CONNECT_TIMEOUT,
    HTTP_TOTAL_TIMEOUT,
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables / .env file."""

    # --- API ---
    api_base_url: str = API_BASE_URL

    @field_validator("api_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are appended with a leading slash."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # --- Client identity ---
    client_name: str = CLIENT_NAME
    client_version: str = CLIENT_VERSION
    hl: str = DEFAULT_HL
    gl: str = DEFAULT_GL
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("client_version")
    @classmethod
    def _require_client_version(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("TUBEFEED_CLIENT_VERSION must not be empty")
        return v

    # --- Auth ---
    # Raw Cookie header of a signed-in session; only needed for account pages
    cookie: str = ""

    # --- HTTP ---
    http_timeout: float = HTTP_TOTAL_TIMEOUT
    http_connect_timeout: float = HTTP_CONNECT_TIMEOUT

    # --- Logging ---
    verbose: bool = False

    model_config = {
        "env_prefix": "TUBEFEED_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return cached settings singleton."""
    return Settings()


def show_settings(settings: Settings) -> str:
    """Format settings for display."""
    lines = [
        "Current Configuration:",
        "",
        f"  api_base_url: {settings.api_base_url}",
        f"  client: {settings.client_name} {settings.client_version}",
        f"  hl/gl: {settings.hl}/{settings.gl}",
        f"  cookie: {'***' if settings.cookie else '(not set)'}",
        f"  http_timeout: {settings.http_timeout}s (connect {settings.http_connect_timeout}s)",
        f"  verbose: {settings.verbose}",
    ]
    return "\n".join(lines)
