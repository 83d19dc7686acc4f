"""
core/config.py
----------------

Client configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings control the API origin, the
default transport timeout, pagination guards and log verbosity. The
values provided here are sensible defaults but can be overridden via
environment variables at deployment time.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``INTERCOM_``.  For example, to override the default
    request timeout you can set ``INTERCOM_HTTP_TIMEOUT=15``.
    """

    base_url: str = Field("https://api.intercom.io", description="API origin, without trailing slash.")

    # Credentials, only consulted by IntercomClient.from_settings()
    username: Optional[str] = Field(None, description="App ID or access token.")
    password: Optional[str] = Field(None, description="API key; empty for token auth.")

    # HTTP client settings
    http_timeout: float = Field(10.0, gt=0, description="Timeout of the default transport in seconds.")

    # Pagination guards
    max_pages: int = Field(50, ge=1, description="Maximum number of pages to request when paginating.")
    max_items: int = Field(1000, ge=1, description="Maximum number of items to retrieve during pagination.")

    log_level: str = Field("WARNING", description="Level used by configure_logging().")

    model_config = SettingsConfigDict(env_prefix="INTERCOM_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Using a cache prevents repeated environment parsing on every client
    construction. Call ``get_settings.cache_clear()`` after changing
    the environment.
    """
    return Settings()
