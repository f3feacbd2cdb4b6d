"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for every catalog route.
        error_type_base: Base URI of the problem details ``type`` field.
        storage_backend: ``memory`` for the process-local store,
            ``sql`` for the SQLAlchemy store at ``database_url``.
        database_url: SQLAlchemy URL used by the ``sql`` backend.
        database_echo: Log every SQL statement.
        host: Interface bound by ``run()``.
        port: Port bound by ``run()``.
        rate_limit_enabled: Apply the default rate limit to every route.
        rate_limit_default: slowapi limit string, e.g. ``120/minute``.
        api_keys: Accepted ``X-API-Key`` values mapped to user ids. Write
            endpoints are open when this is empty.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Ticket Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    error_type_base: str = "https://api.ticketcatalog.dev/errors"

    storage_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///./ticket_catalog.db"
    database_echo: bool = False

    host: str = "127.0.0.1"
    port: int = 8000

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    api_keys: dict[str, str] = {}

    def problem_type(self, slug: str) -> str:
        """Return the full problem type URI for ``slug``."""
        return f"{self.error_type_base.rstrip('/')}/{slug}"


settings = Settings()
