"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the relational store.
        database_echo: Echo SQL statements to the log.
        rate_limit_enabled: Turn request rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_write: Rate limit for task creation.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "ToDoApp"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./todoapp.db"
    database_echo: bool = False

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"
    rate_limit_write: str = "30/minute"


settings = Settings()
