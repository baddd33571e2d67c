"""
Application configuration.

Loads settings from environment variables and .env file.
Command-line flags (see errorpages.cli) take precedence over both.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the service.
        version: Current service version string.
        debug: Enable debug mode. Exposes /docs, which then shadows that path.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface to bind.
        port: TCP port to bind.
        template_path: HTML template overriding the bundled one.
        cache_control: Cache-Control header value for page responses.
            Omitted from responses when unset.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Error Pages"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 80
    template_path: Optional[Path] = None
    cache_control: Optional[str] = None


settings = Settings()
