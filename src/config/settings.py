"""
Hear Me Out - Application Settings

Loads configuration from environment variables using Pydantic Settings,
and applies the configured log level to the standard logging module.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase
    supabase_url: str
    supabase_anon_key: str

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug is on, otherwise the configured level."""
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.effective_log_level, format=LOG_FORMAT)
