"""
Configuration management for Rentomatic
"""

import logging
import threading
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Storage
    database_url: str = Field(
        default="sqlite:///rentomatic.db", description="Database connection URL"
    )
    repository_backend: Literal["memory", "sqlalchemy"] = Field(
        default="memory", description="Room repository implementation"
    )

    # Request validation
    strict_filter_values: bool = Field(
        default=False,
        description="Reject non-coercible filter values as parameter errors",
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for log files")
    enable_file_logging: bool = Field(
        default=False, description="Write rotating JSON log files"
    )
    environment: str = Field(
        default="development", description="Application environment"
    )

    # HTTP server
    api_host: str = Field(default="0.0.0.0", description="HTTP bind address")
    api_port: int = Field(default=8000, description="HTTP port", gt=0, lt=65536)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows"""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
                logger.debug(
                    "Configuration loaded for %s environment",
                    _settings_instance.environment,
                )
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next call re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
