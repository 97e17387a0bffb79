"""
Logging Infrastructure

Structured logging setup and performance logging helpers.
"""

from .logging_config import (
    LoggingConfigOptions,
    PerformanceLogger,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "LoggingConfigOptions",
    "PerformanceLogger",
    "get_structured_logger",
    "setup_logging",
]
