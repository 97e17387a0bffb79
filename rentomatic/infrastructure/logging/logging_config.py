"""
Logging Configuration

Console logging for development, rotating JSON files for production and
structlog for structured loggers.
"""

import logging
import logging.handlers
import os
import sys
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger


@dataclass
class LoggingConfigOptions:
    """Dataclass for logging configuration options"""
    log_level: str = "INFO"
    log_dir: str = "logs"
    enable_console: bool = True
    enable_file: bool = False
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


class RentomaticJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding process and use case context"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["thread_name"] = threading.current_thread().name
        log_record["process_id"] = os.getpid()

        if hasattr(record, "operation_time"):
            log_record["operation_time_ms"] = record.operation_time


class LoggingConfig:
    """Logging configuration"""

    def __init__(self, options: LoggingConfigOptions):
        self.options = options
        self._configure_structlog()

    def __repr__(self):
        return f"LoggingConfig(options={self.options})"

    def _configure_structlog(self):
        """Configure structlog for structured logging"""
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer()
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def setup_logging(self):
        """Install handlers on the root logger"""
        level = getattr(logging, self.options.log_level.upper())

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        if self.options.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            root_logger.addHandler(console_handler)

        if self.options.enable_file:
            log_dir = Path(self.options.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

            json_handler = logging.handlers.RotatingFileHandler(
                log_dir / 'rentomatic.json.log',
                maxBytes=self.options.max_file_size,
                backupCount=self.options.backup_count,
                encoding="utf-8",
            )
            json_handler.setLevel(level)
            json_handler.setFormatter(RentomaticJsonFormatter())
            root_logger.addHandler(json_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                log_dir / 'errors.log',
                maxBytes=self.options.max_file_size,
                backupCount=self.options.backup_count,
                encoding="utf-8",
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(RentomaticJsonFormatter())
            root_logger.addHandler(error_handler)

        self._configure_external_loggers()

        logging.getLogger(__name__).info(
            "Logging configured - Level: %s, Console: %s, File: %s",
            self.options.log_level,
            self.options.enable_console,
            self.options.enable_file,
        )

    def _configure_external_loggers(self):
        """Quieten chatty third-party loggers"""
        logging.getLogger('sqlalchemy').setLevel(logging.WARNING)
        logging.getLogger('uvicorn.access').setLevel(logging.WARNING)


class PerformanceLogger:
    """Context manager for performance logging"""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None, details: Optional[Dict[str, Any]] = None):
        self.operation_name = operation_name
        self.logger = logger or logging.getLogger(__name__)
        self.details = details or {}
        self.start_time = 0.0

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(
            "Starting operation: %s",
            self.operation_name,
            extra={"operation": self.operation_name, **self.details},
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (time.perf_counter() - self.start_time) * 1000

        if exc_type is None:
            self.logger.debug(
                "Completed operation: %s (%.2fms)",
                self.operation_name,
                duration,
                extra={
                    "operation": self.operation_name,
                    "operation_time": duration,
                    "success": True,
                    **self.details,
                },
            )
        else:
            self.logger.warning(
                "Failed operation: %s (%.2fms)",
                self.operation_name,
                duration,
                extra={
                    "operation": self.operation_name,
                    "operation_time": duration,
                    "success": False,
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **self.details,
                },
            )
        return False


def setup_logging(options: LoggingConfigOptions):
    """Setup logging using the LoggingConfig class"""
    config = LoggingConfig(options)
    config.setup_logging()


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
