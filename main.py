#!/usr/bin/env python3
"""
Entry point for the Rentomatic HTTP service
"""

import logging
import sys

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from rentomatic.infrastructure.configuration.config import get_config
from rentomatic.infrastructure.container.dependency_injection import get_container
from rentomatic.infrastructure.logging.logging_config import (
    LoggingConfigOptions,
    setup_logging,
)
from rentomatic.presentation.http.room_routes import create_app


def setup_app():
    """Configure logging and dependencies, then build the FastAPI app"""
    config = get_config()
    setup_logging(
        LoggingConfigOptions(
            log_level=config.log_level,
            log_dir=config.log_dir,
            enable_file=config.enable_file_logging,
        )
    )
    logger = logging.getLogger(__name__)
    logger.info(
        "Starting Rentomatic (%s, %s repository)",
        config.environment,
        config.repository_backend,
    )
    return create_app(get_container())


def main():
    """Main entry point"""
    config = get_config()
    try:
        app = setup_app()
        uvicorn.run(app, host=config.api_host, port=config.api_port, log_level="info")
    except Exception as e:
        logging.getLogger(__name__).error("Failed to start server: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
