"""Main entry point: runs the decode API server."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import uvicorn

from metardecode import web_app
from metardecode.config import AppConfig, LoggingConfig

LOG_FORMAT = '%(asctime)s - %(levelname)s:%(name)s:%(message)s'


def get_log_dir(logging_config: LoggingConfig) -> str:
    """Log directory from the configuration, or logs/ next to the package."""
    if logging_config.log_dir:
        return logging_config.log_dir
    return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'logs')


def setup_logging(logging_config: LoggingConfig) -> str:
    """
    Configure root logging to a file and to stderr.

    Returns:
        Path of the log file
    """
    log_dir = get_log_dir(logging_config)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, logging_config.file_name)

    logging.basicConfig(
        level=getattr(logging, logging_config.level),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )
    return log_file


def main(config_path: Optional[Path] = None):
    """Main entry point."""
    try:
        config = AppConfig.load(config_path)
    except Exception as e:
        # Logging is not configured yet
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        sys.exit(1)

    log_file = setup_logging(config.logging)
    logger = logging.getLogger(__name__)
    logger.info("METAR decoder starting...")
    logger.info(f"Logging to {log_file}")

    web_app.config = config

    logger.info(f"Server will run on {config.web_ui.host}:{config.web_ui.port}")
    try:
        uvicorn.run(
            web_app.app,
            host=config.web_ui.host,
            port=config.web_ui.port,
            log_level=config.logging.level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
    logger.info("Server stopped")


if __name__ == "__main__":
    main()
