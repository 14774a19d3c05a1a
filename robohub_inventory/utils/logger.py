"""
Logger utility for consistent logging across the inventory service.

Features:
- Consistent log format across all modules
- Log level taken from settings (LOG_LEVEL / DEBUG)
- Stream handler to stdout for easy viewing in console/terminal
- Rotating file handlers for error and debug logs
- Prevents duplicate log handlers when called multiple times
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from robohub_inventory.utils.config import Settings, get_settings

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure global logging for the service.

    Args:
        settings: Settings to read LOG_LEVEL, DEBUG and LOG_DIR from.
            Defaults to the cached application settings.

    Returns:
        logging.Logger: Application logger
    """
    settings = settings or get_settings()
    debug_mode = settings.DEBUG
    log_level_name = settings.LOG_LEVEL.upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    verbose_formatter = logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if debug_mode else log_level)
    root_logger.addHandler(console_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "error.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(verbose_formatter)
    root_logger.addHandler(error_file_handler)

    if debug_mode:
        debug_file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "debug.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        debug_file_handler.setLevel(log_level)
        debug_file_handler.setFormatter(verbose_formatter)
        root_logger.addHandler(debug_file_handler)

    # SQL statements only in debug mode
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if debug_mode else logging.WARNING
    )
    logging.getLogger('aiosqlite').setLevel(logging.WARNING)

    logger = logging.getLogger('robohub_inventory')
    logger.info(f"Logging initialized with level {log_level_name}")
    return logger

