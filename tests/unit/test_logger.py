"""
Tests for the logging setup.
"""

import logging
import logging.handlers

import pytest

from robohub_inventory.utils.config import Settings
from robohub_inventory.utils.logger import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _file_names(root):
    return sorted(
        h.baseFilename.rsplit("/", 1)[-1]
        for h in root.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    )


def test_setup_logging_debug_mode(tmp_path, restore_root_logger):
    setup_logging(Settings(LOG_DIR=str(tmp_path / "logs"), DEBUG=True, LOG_LEVEL="debug"))

    assert restore_root_logger.level == logging.DEBUG
    assert _file_names(restore_root_logger) == ["debug.log", "error.log"]
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO


def test_setup_logging_is_idempotent(tmp_path, restore_root_logger):
    settings = Settings(LOG_DIR=str(tmp_path), DEBUG=False, LOG_LEVEL="WARNING")

    setup_logging(settings)
    setup_logging(settings)

    assert _file_names(restore_root_logger) == ["error.log"]
    assert len(restore_root_logger.handlers) == 2
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

