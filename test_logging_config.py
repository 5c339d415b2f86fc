#!/usr/bin/env python3
"""
Tests for the logging setup.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from utils.logging_config import ROOT_LOGGER_NAME, ColoredFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_module_loggers_are_children_of_application_logger():
    assert get_logger("core.line_fixer").name == "sbv_fixer.core.line_fixer"
    assert get_logger("sbv_fixer.ui").name == "sbv_fixer.ui"
    assert get_logger().name == ROOT_LOGGER_NAME


def test_setup_again_replaces_handlers_and_level():
    setup_logging(logging.WARNING)
    logger = setup_logging(logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG


def test_log_file_receives_plain_level_names(tmp_path):
    log_file = tmp_path / "logs" / "sbvfix.log"
    logger = setup_logging(logging.INFO, log_file=log_file)
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setFormatter(ColoredFormatter("%(levelname)s %(message)s"))

    get_logger("processors.converter").warning("שלום")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding='utf-8')
    assert "WARNING" in text
    assert "שלום" in text
    assert "\033[" not in text
