"""Unit tests for logging configuration."""

import logging

import pytest

from it_term_translator.services import configure_logging
from it_term_translator.services.logging_setup import LOG_FORMAT


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_installs_single_handler(restore_root_logger):
    configure_logging("DEBUG")
    configure_logging("DEBUG")

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT
    assert root.level == logging.DEBUG


def test_level_is_case_insensitive(restore_root_logger):
    configure_logging("warning")
    assert restore_root_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_root_logger):
    configure_logging("LOUD")
    assert restore_root_logger.level == logging.INFO


def test_http_loggers_quieted(restore_root_logger):
    configure_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING
