"""Tests for the logging setup."""

import logging

import pytest

from megastore.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, setup_logging


@pytest.fixture
def root_logger():
    """Yield the root logger and undo setup_logging's changes afterwards."""
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def handler_names(logger):
    return [handler.get_name() for handler in logger.handlers]


def test_installs_console_handler_once(root_logger):
    setup_logging("info")
    setup_logging("info")

    assert handler_names(root_logger).count(CONSOLE_HANDLER) == 1


def test_level_is_case_insensitive(root_logger):
    setup_logging("debug")

    assert root_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("chatty")

    assert root_logger.level == logging.INFO


def test_logfile_receives_records(root_logger, tmp_path):
    logfile = tmp_path / "megastore.log"

    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    logging.getLogger("megastore.test").warning("Catalog ready")
    for handler in root_logger.handlers:
        handler.flush()

    assert handler_names(root_logger).count(FILE_HANDLER) == 1
    content = logfile.read_text(encoding="utf-8")
    assert "[WARNING] megastore.test: Catalog ready" in content
