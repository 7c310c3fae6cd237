import logging
import os

import pytest

from logger import setup_logger


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logger_sets_level(root_logger) -> None:
    assert setup_logger("debug") is root_logger
    assert root_logger.level == logging.DEBUG

    setup_logger(logging.ERROR)
    assert root_logger.level == logging.ERROR


def _file_handlers(root, log_file):
    target = os.path.abspath(log_file)
    return [
        handler
        for handler in root.handlers
        if getattr(handler, "baseFilename", None) == target
    ]


def test_setup_logger_writes_file_once(root_logger, tmp_path) -> None:
    log_file = tmp_path / "search.log"

    setup_logger("INFO", log_file)
    setup_logger("INFO", log_file)
    logging.getLogger("search").info("Found A -> B")
    for handler in root_logger.handlers:
        handler.flush()

    assert len(_file_handlers(root_logger, log_file)) == 1
    assert "INFO - Found A -> B" in log_file.read_text(encoding="utf-8")


def test_setup_logger_adds_handler_per_file(root_logger, tmp_path) -> None:
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"

    setup_logger("INFO", first)
    setup_logger("INFO", second)
    logging.getLogger("search").info("No route A -> Z")
    for handler in root_logger.handlers:
        handler.flush()

    assert len(_file_handlers(root_logger, first)) == 1
    assert len(_file_handlers(root_logger, second)) == 1
    assert "No route A -> Z" in first.read_text(encoding="utf-8")
    assert "No route A -> Z" in second.read_text(encoding="utf-8")
