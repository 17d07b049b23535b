"""
Brief: Tests for ptrcname.logging_config.init_logging.

Inputs:
  - None

Outputs:
  - None
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from ptrcname.logging_config import init_logging


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("ptrcname")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_init_logging_installs_rich_handler():
    logger = init_logging("debug", console=Console(record=True))
    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [RichHandler]


def test_init_logging_is_idempotent():
    init_logging("info")
    logger = init_logging("info")
    assert len(logger.handlers) == 1


def test_init_logging_unknown_level_defaults_to_warning():
    assert init_logging("loud").level == logging.WARNING


def test_init_logging_writes_file(tmp_path):
    log_path = tmp_path / "ptrcname.log"
    init_logging("info", log_file=str(log_path), console=Console(record=True))
    logging.getLogger("ptrcname.source").info("file message")
    for handler in logging.getLogger("ptrcname").handlers:
        handler.flush()
    content = log_path.read_text()
    assert "file message" in content
    assert "INFO ptrcname.source" in content
