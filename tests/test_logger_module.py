"""Tests for the LabelBridge log file setup."""

import logging
import os
from logging.handlers import RotatingFileHandler

import pytest

from labelbridge import logger_module
from labelbridge.logger_module import configure_file_logging, logger

@pytest.fixture
def restore_file_handler():
    yield
    handler = logger_module._file_handler
    if handler is not None:
        logger.removeHandler(handler)
        handler.close()
        logger_module._file_handler = None

def _file_handlers():
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]

def test_log_file_lives_in_base_dir(tmp_path, monkeypatch, restore_file_handler):
    monkeypatch.setenv("LABELBRIDGE_BASE", str(tmp_path))

    handler = configure_file_logging("WARNING")

    assert handler.baseFilename == os.path.join(str(tmp_path), "log.log")
    assert handler.level == logging.WARNING

def test_reconfigure_replaces_handler(tmp_path, restore_file_handler):
    configure_file_logging("DEBUG", str(tmp_path / "a.log"))
    handler = configure_file_logging("ERROR", str(tmp_path / "b.log"))

    assert _file_handlers() == [handler]
    assert handler.level == logging.ERROR

def test_unknown_level_means_info(tmp_path, restore_file_handler):
    handler = configure_file_logging("chatty", str(tmp_path / "log.log"))
    assert handler.level == logging.INFO

def test_messages_reach_the_file(tmp_path, restore_file_handler):
    path = tmp_path / "log.log"
    handler = configure_file_logging("INFO", str(path))

    logger.info("label sent")
    handler.flush()

    assert "label sent" in path.read_text(encoding="utf-8")
