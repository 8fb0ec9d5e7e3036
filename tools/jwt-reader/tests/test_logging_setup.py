"""Tests for logging setup."""

import logging
import os

from jwt_reader.logging_setup import setup_logging


def test_console_only(restore_root_logging):
    assert setup_logging() is None
    root = restore_root_logging
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING


def test_verbose_console(restore_root_logging):
    setup_logging(verbose=True)
    assert restore_root_logging.handlers[0].level == logging.DEBUG


def test_file_handler(tmp_path, restore_root_logging):
    log_dir = tmp_path / "logs"
    log_path = setup_logging(log_dir=str(log_dir), log_prefix="unit")
    assert os.path.dirname(log_path) == str(log_dir)
    assert os.path.basename(log_path).startswith("unit_")

    logging.getLogger("jwt_reader.test").debug("hello from the test")
    for handler in restore_root_logging.handlers:
        handler.flush()

    with open(log_path, encoding="utf-8") as fh:
        assert "hello from the test" in fh.read()


def test_repeated_setup_replaces_handlers(restore_root_logging):
    setup_logging()
    setup_logging()
    assert len(restore_root_logging.handlers) == 1
