"""Tests for debug logging setup."""

import logging
from pathlib import Path

import pytest

from pitstop.verbose import setup_logger


def test_logger_writes_to_debug_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, logger_name="pitstop_test_file")

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp
    assert logger.level == logging.DEBUG


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, logger_name="pitstop_test_nested")
    assert debug_file.exists()


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(
        tmp_path / "debug.log", verbose=True, logger_name="pitstop_test_verbose"
    )
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert handler_types == ["FileHandler", "StreamHandler"]


def test_no_outputs_configures_null_handler():
    logger = setup_logger(logger_name="pitstop_test_null")
    assert [type(h).__name__ for h in logger.handlers] == ["NullHandler"]


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "one.log", logger_name="pitstop_test_shared")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "two.log", logger_name="pitstop_test_shared")

    assert "pitstop_test_shared" in str(exc_info.value)
    assert "already exists" in str(exc_info.value)


def test_child_loggers_reach_configured_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file, logger_name="pitstop_test_parent")

    logging.getLogger("pitstop_test_parent.child").debug("from child")

    assert "from child" in debug_file.read_text()


def test_teardown_allows_reuse_of_name(tmp_path: Path):
    from pitstop.verbose import teardown_logger

    logger = setup_logger(tmp_path / "one.log", logger_name="pitstop_test_reuse")
    teardown_logger(logger)
    assert logger.handlers == []

    again = setup_logger(tmp_path / "two.log", logger_name="pitstop_test_reuse")
    again.debug("second run")
    assert "second run" in (tmp_path / "two.log").read_text()
