"""
Tests for logging system
"""

import pytest
import logging

from smokefield.core.logger import SmokeLogger, get_logger, init_logger, parse_level

def test_logger_singleton():
    """Test that logger is a singleton."""
    logger1 = get_logger()
    logger2 = get_logger()
    assert logger1 is logger2

def test_init_logger_returns_existing_instance():
    assert init_logger() is get_logger()

def test_direct_construction_rejected():
    get_logger()
    with pytest.raises(RuntimeError):
        SmokeLogger()

def test_logger_methods():
    """Test that all logging methods work."""
    logger = get_logger()

    logger.debug("Debug message")
    logger.info("Info message")
    logger.warning("Warning message")
    logger.error("Error message")

def test_logger_creates_log_file():
    """Test that logger creates log file."""
    logger = get_logger()
    log_dir = logger.log_dir

    assert log_dir.exists()
    assert log_dir.is_dir()

    log_files = list(log_dir.glob("smokefield_*.log"))
    assert len(log_files) > 0

def test_parse_level_accepts_names_and_constants():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level("WARNING") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        parse_level("chatty")

def test_set_level_changes_console_only():
    logger = get_logger()
    logger.set_level("warning")
    try:
        assert logger.console_handler.level == logging.WARNING
        assert logger.logger.level == logging.DEBUG
    finally:
        logger.set_level(logging.INFO)

def test_console_only_logger(tmp_path):
    SmokeLogger.shutdown()
    try:
        logger = init_logger(str(tmp_path / "logs"), "ERROR", to_file=False)
        assert logger.log_file is None
        assert not (tmp_path / "logs").exists()
        assert logger.logger.handlers == [logger.console_handler]
    finally:
        SmokeLogger.shutdown()
