"""Tests for logging setup."""

import io
import logging

import pytest

from sysgauge.logger import LOG_FORMAT, configure_logging, resolve_log_level


def test_resolve_log_level():
    """Test level names map to logging constants, case-insensitively."""
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("WARNING") == logging.WARNING


def test_resolve_unknown_level():
    """Test unknown level names are rejected."""
    with pytest.raises(ValueError):
        resolve_log_level("chatty")


def test_configure_logging_writes_to_stream():
    """Test records are formatted onto the given stream."""
    stream = io.StringIO()

    configure_logging("INFO", stream=stream)
    logging.getLogger("sysgauge.test").info("hello")

    assert " | INFO | sysgauge.test | hello" in stream.getvalue()
    assert logging.getLogger().handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_filters_below_level():
    """Test records below the level are dropped."""
    stream = io.StringIO()

    configure_logging("ERROR", stream=stream)
    logging.getLogger("sysgauge.test").warning("quiet")

    assert stream.getvalue() == ""
