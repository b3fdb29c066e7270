"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from hashbench.utils.logger import Logger, LoggerNotConfiguredError, LogLevel


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    # Reset logger state for test
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")
    with pytest.raises(LoggerNotConfiguredError):
        Logger.set_level("INFO")


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[hashbench.test_config]" in content
    assert "Debug message" in content


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level=LogLevel.INFO, output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_logger_defaults_to_stderr(capsys):
    """Test that log records stay off stdout unless asked for."""
    Logger.configure(level="WARNING", timestamps=False)
    Logger.get("test_stream").warning("to stderr")

    captured = capsys.readouterr()
    assert "to stderr" not in captured.out
    assert "to stderr" in captured.err


def test_logger_rejects_invalid_output():
    """Test that a non-stream output is rejected."""
    with pytest.raises(ValueError):
        Logger.configure(output=42)  # type: ignore[arg-type]
