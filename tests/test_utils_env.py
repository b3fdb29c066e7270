"""Tests for the environment variable utility."""

import pytest

from hashbench.utils.env import (
    EnvVarTypeError,
    env_is_set,
    get_env,
    get_log_level,
    get_warmup_iterations,
)


def test_get_env_basic(monkeypatch):
    """Test getting set variables and missing variables with defaults."""
    monkeypatch.setenv("HASHBENCH_TEST_VAR", "test_value")
    monkeypatch.delenv("HASHBENCH_MISSING_VAR", raising=False)

    assert get_env("HASHBENCH_TEST_VAR") == "test_value"
    assert get_env("HASHBENCH_MISSING_VAR", default="default") == "default"
    assert get_env("HASHBENCH_MISSING_VAR") is None


def test_get_env_coercion(monkeypatch):
    """Test type coercion for common types."""
    monkeypatch.setenv("HASHBENCH_BOOL_TRUE", "true")
    monkeypatch.setenv("HASHBENCH_BOOL_FALSE", "0")
    monkeypatch.setenv("HASHBENCH_INT", "123")
    monkeypatch.setenv("HASHBENCH_FLOAT", "1.23")
    monkeypatch.setenv("HASHBENCH_LIST", "pyb3, blake3 ")

    assert get_env("HASHBENCH_BOOL_TRUE", as_type=bool) is True
    assert get_env("HASHBENCH_BOOL_FALSE", as_type=bool) is False
    assert get_env("HASHBENCH_INT", as_type=int) == 123
    assert get_env("HASHBENCH_FLOAT", as_type=float) == 1.23
    assert get_env("HASHBENCH_LIST", as_type=list) == ["pyb3", "blake3"]

    # Test coercion failure
    monkeypatch.setenv("HASHBENCH_INVALID_INT", "not_an_int")
    with pytest.raises(EnvVarTypeError):
        get_env("HASHBENCH_INVALID_INT", as_type=int)


def test_env_is_set(monkeypatch):
    """Test that empty values count as unset."""
    monkeypatch.setenv("HASHBENCH_EMPTY", "")
    monkeypatch.setenv("HASHBENCH_FULL", "x")

    assert not env_is_set("HASHBENCH_EMPTY")
    assert env_is_set("HASHBENCH_FULL")


def test_get_log_level(monkeypatch):
    """Test the log level setting and its default."""
    monkeypatch.delenv("HASHBENCH_LOG_LEVEL", raising=False)
    assert get_log_level() == "WARNING"

    monkeypatch.setenv("HASHBENCH_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_get_warmup_iterations(monkeypatch):
    """Test the warmup override and its validation."""
    monkeypatch.delenv("HASHBENCH_WARMUP", raising=False)
    assert get_warmup_iterations(10) == 10

    monkeypatch.setenv("HASHBENCH_WARMUP", "0")
    assert get_warmup_iterations(10) == 0

    monkeypatch.setenv("HASHBENCH_WARMUP", "-3")
    with pytest.raises(ValueError):
        get_warmup_iterations(10)

    monkeypatch.setenv("HASHBENCH_WARMUP", "lots")
    with pytest.raises(EnvVarTypeError):
        get_warmup_iterations(10)
