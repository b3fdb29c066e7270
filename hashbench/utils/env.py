"""Environment variable settings for hashbench.

Usage:
    from hashbench.utils.env import get_env, get_log_level

    warmup = get_env("HASHBENCH_WARMUP", default=10, as_type=int)
    level = get_log_level()
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

LOG_LEVEL_VAR = "HASHBENCH_LOG_LEVEL"
WARMUP_VAR = "HASHBENCH_WARMUP"

DEFAULT_LOG_LEVEL = "WARNING"


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" and friends are False
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value
        if as_type is list:
            return [item.strip() for item in value.split(",") if item.strip()]
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


@overload
def get_env(name: str, *, default: T, as_type: type[T]) -> T:
    ...


@overload
def get_env(name: str, *, default: T) -> T:
    ...


@overload
def get_env(name: str) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: bool, int, float, str or list (comma-separated).

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.
    """
    value = os.environ.get(name)
    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set and non-empty."""
    value = os.environ.get(name)
    return value is not None and value != ""


def get_log_level() -> str:
    """Log level from HASHBENCH_LOG_LEVEL (defaults to WARNING)."""
    return get_env(LOG_LEVEL_VAR, default=DEFAULT_LOG_LEVEL).upper()


def get_warmup_iterations(default: int) -> int:
    """Warmup cap from HASHBENCH_WARMUP.

    Raises:
        EnvVarTypeError: If the value is not an integer.
        ValueError: If the value is negative.
    """
    warmup = get_env(WARMUP_VAR, default=default, as_type=int)
    if warmup < 0:
        raise ValueError(f"{WARMUP_VAR} must be >= 0, got {warmup}")
    return warmup
