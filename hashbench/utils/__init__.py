"""hashbench utilities - logging and environment settings."""

from hashbench.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    env_is_set,
    get_env,
    get_log_level,
    get_warmup_iterations,
)
from hashbench.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "env_is_set",
    "get_env",
    "get_log_level",
    "get_warmup_iterations",
]
