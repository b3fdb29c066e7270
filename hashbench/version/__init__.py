"""Version information for hashbench."""

from hashbench.version.hashbench_version import HASHBENCH_VERSION, Version

__all__ = ["HASHBENCH_VERSION", "Version"]
