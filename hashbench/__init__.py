"""hashbench - compare interchangeable hash implementations for speed and agreement."""

from hashbench.version.hashbench_version import HASHBENCH_VERSION, Version

__version__ = str(HASHBENCH_VERSION)
__version_info__ = HASHBENCH_VERSION

__all__ = [
    "HASHBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
