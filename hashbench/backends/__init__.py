"""Host information backends."""

from hashbench.backends.system import get_system_info

__all__ = ["get_system_info"]
