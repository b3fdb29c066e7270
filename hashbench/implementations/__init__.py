"""Hash implementations and the registry that tracks their availability.

Quick Start:
    from hashbench.implementations import ImplementationRegistry

    registry = ImplementationRegistry.default()
    for impl in registry.list_available():
        print(impl.id, impl.hash("hello world").hex())
"""

from hashbench.implementations.base import (
    CapabilityNotSupportedError,
    HashImplementation,
    ImplementationLoadError,
    StreamingHasher,
    to_bytes,
)
from hashbench.implementations.pure import PurePythonBlake3
from hashbench.implementations.registry import (
    ImplementationNameCollisionError,
    ImplementationNotFoundError,
    ImplementationRegistry,
    ImplementationRegistryError,
)
from hashbench.implementations.rust import RustBlake3, RustBlake3Multithreaded


def default_candidates() -> list[HashImplementation]:
    """Fresh instances of every known implementation, reference first."""
    return [
        PurePythonBlake3(),
        RustBlake3(),
        RustBlake3Multithreaded(),
    ]


__all__ = [
    "CapabilityNotSupportedError",
    "HashImplementation",
    "ImplementationLoadError",
    "ImplementationNameCollisionError",
    "ImplementationNotFoundError",
    "ImplementationRegistry",
    "ImplementationRegistryError",
    "PurePythonBlake3",
    "RustBlake3",
    "RustBlake3Multithreaded",
    "StreamingHasher",
    "default_candidates",
    "to_bytes",
]
