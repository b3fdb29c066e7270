"""Plugin contract for hash implementations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from hashbench.models.constants import Capability


class ImplementationLoadError(Exception):
    """Raised by load() when an implementation's dependency can't be resolved."""

    def __init__(self, implementation_id: str, reason: str) -> None:
        self.implementation_id = implementation_id
        self.reason = reason
        super().__init__(f"Cannot load '{implementation_id}': {reason}")


class CapabilityNotSupportedError(NotImplementedError):
    """Raised when an implementation is asked for a mode it doesn't offer."""

    def __init__(self, implementation_id: str, capability: Capability) -> None:
        self.implementation_id = implementation_id
        self.capability = capability
        super().__init__(
            f"Implementation '{implementation_id}' does not support {capability} hashing"
        )


def to_bytes(data: bytes | str) -> bytes:
    """Encode text input as UTF-8; pass bytes through."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


class StreamingHasher(ABC):
    """Normalized incremental hasher.

    Adapters wrap each library's native hasher so the harness only ever
    calls update() and finalize(), whatever the library names them.
    """

    @abstractmethod
    def update(self, chunk: bytes | str) -> StreamingHasher:
        """Absorb a chunk and return self to allow chaining."""
        pass

    @abstractmethod
    def finalize(self) -> bytes:
        """Return the digest of all chunks absorbed so far."""
        pass


class HashImplementation(ABC):
    """Abstract base class for a candidate hash implementation.

    Lifecycle:
        1. load() - Resolve the backing library. Raises on failure; the
           registry records the failure and marks the candidate unavailable.
        2. hash() / create_hasher() - Only dispatched for capabilities the
           implementation declares, and only after a successful load().

    Example:
        >>> class MyBlake3(HashImplementation):
        ...     implementation_id = "my-blake3"
        ...
        ...     def capabilities(self):
        ...         return frozenset({Capability.ONE_SHOT})
        ...
        ...     def load(self):
        ...         self._module = self.import_module("my_blake3")
        ...
        ...     def hash(self, data):
        ...         return self._module.blake3(to_bytes(data))
    """

    implementation_id: str = ""

    # -------------------------------------------------------------------------
    # Identity & Metadata
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        """Stable short name used in results and verification."""
        return self.implementation_id or self.__class__.__name__

    @abstractmethod
    def get_pretty_name(self) -> str:
        """Human-readable name for report lines."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """One-line description of the implementation."""
        pass

    @abstractmethod
    def capabilities(self) -> frozenset[Capability]:
        """Hashing modes this implementation offers."""
        pass

    def supports(self, capability: Capability) -> bool:
        """Check whether a hashing mode is offered."""
        return capability in self.capabilities()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @abstractmethod
    def load(self) -> None:
        """Resolve and initialize the backing library.

        Raises:
            ImplementationLoadError: If the library can't be resolved.
        """
        pass

    def import_module(self, module_name: str) -> object:
        """Import a backing module, converting failures to ImplementationLoadError."""
        import importlib

        try:
            return importlib.import_module(module_name)
        except ImportError as e:
            raise ImplementationLoadError(self.id, str(e)) from e

    # -------------------------------------------------------------------------
    # Hashing
    # -------------------------------------------------------------------------

    def hash(self, data: bytes | str) -> bytes:
        """One-shot digest of data.

        Raises:
            CapabilityNotSupportedError: If ONE_SHOT isn't offered.
        """
        raise CapabilityNotSupportedError(self.id, Capability.ONE_SHOT)

    def create_hasher(self) -> StreamingHasher:
        """Create a fresh streaming hasher.

        Raises:
            CapabilityNotSupportedError: If STREAMING isn't offered.
        """
        raise CapabilityNotSupportedError(self.id, Capability.STREAMING)

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    @property
    def logger(self) -> logging.Logger:
        """Logger for this implementation."""
        from hashbench.utils.logger import Logger

        return Logger.get(f"implementations.{self.id}")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r}>"
