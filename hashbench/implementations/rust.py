"""Adapters for the ``blake3`` package (Rust bindings).

The package names its finalize operation ``digest()`` and only accepts
bytes-like input; the adapters encode text and normalize the name.
"""

from __future__ import annotations

from typing import Any

from hashbench.implementations.base import (
    HashImplementation,
    ImplementationLoadError,
    StreamingHasher,
    to_bytes,
)
from hashbench.models.constants import Capability


class RustStreamingHasher(StreamingHasher):
    """Streaming hasher over a native ``blake3.blake3`` object."""

    def __init__(self, hasher: Any) -> None:
        self._hasher = hasher

    def update(self, chunk: bytes | str) -> RustStreamingHasher:
        self._hasher.update(to_bytes(chunk))
        return self

    def finalize(self) -> bytes:
        digest: bytes = self._hasher.digest()
        return digest


class RustBlake3(HashImplementation):
    """Single-threaded ``blake3`` package."""

    implementation_id = "blake3"
    module_name = "blake3"

    def __init__(self) -> None:
        self._module: Any = None
        self._hasher_kwargs: dict[str, Any] = {}

    def get_pretty_name(self) -> str:
        return "blake3 (Rust)"

    def get_description(self) -> str:
        return "Official BLAKE3 Rust implementation via the blake3 Python bindings"

    def capabilities(self) -> frozenset[Capability]:
        return frozenset({Capability.ONE_SHOT, Capability.STREAMING})

    def load(self) -> None:
        module: Any = self.import_module(self.module_name)
        if not hasattr(module, "blake3"):
            raise ImplementationLoadError(
                self.id, f"module '{self.module_name}' has no blake3 constructor"
            )
        self._module = module
        self._hasher_kwargs = self.hasher_options(module)
        self.logger.debug(
            f"Resolved {self.module_name} {getattr(module, '__version__', 'unknown')}"
        )

    def hasher_options(self, module: Any) -> dict[str, Any]:
        """Keyword arguments passed to every ``blake3.blake3`` constructor."""
        del module
        return {}

    def _new(self) -> Any:
        assert self._module is not None, "load() must succeed before hashing"
        return self._module.blake3(**self._hasher_kwargs)

    def hash(self, data: bytes | str) -> bytes:
        hasher = self._new()
        hasher.update(to_bytes(data))
        result: bytes = hasher.digest()
        return result

    def create_hasher(self) -> RustStreamingHasher:
        return RustStreamingHasher(self._new())


class RustBlake3Multithreaded(RustBlake3):
    """``blake3`` package with multithreaded hashing enabled.

    Only one-shot hashing is offered: the streaming scenario feeds 1KB
    chunks, far below the size where the package splits work across threads.
    """

    implementation_id = "blake3-mt"

    def get_pretty_name(self) -> str:
        return "blake3 (Rust, threads)"

    def get_description(self) -> str:
        return "blake3 bindings with max_threads=AUTO (parallel hashing of large inputs)"

    def capabilities(self) -> frozenset[Capability]:
        return frozenset({Capability.ONE_SHOT})

    def hasher_options(self, module: Any) -> dict[str, Any]:
        # AUTO lives on the hasher class, not the module
        if not hasattr(module.blake3, "AUTO"):
            raise ImplementationLoadError(
                self.id, f"module '{self.module_name}' does not support max_threads"
            )
        return {"max_threads": module.blake3.AUTO}

    def create_hasher(self) -> RustStreamingHasher:
        return HashImplementation.create_hasher(self)  # type: ignore[return-value]
