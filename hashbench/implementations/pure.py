"""Adapter for the bundled pure Python BLAKE3 (the reference implementation)."""

from __future__ import annotations

from types import ModuleType
from typing import Any

from hashbench.implementations.base import HashImplementation, StreamingHasher
from hashbench.models.constants import REFERENCE_IMPLEMENTATION_ID, Capability


class PurePythonStreamingHasher(StreamingHasher):
    """Streaming hasher over hashbench.reference.blake3.Hasher."""

    def __init__(self, hasher: Any) -> None:
        self._hasher = hasher

    def update(self, chunk: bytes | str) -> PurePythonStreamingHasher:
        self._hasher.update(chunk)
        return self

    def finalize(self) -> bytes:
        digest: bytes = self._hasher.finalize()
        return digest


class PurePythonBlake3(HashImplementation):
    """Bundled pure Python BLAKE3, used as the verification reference."""

    implementation_id = REFERENCE_IMPLEMENTATION_ID

    def __init__(self) -> None:
        self._module: ModuleType | None = None

    def get_pretty_name(self) -> str:
        return "pyb3 (pure Python)"

    def get_description(self) -> str:
        return "Bundled dependency-free BLAKE3; slow, but the correctness baseline"

    def capabilities(self) -> frozenset[Capability]:
        return frozenset({Capability.ONE_SHOT, Capability.STREAMING})

    def load(self) -> None:
        self._module = self.import_module("hashbench.reference.blake3")  # type: ignore[assignment]

    def hash(self, data: bytes | str) -> bytes:
        assert self._module is not None, "load() must succeed before hashing"
        result: bytes = self._module.digest(data)
        return result

    def create_hasher(self) -> PurePythonStreamingHasher:
        assert self._module is not None, "load() must succeed before hashing"
        return PurePythonStreamingHasher(self._module.Hasher())
