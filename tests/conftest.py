"""Shared fixtures: configured logging, a fake clock and fake implementations."""

import hashlib
from collections.abc import Callable
from io import StringIO

import pytest

from hashbench.implementations.base import (
    HashImplementation,
    ImplementationLoadError,
    StreamingHasher,
    to_bytes,
)
from hashbench.models.constants import Capability
from hashbench.utils.logger import Logger


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000


class FakeStreamingHasher(StreamingHasher):
    """Buffers chunks and digests them on finalize()."""

    def __init__(self, impl: "FakeImplementation") -> None:
        self._impl = impl
        self._buffer = bytearray()

    def update(self, chunk):
        self._buffer += to_bytes(chunk)
        return self

    def finalize(self):
        self._impl.tick()
        return self._impl.digest_fn(bytes(self._buffer))


class FakeImplementation(HashImplementation):
    """Configurable stand-in for a real hash library."""

    def __init__(
        self,
        implementation_id: str,
        capabilities: tuple[Capability, ...] = (Capability.ONE_SHOT, Capability.STREAMING),
        fail_load: Exception | None = None,
        cost_ms: float = 0.0,
        clock: FakeClock | None = None,
        digest_fn: Callable[[bytes], bytes] | None = None,
    ) -> None:
        self.implementation_id = implementation_id
        self._capabilities = frozenset(capabilities)
        self._fail_load = fail_load
        self.cost_ms = cost_ms
        self.clock = clock
        self.digest_fn = digest_fn or (lambda data: hashlib.sha256(data).digest())
        self.load_calls = 0
        self.hash_calls = 0
        self.hashers_created = 0

    def get_pretty_name(self):
        return self.implementation_id.upper()

    def get_description(self):
        return f"Fake implementation {self.implementation_id}"

    def capabilities(self):
        return self._capabilities

    def load(self):
        self.load_calls += 1
        if self._fail_load is not None:
            raise self._fail_load

    def tick(self) -> None:
        if self.clock is not None:
            self.clock.advance_ms(self.cost_ms)

    def hash(self, data):
        if not self.supports(Capability.ONE_SHOT):
            return super().hash(data)
        self.hash_calls += 1
        self.tick()
        return self.digest_fn(to_bytes(data))

    def create_hasher(self):
        if not self.supports(Capability.STREAMING):
            return super().create_hasher()
        self.hashers_created += 1
        return FakeStreamingHasher(self)


@pytest.fixture(autouse=True)
def log_output():
    """Configure logging into a buffer for every test."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    yield output


@pytest.fixture
def fake_clock():
    """A clock that only moves when fake implementations do work."""
    return FakeClock()


@pytest.fixture
def make_impl(fake_clock):
    """Factory for fake implementations sharing the fake clock."""

    def factory(implementation_id, **kwargs):
        kwargs.setdefault("clock", fake_clock)
        return FakeImplementation(implementation_id, **kwargs)

    return factory


@pytest.fixture
def load_failure():
    """The error a candidate raises when its library is missing."""
    return ImplementationLoadError("missing", "No module named 'missing'")
