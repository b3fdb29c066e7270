"""Tests for the implementation adapters."""

import pytest

from hashbench.implementations import (
    CapabilityNotSupportedError,
    ImplementationLoadError,
    ImplementationRegistry,
    PurePythonBlake3,
    RustBlake3,
    RustBlake3Multithreaded,
    default_candidates,
)
from hashbench.models.constants import REFERENCE_IMPLEMENTATION_ID, Capability
from hashbench.reference.blake3 import digest


@pytest.fixture
def pure():
    impl = PurePythonBlake3()
    impl.load()
    return impl


def test_pure_python_is_the_reference(pure):
    """Test the reference adapter's identity and capabilities."""
    assert pure.id == REFERENCE_IMPLEMENTATION_ID
    assert pure.supports(Capability.ONE_SHOT)
    assert pure.supports(Capability.STREAMING)


def test_pure_python_hash_and_stream(pure):
    """Test that both modes produce the reference digest."""
    expected = digest(b"hello world")

    assert pure.hash("hello world") == expected
    assert pure.hash(b"hello world") == expected

    hasher = pure.create_hasher()
    assert hasher.update("hello ").update(b"world") is hasher
    assert hasher.finalize() == expected


def test_default_candidates_order():
    """Test that the reference is registered first and ids are unique."""
    ids = [impl.id for impl in default_candidates()]
    assert ids[0] == REFERENCE_IMPLEMENTATION_ID
    assert len(ids) == len(set(ids))


def test_rust_load_failure_when_module_missing(monkeypatch):
    """Test that a missing library raises ImplementationLoadError."""
    impl = RustBlake3()
    monkeypatch.setattr(impl, "module_name", "hashbench_no_such_module")

    with pytest.raises(ImplementationLoadError) as exc_info:
        impl.load()
    assert exc_info.value.implementation_id == "blake3"


def test_rust_adapters_normalize_finalize():
    """Test the blake3 adapters when the package is installed."""
    pytest.importorskip("blake3")
    expected = digest(b"hello world")

    single = RustBlake3()
    single.load()
    assert single.hash("hello world") == expected
    assert single.create_hasher().update("hello ").update("world").finalize() == expected

    threaded = RustBlake3Multithreaded()
    threaded.load()
    assert threaded.hash(b"hello world") == expected


def test_multithreaded_adapter_is_one_shot_only():
    """Test that asking for an unsupported mode raises."""
    impl = RustBlake3Multithreaded()
    assert not impl.supports(Capability.STREAMING)

    with pytest.raises(CapabilityNotSupportedError):
        impl.create_hasher()


def test_every_loaded_implementation_agrees_on_hello_world():
    """Test cross-implementation agreement for the fixed verification input."""
    registry = ImplementationRegistry()
    registry.load_all(default_candidates())

    reference = registry.get(REFERENCE_IMPLEMENTATION_ID).hash("hello world").hex()
    for impl in registry.list_available(Capability.ONE_SHOT):
        assert impl.hash("hello world").hex() == reference, impl.id


def test_every_loaded_implementation_is_deterministic():
    """Test that hashing the same input twice gives identical digests."""
    registry = ImplementationRegistry()
    registry.load_all(default_candidates())

    for impl in registry.list_available(Capability.ONE_SHOT):
        for payload in ("hello world", b"a" * 1024, b""):
            assert impl.hash(payload) == impl.hash(payload), impl.id
    for impl in registry.list_available(Capability.STREAMING):
        first = impl.create_hasher().update(b"a" * 1500).finalize()
        second = impl.create_hasher().update(b"a" * 1500).finalize()
        assert first == second, impl.id


def test_multithreaded_adapter_loads_with_blake3_installed():
    """Test that the threaded adapter is available whenever blake3 imports."""
    pytest.importorskip("blake3")
    registry = ImplementationRegistry()
    registry.load_all(default_candidates())

    assert registry.is_available("blake3")
    assert registry.is_available("blake3-mt")
    payload = b"a" * 32 * 1024
    assert registry.get("blake3-mt").hash(payload) == digest(payload)


def test_multithreaded_adapter_reads_auto_from_hasher_class():
    """Test that max_threads comes from blake3.blake3.AUTO."""

    class FakeHasherClass:
        AUTO = -1

    class FakeModule:
        blake3 = FakeHasherClass

    assert RustBlake3Multithreaded().hasher_options(FakeModule) == {"max_threads": -1}


def test_multithreaded_adapter_without_auto():
    """Test that an old blake3 without threading support fails to load."""

    class FakeModule:
        class blake3:
            pass

    with pytest.raises(ImplementationLoadError):
        RustBlake3Multithreaded().hasher_options(FakeModule)
