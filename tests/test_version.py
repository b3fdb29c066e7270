"""Tests for the hashbench version information."""

from datetime import datetime

from hashbench.version.hashbench_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2023, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2023"
    assert "1.2.3" in v.full_version()
    assert "abcd" in v.full_version()


def test_hashbench_version_instance():
    """Test the global HASHBENCH_VERSION instance."""
    import hashbench
    from hashbench.version.hashbench_version import HASHBENCH_VERSION

    assert isinstance(HASHBENCH_VERSION, Version)
    assert HASHBENCH_VERSION.major >= 0
    assert len(HASHBENCH_VERSION.hash) == 64
    assert hashbench.__version__ == str(HASHBENCH_VERSION)
