"""Reference hash implementations bundled with hashbench."""

from hashbench.reference.blake3 import OUT_LEN, Hasher, digest

__all__ = ["OUT_LEN", "Hasher", "digest"]
