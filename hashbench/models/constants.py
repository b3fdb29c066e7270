"""Constants for hashbench models and commands."""

import sys
from enum import auto

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035


class Capability(StrEnum):
    """Hashing modes an implementation can offer."""

    ONE_SHOT = auto()
    STREAMING = auto()


# Hash family under test
HASH_FAMILY = "BLAKE3"

# Implementation whose digest is ground truth for verification
REFERENCE_IMPLEMENTATION_ID = "pyb3"

# Untimed calls before measurement (capped at the iteration count)
DEFAULT_WARMUP_ITERATIONS = 10

# Fixed input for the correctness pass
VERIFY_INPUT = "hello world"

# Report layout
REPORT_WIDTH = 100
NAME_COLUMN_WIDTH = 25
FASTEST_MARKER = " 🏆"

# Workload matrix: iteration counts shrink as payloads grow
SMALL_PAYLOAD = "hello world"
MEDIUM_PAYLOAD = "a" * 1024
LARGE_PAYLOAD = "a" * 100 * 1024
VERY_LARGE_PAYLOAD = "a" * 1024 * 1024

SMALL_ITERATIONS = 10000
MEDIUM_ITERATIONS = 1000
LARGE_ITERATIONS = 100
VERY_LARGE_ITERATIONS = 10

# CLI names for the workloads, in matrix order
ONE_SHOT_CASE_KEYS = ("small", "medium", "large", "very-large")
STREAMING_CASE_KEY = "streaming"
CASE_CHOICES = (*ONE_SHOT_CASE_KEYS, STREAMING_CASE_KEY)

# Streaming scenario: one hasher per op, fed STREAMING_CHUNK_COUNT chunks
STREAMING_CHUNK = "a" * 1024
STREAMING_CHUNK_COUNT = 100
STREAMING_ITERATIONS = 100

# Closing notes printed after the suite
VARIANCE_NOTES = (
    "Python interpreter and version",
    "CPU architecture and features",
    "System load and thermal state",
    "Input size and memory alignment",
)
