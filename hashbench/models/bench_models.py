"""Pydantic models for benchmark workloads and results."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from hashbench.models.constants import Capability

# ============================================================================
# Workloads
# ============================================================================


class TestCase(BaseModel):
    """A one-shot hashing workload."""

    __test__: ClassVar[bool] = False  # Tell pytest not to collect this class

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name (e.g., 'Small (11 bytes)')")
    payload: str | bytes = Field(..., description="Input hashed by every operation")
    iterations: int = Field(..., gt=0, description="Timed operations per implementation")

    @property
    def payload_size(self) -> int:
        """Payload size in bytes (text is measured as UTF-8)."""
        if isinstance(self.payload, str):
            return len(self.payload.encode("utf-8"))
        return len(self.payload)


class StreamingCase(BaseModel):
    """A streaming workload: each operation hashes chunk_count chunks."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name")
    chunk: str | bytes = Field(..., description="Chunk fed to update()")
    chunk_count: int = Field(..., gt=0, description="update() calls per operation")
    iterations: int = Field(..., gt=0, description="Timed operations per implementation")


# ============================================================================
# Measurements
# ============================================================================


class TimingSample(BaseModel):
    """Raw output of the timed runner."""

    total_time_ms: float = Field(
        ..., description="Wall-clock duration of the timed loop (warmup excluded)"
    )
    op_count: int = Field(..., gt=0, description="Number of timed operations")


class BenchmarkResult(BaseModel):
    """One implementation measured against one workload."""

    name: str = Field(..., description="Implementation display name")
    total_time_ms: float = Field(..., description="Sum over all timed iterations")
    avg_time_ms: float = Field(..., description="Average time per operation")
    throughput_ops_per_sec: float = Field(
        ..., ge=0, description="Operations per second (0 when unmeasurable)"
    )
    op_count: int = Field(..., gt=0, description="Number of timed operations")

    @property
    def measurable(self) -> bool:
        """False when the clock reported no elapsed time."""
        return self.total_time_ms > 0


class ComparisonEntry(BaseModel):
    """A result ranked against the fastest result of its table."""

    result: BenchmarkResult
    relative_percent: float | None = Field(
        None, description="Throughput as a percentage of the fastest (None if N/A)"
    )
    speedup_factor: float | None = Field(
        None, description="How many times slower than the fastest (None if N/A)"
    )
    is_fastest: bool = Field(False, description="Whether this is the fastest entry")


class ComparisonTable(BaseModel):
    """Ranked results for one workload."""

    title: str = Field("", description="Workload name")
    entries: list[ComparisonEntry] = Field(..., min_length=1)
    fastest: str = Field(..., description="Name of the highest-throughput result")

    @property
    def fastest_entry(self) -> ComparisonEntry:
        """The entry marked fastest."""
        return next(entry for entry in self.entries if entry.is_fastest)

    @property
    def names(self) -> list[str]:
        """Result names in input order."""
        return [entry.result.name for entry in self.entries]


# ============================================================================
# Loading & verification
# ============================================================================


class LoadOutcome(BaseModel):
    """Settled outcome of one registration attempt."""

    implementation_id: str
    pretty_name: str
    loaded: bool
    capabilities: list[Capability] = Field(default_factory=list)
    error: str | None = Field(None, description="Failure reason if not loaded")


class VerificationReport(BaseModel):
    """Digest agreement of every one-shot implementation with the reference."""

    input: str | bytes = Field(..., description="Hashed input; bytes serialize as hex")
    reference_id: str
    reference_digest: str = Field(..., description="Lowercase hex digest")
    digests: dict[str, str] = Field(default_factory=dict)
    matches: dict[str, bool] = Field(default_factory=dict)
    skipped: list[str] = Field(
        default_factory=list, description="Available streaming-only implementations"
    )
    errors: dict[str, str] = Field(
        default_factory=dict, description="Implementations that raised while hashing"
    )

    @field_serializer("input")
    def serialize_input(self, value: str | bytes) -> str:
        # Arbitrary bytes aren't valid UTF-8 text
        if isinstance(value, bytes):
            return value.hex()
        return value

    @property
    def all_match(self) -> bool:
        """True when every verified implementation agrees with the reference."""
        return all(self.matches.values())

    @property
    def mismatches(self) -> list[str]:
        """Ids whose digest disagreed with the reference."""
        return [impl_id for impl_id, ok in self.matches.items() if not ok]


# ============================================================================
# Suite
# ============================================================================


class SystemInfo(BaseModel):
    """Host details that affect benchmark numbers."""

    python_implementation: str
    python_version: str
    platform: str
    machine: str
    physical_cores: int | None = Field(None, ge=1)
    logical_cores: int | None = Field(None, ge=1)


class SuiteResults(BaseModel):
    """Everything produced by one workload driver run."""

    hashbench_version: str
    system: SystemInfo | None = None
    load_outcomes: list[LoadOutcome] = Field(default_factory=list)
    tables: list[ComparisonTable] = Field(default_factory=list)
    verification: VerificationReport | None = None

    def get_table(self, title: str) -> ComparisonTable | None:
        """Return the table for a workload, or None if it produced no results."""
        for table in self.tables:
            if table.title == title:
                return table
        return None
