"""Cross-implementation digest agreement.

The reference digest is treated as ground truth; every other available
one-shot implementation must reproduce it for the same input. This checks
mutual agreement only, not agreement with published test vectors.
"""

from collections.abc import Iterable

from hashbench.implementations.base import HashImplementation
from hashbench.models.bench_models import VerificationReport
from hashbench.models.constants import Capability
from hashbench.utils.logger import Logger


class ReferenceUnavailableError(Exception):
    """Raised when the reference implementation can't produce a digest."""

    def __init__(self, reference_id: str, reason: str) -> None:
        self.reference_id = reference_id
        super().__init__(f"Reference implementation '{reference_id}' {reason}")


def digest_hex(digest: bytes) -> str:
    """Lowercase hex, two characters per byte, no prefix or separators."""
    return bytes(digest).hex()


def verify(
    implementations: Iterable[HashImplementation],
    reference_id: str,
    data: bytes | str,
) -> VerificationReport:
    """Hash data with every implementation and compare against the reference.

    Implementations without one-shot hashing are listed as skipped. A
    mismatch, or an implementation raising while hashing, is recorded and
    logged; the remaining implementations are still verified.

    Args:
        implementations: Available implementations (the reference included).
        reference_id: Id of the implementation whose digest is ground truth.
        data: Input hashed by every implementation.

    Raises:
        ReferenceUnavailableError: If the reference is missing or can't hash.
    """
    log = Logger.get("verify")
    implementations = list(implementations)

    reference = next(
        (impl for impl in implementations if impl.id == reference_id), None
    )
    if reference is None:
        raise ReferenceUnavailableError(reference_id, "is not available")
    if not reference.supports(Capability.ONE_SHOT):
        raise ReferenceUnavailableError(reference_id, "does not support one-shot hashing")

    expected = digest_hex(reference.hash(data))
    report = VerificationReport(
        input=data,
        reference_id=reference_id,
        reference_digest=expected,
        digests={reference_id: expected},
    )

    for impl in implementations:
        if impl is reference:
            continue
        if not impl.supports(Capability.ONE_SHOT):
            log.info(f"Skipping {impl.id}: streaming only")
            report.skipped.append(impl.id)
            continue

        try:
            actual = digest_hex(impl.hash(data))
        except Exception as e:
            log.error(f"{impl.id} raised while hashing: {e}")
            report.errors[impl.id] = str(e) or type(e).__name__
            report.matches[impl.id] = False
            continue

        report.digests[impl.id] = actual
        report.matches[impl.id] = actual == expected
        if actual != expected:
            log.warning(
                f"Digest mismatch: {impl.id} produced {actual}, "
                f"{reference_id} produced {expected}"
            )

    return report
