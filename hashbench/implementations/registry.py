"""Registry of candidate hash implementations and their availability.

Usage:
    from hashbench.implementations.registry import ImplementationRegistry

    # Attempt to load every known implementation
    registry = ImplementationRegistry.default()

    # Implementations that loaded
    available = registry.list_available()

    # Implementations that loaded and can hash incrementally
    streaming = registry.list_available(Capability.STREAMING)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from hashbench.implementations.base import HashImplementation
from hashbench.models.bench_models import LoadOutcome
from hashbench.models.constants import Capability


class ImplementationRegistryError(Exception):
    """Base exception for registry errors."""

    pass


class ImplementationNameCollisionError(ImplementationRegistryError):
    """Raised when two candidates share an id."""

    def __init__(
        self, name: str, first: HashImplementation, second: HashImplementation
    ) -> None:
        self.name = name
        self.first = first
        self.second = second
        super().__init__(
            f"Implementation id collision: '{name}' is used by both "
            f"{type(first).__name__} and {type(second).__name__}"
        )


class ImplementationNotFoundError(ImplementationRegistryError):
    """Raised when a requested implementation is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Implementation not found: '{name}'")


@dataclass
class _Entry:
    implementation: HashImplementation
    outcome: LoadOutcome

    @property
    def available(self) -> bool:
        return self.outcome.loaded


class ImplementationRegistry:
    """Holds candidate implementations and whether each one loaded.

    Each registration attempt is isolated: a candidate whose load() raises
    is recorded as unavailable and never handed out by list_available().
    Availability is decided once, at registration.

    Example:
        >>> registry = ImplementationRegistry()
        >>> outcomes = registry.load_all([PurePythonBlake3(), RustBlake3()])
        >>> [impl.id for impl in registry.list_available()]
        ['pyb3', 'blake3']
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    @classmethod
    def default(cls) -> ImplementationRegistry:
        """Build a registry from every known implementation."""
        from hashbench.implementations import default_candidates

        registry = cls()
        registry.load_all(default_candidates())
        return registry

    @property
    def logger(self) -> logging.Logger:
        from hashbench.utils.logger import Logger

        return Logger.get("registry")

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def register(self, candidate: HashImplementation) -> LoadOutcome:
        """Attempt to load a candidate and record the outcome.

        Args:
            candidate: Implementation to load.

        Returns:
            The settled outcome; a failure never propagates.

        Raises:
            ImplementationNameCollisionError: If the id is already registered.
        """
        name = candidate.id
        if name in self._entries:
            raise ImplementationNameCollisionError(
                name, self._entries[name].implementation, candidate
            )

        try:
            candidate.load()
        except Exception as e:
            outcome = LoadOutcome(
                implementation_id=name,
                pretty_name=candidate.get_pretty_name(),
                loaded=False,
                error=str(e) or type(e).__name__,
            )
            self.logger.warning(
                f"✗ Failed to load {candidate.get_pretty_name()}: {outcome.error}"
            )
        else:
            outcome = LoadOutcome(
                implementation_id=name,
                pretty_name=candidate.get_pretty_name(),
                loaded=True,
                capabilities=sorted(candidate.capabilities()),
            )
            self.logger.info(f"✓ Loaded {candidate.get_pretty_name()}")

        self._entries[name] = _Entry(candidate, outcome)
        return outcome

    def load_all(self, candidates: Iterable[HashImplementation]) -> list[LoadOutcome]:
        """Register every candidate and return all outcomes once settled.

        Args:
            candidates: Implementations to load, in report order.

        Returns:
            One outcome per candidate, in the same order.
        """
        outcomes = [self.register(candidate) for candidate in candidates]
        loaded = sum(1 for outcome in outcomes if outcome.loaded)
        self.logger.info(f"{loaded}/{len(outcomes)} implementations available")
        return outcomes

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def list_available(
        self, capability: Capability | None = None
    ) -> list[HashImplementation]:
        """Get loaded implementations in registration order.

        Args:
            capability: If given, only implementations offering this mode.
        """
        return [
            entry.implementation
            for entry in self._entries.values()
            if entry.available
            and (capability is None or entry.implementation.supports(capability))
        ]

    def get(self, name: str) -> HashImplementation:
        """Get a registered implementation by id, available or not.

        Raises:
            ImplementationNotFoundError: If no candidate has this id.
        """
        if name not in self._entries:
            raise ImplementationNotFoundError(name)
        return self._entries[name].implementation

    def is_available(self, name: str) -> bool:
        """Check whether an implementation is registered and loaded."""
        entry = self._entries.get(name)
        return entry is not None and entry.available

    @property
    def outcomes(self) -> list[LoadOutcome]:
        """Load outcomes in registration order."""
        return [entry.outcome for entry in self._entries.values()]

    def list_implementations(self) -> list[dict[str, str | bool]]:
        """Summaries of every registered candidate.

        Returns:
            List of dicts with id, pretty_name, description, capabilities,
            available and error.
        """
        summaries: list[dict[str, str | bool]] = []
        for name, entry in self._entries.items():
            impl = entry.implementation
            summaries.append(
                {
                    "id": name,
                    "pretty_name": impl.get_pretty_name(),
                    "description": impl.get_description(),
                    "capabilities": ", ".join(sorted(impl.capabilities())),
                    "available": entry.available,
                    "error": entry.outcome.error or "",
                }
            )
        return summaries

    def __len__(self) -> int:
        """Return number of registered candidates."""
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        """Check if a candidate is registered."""
        return name in self._entries
