"""Port interfaces for the valuecheck library.

These abstract base classes define the boundaries between core
domain logic and its collaborators.

Port Interface Categories:

1. **Capability Ports** (types opt into value semantics through these)
   - EqualityStrategy: Paired equals/hash functions
   - OrderingStrategy: Three-way comparison for ordered containers

2. **Driven Ports** (core calls out to adapters)
   - ReportPort: Publish contract reports to a human
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import ContractReport, ScenarioResult


# ============================================================================
# CAPABILITY PORTS
# ============================================================================


class EqualityStrategy(ABC):
    """Paired equality and hash functions for a family of values.

    A container or checker never calls __eq__ or __hash__ directly; it
    goes through a strategy, so identity semantics and value semantics
    are both explicit choices rather than a language fallback.

    Implementations must keep the pair consistent:
    equals(a, b) implies hash(a) == hash(b). Deliberately inconsistent
    implementations exist only to reproduce the classic lookup bug.
    """

    name: str = "strategy"

    @abstractmethod
    def equals(self, a: Any, b: Any) -> bool:
        """Return True if a and b are the same value.

        Must return False, not raise, when either side is None and the
        other is not.
        """

    @abstractmethod
    def hash(self, value: Any) -> int:
        """Return the bucket hash for value."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class OrderingStrategy(ABC):
    """Three-way comparison for ordered containers.

    compare(a, b) is negative, zero or positive as a sorts before,
    alongside or after b. A well-behaved ordering returns zero exactly
    when the paired EqualityStrategy reports equality.
    """

    name: str = "ordering"

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Compare a with b."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ReportPort(ABC):
    """Port for publishing contract reports and scenario outcomes.

    Implementations decide where the output goes (terminal, files, ...).
    They must not mutate the reports they receive.
    """

    @abstractmethod
    def report(self, report: ContractReport) -> None:
        """Publish a single contract report.

        Raises:
            OSError: If the underlying sink cannot be written.
        """

    @abstractmethod
    def report_scenarios(self, results: list[ScenarioResult]) -> None:
        """Publish the outcome of a batch of teaching scenarios."""
