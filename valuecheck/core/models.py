"""Domain models for the valuecheck library.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .errors import ContractViolationError


class ViolationKind(Enum):
    """Which law of the equality or ordering contract was broken."""

    REFLEXIVITY = "reflexivity"
    SYMMETRY = "symmetry"
    TRANSITIVITY = "transitivity"
    HASH_CONSISTENCY = "hash_consistency"
    REPEATABILITY = "repeatability"
    NON_NULL = "non_null"
    ORDER_ANTISYMMETRY = "order_antisymmetry"
    ORDER_CONSISTENCY = "order_consistency"
    RAISED = "raised"


@dataclass(frozen=True)
class Violation:
    """A single detected contract failure.

    indices refers to positions in the sample tuple the checker was given,
    so the offending pair or triple can be recovered by the caller.
    """

    kind: ViolationKind
    indices: tuple[int, ...]
    message: str

    def __post_init__(self) -> None:
        """Validate violation invariants on creation."""
        if not self.indices:
            raise ValueError("indices must name at least one sample")
        if any(i < 0 for i in self.indices):
            raise ValueError(f"indices must be non-negative, got {self.indices}")


@dataclass(frozen=True)
class ContractReport:
    """Summary of one contract check over a set of samples."""

    subject: str  # e.g. "Student via natural"
    strategy: str
    samples_checked: int
    violations: tuple[Violation, ...]  # immutable for frozen dataclass
    checked_at: datetime

    def __post_init__(self) -> None:
        """Validate report invariants on creation."""
        if self.samples_checked < 0:
            raise ValueError(
                f"samples_checked must be non-negative, got {self.samples_checked}"
            )

    @property
    def passed(self) -> bool:
        return not self.violations

    def by_kind(self) -> dict[ViolationKind, int]:
        """Count violations per contract law."""
        counts: dict[ViolationKind, int] = {}
        for violation in self.violations:
            counts[violation.kind] = counts.get(violation.kind, 0) + 1
        return counts

    def raise_for_violations(self) -> None:
        """Raise ContractViolationError if any violation was recorded."""
        if self.violations:
            raise ContractViolationError(self.subject, self.violations)

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject,
            "strategy": self.strategy,
            "samples_checked": self.samples_checked,
            "passed": self.passed,
            "checked_at": self.checked_at.isoformat(),
            "violations": [
                {
                    "kind": v.kind.value,
                    "indices": list(v.indices),
                    "message": v.message,
                }
                for v in self.violations
            ],
        }


@dataclass
class ContainerSlot:
    """One bucket of a hash-based container.

    Holds every (hash, key, payload) entry whose hash maps to this bucket
    index. Sets leave payload as None.
    The hash is cached at insert time and reused when the table is resized.

    Note: This dataclass is intentionally mutable; the owning container
    appends and removes entries in place.
    """

    index: int
    entries: list[tuple[int, Any, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"index must be non-negative, got {self.index}")

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of one documented teaching scenario."""

    name: str
    strategy: str
    expected: Any
    observed: Any
    description: str = ""

    @property
    def matched(self) -> bool:
        return self.expected == self.observed

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "strategy": self.strategy,
            "expected": self.expected,
            "observed": self.observed,
            "matched": self.matched,
            "description": self.description,
        }
