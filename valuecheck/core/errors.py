"""Error taxonomy for the valuecheck library.

Contract checks never raise these on their own; they collect violations
into a ContractReport. Range and argument errors abort immediately at
the point of detection.
"""


class ValueCheckError(Exception):
    """Base class for all valuecheck errors."""


class ContractViolationError(ValueCheckError):
    """Raised when a caller asks a failing ContractReport to fail hard."""

    def __init__(self, subject: str, violations: tuple) -> None:
        self.subject = subject
        self.violations = violations
        super().__init__(
            f"{subject}: {len(violations)} contract violation(s); "
            f"first: {violations[0].message if violations else 'none'}"
        )


class OutOfRangeError(ValueCheckError, IndexError):
    """Index outside [0, length)."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for length {length}")


class InvalidArgumentError(ValueCheckError, ValueError):
    """Argument outside its declared valid range."""
