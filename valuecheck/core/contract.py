"""Equality and ordering contract checking.

This module implements the checker that validates an equals/hash pairing
(and optionally a three-way ordering) over a finite set of sample values.
Every violation found is collected; the checker never stops early and
never raises on a broken contract.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from itertools import combinations
from typing import Any

from .errors import InvalidArgumentError
from .models import ContractReport, Violation, ViolationKind
from .ports import EqualityStrategy, OrderingStrategy
from .strategies import StrategyRegistry, default_registry

logger = logging.getLogger(__name__)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class ContractChecker:
    """Checks equality/hash and ordering contracts over sample values.

    Pure function over supplied samples; samples are snapshotted into a
    tuple and never mutated. Any exception raised by a strategy is
    recorded as a RAISED violation.
    """

    def __init__(
        self,
        registry: StrategyRegistry | None = None,
        max_samples: int = 64,
    ):
        if max_samples <= 0:
            raise InvalidArgumentError(f"max_samples must be positive, got {max_samples}")
        self.registry = registry or default_registry
        self.max_samples = max_samples

    def check(
        self,
        samples: Iterable[Any],
        strategy: EqualityStrategy | None = None,
        subject: str | None = None,
    ) -> ContractReport:
        """Check reflexivity, symmetry, transitivity and hash consistency.

        Also verifies that repeated calls agree and that comparing with
        None yields False rather than an exception.

        Args:
            samples: Values to check. Include distinct-but-equal instances,
                otherwise symmetry and transitivity are trivially satisfied.
            strategy: Strategy under test. Resolved from the registry using
                the first sample's type when omitted.
            subject: Label for the report. Defaults to the first sample's
                type name.

        Returns:
            ContractReport listing every violation found.

        Raises:
            InvalidArgumentError: If more than max_samples samples are given,
                or if no strategy can be resolved.
        """
        values = self._snapshot(samples)
        if strategy is None:
            strategy = self._resolve(values)
        subject = subject or self._subject(values, strategy)

        violations: list[Violation] = []
        record = violations.append

        equal = self._equality_matrix(values, strategy, record)
        hashes = self._hashes(values, strategy, record)

        n = len(values)
        for i in range(n):
            if equal[i][i] is False:
                record(Violation(
                    ViolationKind.REFLEXIVITY, (i,),
                    f"equals(a, a) is False for sample {i} ({values[i]!r})",
                ))
            self._check_non_null(i, values[i], strategy, record)

        for i, j in combinations(range(n), 2):
            ab, ba = equal[i][j], equal[j][i]
            if ab is not None and ba is not None and ab != ba:
                record(Violation(
                    ViolationKind.SYMMETRY, (i, j),
                    f"equals(a, b) is {ab} but equals(b, a) is {ba}",
                ))
            if (ab or ba) and hashes[i] is not None and hashes[j] is not None:
                if hashes[i] != hashes[j]:
                    record(Violation(
                        ViolationKind.HASH_CONSISTENCY, (i, j),
                        f"equal samples have different hashes: {hashes[i]} != {hashes[j]}",
                    ))

        for i in range(n):
            for j in range(n):
                if i == j or not equal[i][j]:
                    continue
                for k in range(n):
                    if k in (i, j) or not equal[j][k]:
                        continue
                    if equal[i][k] is False:
                        record(Violation(
                            ViolationKind.TRANSITIVITY, (i, j, k),
                            "equals(a, b) and equals(b, c) but not equals(a, c)",
                        ))

        return self._finish(subject, strategy.name, n, violations)

    def check_ordering(
        self,
        samples: Iterable[Any],
        ordering: OrderingStrategy,
        strategy: EqualityStrategy | None = None,
        subject: str | None = None,
    ) -> ContractReport:
        """Check that an ordering is antisymmetric and consistent with equals.

        Raises:
            InvalidArgumentError: If more than max_samples samples are given.
        """
        values = self._snapshot(samples)
        if strategy is None:
            strategy = self._resolve(values)
        subject = subject or self._subject(values, strategy)

        violations: list[Violation] = []
        record = violations.append
        equal = self._equality_matrix(values, strategy, record)

        n = len(values)
        compared: dict[tuple[int, int], int | None] = {}
        for i in range(n):
            for j in range(n):
                compared[(i, j)] = self._guard(
                    lambda: _sign(ordering.compare(values[i], values[j])),
                    (i, j), f"compare raised on samples {i}, {j}", record,
                )

        for i in range(n):
            for j in range(i, n):
                ab, ba = compared[(i, j)], compared[(j, i)]
                if ab is None or ba is None:
                    continue
                if ab != -ba:
                    record(Violation(
                        ViolationKind.ORDER_ANTISYMMETRY, (i, j),
                        f"sign(compare(a, b)) is {ab} but sign(compare(b, a)) is {ba}",
                    ))
                if equal[i][j] is not None and (ab == 0) != equal[i][j]:
                    record(Violation(
                        ViolationKind.ORDER_CONSISTENCY, (i, j),
                        f"compare(a, b) == 0 is {ab == 0} but equals(a, b) is {equal[i][j]}",
                    ))

        return self._finish(f"{subject} ordered by {ordering.name}", strategy.name, n, violations)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _snapshot(self, samples: Iterable[Any]) -> tuple[Any, ...]:
        if samples is None:
            raise InvalidArgumentError("samples must be an iterable, got None")
        values = tuple(samples)
        if len(values) > self.max_samples:
            raise InvalidArgumentError(
                f"too many samples: {len(values)} exceeds max_samples={self.max_samples}"
            )
        return values

    def _resolve(self, values: tuple[Any, ...]) -> EqualityStrategy:
        if not values:
            return self.registry.default
        return self.registry.strategy_for(values[0])

    @staticmethod
    def _subject(values: tuple[Any, ...], strategy: EqualityStrategy) -> str:
        type_name = type(values[0]).__name__ if values else "empty"
        return f"{type_name} via {strategy.name}"

    @staticmethod
    def _guard(
        call: Callable[[], Any],
        indices: tuple[int, ...],
        what: str,
        record: Callable[[Violation], None],
    ) -> Any:
        try:
            return call()
        except Exception as e:
            record(Violation(ViolationKind.RAISED, indices, f"{what}: {type(e).__name__}: {e}"))
            return None

    def _equality_matrix(
        self,
        values: tuple[Any, ...],
        strategy: EqualityStrategy,
        record: Callable[[Violation], None],
    ) -> list[list[bool | None]]:
        """Evaluate equals for every ordered pair, twice, and flag disagreement.

        Cells are None where equals raised.
        """
        n = len(values)
        matrix: list[list[bool | None]] = [[None] * n for _ in range(n)]
        for i in range(n):
            for j in range(n):
                first = self._guard(
                    lambda: bool(strategy.equals(values[i], values[j])),
                    (i, j), f"equals raised on samples {i}, {j}", record,
                )
                if first is None:
                    continue
                second = self._guard(
                    lambda: bool(strategy.equals(values[i], values[j])),
                    (i, j), f"equals raised on samples {i}, {j}", record,
                )
                if second is not None and second != first:
                    record(Violation(
                        ViolationKind.REPEATABILITY, (i, j),
                        f"equals(a, b) returned {first} then {second}",
                    ))
                matrix[i][j] = first
        return matrix

    def _hashes(
        self,
        values: tuple[Any, ...],
        strategy: EqualityStrategy,
        record: Callable[[Violation], None],
    ) -> list[int | None]:
        hashes: list[int | None] = []
        for i, value in enumerate(values):
            first = self._guard(
                lambda: strategy.hash(value), (i,), f"hash raised on sample {i}", record,
            )
            if first is not None:
                second = self._guard(
                    lambda: strategy.hash(value), (i,), f"hash raised on sample {i}", record,
                )
                if second is not None and second != first:
                    record(Violation(
                        ViolationKind.REPEATABILITY, (i,),
                        f"hash(a) returned {first} then {second}",
                    ))
            hashes.append(first)
        return hashes

    def _check_non_null(
        self,
        i: int,
        value: Any,
        strategy: EqualityStrategy,
        record: Callable[[Violation], None],
    ) -> None:
        if value is None:
            return
        result = self._guard(
            lambda: strategy.equals(value, None),
            (i,), f"equals(a, None) raised on sample {i}", record,
        )
        if result:
            record(Violation(
                ViolationKind.NON_NULL, (i,),
                f"equals(a, None) is True for sample {i}",
            ))

    @staticmethod
    def _finish(
        subject: str, strategy_name: str, n: int, violations: list[Violation]
    ) -> ContractReport:
        report = ContractReport(
            subject=subject,
            strategy=strategy_name,
            samples_checked=n,
            violations=tuple(violations),
            checked_at=datetime.now(UTC),
        )
        for violation in violations:
            logger.debug(f"{subject}: {violation.kind.value} {violation.indices}: {violation.message}")
        logger.info(
            f"Checked {subject}: {n} samples, {len(violations)} violation(s)",
            extra={"subject": subject, "passed": report.passed},
        )
        return report
