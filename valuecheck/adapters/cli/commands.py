"""CLI command implementations for valuecheck.

Maps CLI commands (check, scenarios, lookup) to core operations and
handles CLI-specific formatting and error reporting. Every command
returns a JSON-serializable dict; library errors become
{"status": "error", ...} results rather than tracebacks.
"""

import logging
from collections.abc import Callable
from typing import Any

from valuecheck.core import scenarios
from valuecheck.core.container import HashContainer
from valuecheck.core.contract import ContractChecker
from valuecheck.core.errors import ValueCheckError
from valuecheck.core.models import ContractReport
from valuecheck.core.ports import EqualityStrategy, ReportPort
from valuecheck.core.specimens import (
    BY_NAME,
    EQUALS_ONLY,
    NAME_ORDER,
    PlainStudent,
    Student,
    student_samples,
)
from valuecheck.core.strategies import IdentityStrategy, NaturalStrategy

logger = logging.getLogger(__name__)

STRATEGIES: dict[str, Callable[[], EqualityStrategy]] = {
    "natural": NaturalStrategy,
    "by-name": lambda: BY_NAME,
    "equals-only": lambda: EQUALS_ONLY,
    "identity": IdentityStrategy,
}


def _suites(
    checker: ContractChecker,
) -> dict[str, tuple[Callable[[], ContractReport], bool]]:
    """Built-in suites, each paired with whether it is expected to pass."""
    return {
        "student-natural": (lambda: checker.check(
            student_samples(Student), NaturalStrategy(), subject="Student via natural"
        ), True),
        "student-by-name": (lambda: checker.check(
            student_samples(PlainStudent), BY_NAME, subject="PlainStudent via by-name"
        ), True),
        "student-equals-only": (lambda: checker.check(
            student_samples(PlainStudent), EQUALS_ONLY, subject="PlainStudent via equals-only"
        ), False),
        "student-identity": (lambda: checker.check(
            student_samples(PlainStudent), IdentityStrategy(), subject="PlainStudent via identity"
        ), True),
        "student-order": (lambda: checker.check_ordering(
            student_samples(Student), NAME_ORDER, NaturalStrategy(), subject="Student"
        ), True),
    }


class CLICommandHandler:
    """Handles CLI commands by delegating to the core and a ReportPort."""

    def __init__(
        self,
        checker: ContractChecker,
        reporter: ReportPort,
        initial_capacity: int = 16,
        load_factor: float = 0.75,
    ):
        """Initialize the CLI command handler.

        Args:
            checker: ContractChecker used by the check command.
            reporter: ReportPort that receives every report produced.
            initial_capacity: Bucket count for containers built by lookup.
            load_factor: Resize threshold for containers built by lookup.
        """
        self.checker = checker
        self.reporter = reporter
        self.initial_capacity = initial_capacity
        self.load_factor = load_factor
        self.suites = _suites(checker)

    def check(self, suite: str | None = None, verbose: bool = False) -> dict[str, Any]:
        """Run one named suite, or all of them when suite is None.

        A suite built to demonstrate a broken contract is expected to
        fail; "as_expected" is False only when some suite's outcome
        differs from its expectation.

        Returns:
            Dictionary with status, per-suite summaries and, if verbose,
            the full reports.
        """
        if suite is not None and suite not in self.suites:
            return {
                "status": "error",
                "operation": "check",
                "message": f"Unknown suite: {suite}. Available: {', '.join(sorted(self.suites))}",
            }

        names = [suite] if suite is not None else list(self.suites)
        summaries = []
        reports = []
        for name in names:
            run_suite, expect_pass = self.suites[name]
            try:
                report = run_suite()
            except ValueCheckError as e:
                logger.error(f"Suite {name} could not run: {e}")
                return {"status": "error", "operation": "check", "suite": name, "message": str(e)}
            self.reporter.report(report)
            summaries.append({
                "suite": name,
                "passed": report.passed,
                "expected_pass": expect_pass,
                "violations": len(report.violations),
            })
            reports.append(report)

        result: dict[str, Any] = {
            "status": "success",
            "operation": "check",
            "as_expected": all(s["passed"] == s["expected_pass"] for s in summaries),
            "suites": summaries,
        }
        if verbose:
            result["reports"] = [r.to_dict() for r in reports]
        return result

    def run_scenarios(self) -> dict[str, Any]:
        """Run every documented scenario and publish the outcomes."""
        results = scenarios.run_all()
        self.reporter.report_scenarios(results)
        return {
            "status": "success",
            "operation": "scenarios",
            "matched": all(r.matched for r in results),
            "results": [r.to_dict() for r in results],
        }

    def lookup(
        self,
        names: list[str],
        probe: str,
        strategy: str = "natural",
    ) -> dict[str, Any]:
        """Insert one student per name, then probe with a fresh instance.

        Natural strategy uses the hashable Student; every other strategy
        uses PlainStudent so the strategy alone decides equality.
        """
        if strategy not in STRATEGIES:
            return {
                "status": "error",
                "operation": "lookup",
                "message": f"Unknown strategy: {strategy}. Available: {', '.join(sorted(STRATEGIES))}",
            }
        try:
            chosen = STRATEGIES[strategy]()
            factory = Student if strategy == "natural" else PlainStudent
            box = HashContainer(
                chosen,
                initial_capacity=self.initial_capacity,
                load_factor=self.load_factor,
            )
            inserted = [box.insert(factory(name)) for name in names]
            found = box.contains(factory(probe))
        except (ValueCheckError, ValueError) as e:
            logger.error(f"Lookup failed: {e}")
            return {"status": "error", "operation": "lookup", "message": str(e)}

        return {
            "status": "success",
            "operation": "lookup",
            "strategy": chosen.name,
            "inserted": inserted,
            "size": box.size(),
            "buckets": box.bucket_count,
            "probe": probe,
            "found": found,
        }
