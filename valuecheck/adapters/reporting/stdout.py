"""Stdout report adapter.

Implements ReportPort by printing contract reports to the terminal with
human-readable formatting.
"""

import logging

from valuecheck.core.models import ContractReport, ScenarioResult
from valuecheck.core.ports import ReportPort

logger = logging.getLogger(__name__)


class StdoutReportAdapter(ReportPort):
    """Prints contract reports to stdout."""

    def __init__(self, verbose: bool = False, max_listed: int = 10):
        """Initialize stdout report adapter.

        Args:
            verbose: If True, list every violation instead of the first few.
            max_listed: Violations listed per report when not verbose.
        """
        self.verbose = verbose
        self.max_listed = max_listed

    def report(self, report: ContractReport) -> None:
        """Print a single contract report."""
        print(self._format_header(report))
        print(self._format_violations(report))
        print(self._format_footer())

    def report_scenarios(self, results: list[ScenarioResult]) -> None:
        print(self._format_scenarios(results))

    @staticmethod
    def _format_header(report: ContractReport) -> str:
        """Format the report header."""
        lines = [
            "=" * 80,
            "CONTRACT REPORT",
            "=" * 80,
            f"Subject: {report.subject}",
            f"Strategy: {report.strategy}",
            f"Samples: {report.samples_checked}",
            f"Result: {'PASSED' if report.passed else 'FAILED'}",
        ]
        return "\n".join(lines)

    def _format_violations(self, report: ContractReport) -> str:
        """Format the violations section."""
        if report.passed:
            return ""

        lines = [
            "",
            "-" * 80,
            f"VIOLATIONS ({len(report.violations)})",
            "-" * 80,
        ]
        for kind, count in sorted(report.by_kind().items(), key=lambda x: x[0].value):
            lines.append(f"  {kind.value.upper()}: {count}")

        listed = report.violations if self.verbose else report.violations[: self.max_listed]
        lines.append("")
        for i, violation in enumerate(listed, 1):
            lines.append(f"  {i}. [{violation.kind.value}] samples {violation.indices}: {violation.message}")

        hidden = len(report.violations) - len(listed)
        if hidden > 0:
            lines.append(f"  ... {hidden} more (run with VERBOSE=true to list all)")

        return "\n".join(lines)

    @staticmethod
    def _format_footer() -> str:
        """Format the report footer."""
        return "=" * 80

    @staticmethod
    def _format_scenarios(results: list[ScenarioResult]) -> str:
        """Format a scenario outcome table."""
        lines = [
            "=" * 80,
            "SCENARIOS",
            "=" * 80,
        ]
        for result in results:
            mark = "PASSED" if result.matched else "FAILED"
            lines.append(
                f"{mark:<7} {result.name} [{result.strategy}] "
                f"expected={result.expected!r} observed={result.observed!r}"
            )
        matched = sum(1 for r in results if r.matched)
        lines.append("")
        lines.append(f"{matched}/{len(results)} matched")
        lines.append("=" * 80)
        return "\n".join(lines)
