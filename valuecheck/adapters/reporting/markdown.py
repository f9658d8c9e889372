"""Markdown file report adapter.

Implements ReportPort by writing each contract report to its own markdown
file in a date-based directory (YYYY-MM-DD). Scenario batches are
appended to scenarios.md in the same directory.
"""

import logging
import re
from datetime import UTC, datetime
from pathlib import Path

from valuecheck.core.models import ContractReport, ScenarioResult
from valuecheck.core.ports import ReportPort

logger = logging.getLogger(__name__)


class MarkdownReportAdapter(ReportPort):
    """Writes contract reports to markdown files organized by date."""

    def __init__(self, report_dir: str):
        """Initialize markdown report adapter.

        Args:
            report_dir: Base directory where date-based subdirectories
                will be created.

        Raises:
            ValueError: If report_dir is a filesystem root.
            OSError: If the base directory cannot be created.
        """
        self.base_dir = Path(report_dir).resolve()

        if self.base_dir.parent == self.base_dir:
            raise ValueError(f"report_dir cannot be a filesystem root: {report_dir}")

        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create base directory {report_dir}: {e}") from e

    @staticmethod
    def _sanitize_filename(text: str) -> str:
        """Sanitize a string for use in filenames.

        Replaces all non-alphanumeric characters (except underscores and
        hyphens) with underscores and truncates to 100 characters.

        Examples:
            >>> MarkdownReportAdapter._sanitize_filename("Student via by-name")
            'Student_via_by-name'
        """
        sanitized = re.sub(r"[^\w\-]", "_", text)
        return sanitized[:100]

    def _date_dir(self, timestamp: datetime) -> Path:
        date_dir = self.base_dir / timestamp.strftime("%Y-%m-%d")
        try:
            date_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create date directory {date_dir}: {e}") from e
        return date_dir

    def _get_report_file_path(self, report: ContractReport) -> Path:
        """Compute the report path: YYYY-MM-DD/HH-MM-SS-ffffff_subject.md."""
        timestamp = report.checked_at
        date_dir = self.base_dir / timestamp.strftime("%Y-%m-%d")
        subject = self._sanitize_filename(report.subject or "unknown")
        return date_dir / f"{timestamp.strftime('%H-%M-%S-%f')}_{subject}.md"

    def report(self, report: ContractReport) -> None:
        """Write a contract report to its own markdown file."""
        entry = self._format_report(report)
        self._date_dir(report.checked_at)
        report_file = self._get_report_file_path(report)
        try:
            report_file.write_text(entry, encoding="utf-8")
            logger.info(
                f"Wrote contract report to {report_file}",
                extra={"subject": report.subject, "passed": report.passed},
            )
        except OSError as e:
            logger.error(
                f"Failed to write markdown report: {e}",
                extra={"path": str(report_file)},
                exc_info=True,
            )
            raise

    def report_scenarios(self, results: list[ScenarioResult]) -> None:
        """Append a scenario table to today's scenarios.md."""
        now = datetime.now(UTC)
        scenarios_file = self._date_dir(now) / "scenarios.md"
        entry = self._format_scenarios(results, now)
        try:
            with scenarios_file.open("a", encoding="utf-8") as f:
                f.write(entry)
            logger.info(f"Appended {len(results)} scenario result(s) to {scenarios_file}")
        except OSError as e:
            logger.error(
                f"Failed to write scenario report: {e}",
                extra={"path": str(scenarios_file)},
                exc_info=True,
            )
            raise

    @staticmethod
    def _format_report(report: ContractReport) -> str:
        lines = [
            f"# Contract report: {report.subject}",
            "",
            f"- **Strategy:** {report.strategy}",
            f"- **Samples checked:** {report.samples_checked}",
            f"- **Checked at:** {report.checked_at.isoformat()}",
            f"- **Result:** {'PASSED' if report.passed else 'FAILED'}",
            "",
        ]
        if report.violations:
            lines.extend([
                "## Violations",
                "",
                "| # | Law | Samples | Detail |",
                "|---|-----|---------|--------|",
            ])
            for i, v in enumerate(report.violations, 1):
                detail = v.message.replace("|", "\\|")
                indices = ", ".join(str(idx) for idx in v.indices)
                lines.append(f"| {i} | {v.kind.value} | {indices} | {detail} |")
            lines.append("")
        return "\n".join(lines)

    @staticmethod
    def _format_scenarios(results: list[ScenarioResult], timestamp: datetime) -> str:
        lines = [
            f"## Scenarios run at {timestamp.isoformat()}",
            "",
            "| Scenario | Strategy | Expected | Observed | Result |",
            "|----------|----------|----------|----------|--------|",
        ]
        for r in results:
            lines.append(
                f"| {r.name} | {r.strategy} | {r.expected!r} | {r.observed!r} | "
                f"{'PASSED' if r.matched else 'FAILED'} |"
            )
        lines.append("")
        lines.append("")
        return "\n".join(lines)
