"""Unit tests for MarkdownReportAdapter."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from valuecheck.adapters.reporting.markdown import MarkdownReportAdapter
from valuecheck.core.models import ContractReport, ScenarioResult, Violation, ViolationKind


@pytest.fixture
def failing_report() -> ContractReport:
    """Create a failing report whose message contains a pipe."""
    return ContractReport(
        subject="PlainStudent via equals-only",
        strategy="equals-only",
        samples_checked=6,
        violations=(
            Violation(ViolationKind.HASH_CONSISTENCY, (0, 3), "hash | mismatch"),
        ),
        checked_at=datetime(2026, 1, 15, 10, 30, 45, 123456, tzinfo=UTC),
    )


def test_creates_base_directory(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "reports"
    MarkdownReportAdapter(str(target))
    assert target.is_dir()


def test_rejects_filesystem_root() -> None:
    with pytest.raises(ValueError, match="filesystem root"):
        MarkdownReportAdapter("/")


def test_report_written_to_dated_file(tmp_path: Path, failing_report: ContractReport) -> None:
    adapter = MarkdownReportAdapter(str(tmp_path))
    adapter.report(failing_report)

    report_file = tmp_path / "2026-01-15" / "10-30-45-123456_PlainStudent_via_equals-only.md"
    assert report_file.exists()
    content = report_file.read_text(encoding="utf-8")
    assert "# Contract report: PlainStudent via equals-only" in content
    assert "**Result:** FAILED" in content
    assert "| 1 | hash_consistency | 0, 3 | hash \\| mismatch |" in content


def test_passing_report_has_no_violation_table(tmp_path: Path, failing_report: ContractReport) -> None:
    passing = ContractReport(
        subject="Student via natural",
        strategy="natural",
        samples_checked=6,
        violations=(),
        checked_at=failing_report.checked_at,
    )
    adapter = MarkdownReportAdapter(str(tmp_path))
    adapter.report(passing)

    files = list((tmp_path / "2026-01-15").glob("*.md"))
    assert len(files) == 1
    content = files[0].read_text(encoding="utf-8")
    assert "**Result:** PASSED" in content
    assert "## Violations" not in content


def test_scenarios_are_appended(tmp_path: Path) -> None:
    adapter = MarkdownReportAdapter(str(tmp_path))
    results = [ScenarioResult("aden_lookup", "natural", True, True)]
    adapter.report_scenarios(results)
    adapter.report_scenarios(results)

    scenario_files = list(tmp_path.glob("*/scenarios.md"))
    assert len(scenario_files) == 1
    content = scenario_files[0].read_text(encoding="utf-8")
    assert content.count("## Scenarios run at") == 2
    assert "| aden_lookup | natural | True | True | PASSED |" in content


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Student via by-name", "Student_via_by-name"),
        ("a/b\\c", "a_b_c"),
        ("x" * 150, "x" * 100),
    ],
)
def test_sanitize_filename(text: str, expected: str) -> None:
    assert MarkdownReportAdapter._sanitize_filename(text) == expected
