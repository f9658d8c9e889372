"""Fake implementations of core ports for testing.

These in-memory implementations allow command handlers to be tested
without writing to the terminal or the filesystem:

- FakeReportPort: Captured reports and scenario batches for assertion
"""

from .reporting import FakeReportPort

__all__ = ["FakeReportPort"]
