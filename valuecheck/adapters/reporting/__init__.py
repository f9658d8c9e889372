"""Report adapters: publish contract reports and scenario outcomes."""

from .markdown import MarkdownReportAdapter
from .stdout import StdoutReportAdapter

__all__ = ["MarkdownReportAdapter", "StdoutReportAdapter"]
