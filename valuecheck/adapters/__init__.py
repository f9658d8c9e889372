"""Adapters for the valuecheck library.

This package holds everything that talks to the outside world and
provides implementations of the core port interfaces.

Adapter Organization:

- reporting/: ReportPort implementations (stdout, markdown files)
- cli/: Command handlers behind the valuecheck console script
"""
