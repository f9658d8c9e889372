"""Tests for report adapters.

Validates output formatting for stdout and markdown report adapters.
"""
