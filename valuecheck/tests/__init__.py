"""Test suite for the valuecheck library.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Validates report formatting and file output

3. fakes/: Port implementations for testing
   - In-memory ReportPort that captures what it was given
"""
