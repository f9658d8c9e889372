"""Command-line interface adapters.

Provides the commands behind the valuecheck console script:
- check: Run the contract checker over the built-in specimen suites
- scenarios: Run the documented teaching scenarios
- lookup: Insert values into a hash container and probe for one
"""
