"""valuecheck: equality/hash contract checking, strategy-driven containers
and defensive copies."""

__version__ = "0.1.0"
