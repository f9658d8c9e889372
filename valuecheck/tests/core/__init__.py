"""Unit tests for core domain logic.

Tests strategies, the contract checker, containers and the
defensive-copy holder without any adapter involvement.
"""
