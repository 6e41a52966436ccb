"""Custom exception types used across :mod:`dijkstrax`."""

from __future__ import annotations


class DijkstraxError(Exception):
    """Base class for all package-specific errors."""


class InvalidArgument(DijkstraxError, ValueError):
    """Raised for malformed construction parameters such as a negative vertex count."""


class OutOfRange(InvalidArgument, IndexError):
    """Raised when a vertex id falls outside ``[0, n)``."""


class InvalidWeight(InvalidArgument):
    """Raised when an edge weight is negative or not a real number."""


class GraphFormatError(InvalidArgument):
    """Raised when parsing a graph file fails."""


class ConfigError(DijkstraxError, ValueError):
    """Raised for invalid configuration options."""


class InvariantViolation(DijkstraxError, AssertionError):
    """Raised when an internal consistency check fails.

    This always signals a defect (heap/position-index mismatch, a cycle in a
    predecessor table, misuse of ``decrease_key``), never bad user input.
    """


__all__ = [
    "DijkstraxError",
    "InvalidArgument",
    "OutOfRange",
    "InvalidWeight",
    "GraphFormatError",
    "ConfigError",
    "InvariantViolation",
]
