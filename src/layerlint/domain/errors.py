from __future__ import annotations

"""
Analysis Error Types.

Failures that abort a whole lint run. Per-node defects are never raised;
they are reported as 'malformed' findings instead.
"""

from typing import Iterable, Sequence, Tuple


class LayerLintError(Exception):
    """Base class for all errors raised by the analyzer."""


class CycleDetected(LayerLintError):
    """
    The input graph is not a tree: a node appears as its own descendant.

    Attributes:
        path: Names from the root down to the node that closes the cycle.
    """

    def __init__(self, path: Sequence[str]):
        self.path: Tuple[str, ...] = tuple(path)
        super().__init__(f"Cycle detected at: {' > '.join(self.path) or '<root>'}")


class InvalidConfiguration(LayerLintError, ValueError):
    """
    The configuration cannot be used for analysis.

    Attributes:
        values: The offending configuration values.
    """

    def __init__(self, message: str, values: Iterable[str] = ()):
        self.values: Tuple[str, ...] = tuple(values)
        super().__init__(message)


class SnapshotError(LayerLintError):
    """A snapshot file could not be read or decoded."""
