from __future__ import annotations

"""
Layer Tree Data Models.

Provides the recursive node type mirroring a design document's layer
hierarchy, together with the finding and report objects produced by
the linter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from layerlint.domain.constants import SEVERITY_WARNING

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class LayerKind(str, Enum):
    """Normalized layer categories understood by the rules."""
    FRAME = "frame"
    GROUP = "group"
    RECTANGLE = "rectangle"
    COMPONENT_INSTANCE = "component-instance"
    TEXT = "text"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> LayerKind:
        """Resolve a kind name, falling back to UNKNOWN for unrecognised tags."""
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return cls.UNKNOWN


CONTAINER_KINDS = frozenset({LayerKind.FRAME, LayerKind.GROUP})


@dataclass(frozen=True)
class LayerNode:
    """
    Represents one entry of the layer tree.

    A node whose snapshot record could not be interpreted keeps a
    description of the defect in ``problem`` and has no children.

    Attributes:
        name: Layer label as shown in the design tool.
        kind: Normalized layer category.
        children: Ordered child layers, owned by this node.
        node_id: Identifier from the snapshot, kept for diagnostics.
        problem: Reason the source record was rejected, if any.
    """
    name: Optional[str]
    kind: Optional[LayerKind]
    children: Tuple[LayerNode, ...] = ()
    node_id: Optional[str] = None
    problem: Optional[str] = None

    @property
    def is_malformed(self) -> bool:
        return self.problem is not None or not self.name or self.kind is None

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS


def malformed_label(index: int) -> str:
    """Path segment used for a node that has no usable name."""
    return f"<malformed #{index}>"

# -----------------------------------------------------------------------------
# ANALYSIS RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Finding:
    """
    One reported rule violation.

    Attributes:
        rule_id: Identifier of the rule that produced the finding.
        path: Node names from the root down to the offending node.
        message: Human-readable explanation.
        severity: Always 'warning'.
        location: Child indices from the root down to the offending node.
                  Rules give it relative to the node they inspect and the
                  linter makes it absolute; None for findings built elsewhere.
    """
    rule_id: str
    path: Tuple[str, ...]
    message: str
    severity: str = SEVERITY_WARNING
    location: Optional[Tuple[int, ...]] = None

    def to_record(self) -> Dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "severity": self.severity,
            "path": list(self.path),
            "message": self.message,
        }


@dataclass(frozen=True)
class LintReport:
    """
    Complete, ordered result of a lint run.

    Attributes:
        findings: All findings in traversal order.
        nodes_visited: Number of nodes the traversal reached.
        summary: Finding counts keyed by rule id.
    """
    findings: Tuple[Finding, ...] = ()
    nodes_visited: int = 0
    summary: Dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.findings

    @property
    def total(self) -> int:
        return len(self.findings)
