from __future__ import annotations

"""
Snapshot to Layer Tree Conversion.

Transforms a decoded snapshot record into the immutable LayerNode model.
Accepts both the plain nested format ({name, kind, children}) and the
node layout of a Figma REST export ({document: {name, type, children}}).

Key transformations:
- Figma upper-case type tags are folded into the six layer kinds
- Records that cannot be interpreted become malformed nodes instead of
  aborting the conversion; their subtrees are not parsed
- Hidden layers are optionally dropped
- A record reachable from itself aborts with CycleDetected
"""

import logging
from typing import Any, Dict, List, Optional, Set

from layerlint.domain.constants import FIGMA_TYPE_TO_KIND
from layerlint.domain.errors import CycleDetected
from layerlint.domain.layer_models import LayerKind, LayerNode, malformed_label

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_layer_tree(raw: Any, *, include_hidden: bool = True) -> LayerNode:
    """
    Build a LayerNode tree from a decoded snapshot.

    Args:
        raw: Decoded snapshot (usually the output of read_snapshot).
        include_hidden: Keep layers flagged with ``visible: false``.

    Returns:
        LayerNode: Root of the converted tree. If the root record itself is
                   unusable, a malformed root node is returned.

    Raises:
        CycleDetected: If a record appears as its own descendant.
    """
    record = unwrap_document(raw)
    root = _parse_record(record, 0, set(), [], include_hidden)
    if root is None:
        # A hidden root leaves nothing to analyse but is not a defect
        return LayerNode(name=_record_name(record) or "Document", kind=LayerKind.UNKNOWN)
    return root


def unwrap_document(raw: Any) -> Any:
    """
    Strip the export envelopes used by design-tool APIs.

    Handles ``{"document": {...}}`` (file export) and
    ``{"nodes": {"<id>": {"document": {...}}}}`` (node export, first
    entry wins).
    """
    if not isinstance(raw, dict) or _looks_like_node(raw):
        return raw

    document = raw.get("document")
    if isinstance(document, dict):
        return document

    nodes = raw.get("nodes")
    if isinstance(nodes, dict) and nodes:
        first = next(iter(nodes.values()))
        if isinstance(first, dict) and isinstance(first.get("document"), dict):
            return first["document"]

    return raw

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _parse_record(
        record: Any,
        index: int,
        ancestor_ids: Set[int],
        path: List[str],
        include_hidden: bool,
) -> Optional[LayerNode]:
    """Recursively convert one record; returns None for dropped hidden layers."""
    if not isinstance(record, dict):
        return _malformed(None, None, f"expected a record, got {type(record).__name__}", index, path)

    name = _record_name(record)
    label = name or malformed_label(index)

    if id(record) in ancestor_ids:
        logger.error(f"Cycle in snapshot at {' > '.join(path + [label])}")
        raise CycleDetected(path + [label])

    if not include_hidden and record.get("visible") is False:
        logger.debug(f"Skipping hidden layer {' > '.join(path + [label])}")
        return None

    node_id = record.get("id") if isinstance(record.get("id"), str) else None

    if not name:
        return _malformed(None, node_id, "missing layer name", index, path)

    tag = record.get("kind", record.get("type"))
    if not isinstance(tag, str) or not tag.strip():
        return _malformed(name, node_id, "missing type tag", index, path)

    raw_children = record.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        return _malformed(name, node_id, "'children' must be a list", index, path)

    ancestor_ids.add(id(record))
    path.append(name)
    try:
        children: List[LayerNode] = []
        for child_index, child in enumerate(raw_children):
            parsed = _parse_record(child, child_index, ancestor_ids, path, include_hidden)
            if parsed is not None:
                children.append(parsed)
    finally:
        path.pop()
        ancestor_ids.discard(id(record))

    return LayerNode(
        name=name,
        kind=_resolve_kind(tag),
        children=tuple(children),
        node_id=node_id,
    )


def _resolve_kind(tag: str) -> LayerKind:
    """Map a snapshot type tag onto a LayerKind."""
    figma_kind = FIGMA_TYPE_TO_KIND.get(tag.strip().upper())
    if figma_kind is not None:
        return LayerKind(figma_kind)
    return LayerKind.from_tag(tag)


def _record_name(record: Any) -> Optional[str]:
    if not isinstance(record, dict):
        return None
    name = record.get("name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None


def _looks_like_node(record: Dict[str, Any]) -> bool:
    return "name" in record and ("kind" in record or "type" in record)


def _malformed(
        name: Optional[str],
        node_id: Optional[str],
        problem: str,
        index: int,
        path: List[str],
) -> LayerNode:
    logger.debug(f"Malformed layer at {' > '.join(path + [name or malformed_label(index)])}: {problem}")
    return LayerNode(name=name, kind=None, node_id=node_id, problem=problem)
