from __future__ import annotations

"""
Layer Tree Renderer.

Converts a LayerNode tree into an ASCII outline and annotates each layer
with the rule ids flagged on it, so a report can be read against the
document structure. Findings produced by the linter are placed by their
child-index location, so same-named siblings keep separate annotations.
"""

from typing import Dict, Iterable, List, Tuple

from layerlint.domain.layer_models import Finding, LayerNode, malformed_label

_Marks = Dict[Tuple, List[str]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_layer_tree(root: LayerNode, findings: Iterable[Finding] = ()) -> List[str]:
    """
    Render the layer tree, one line per layer.

    Uses standard ASCII connectors (├──, └──). Layers with findings get
    their rule ids appended in brackets. Findings without a location
    (built outside the linter) fall back to matching by name path.

    Args:
        root: Root of the layer tree (must be acyclic).
        findings: Findings to annotate the outline with.

    Returns:
        List[str]: Visual lines of the rendered tree.
    """
    by_location: _Marks = {}
    by_path: _Marks = {}
    for f in findings:
        if f.location is not None:
            _add_mark(by_location, f.location, f.rule_id)
        else:
            _add_mark(by_path, f.path, f.rule_id)

    root_label = _label(root, 0)
    lines = [_decorate(root_label, root, _rule_ids((), (root_label,), by_location, by_path))]
    _render_children(root, (), (root_label,), lines, "", by_location, by_path)
    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_children(
        node: LayerNode,
        location: Tuple[int, ...],
        path: Tuple[str, ...],
        lines: List[str],
        prefix: str,
        by_location: _Marks,
        by_path: _Marks,
) -> None:
    """Recursively append the children of ``node`` below the given prefix."""
    children = node.children if isinstance(node, LayerNode) else ()
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        label = _label(child, i)
        child_location = location + (i,)
        child_path = path + (label,)
        rule_ids = _rule_ids(child_location, child_path, by_location, by_path)
        lines.append(f"{prefix}{connector}{_decorate(label, child, rule_ids)}")

        # Malformed subtrees were not analysed, so they are not expanded
        if isinstance(child, LayerNode) and not child.is_malformed:
            new_prefix = prefix + ("    " if is_last else "│   ")
            _render_children(child, child_location, child_path, lines, new_prefix, by_location, by_path)


def _add_mark(marks: _Marks, key: Tuple, rule_id: str) -> None:
    rule_ids = marks.setdefault(key, [])
    if rule_id not in rule_ids:
        rule_ids.append(rule_id)


def _rule_ids(
        location: Tuple[int, ...],
        path: Tuple[str, ...],
        by_location: _Marks,
        by_path: _Marks,
) -> List[str]:
    rule_ids = list(by_location.get(location, []))
    for rule_id in by_path.get(path, []):
        if rule_id not in rule_ids:
            rule_ids.append(rule_id)
    return rule_ids


def _label(node: object, index: int) -> str:
    if isinstance(node, LayerNode) and node.name:
        return node.name
    return malformed_label(index)


def _decorate(label: str, node: object, rule_ids: List[str]) -> str:
    kind = node.kind.value if isinstance(node, LayerNode) and node.kind is not None else "?"
    text = f"{label} ({kind})"
    if rule_ids:
        text += f"  [{', '.join(rule_ids)}]"
    return text
