from __future__ import annotations

"""
Layer Tree Linter.

Coordinates a lint run:
1. Validates configuration (unknown rule ids abort before traversal).
2. Verifies the tree is acyclic before the first finding is produced.
3. Walks the tree once, depth-first pre-order, applying the enabled
   rules per node in registry order.
4. Reports malformed nodes as findings and skips their subtrees.
"""

import logging
from collections import Counter
from dataclasses import replace
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from layerlint.core.linter.settings import build_settings
from layerlint.core.linter.validator import validate_config
from layerlint.core.rules import RULES
from layerlint.core.snapshot.parser import parse_layer_tree
from layerlint.domain.constants import RULE_MALFORMED
from layerlint.domain.errors import CycleDetected
from layerlint.domain.layer_models import Finding, LayerNode, LintReport, malformed_label
from layerlint.domain.lint_settings import LintSettings

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_findings(root: LayerNode, settings: Optional[LintSettings] = None) -> Iterator[Finding]:
    """
    Lazily produce the findings for a layer tree.

    The structural check runs when the first finding is requested, so a
    cyclic tree raises before anything has been yielded.

    Args:
        root: Root of the layer tree.
        settings: Compiled settings; defaults apply when omitted.

    Returns:
        Iterator[Finding]: Findings in depth-first pre-order.

    Raises:
        CycleDetected: If a node is its own descendant.
    """
    return _walk(root, settings or default_settings(), {})


def run_lint(root: LayerNode, settings: Optional[LintSettings] = None) -> LintReport:
    """
    Lint a layer tree and collect the complete report.

    Args:
        root: Root of the layer tree.
        settings: Compiled settings; defaults apply when omitted.

    Returns:
        LintReport: Ordered findings with per-rule counts.

    Raises:
        CycleDetected: If a node is its own descendant.
    """
    settings = settings or default_settings()
    stats: Dict[str, int] = {}

    logger.debug(f"Lint run started (rules: {', '.join(settings.enabled_rules) or 'none'}).")
    findings = tuple(_walk(root, settings, stats))

    counts = Counter(f.rule_id for f in findings)
    summary = {rule_id: counts.get(rule_id, 0) for rule_id in settings.enabled_rules}
    if counts.get(RULE_MALFORMED):
        summary[RULE_MALFORMED] = counts[RULE_MALFORMED]

    logger.info(f"Lint run finished: {len(findings)} finding(s) over {stats.get('nodes', 0)} layer(s).")
    return LintReport(findings=findings, nodes_visited=stats.get("nodes", 0), summary=summary)


def lint_document(
        raw: Any,
        config: Optional[Dict[str, Any]] = None,
        *,
        strict: bool = False,
) -> LintReport:
    """
    Validate configuration, convert a decoded snapshot and lint it.

    Args:
        raw: Decoded snapshot record.
        config: Raw configuration dictionary; defaults apply when omitted.
        strict: Forwarded to validate_config.

    Returns:
        LintReport: The complete report.

    Raises:
        InvalidConfiguration: On unknown rule ids, before the snapshot is read.
        CycleDetected: If the snapshot is not a tree.
    """
    cfg, warnings = validate_config(config if config is not None else {}, strict=strict)
    for w in warnings:
        logger.warning(f"Configuration Warning: {w}")

    root = parse_layer_tree(raw, include_hidden=cfg["include_hidden"])
    return run_lint(root, build_settings(cfg))


def default_settings() -> LintSettings:
    cfg, _ = validate_config({})
    return build_settings(cfg)


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk(root: LayerNode, settings: LintSettings, stats: Dict[str, int]) -> Iterator[Finding]:
    """Verify structure, then traverse the tree applying the enabled rules."""
    verify_acyclic(root)

    checks = [RULES[rule_id] for rule_id in settings.enabled_rules]
    stack: List[Tuple[Any, Tuple[int, ...], Tuple[str, ...]]] = [(root, (), ())]
    stats["nodes"] = 0

    while stack:
        node, location, ancestors = stack.pop()
        stats["nodes"] += 1

        if not isinstance(node, LayerNode) or node.is_malformed:
            yield _malformed_finding(node, location, ancestors)
            continue

        for check in checks:
            for finding in check(node, ancestors, settings):
                yield replace(finding, location=location + (finding.location or ()))

        child_ancestors = ancestors + (node.name,)
        for child_index in range(len(node.children) - 1, -1, -1):
            stack.append((node.children[child_index], location + (child_index,), child_ancestors))


def verify_acyclic(root: LayerNode) -> None:
    """
    Ensure no node is reachable from itself.

    Raises:
        CycleDetected: With the path at which the cycle closes.
    """
    on_path: Set[int] = set()
    names: List[str] = []
    stack: List[Tuple[Any, int, bool]] = [(root, 0, False)]

    while stack:
        node, index, leaving = stack.pop()
        if leaving:
            on_path.discard(id(node))
            names.pop()
            continue

        if not isinstance(node, LayerNode):
            continue

        label = node.name or malformed_label(index)
        if id(node) in on_path:
            logger.error(f"Cycle detected at {' > '.join(names + [label])}")
            raise CycleDetected(names + [label])

        on_path.add(id(node))
        names.append(label)
        stack.append((node, index, True))
        for child_index in range(len(node.children) - 1, -1, -1):
            stack.append((node.children[child_index], child_index, False))


def _malformed_finding(node: Any, location: Tuple[int, ...], ancestors: Tuple[str, ...]) -> Finding:
    index = location[-1] if location else 0
    if isinstance(node, LayerNode):
        label = node.name or malformed_label(index)
        if node.problem:
            problem = node.problem
        elif not node.name:
            problem = "missing layer name"
        else:
            problem = "missing type tag"
    else:
        label = malformed_label(index)
        problem = f"expected a layer node, got {type(node).__name__}"

    logger.warning(f"Skipping malformed layer {' > '.join(ancestors + (label,))}: {problem}")
    return Finding(
        rule_id=RULE_MALFORMED,
        path=ancestors + (label,),
        message=f"Layer could not be analysed ({problem}); its children were skipped.",
        location=location,
    )
