from __future__ import annotations

"""
Excessive Depth Rule.

Flags every layer nested deeper than the configured limit. The root has
depth 0, so with the default limit of 6 the first flagged layer is the
seventh level below the root.
"""

from typing import Iterator, Tuple

from layerlint.domain.constants import RULE_EXCESSIVE_DEPTH
from layerlint.domain.layer_models import Finding, LayerNode
from layerlint.domain.lint_settings import LintSettings

RULE_ID = RULE_EXCESSIVE_DEPTH


def check(node: LayerNode, ancestors: Tuple[str, ...], settings: LintSettings) -> Iterator[Finding]:
    depth = len(ancestors)
    if depth <= settings.max_depth:
        return
    yield Finding(
        rule_id=RULE_ID,
        path=ancestors + (node.name or "",),
        message=(
            f"'{node.name}' is nested {depth} levels deep (limit {settings.max_depth}); "
            f"flatten wrappers that add no layout of their own."
        ),
    )
