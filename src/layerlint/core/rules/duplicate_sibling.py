from __future__ import annotations

"""
Duplicate Sibling Rule.

Evaluated on a parent node. Children whose names only differ by a
trailing copy marker ('Logo Line', 'Logo Line (copy)', 'Logo Line copy 2')
are duplicated layers that should be a single component with variants.
The first occurrence in document order is the canonical original; every
later one is reported, with the finding pointing at the duplicate itself.
"""

from typing import Dict, Iterator, Tuple

from layerlint.core.rules.patterns import strip_copy_suffix
from layerlint.domain.constants import RULE_DUPLICATE_SIBLING
from layerlint.domain.layer_models import Finding, LayerNode
from layerlint.domain.lint_settings import LintSettings

RULE_ID = RULE_DUPLICATE_SIBLING


def check(node: LayerNode, ancestors: Tuple[str, ...], settings: LintSettings) -> Iterator[Finding]:
    if len(node.children) < 2:
        return

    parent_path = ancestors + (node.name or "",)
    canonical: Dict[str, str] = {}

    for index, child in enumerate(node.children):
        # Malformed children are reported on their own
        if not isinstance(child, LayerNode) or child.is_malformed:
            continue

        base = strip_copy_suffix(child.name or "")
        original = canonical.get(base)
        if original is None:
            canonical[base] = child.name or ""
            continue

        yield Finding(
            rule_id=RULE_ID,
            path=parent_path + (child.name or "",),
            location=(index,),
            message=(
                f"'{child.name}' duplicates sibling '{original}'; "
                f"consolidate them into one component with variants."
            ),
        )
