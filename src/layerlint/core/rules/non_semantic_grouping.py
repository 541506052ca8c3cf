from __future__ import annotations

"""
Non-Semantic Grouping Rule.

Heuristic for containers that exist only to move layers around together.
A frame or group holding three or more direct children of at least two
different kinds is expected to be a structural section; its name must
match the allow-list either as a whole ('Main Content') or through one of
its words ('Site Header', 'mainNav').
"""

from typing import Iterator, List, Tuple

from layerlint.core.rules.patterns import name_words
from layerlint.domain.constants import MIN_GROUPING_CHILDREN, RULE_NON_SEMANTIC_GROUPING
from layerlint.domain.layer_models import Finding, LayerKind, LayerNode
from layerlint.domain.lint_settings import LintSettings

RULE_ID = RULE_NON_SEMANTIC_GROUPING


def check(node: LayerNode, ancestors: Tuple[str, ...], settings: LintSettings) -> Iterator[Finding]:
    if not node.is_container:
        return

    kinds: List[LayerKind] = [
        child.kind for child in node.children
        if isinstance(child, LayerNode) and not child.is_malformed and child.kind is not None
    ]
    distinct = set(kinds)
    if len(kinds) < MIN_GROUPING_CHILDREN or len(distinct) < 2:
        return

    name = node.name or ""
    if is_semantic_name(name, settings):
        return

    yield Finding(
        rule_id=RULE_ID,
        path=ancestors + (name,),
        message=(
            f"'{name}' groups {len(kinds)} layers of {len(distinct)} different kinds "
            f"but is not named as a structural section; rename it (e.g. Header, Main, Footer) "
            f"or remove the grouping."
        ),
    )


def is_semantic_name(name: str, settings: LintSettings) -> bool:
    words = name_words(name)
    if not words:
        return False
    if " ".join(words) in settings.semantic_section_names:
        return True
    return any(w in settings.semantic_section_names for w in words)
