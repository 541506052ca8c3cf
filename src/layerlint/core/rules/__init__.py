from __future__ import annotations

from typing import Callable, Dict, Iterator, Tuple

from layerlint.domain.layer_models import Finding, LayerNode
from layerlint.domain.lint_settings import LintSettings

from . import duplicate_sibling, excessive_depth, generic_name, non_semantic_grouping

RuleCheck = Callable[[LayerNode, Tuple[str, ...], LintSettings], Iterator[Finding]]

# Insertion order follows RULE_IDS and is the per-node evaluation order
RULES: Dict[str, RuleCheck] = {
    module.RULE_ID: module.check
    for module in (generic_name, duplicate_sibling, excessive_depth, non_semantic_grouping)
}

__all__ = ["RULES", "RuleCheck"]
