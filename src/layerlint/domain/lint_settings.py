from __future__ import annotations

"""
Compiled Lint Settings.

Immutable, ready-to-use form of a validated configuration dictionary.
Rules receive this object instead of the raw dictionary so that pattern
compilation and name normalization happen once per run.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from layerlint.domain.constants import DEFAULT_MAX_DEPTH, RULE_IDS


@dataclass(frozen=True)
class LintSettings:
    """
    Attributes:
        generic_name_patterns: Compiled placeholder patterns (built-ins first).
        max_depth: Deepest allowed node depth; the root has depth 0.
        semantic_section_names: Lower-cased allow-list of container names.
        enabled_rules: Active rule ids, in registry order.
    """
    generic_name_patterns: Tuple[re.Pattern, ...] = ()
    max_depth: int = DEFAULT_MAX_DEPTH
    semantic_section_names: FrozenSet[str] = frozenset()
    enabled_rules: Tuple[str, ...] = RULE_IDS
