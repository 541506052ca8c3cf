from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to rule identifiers, default thresholds,
built-in placeholder name patterns, the structural section allow-list
and the mapping between design-tool type tags and layer kinds.
"""

from typing import Dict, List, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"
SEVERITY_WARNING = "warning"

# -----------------------------------------------------------------------------
# RULE IDENTIFIERS
# -----------------------------------------------------------------------------
RULE_GENERIC_NAME = "generic-name"
RULE_DUPLICATE_SIBLING = "duplicate-sibling"
RULE_EXCESSIVE_DEPTH = "excessive-depth"
RULE_NON_SEMANTIC_GROUPING = "non-semantic-grouping"
RULE_MALFORMED = "malformed"

# Registry order doubles as the per-node evaluation order
RULE_IDS: Tuple[str, ...] = (
    RULE_GENERIC_NAME,
    RULE_DUPLICATE_SIBLING,
    RULE_EXCESSIVE_DEPTH,
    RULE_NON_SEMANTIC_GROUPING,
)

# -----------------------------------------------------------------------------
# RULE DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_MAX_DEPTH = 6
MIN_GROUPING_CHILDREN = 3

# Auto-assigned layer names: the tool's default label followed by a counter
DEFAULT_GENERIC_NAME_PATTERNS: List[str] = [
    r"^(frame|rectangle|group|artboard)\s*\d+\b",
    r"^(ellipse|vector|line|polygon|star|component)\s*\d+\b",
]

DEFAULT_SEMANTIC_SECTION_NAMES: List[str] = [
    "Header",
    "Main",
    "Footer",
    "Section",
    "Navigation",
    "Nav",
    "Sidebar",
    "Aside",
    "Article",
    "Hero",
    "Form",
]

# Trailing markers left behind by duplicate-and-rename workflows. A bare
# trailing word is only a marker in lower case ("Body copy", not "Body Copy")
COPY_SUFFIX_PATTERN = r"\s*(\(\s*(?i:copy)(\s+\d+)?\s*\)|\b(?i:copy)\s+\d+|\bcopy)\s*$"

# -----------------------------------------------------------------------------
# SNAPSHOT TYPE TAGS
# -----------------------------------------------------------------------------
FIGMA_TYPE_TO_KIND: Dict[str, str] = {
    "FRAME": "frame",
    "COMPONENT": "frame",
    "COMPONENT_SET": "frame",
    "SECTION": "frame",
    "GROUP": "group",
    "BOOLEAN_OPERATION": "group",
    "RECTANGLE": "rectangle",
    "INSTANCE": "component-instance",
    "TEXT": "text",
}

# Camel-case keys accepted in configuration files
CONFIG_KEY_ALIASES: Dict[str, str] = {
    "genericNamePatterns": "generic_name_patterns",
    "maxDepth": "max_depth",
    "semanticSectionNames": "semantic_section_names",
    "enabledRules": "enabled_rules",
    "includeHidden": "include_hidden",
}
