from __future__ import annotations

"""
Settings Compilation.

Turns a validated configuration dictionary into the immutable
LintSettings consumed by the rules.
"""

from typing import Any, Dict

from layerlint.core.rules.patterns import compile_patterns, name_words
from layerlint.domain.constants import DEFAULT_GENERIC_NAME_PATTERNS
from layerlint.domain.lint_settings import LintSettings


def build_settings(config: Dict[str, Any]) -> LintSettings:
    """
    Compile a configuration produced by validate_config.

    Built-in placeholder patterns are always active; configured patterns
    extend them. Section names are normalized the same way layer names
    are when compared.

    Args:
        config: Validated configuration dictionary.

    Returns:
        LintSettings: Compiled settings.
    """
    patterns, _ = compile_patterns(
        list(DEFAULT_GENERIC_NAME_PATTERNS) + list(config["generic_name_patterns"])
    )
    section_names = frozenset(
        " ".join(name_words(n)) for n in config["semantic_section_names"] if name_words(n)
    )
    return LintSettings(
        generic_name_patterns=tuple(patterns),
        max_depth=int(config["max_depth"]),
        semantic_section_names=section_names,
        enabled_rules=tuple(config["enabled_rules"]),
    )
