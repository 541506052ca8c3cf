from __future__ import annotations

"""
Unit tests for Settings Compilation.
"""

from layerlint.core.linter.settings import build_settings
from layerlint.core.linter.validator import validate_config
from layerlint.domain.constants import DEFAULT_GENERIC_NAME_PATTERNS


def test_build_settings_from_defaults() -> None:
    """TC-01: Verify built-in patterns and the normalized allow-list."""
    cfg, _ = validate_config({})
    settings = build_settings(cfg)

    assert len(settings.generic_name_patterns) == len(DEFAULT_GENERIC_NAME_PATTERNS)
    assert settings.max_depth == 6
    assert "header" in settings.semantic_section_names
    assert "Header" not in settings.semantic_section_names


def test_build_settings_with_overrides() -> None:
    """TC-02: Verify configured values flow into the compiled settings."""
    cfg, _ = validate_config({
        "generic_name_patterns": ["^tmp"],
        "semantic_section_names": ["Product Card", "  "],
        "enabled_rules": ["excessive-depth"],
        "max_depth": 3,
    })
    settings = build_settings(cfg)

    assert len(settings.generic_name_patterns) == len(DEFAULT_GENERIC_NAME_PATTERNS) + 1
    assert settings.semantic_section_names == frozenset({"product card"})
    assert settings.enabled_rules == ("excessive-depth",)
    assert settings.max_depth == 3
