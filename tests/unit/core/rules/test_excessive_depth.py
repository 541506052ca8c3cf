from __future__ import annotations

"""
Unit tests for the excessive-depth rule.
"""

from typing import Callable

from layerlint.core.linter.engine import default_settings
from layerlint.core.rules import excessive_depth
from layerlint.domain.layer_models import LayerNode
from layerlint.domain.lint_settings import LintSettings


def test_depth_at_limit_is_allowed(make_layer: Callable[..., LayerNode]) -> None:
    """TC-01: Verify a node exactly at max_depth is not reported."""
    ancestors = tuple(f"L{i}" for i in range(6))
    assert list(excessive_depth.check(make_layer("Leaf", "text"), ancestors, default_settings())) == []


def test_depth_beyond_limit_is_flagged(make_layer: Callable[..., LayerNode]) -> None:
    """TC-02: Verify a node one level beyond max_depth is reported with its path."""
    ancestors = tuple(f"L{i}" for i in range(7))
    findings = list(excessive_depth.check(make_layer("Leaf", "text"), ancestors, default_settings()))

    assert len(findings) == 1
    assert findings[0].path == ancestors + ("Leaf",)
    assert "7 levels" in findings[0].message
    assert "limit 6" in findings[0].message


def test_custom_limit(make_layer: Callable[..., LayerNode]) -> None:
    """TC-03: Verify the configured limit is honoured."""
    settings = LintSettings(max_depth=1)
    assert list(excessive_depth.check(make_layer("A"), ("Root",), settings)) == []
    assert len(list(excessive_depth.check(make_layer("B"), ("Root", "A"), settings))) == 1
