from __future__ import annotations

"""
Unit tests for the non-semantic-grouping rule.
"""

from typing import Callable

import pytest

from layerlint.core.linter.engine import default_settings
from layerlint.core.linter.settings import build_settings
from layerlint.core.linter.validator import validate_config
from layerlint.core.rules import non_semantic_grouping
from layerlint.domain.layer_models import LayerNode


@pytest.fixture
def mixed_children(make_layer: Callable[..., LayerNode]) -> tuple:
    return (
        make_layer("Logo", "component-instance"),
        make_layer("Title", "text"),
        make_layer("Backdrop", "rectangle"),
    )


def test_flags_unnamed_heterogeneous_container(make_layer: Callable[..., LayerNode], mixed_children: tuple) -> None:
    """TC-01: Verify a mixed container with a non-section name is reported."""
    node = make_layer("Wrapper", "group", *mixed_children)
    findings = list(non_semantic_grouping.check(node, ("Main",), default_settings()))

    assert len(findings) == 1
    assert findings[0].path == ("Main", "Wrapper")
    assert "3 layers of 3 different kinds" in findings[0].message


@pytest.mark.parametrize("name", ["Header", "site header", "mainNav", "Hero Section", "FOOTER"])
def test_section_names_are_accepted(
        make_layer: Callable[..., LayerNode], mixed_children: tuple, name: str
) -> None:
    """TC-02: Verify allow-listed names match as a whole or through one word."""
    node = make_layer(name, "frame", *mixed_children)
    assert list(non_semantic_grouping.check(node, (), default_settings())) == []


def test_homogeneous_or_small_containers_are_ignored(make_layer: Callable[..., LayerNode]) -> None:
    """TC-03: Verify the child-count and kind-variety thresholds."""
    same_kind = make_layer(
        "List", "frame",
        make_layer("A", "text"), make_layer("B", "text"), make_layer("C", "text"),
    )
    two_children = make_layer("Pair", "frame", make_layer("A", "text"), make_layer("B", "rectangle"))

    assert list(non_semantic_grouping.check(same_kind, (), default_settings())) == []
    assert list(non_semantic_grouping.check(two_children, (), default_settings())) == []


def test_non_container_kinds_are_ignored(make_layer: Callable[..., LayerNode], mixed_children: tuple) -> None:
    """TC-04: Verify only frames and groups are evaluated."""
    node = make_layer("Widget", "component-instance", *mixed_children)
    assert list(non_semantic_grouping.check(node, (), default_settings())) == []


def test_malformed_children_do_not_count(make_layer: Callable[..., LayerNode]) -> None:
    """TC-05: Verify malformed children are excluded from the threshold."""
    node = make_layer(
        "Wrapper", "group",
        make_layer("Logo", "component-instance"),
        make_layer("Title", "text"),
        make_layer(None, "rectangle"),
    )
    assert list(non_semantic_grouping.check(node, (), default_settings())) == []


def test_configured_allow_list(make_layer: Callable[..., LayerNode], mixed_children: tuple) -> None:
    """TC-06: Verify a custom allow-list replaces the default one."""
    cfg, _ = validate_config({"semantic_section_names": ["Product Card"]})
    settings = build_settings(cfg)

    assert list(non_semantic_grouping.check(make_layer("productCard", "frame", *mixed_children), (), settings)) == []
    assert len(list(non_semantic_grouping.check(make_layer("Header", "frame", *mixed_children), (), settings))) == 1
