from __future__ import annotations

"""
Unit tests for the Layer Tree Linter.

Covers the behavioural guarantees of a lint run: empty output on clean
trees, reproducible ordering, rule selection, depth accounting, cycle
handling and malformed-node recovery.
"""

from typing import Any, Callable, Dict

import pytest

from layerlint.core.linter.engine import (
    default_settings,
    iter_findings,
    lint_document,
    run_lint,
    verify_acyclic,
)
from layerlint.core.linter.settings import build_settings
from layerlint.core.linter.validator import validate_config
from layerlint.core.report.render import to_json_lines
from layerlint.core.snapshot.parser import parse_layer_tree
from layerlint.domain.errors import CycleDetected, InvalidConfiguration
from layerlint.domain.layer_models import LayerNode


def _chain(depth: int) -> Dict[str, Any]:
    """Single-child chain whose deepest node sits at the given depth."""
    node: Dict[str, Any] = {"name": f"Level {depth}", "kind": "frame"}
    for d in range(depth - 1, -1, -1):
        node = {"name": f"Level {d}", "kind": "frame", "children": [node]}
    return node

# -----------------------------------------------------------------------------
# CLEAN INPUT AND DETERMINISM
# -----------------------------------------------------------------------------

def test_clean_tree_produces_no_findings(clean_document: Dict[str, Any]) -> None:
    """TC-01: Verify a tree obeying every rule yields an empty sequence."""
    report = lint_document(clean_document)

    assert report.ok
    assert report.findings == ()
    assert report.nodes_visited == 9
    assert list(iter_findings(parse_layer_tree(clean_document))) == []


def test_repeated_runs_are_identical(noisy_document: Dict[str, Any]) -> None:
    """TC-02: Verify two runs over the same input serialize byte for byte alike."""
    first = to_json_lines(lint_document(noisy_document).findings)
    second = to_json_lines(lint_document(noisy_document).findings)

    assert first
    assert first == second


def test_findings_follow_preorder_and_rule_order(noisy_document: Dict[str, Any]) -> None:
    """TC-03: Verify traversal order and per-node rule order."""
    report = lint_document(noisy_document)

    assert [f.rule_id for f in report.findings] == [
        "generic-name",
        "duplicate-sibling",
        "non-semantic-grouping",
        "excessive-depth",
    ]
    assert report.summary == {
        "generic-name": 1,
        "duplicate-sibling": 1,
        "excessive-depth": 1,
        "non-semantic-grouping": 1,
    }

# -----------------------------------------------------------------------------
# RULE BEHAVIOUR THROUGH THE ENGINE
# -----------------------------------------------------------------------------

def test_frame_28_yields_one_generic_name_finding() -> None:
    """TC-04: Verify a single placeholder name produces one finding ending in its name."""
    report = lint_document({
        "name": "Main",
        "kind": "frame",
        "children": [{"name": "Frame 28", "kind": "frame"}],
    })

    generic = [f for f in report.findings if f.rule_id == "generic-name"]
    assert len(generic) == 1
    assert generic[0].path[-1] == "Frame 28"


def test_logo_line_copies_yield_two_duplicate_findings() -> None:
    """TC-05: Verify the first sibling is canonical and both copies are flagged."""
    report = lint_document({
        "name": "Header",
        "kind": "frame",
        "children": [
            {"name": "Logo Line", "kind": "component-instance"},
            {"name": "Logo Line (copy)", "kind": "component-instance"},
            {"name": "Logo Line (copy 2)", "kind": "component-instance"},
        ],
    })

    duplicates = [f for f in report.findings if f.rule_id == "duplicate-sibling"]
    assert [f.path[-1] for f in duplicates] == ["Logo Line (copy)", "Logo Line (copy 2)"]


def test_depth_eight_path_flags_levels_seven_and_eight() -> None:
    """TC-06: Verify excessive-depth fires only below the default limit of 6."""
    report = lint_document(_chain(8))

    flagged = [f.path[-1] for f in report.findings if f.rule_id == "excessive-depth"]
    assert flagged == ["Level 7", "Level 8"]
    assert [f.path for f in report.findings if f.rule_id == "excessive-depth"][0] == tuple(
        f"Level {d}" for d in range(8)
    )


def test_enabled_rules_suppress_other_rules(noisy_document: Dict[str, Any]) -> None:
    """TC-07: Verify that only the selected rule reports findings."""
    report = lint_document(noisy_document, {"enabledRules": {"generic-name"}})

    assert report.findings
    assert {f.rule_id for f in report.findings} == {"generic-name"}
    assert report.summary == {"generic-name": 1}


def test_empty_rule_selection_runs_nothing(noisy_document: Dict[str, Any]) -> None:
    """TC-08: Verify an explicit empty selection disables every rule."""
    report = lint_document(noisy_document, {"enabled_rules": []})
    assert report.ok
    assert report.nodes_visited > 0

# -----------------------------------------------------------------------------
# FAILURE SEMANTICS
# -----------------------------------------------------------------------------

def test_unknown_rule_is_rejected_before_traversal() -> None:
    """TC-09: Verify an unknown rule id aborts even when the input is cyclic."""
    cyclic: Dict[str, Any] = {"name": "Main", "kind": "frame", "children": []}
    cyclic["children"].append(cyclic)

    with pytest.raises(InvalidConfiguration) as exc:
        lint_document(cyclic, {"enabled_rules": ["generic-name", "no-such-rule"]})
    assert exc.value.values == ("no-such-rule",)


def test_cyclic_snapshot_raises_cycle_detected() -> None:
    """TC-10: Verify a self-containing snapshot fails without a report."""
    card: Dict[str, Any] = {"name": "Card", "kind": "frame", "children": []}
    root = {"name": "Frame 1", "kind": "frame", "children": [card]}
    card["children"].append(root)

    with pytest.raises(CycleDetected) as exc:
        lint_document(root)
    assert exc.value.path == ("Frame 1", "Card", "Frame 1")


def test_cyclic_tree_yields_nothing_before_failing(make_layer: Callable[..., LayerNode]) -> None:
    """TC-11: Verify the lazy sequence raises on first use without partial output."""
    child = make_layer("Frame 2", "frame")
    root = make_layer("Frame 1", "frame", child)
    object.__setattr__(child, "children", (root,))

    produced = []
    findings = iter_findings(root)
    with pytest.raises(CycleDetected):
        for f in findings:
            produced.append(f)
    assert produced == []

    with pytest.raises(CycleDetected):
        run_lint(root)
    with pytest.raises(CycleDetected):
        verify_acyclic(root)


def test_shared_subtree_is_not_a_cycle(make_layer: Callable[..., LayerNode]) -> None:
    """TC-12: Verify the same node object reused in two branches is accepted."""
    shared = make_layer("Icon", "rectangle")
    root = make_layer("Main", "frame", make_layer("Left", "frame", shared), make_layer("Right", "frame", shared))

    verify_acyclic(root)
    assert run_lint(root).ok


def test_malformed_node_is_reported_and_subtree_skipped() -> None:
    """TC-13: Verify malformed nodes become findings while siblings are analysed."""
    report = lint_document({
        "name": "Main",
        "kind": "frame",
        "children": [
            {"kind": "frame", "children": [{"name": "Frame 1", "kind": "frame"}]},
            {"name": "Rectangle 9", "kind": "rectangle"},
        ],
    })

    assert [(f.rule_id, f.path) for f in report.findings] == [
        ("malformed", ("Main", "<malformed #0>")),
        ("generic-name", ("Main", "Rectangle 9")),
    ]
    assert "missing layer name" in report.findings[0].message
    assert report.summary["malformed"] == 1


def test_malformed_root() -> None:
    """TC-14: Verify an unusable root yields a single malformed finding."""
    report = run_lint(parse_layer_tree(["not", "a", "record"]))

    assert len(report.findings) == 1
    assert report.findings[0].rule_id == "malformed"
    assert report.findings[0].path == ("<malformed #0>",)


def test_malformed_findings_ignore_rule_selection() -> None:
    """TC-15: Verify malformed findings are emitted regardless of enabled_rules."""
    report = lint_document({"name": "Main", "kind": "frame", "children": [42]}, {"enabled_rules": []})

    assert [f.rule_id for f in report.findings] == ["malformed"]
    assert "got int" in report.findings[0].message


def test_run_lint_accepts_explicit_settings(make_layer: Callable[..., LayerNode]) -> None:
    """TC-16: Verify settings compiled from a custom config are honoured."""
    cfg, _ = validate_config({"max_depth": 1})
    root = make_layer("Main", "frame", make_layer("Card", "frame", make_layer("Label", "text")))

    report = run_lint(root, build_settings(cfg))
    assert [f.path for f in report.findings] == [("Main", "Card", "Label")]
    assert run_lint(root, default_settings()).ok


@pytest.mark.parametrize("rules", [[123], [""], ["  "]])
def test_unusable_rule_entries_abort_the_run(rules: list) -> None:
    """TC-17: Verify blank or non-string rule ids fail before traversal."""
    with pytest.raises(InvalidConfiguration):
        lint_document({"name": "Frame 1", "kind": "frame"}, {"enabledRules": rules})


def test_placeholder_names_with_trailing_text_are_flagged() -> None:
    """TC-18: Verify 'Frame 28 copy' and 'Group 5 Hero' are still auto-generated names."""
    report = lint_document(
        {
            "name": "Page",
            "kind": "unknown",
            "children": [
                {"name": "Frame 28 copy", "kind": "frame"},
                {"name": "Group 5 Hero", "kind": "group"},
            ],
        },
        {"enabledRules": ["generic-name"]},
    )
    assert [f.path[-1] for f in report.findings] == ["Frame 28 copy", "Group 5 Hero"]
