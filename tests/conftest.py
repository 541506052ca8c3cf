from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory so no test touches the real
   persisted configuration.
3. Shared layer-tree builders and sample snapshot records.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from layerlint.domain.layer_models import LayerKind, LayerNode  # noqa: E402


# -----------------------------------------------------------------------------
# Environment Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the per-user data directory into the test's temp folder."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData"))
    return home


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_layer() -> Callable[..., LayerNode]:
    """
    Return a compact LayerNode builder.

    Usage: make_layer("Header", "frame", make_layer("Title", "text")).
    """
    def _make(name: Optional[str], kind: Optional[str] = "frame", *children: LayerNode) -> LayerNode:
        return LayerNode(
            name=name,
            kind=LayerKind(kind) if kind is not None else None,
            children=tuple(children),
        )
    return _make


@pytest.fixture
def clean_document() -> Dict[str, Any]:
    """
    Return a snapshot record that violates no rule under defaults.

    The root and every heterogeneous container carry allow-listed names.
    """
    return {
        "name": "Main",
        "kind": "frame",
        "children": [
            {
                "name": "Site Header",
                "kind": "frame",
                "children": [
                    {"name": "Logo", "kind": "component-instance"},
                    {"name": "Tagline", "kind": "text"},
                    {"name": "Divider", "kind": "rectangle"},
                ],
            },
            {
                "name": "Hero Section",
                "kind": "frame",
                "children": [
                    {"name": "Headline", "kind": "text"},
                    {"name": "Hero Image", "kind": "rectangle"},
                ],
            },
            {"name": "Footer", "kind": "group", "children": []},
        ],
    }


@pytest.fixture
def noisy_document() -> Dict[str, Any]:
    """Return a snapshot record that triggers every rule at least once."""
    def _chain(depth: int) -> Dict[str, Any]:
        node: Dict[str, Any] = {"name": f"Level {depth}", "kind": "frame"}
        if depth < 8:
            node["children"] = [_chain(depth + 1)]
        return node

    return {
        "name": "Main",
        "kind": "frame",
        "children": [
            {"name": "Frame 28", "kind": "frame"},
            {
                "name": "Wrapper",
                "kind": "group",
                "children": [
                    {"name": "Logo Line", "kind": "component-instance"},
                    {"name": "Logo Line (copy)", "kind": "component-instance"},
                    {"name": "Caption", "kind": "text"},
                ],
            },
            _chain(2),
        ],
    }
