from __future__ import annotations

"""
Generic Name Rule.

Flags layers that still carry the label the design tool assigned on
creation ('Frame 28', 'Rectangle 4'). Such names say nothing about the
layer's role and cannot become meaningful identifiers in generated code.
"""

from typing import Iterator, Tuple

from layerlint.core.rules.patterns import matches_any
from layerlint.domain.constants import RULE_GENERIC_NAME
from layerlint.domain.layer_models import Finding, LayerNode
from layerlint.domain.lint_settings import LintSettings

RULE_ID = RULE_GENERIC_NAME


def check(node: LayerNode, ancestors: Tuple[str, ...], settings: LintSettings) -> Iterator[Finding]:
    name = node.name or ""
    if not matches_any(name, settings.generic_name_patterns):
        return
    yield Finding(
        rule_id=RULE_ID,
        path=ancestors + (name,),
        message=(
            f"'{name}' is an auto-generated layer name; "
            f"rename it after what it represents (e.g. 'Hero Image', 'Submit Button')."
        ),
    )
