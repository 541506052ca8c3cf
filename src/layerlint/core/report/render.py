from __future__ import annotations

"""
Report Rendering.

Converts findings into the plain-text report shown on the terminal and
into JSON Lines records for downstream tooling. Both forms are fully
determined by the ordered findings, so identical runs diff cleanly.
"""

import json
from typing import Iterable, List

from layerlint.domain.layer_models import Finding, LintReport

PATH_SEPARATOR = " > "


def format_finding(finding: Finding) -> str:
    """Render one finding as 'WARNING [rule-id] A > B: message'."""
    return (
        f"{finding.severity.upper()} [{finding.rule_id}] "
        f"{PATH_SEPARATOR.join(finding.path)}: {finding.message}"
    )


def render_text_report(report: LintReport) -> List[str]:
    """
    Build the human-readable report lines.

    Args:
        report: Completed lint report.

    Returns:
        List[str]: One line per finding followed by a summary line.
    """
    if report.ok:
        return [f"No findings ({report.nodes_visited} layers checked)."]

    lines = [format_finding(f) for f in report.findings]
    counts = ", ".join(f"{rule_id}: {n}" for rule_id, n in report.summary.items() if n)
    lines.append("")
    lines.append(
        f"{report.total} finding(s) in {report.nodes_visited} layers ({counts})."
    )
    return lines


def to_json_lines(findings: Iterable[Finding]) -> str:
    """
    Serialize findings as JSON Lines, one record per finding.

    Keys are sorted and non-ASCII text is kept as-is.

    Returns:
        str: Newline-terminated records, or an empty string without findings.
    """
    records = [
        json.dumps(f.to_record(), ensure_ascii=False, sort_keys=True)
        for f in findings
    ]
    return "".join(r + "\n" for r in records)
