from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from layerlint.domain.constants import RULE_IDS
from layerlint.utils.i18n import i18n

OUTPUT_FORMATS = ("text", "jsonl", "tree")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the layerlint CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="layerlint",
        description=i18n.t(
            "app.description",
            default="Lint a design document's layer tree before converting it to code.",
        ),
    )

    # --- Input ---
    p.add_argument(
        "snapshot",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.snapshot", default="Exported document snapshot (.json, .yaml)."),
    )
    p.add_argument(
        "--skip-hidden",
        action="store_true",
        help=i18n.t("cli.args.skip_hidden", default="Ignore layers marked as not visible."),
    )

    # --- Configuration Sources ---
    p.add_argument(
        "-c", "--config",
        dest="config_file",
        default=None,
        help=i18n.t("cli.args.config", default="Project configuration file (JSON or YAML)."),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults", default="Ignore the saved user configuration."),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save", default="Persist the effective configuration as user default."),
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help=i18n.t("cli.args.strict", default="Reject configuration values instead of coercing them."),
    )

    # --- Rule Options ---
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help=i18n.t("cli.args.max_depth", default="Deepest allowed nesting level (root is 0)."),
    )
    p.add_argument(
        "--pattern",
        dest="generic_name_patterns",
        action="append",
        default=None,
        help=i18n.t("cli.args.pattern", default="Extra placeholder-name regex (repeatable)."),
    )
    p.add_argument(
        "--sections",
        dest="semantic_section_names",
        default=None,
        help=i18n.t("cli.args.sections", default="Comma-separated allow-list of section names."),
    )
    p.add_argument(
        "--rules",
        dest="enabled_rules",
        default=None,
        help=i18n.t(
            "cli.args.rules",
            default="Comma-separated rules to run ({rules}).",
            rules=", ".join(RULE_IDS),
        ),
    )

    # --- Output ---
    p.add_argument(
        "-f", "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default="text",
        help=i18n.t("cli.args.format", default="Report format."),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=i18n.t("cli.args.output", default="Write the report to a file instead of stdout."),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump", default="Print the effective configuration as JSON and exit."),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file", default="Also write diagnostics to this file."),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Options left at their defaults map to None so the merge step keeps
    the values coming from files and saved state.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["max_depth"] = args.max_depth
    overrides["generic_name_patterns"] = args.generic_name_patterns
    overrides["semantic_section_names"] = _split_csv(args.semantic_section_names)
    overrides["enabled_rules"] = _split_csv(args.enabled_rules)

    if args.skip_hidden:
        overrides["include_hidden"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
