from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, persistent user state, a
project config file and CLI overrides), snapshot loading, the lint run
and report rendering.

Exit codes:
    0   no findings
    1   findings reported
    2   usage, input or configuration error
    3   the snapshot is not a tree (cycle detected)
    130 interrupted
"""

import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from layerlint.core.linter.engine import run_lint
from layerlint.core.linter.settings import build_settings
from layerlint.core.linter.validator import validate_config
from layerlint.core.report.render import render_text_report, to_json_lines
from layerlint.core.report.tree_renderer import render_layer_tree
from layerlint.core.snapshot.parser import parse_layer_tree
from layerlint.core.snapshot.reader import read_snapshot
from layerlint.domain.config import get_default_config, load_config, load_config_file, save_config
from layerlint.domain.errors import CycleDetected, InvalidConfiguration, SnapshotError
from layerlint.domain.layer_models import LayerNode, LintReport
from layerlint.infra.fs import write_text_file
from layerlint.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from layerlint.interface.cli import args as cli_args
from layerlint.utils.i18n import i18n

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2
EXIT_CYCLE = 3
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file), force=True)

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 1. Resolve configuration (defaults or saved state, file, CLI flags)
    try:
        base_conf = get_default_config() if args.use_defaults else load_config()
        file_conf = load_config_file(args.config_file) if args.config_file else {}
        raw_conf = _merge_config(_merge_config(base_conf, file_conf), cli_args.args_to_overrides(args))
        clean_conf, warnings = validate_config(raw_conf, strict=bool(args.strict))
    except (InvalidConfiguration, TypeError, ValueError) as e:
        return _fail(i18n.t("cli.errors.config", default="Invalid configuration: {error}", error=str(e)))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_CLEAN

    if args.save_config:
        save_config(clean_conf)

    # 2. Pre-flight input verification
    if not args.snapshot:
        return _fail(i18n.t("cli.errors.no_snapshot", default="No snapshot file given."))
    if not os.path.isfile(args.snapshot):
        return _fail(i18n.t(
            "cli.errors.path_not_exist",
            default="Snapshot does not exist: {path}",
            path=args.snapshot,
        ))

    # 3. Analysis
    logger.info(f"Linting snapshot: {args.snapshot}")
    try:
        raw = read_snapshot(args.snapshot)
        root = parse_layer_tree(raw, include_hidden=clean_conf["include_hidden"])
        report = run_lint(root, build_settings(clean_conf))
    except SnapshotError as e:
        return _fail(str(e))
    except CycleDetected as e:
        return _fail(
            i18n.t("cli.errors.cycle", default="Snapshot is not a tree: {error}", error=str(e)),
            EXIT_CYCLE,
        )
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted", default="Interrupted."), file=sys.stderr)
        return EXIT_INTERRUPTED

    # 4. Output rendering
    output = render_output(report, root, args.output_format)
    if args.output_path:
        try:
            write_text_file(args.output_path, output)
        except OSError as e:
            return _fail(i18n.t(
                "cli.errors.write",
                default="Cannot write report to {path}: {error}",
                path=args.output_path,
                error=str(e),
            ))
        print(i18n.t("cli.status.written", default="Report written to {path}", path=args.output_path))
    else:
        sys.stdout.write(output)

    return EXIT_CLEAN if report.ok else EXIT_FINDINGS

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values that are set into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject; None means 'not set'.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def render_output(report: LintReport, root: LayerNode, output_format: str) -> str:
    """
    Render the report in the requested format.

    Args:
        report: Completed lint report.
        root: Analysed layer tree, used by the 'tree' format.
        output_format: One of 'text', 'jsonl', 'tree'.

    Returns:
        str: Newline-terminated report text.
    """
    if output_format == "jsonl":
        return to_json_lines(report.findings)
    if output_format == "tree":
        lines = render_layer_tree(root, report.findings)
    else:
        lines = render_text_report(report)
    return "\n".join(lines) + "\n"


def _fail(message: str, code: int = EXIT_USAGE) -> int:
    logger.error(message)
    print(f"ERROR: {message}", file=sys.stderr)
    return code

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
