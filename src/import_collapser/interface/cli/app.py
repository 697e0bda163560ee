from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persisted user defaults, command-line overrides), analysis
execution and report rendering, either human-readable or JSON.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from import_collapser.core.engine import run_analysis
from import_collapser.core.validator import validate_config
from import_collapser.domain.analysis_models import AnalysisResult
from import_collapser.domain.config import get_default_config, load_config
from import_collapser.domain.constants import MODE_FIND, MODE_SIZE, MODE_TRACE
from import_collapser.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from import_collapser.interface.cli import args as cli_args
from import_collapser.interface.cli import render

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 missing entry, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_file = args.log_file
    if log_file == "":
        log_file = get_default_log_path()
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=log_file,
    ))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration and merge overrides
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 4. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pre-flight entry verification
    input_path = os.path.abspath(clean_conf["input_path"])
    if not os.path.exists(input_path):
        msg = f"Path does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 6. Analysis phase
    logger.info(f"Analyzing: {input_path}")
    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        msg = f"Analysis failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_report(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.
    """
    out = dict(base)
    keys_to_merge = [
        "input_path", "project_root", "mode", "target", "show_tree",
        "external_only", "extensions", "exclude_patterns", "max_depth",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_report(result: AnalysisResult) -> None:
    """Print the mode-specific report for a finished analysis."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.mode == MODE_SIZE:
        lines = render.render_sizes(result.sizes)
    elif result.mode == MODE_TRACE:
        lines = render.render_chains(result.chains, result.target)
    elif result.mode == MODE_FIND:
        lines = render.render_matches(result.matches, result.target)
    else:
        lines = []
        for tree in result.trees:
            lines.extend(render.render_tree(tree, show_tree=result.show_tree))

    lines.extend(render.render_warnings(result.warnings))
    print("\n".join(lines))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
