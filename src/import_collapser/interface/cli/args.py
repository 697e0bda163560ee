from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the analysis engine. When several mode
flags are given, the first of size, trace, find wins; otherwise the run
enumerates the dependency tree.
"""

import argparse
from typing import Any, Dict, List, Optional

from import_collapser import __version__
from import_collapser.domain.constants import MODE_FIND, MODE_SIZE, MODE_TRACE, MODE_TREE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the import-collapser CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="import-collapser",
        description="Collapse and analyze the import dependencies of JavaScript/TypeScript components.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # --- Entry ---
    p.add_argument(
        "input_path",
        metavar="PATH",
        help="Entry file or directory to analyze.",
    )
    p.add_argument(
        "--project-root",
        dest="project_root",
        default=None,
        help="Directory where the tsconfig.json search starts (default: current directory).",
    )

    # --- Modes ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Show nested tree of dependencies with file sizes.",
    )
    p.add_argument(
        "--external-only",
        action="store_true",
        help="Only show external packages.",
    )
    p.add_argument(
        "--find",
        dest="find_target",
        metavar="PACKAGE",
        default=None,
        help="Find which components directly import a specific package.",
    )
    p.add_argument(
        "--trace",
        dest="trace_target",
        metavar="TARGET",
        default=None,
        help="Trace import chains to a target module/package.",
    )
    p.add_argument(
        "--size",
        action="store_true",
        help="Show cumulative size of components and their dependencies.",
    )

    # --- Discovery and Traversal ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated source extensions enumerated under a directory.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes of directory/file names to skip.",
    )
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Recursion ceiling for graph walks.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted user configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to a rotating file (default location if no path given).",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the analysis result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["project_root"] = args.project_root

    if args.size:
        overrides["mode"] = MODE_SIZE
    elif args.trace_target:
        overrides["mode"] = MODE_TRACE
        overrides["target"] = args.trace_target
    elif args.find_target:
        overrides["mode"] = MODE_FIND
        overrides["target"] = args.find_target
    else:
        overrides["mode"] = MODE_TREE

    if args.tree:
        overrides["show_tree"] = True
    if args.external_only:
        overrides["external_only"] = True

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
