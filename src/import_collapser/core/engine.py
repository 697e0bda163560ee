from __future__ import annotations

"""
Core analysis orchestration.

This module coordinates one analysis run:
1. Validates configuration and normalizes paths.
2. Expands the entry path into root files.
3. Loads the alias table once for the whole run.
4. Builds the traversal mode variant and runs the graph walker.
5. Packs the outcome into an AnalysisResult for the interface layer.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from import_collapser.core.discovery.scanner import collect_entry_files
from import_collapser.core.filters import compile_patterns
from import_collapser.core.graph.walker import DependencyGraphWalker
from import_collapser.core.resolution.alias_table import load_alias_table
from import_collapser.core.services.module_cache import ModuleCache
from import_collapser.core.validator import validate_config
from import_collapser.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from import_collapser.domain.constants import MODE_FIND, MODE_SIZE, MODE_TRACE
from import_collapser.domain.graph_models import (
    AnalysisMode,
    FindMode,
    SizeMode,
    TraceMode,
    TreeMode,
)
from import_collapser.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_analysis(config: Optional[Dict[str, Any]]) -> AnalysisResult:
    """
    Execute one analysis run.

    Per-file failures never abort the run; they surface as warnings on the
    result. Only boundary problems (missing entry path, missing target)
    produce an error result.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        AnalysisResult: Status, mode-specific output and statistics.
    """
    logger.info("Analysis started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    entry_path = normalize_path(cfg.get("input_path", ""), cwd)
    project_root = normalize_path(cfg.get("project_root", ""), cwd)

    if not os.path.exists(entry_path):
        msg = f"Entry path does not exist: {entry_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, entry_path)

    mode, error = build_mode(cfg)
    if mode is None:
        logger.error(error)
        return create_error_result(error, cfg, entry_path)

    # -------------------------------------------------------------------------
    # 2) Root Discovery & Alias Table
    # -------------------------------------------------------------------------
    roots = collect_entry_files(
        entry_path,
        cfg["extensions"],
        compile_patterns(cfg["exclude_patterns"]),
    )
    if not roots:
        logger.warning(f"No source files found under {entry_path}")

    alias_table = load_alias_table(project_root, cfg["config_file_name"])

    # -------------------------------------------------------------------------
    # 3) Traversal
    # -------------------------------------------------------------------------
    cache = ModuleCache()
    walker = DependencyGraphWalker(cache, alias_table)
    output = walker.run(roots, mode)

    common = {
        "cfg": cfg,
        "entry_path": entry_path,
        "project_root": project_root,
        "roots": roots,
        "alias_config": alias_table.config_path if alias_table else "",
    }

    if isinstance(mode, TreeMode):
        tree_warnings = [w for tree in output for w in tree.warnings]
        result = create_success_result(
            trees=output,
            warnings=tree_warnings,
            summary_extra=_summary(cache, roots, tree_warnings, emissions=sum(len(t.emissions) for t in output)),
            **common,
        )
    elif isinstance(mode, SizeMode):
        result = create_success_result(
            sizes=output.entries,
            warnings=output.warnings,
            summary_extra=_summary(cache, roots, output.warnings, total_bytes=sum(e.size for e in output.entries)),
            **common,
        )
    elif isinstance(mode, TraceMode):
        result = create_success_result(
            chains=output.chains,
            warnings=output.warnings,
            summary_extra=_summary(cache, roots, output.warnings, chains=len(output.chains)),
            **common,
        )
    else:
        result = create_success_result(
            matches=output.matches,
            warnings=output.warnings,
            summary_extra=_summary(cache, roots, output.warnings, matches=len(output.matches)),
            **common,
        )

    logger.info(f"Analysis finished: {len(roots)} root(s), {len(result.warnings)} warning(s).")
    return result


def build_mode(cfg: Dict[str, Any]) -> Tuple[Optional[AnalysisMode], str]:
    """
    Translate a validated configuration into its traversal mode variant.

    Returns:
        Tuple[Optional[AnalysisMode], str]: (Mode, error message if invalid).
    """
    mode_name = cfg["mode"]
    max_depth = cfg["max_depth"]
    target = cfg.get("target", "")

    if mode_name in (MODE_TRACE, MODE_FIND) and not target:
        return None, f"Mode '{mode_name}' requires a target module or package."

    if mode_name == MODE_SIZE:
        return SizeMode(max_depth=max_depth), ""
    if mode_name == MODE_TRACE:
        return TraceMode(target=target, max_depth=max_depth), ""
    if mode_name == MODE_FIND:
        return FindMode(target=target), ""
    return TreeMode(external_only=cfg["external_only"], max_depth=max_depth), ""


def _summary(cache: ModuleCache, roots: List[str], warnings: List[Any], **extra: Any) -> Dict[str, Any]:
    summary: Dict[str, Any] = {
        "roots": len(roots),
        "modules_loaded": cache.loaded_count,
        "modules_failed": cache.failed_count,
        "warnings": len(warnings),
    }
    summary.update(extra)
    return summary
