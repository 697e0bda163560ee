from __future__ import annotations

"""
Analysis Result Data Models.

Defines the result object handed from the analysis engine to the interface
layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from import_collapser.domain.graph_models import SizeEntry, TraversalWarning, TreeResult

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result of one analysis run.

    Only the fields of the executed mode are populated.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        mode: Executed traversal mode (tree/size/trace/find).
        entry_path: Normalized entry file or directory.
        project_root: Directory the alias table was searched from.
        alias_config: Project configuration that supplied aliases, if any.
        target: Trace/find target, empty for other modes.
        show_tree: Whether enumeration output should use the tree rendering.
        roots: Root files analyzed, in input order.
        trees: Per-root enumeration streams (tree mode).
        sizes: Size ranking, largest first (size mode).
        chains: Import chains, root first (trace mode).
        matches: Roots directly importing the target (find mode).
        warnings: Non-fatal traversal diagnostics.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    mode: str
    entry_path: str
    project_root: str
    alias_config: str = ""
    target: str = ""
    show_tree: bool = False

    roots: List[str] = field(default_factory=list)
    trees: List[TreeResult] = field(default_factory=list)
    sizes: List[SizeEntry] = field(default_factory=list)
    chains: List[List[str]] = field(default_factory=list)
    matches: List[str] = field(default_factory=list)
    warnings: List[TraversalWarning] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        entry_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        cfg: Configuration used during the failed run.
        entry_path: Normalized entry path.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        mode=cfg.get("mode", ""),
        entry_path=entry_path,
        project_root=cfg.get("project_root", ""),
        target=cfg.get("target", ""),
        show_tree=cfg.get("show_tree", False),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        entry_path: str,
        project_root: str,
        roots: List[str],
        alias_config: str = "",
        trees: Optional[List[TreeResult]] = None,
        sizes: Optional[List[SizeEntry]] = None,
        chains: Optional[List[List[str]]] = None,
        matches: Optional[List[str]] = None,
        warnings: Optional[List[TraversalWarning]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        mode=cfg.get("mode", ""),
        entry_path=entry_path,
        project_root=project_root,
        alias_config=alias_config,
        target=cfg.get("target", ""),
        show_tree=cfg.get("show_tree", False),
        roots=list(roots),
        trees=trees or [],
        sizes=sizes or [],
        chains=chains or [],
        matches=matches or [],
        warnings=warnings or [],
        summary=summary_extra or {},
    )
