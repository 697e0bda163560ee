from __future__ import annotations

"""
Terminal Report Renderer.

Turns the walker's mode-specific outputs into text lines for the CLI:
plain or tree-style dependency listings, the size ranking, import chains
and package-usage matches. Paths are shown relative to the working directory.
"""

import os
from typing import List, Optional, Sequence

from import_collapser.domain.constants import TRACE_SUFFIX_RE
from import_collapser.domain.graph_models import (
    EmissionKind,
    SizeEntry,
    TraversalWarning,
    TreeResult,
)
from import_collapser.infra.fs import relative_label

EXTERNAL_MARK = "[pkg]"
INTERNAL_MARK = "[mod]"

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def format_bytes(size: int) -> str:
    """Human-readable byte count (B, KB with two decimals, MB with two decimals)."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size / (1024 * 1024):.2f} MB"

# -----------------------------------------------------------------------------
# TREE / ENUMERATE
# -----------------------------------------------------------------------------

def render_tree(tree: TreeResult, show_tree: bool = False, base: Optional[str] = None) -> List[str]:
    """
    Render one root's enumeration stream.

    The plain rendering indents two spaces per depth. The tree rendering adds
    branch connectors, a root header with its size, and the resolved size of
    each internal import.

    Args:
        tree: Enumeration output for one root.
        show_tree: Use the tree rendering.
        base: Directory used for relative labels.

    Returns:
        List[str]: Output lines.
    """
    lines: List[str] = ["", f"Component: {relative_label(tree.root, base)}", ""]

    for emission in tree.emissions:
        indent = "  " * emission.depth

        if emission.kind is EmissionKind.ROOT:
            if show_tree:
                lines.append(f"{emission.label}{_size_suffix(emission.size)}")
            continue

        if emission.kind is EmissionKind.ALREADY_VISITED:
            lines.append(f"{indent}(already visited) {emission.label}")
            continue

        if emission.kind is EmissionKind.DEPTH_LIMIT:
            lines.append(f"{indent}(depth limit reached) {emission.label}")
            continue

        mark = EXTERNAL_MARK if emission.is_external else INTERNAL_MARK
        branch = ""
        size_str = ""
        if show_tree:
            branch = "└── " if emission.is_last else "├── "
            if not emission.is_external:
                size_str = _size_suffix(emission.size)
        lines.append(f"{indent}{branch}{mark} {emission.label}{size_str}")

    return lines


def _size_suffix(size: Optional[int]) -> str:
    return f" ({format_bytes(size)})" if size is not None else ""

# -----------------------------------------------------------------------------
# SIZE RANKING
# -----------------------------------------------------------------------------

def render_sizes(entries: Sequence[SizeEntry], base: Optional[str] = None) -> List[str]:
    """Render the size ranking; the first three entries carry their rank."""
    lines: List[str] = ["", "Component Size Analysis:", ""]
    for idx, entry in enumerate(entries):
        rank = f"#{idx + 1} " if idx < 3 else "   "
        lines.append(f"{rank}{relative_label(entry.path, base)} -> {format_bytes(entry.size)}")
    lines.append("")
    return lines

# -----------------------------------------------------------------------------
# CHAINS
# -----------------------------------------------------------------------------

def render_chains(chains: Sequence[Sequence[str]], target: str, base: Optional[str] = None) -> List[str]:
    """
    Render import chains as an indented list followed by a compact arrow form.
    """
    if not chains:
        return [f"No import chains found to: {target}"]

    lines: List[str] = [f"Found import chains to: {target}", ""]
    for chain in chains:
        for i, path in enumerate(chain):
            label = relative_label(path, base)
            if i == 0:
                lines.append(label)
            else:
                lines.append(f"{'  ' * i}↳ {label}")
        lines.append("")
        lines.append(f"Chain: {compact_chain(chain)}")
        lines.append("")
    return lines


def compact_chain(chain: Sequence[str]) -> str:
    """Join chain basenames (script extension stripped) with arrows."""
    return " → ".join(TRACE_SUFFIX_RE.sub("", os.path.basename(p)) for p in chain)

# -----------------------------------------------------------------------------
# PACKAGE USAGE
# -----------------------------------------------------------------------------

def render_matches(matches: Sequence[str], target: str, base: Optional[str] = None) -> List[str]:
    if not matches:
        return [f"No files found importing: {target}"]
    lines = ["", "Found in:"]
    lines.extend(f"- {relative_label(path, base)}" for path in matches)
    return lines

# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------

def render_warnings(warnings: Sequence[TraversalWarning], base: Optional[str] = None) -> List[str]:
    if not warnings:
        return []
    lines = [f"{len(warnings)} warning(s):"]
    for w in warnings:
        detail = f" ({w.detail})" if w.detail else ""
        lines.append(f"  - {w.kind}: {relative_label(w.path, base)}{detail}")
    return lines
