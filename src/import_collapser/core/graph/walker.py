from __future__ import annotations

"""
Dependency Graph Walker.

Traverses the import graph rooted at one or more entry files. All four modes
share a single edge-resolution primitive and differ only in how visited state
is scoped and what they aggregate:

- tree:  per-root seen set; repeats are reported, never re-expanded.
- size:  per-root visited set; each distinct file counted once per root.
- trace: visited set scoped to the current path stack, reverted on backtrack.
- find:  no expansion; direct imports of each root only.

Visited state is always passed explicitly through the recursive calls. The
graph may contain cycles; every mode terminates on them. A depth ceiling turns
pathological nesting into a diagnostic instead of a RecursionError.
"""

import logging
import os
from typing import Dict, List, Optional, Sequence, Set

from import_collapser.core.graph.matching import imports_target
from import_collapser.core.resolution.resolver import classify_specifier, resolve
from import_collapser.core.services.module_cache import ModuleCache
from import_collapser.domain.graph_models import (
    AliasTable,
    AnalysisMode,
    EmissionKind,
    FindMode,
    FindResult,
    ResolvedEdge,
    SizeEntry,
    SizeMode,
    SizeResult,
    SourceUnit,
    TraceMode,
    TraceResult,
    TraversalWarning,
    TreeEmission,
    TreeMode,
    TreeResult,
)

logger = logging.getLogger(__name__)


class DependencyGraphWalker:
    """
    Mode-specific traversals over a lazily loaded import graph.

    Args:
        cache: Per-run module cache supplying SourceUnits and file sizes.
        alias_table: Optional alias table used for bare specifiers.
    """

    def __init__(self, cache: ModuleCache, alias_table: Optional[AliasTable] = None) -> None:
        self.cache = cache
        self.alias_table = alias_table

    # -------------------------------------------------------------------------
    # SHARED PRIMITIVE
    # -------------------------------------------------------------------------

    def resolve_edges(self, unit: SourceUnit) -> List[ResolvedEdge]:
        """Resolve every import specifier of a unit, preserving source order."""
        return [
            ResolvedEdge(
                importer=unit.path,
                specifier=spec,
                kind=classify_specifier(spec),
                resolved_path=resolve(spec, unit.path, self.alias_table),
            )
            for spec in unit.specifiers
        ]

    def run(self, roots: Sequence[str], mode: AnalysisMode):
        """Dispatch to the traversal matching the mode variant."""
        if isinstance(mode, TreeMode):
            return [self.walk_tree(root, mode) for root in roots]
        if isinstance(mode, SizeMode):
            return self.aggregate_sizes(roots, mode)
        if isinstance(mode, TraceMode):
            return self.trace_chains(roots, mode)
        if isinstance(mode, FindMode):
            return self.find_package_usage(roots, mode)
        raise TypeError(f"Unsupported traversal mode: {type(mode).__name__}")

    # -------------------------------------------------------------------------
    # TREE / ENUMERATE
    # -------------------------------------------------------------------------

    def walk_tree(self, root: str, mode: TreeMode) -> TreeResult:
        """
        Enumerate the dependency tree of one root.

        The seen set lives for this root only, so an unrelated root is never
        suppressed by files printed for a previous one.

        Args:
            root: Absolute path of the entry file.
            mode: Enumeration options.

        Returns:
            TreeResult: Ordered emission stream and warnings.
        """
        result = TreeResult(root=root)
        unit = self.cache.load(root)
        if unit is None:
            _warn(result.warnings, "unreadable", root, "entry file could not be read")
            return result

        seen: Set[str] = set()
        self._expand_tree(unit, 0, mode, seen, result)
        return result

    def _expand_tree(
            self,
            unit: SourceUnit,
            depth: int,
            mode: TreeMode,
            seen: Set[str],
            result: TreeResult,
    ) -> None:
        label = os.path.basename(unit.path)
        if unit.path in seen:
            result.emissions.append(
                TreeEmission(EmissionKind.ALREADY_VISITED, depth, label, path=unit.path)
            )
            return
        seen.add(unit.path)

        if depth == 0:
            result.emissions.append(
                TreeEmission(EmissionKind.ROOT, 0, label, size=self.cache.size(unit.path), path=unit.path)
            )

        if depth >= mode.max_depth:
            result.emissions.append(TreeEmission(EmissionKind.DEPTH_LIMIT, depth, label, path=unit.path))
            _warn(result.warnings, "depth_limit", unit.path, f"depth {depth}")
            return

        edges = self.resolve_edges(unit)
        visible = [edge for edge in edges if not mode.external_only or edge.is_external]

        for index, edge in enumerate(visible):
            size = None
            if edge.resolved_path is not None:
                size = self.cache.size(edge.resolved_path)

            result.emissions.append(TreeEmission(
                EmissionKind.IMPORT,
                depth,
                edge.specifier,
                is_external=edge.is_external,
                size=size,
                path=edge.resolved_path,
                is_last=index == len(visible) - 1,
            ))

            child = self._load_child(edge, result.warnings)
            if child is not None:
                self._expand_tree(child, depth + 1, mode, seen, result)

    # -------------------------------------------------------------------------
    # SIZE AGGREGATION
    # -------------------------------------------------------------------------

    def aggregate_sizes(self, roots: Sequence[str], mode: SizeMode) -> SizeResult:
        """
        Compute the cumulative byte size pulled in by each root.

        Each root gets a fresh visited set: shared files count once per root,
        and once in every root that reaches them.

        Returns:
            SizeResult: Entries sorted by descending size (stable on ties).
        """
        result = SizeResult()
        for root in roots:
            unit = self.cache.load(root)
            if unit is None:
                _warn(result.warnings, "unreadable", root, "entry file could not be read")
                continue
            visited: Set[str] = set()
            total = self._accumulate_size(unit, 0, mode, visited, result.warnings)
            result.entries.append(SizeEntry(path=root, size=total))

        result.entries.sort(key=lambda entry: entry.size, reverse=True)
        return result

    def _accumulate_size(
            self,
            unit: SourceUnit,
            depth: int,
            mode: SizeMode,
            visited: Set[str],
            warnings: List[TraversalWarning],
    ) -> int:
        if unit.path in visited:
            return 0
        visited.add(unit.path)
        total = self.cache.size(unit.path)

        if depth >= mode.max_depth:
            _warn(warnings, "depth_limit", unit.path, f"depth {depth}")
            return total

        for edge in self.resolve_edges(unit):
            if edge.resolved_path in visited:
                continue
            child = self._load_child(edge, warnings)
            if child is not None:
                total += self._accumulate_size(child, depth + 1, mode, visited, warnings)
        return total

    # -------------------------------------------------------------------------
    # CHAIN TRACING
    # -------------------------------------------------------------------------

    def trace_chains(self, roots: Sequence[str], mode: TraceMode) -> TraceResult:
        """
        Find every simple import chain from each root to a file importing the target.

        Returns:
            TraceResult: Chains (root first) concatenated in root order.
        """
        result = TraceResult(target=mode.target)
        for root in roots:
            unit = self.cache.load(root)
            if unit is None:
                _warn(result.warnings, "unreadable", root, "entry file could not be read")
                continue
            self._trace(unit, mode, [], set(), result)
        return result

    def _trace(
            self,
            unit: SourceUnit,
            mode: TraceMode,
            path_stack: List[str],
            on_path: Set[str],
            result: TraceResult,
    ) -> None:
        if unit.path in on_path:
            return
        on_path.add(unit.path)
        path_stack.append(unit.path)

        if imports_target(unit, mode.target):
            result.chains.append(list(path_stack))
        elif len(path_stack) > mode.max_depth:
            _warn(result.warnings, "depth_limit", unit.path, f"depth {len(path_stack) - 1}")
        else:
            for edge in self.resolve_edges(unit):
                if edge.resolved_path in on_path:
                    continue
                child = self._load_child(edge, result.warnings)
                if child is not None:
                    self._trace(child, mode, path_stack, on_path, result)

        path_stack.pop()
        on_path.discard(unit.path)

    # -------------------------------------------------------------------------
    # PACKAGE USAGE SEARCH
    # -------------------------------------------------------------------------

    def find_package_usage(self, roots: Sequence[str], mode: FindMode) -> FindResult:
        """Collect the roots whose own imports match the target package."""
        result = FindResult(target=mode.target)
        for root in roots:
            unit = self.cache.load(root)
            if unit is None:
                _warn(result.warnings, "unreadable", root, "entry file could not be read")
                continue
            if imports_target(unit, mode.target):
                result.matches.append(root)
        return result

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _load_child(self, edge: ResolvedEdge, warnings: List[TraversalWarning]) -> Optional[SourceUnit]:
        """Load the target of an internal edge, recording why it cannot be expanded."""
        if edge.is_external:
            return None
        if edge.is_unresolved_internal:
            _warn(warnings, "unresolved", edge.importer, edge.specifier)
            return None
        child = self.cache.load(edge.resolved_path)
        if child is None:
            _warn(warnings, "unreadable", edge.resolved_path, edge.specifier)
        return child


def _warn(warnings: List[TraversalWarning], kind: str, path: str, detail: str) -> None:
    """Record a diagnostic once per (kind, path, detail)."""
    warning = TraversalWarning(kind=kind, path=path, detail=detail)
    if warning in warnings:
        return
    warnings.append(warning)
    logger.warning(f"{kind}: {path} ({detail})")
