from __future__ import annotations

"""
Import Graph Data Models.

Defines the immutable records exchanged between the resolver, the graph
walker and the reporting layer: parsed source units, alias rules, resolved
edges, and the per-mode traversal configurations and results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from import_collapser.domain.constants import DEFAULT_MAX_DEPTH

# -----------------------------------------------------------------------------
# SOURCE UNITS AND EDGES
# -----------------------------------------------------------------------------

class SpecifierKind(str, Enum):
    """Syntactic category of a raw import specifier."""
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    BARE = "bare"


@dataclass(frozen=True)
class SourceUnit:
    """
    One parsed source file.

    Attributes:
        path: Absolute filesystem path.
        specifiers: Raw import specifiers in source order, duplicates kept.
    """
    path: str
    specifiers: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AliasRule:
    """
    A single path-alias mapping.

    Attributes:
        pattern: Specifier pattern, optionally holding one '*' wildcard.
        replacement: Path template; its first '*' receives the wildcard capture.
    """
    pattern: str
    replacement: str


@dataclass(frozen=True)
class AliasTable:
    """
    Alias rules loaded from the project configuration.

    Attributes:
        base_dir: Absolute directory that anchors every replacement.
        rules: Rules in declaration order (first match wins).
        config_path: Configuration file the rules were read from.
    """
    base_dir: str
    rules: Tuple[AliasRule, ...]
    config_path: str = ""


@dataclass(frozen=True)
class ResolvedEdge:
    """
    One import edge after resolution.

    Attributes:
        importer: Absolute path of the importing file.
        specifier: Raw specifier as written.
        kind: Syntactic category of the specifier.
        resolved_path: Absolute target path, or None when unresolved.
    """
    importer: str
    specifier: str
    kind: SpecifierKind
    resolved_path: Optional[str] = None

    @property
    def is_external(self) -> bool:
        """Bare specifiers are external unless an alias mapped them to a file."""
        return self.kind is SpecifierKind.BARE and self.resolved_path is None

    @property
    def is_unresolved_internal(self) -> bool:
        return self.kind is not SpecifierKind.BARE and self.resolved_path is None

# -----------------------------------------------------------------------------
# TRAVERSAL MODES (TAGGED VARIANT)
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeMode:
    """Depth-first enumeration with a per-root seen set."""
    external_only: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class SizeMode:
    """Cumulative byte size per root, each file counted once per root."""
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class TraceMode:
    """All simple import chains from a root to files importing the target."""
    target: str
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class FindMode:
    """Direct (non-recursive) package usage of each root."""
    target: str


AnalysisMode = Union[TreeMode, SizeMode, TraceMode, FindMode]

# -----------------------------------------------------------------------------
# TRAVERSAL OUTPUTS
# -----------------------------------------------------------------------------

class EmissionKind(str, Enum):
    ROOT = "root"
    IMPORT = "import"
    ALREADY_VISITED = "already_visited"
    DEPTH_LIMIT = "depth_limit"


@dataclass(frozen=True)
class TreeEmission:
    """
    One line of the enumeration stream handed to the reporter.

    Attributes:
        kind: What the line represents.
        depth: Nesting level (0 for the root and its direct imports).
        label: Specifier for imports, basename for files.
        is_external: True for unexpanded third-party imports.
        size: On-disk size of the resolved file, when known.
        path: Resolved absolute path, when known.
        is_last: Whether this is the final sibling at its level.
    """
    kind: EmissionKind
    depth: int
    label: str
    is_external: bool = False
    size: Optional[int] = None
    path: Optional[str] = None
    is_last: bool = True


@dataclass(frozen=True)
class TraversalWarning:
    """
    Non-fatal diagnostic raised during a walk.

    Attributes:
        kind: 'unresolved', 'unreadable' or 'depth_limit'.
        path: File the diagnostic refers to.
        detail: Specifier or human-readable context.
    """
    kind: str
    path: str
    detail: str = ""


@dataclass(frozen=True)
class SizeEntry:
    path: str
    size: int


@dataclass
class TreeResult:
    root: str
    emissions: List[TreeEmission] = field(default_factory=list)
    warnings: List[TraversalWarning] = field(default_factory=list)


@dataclass
class SizeResult:
    entries: List[SizeEntry] = field(default_factory=list)
    warnings: List[TraversalWarning] = field(default_factory=list)


@dataclass
class TraceResult:
    target: str
    chains: List[List[str]] = field(default_factory=list)
    warnings: List[TraversalWarning] = field(default_factory=list)


@dataclass
class FindResult:
    target: str
    matches: List[str] = field(default_factory=list)
    warnings: List[TraversalWarning] = field(default_factory=list)
