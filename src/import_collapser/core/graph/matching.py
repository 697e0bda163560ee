from __future__ import annotations

"""
Import Target Matching.

Shared predicate for chain tracing and package search: a specifier matches a
target when it equals it, lives under it ('target/...'), or has the target as
its basename once a .ts/.tsx/.js/.jsx suffix is removed.
"""

import posixpath

from import_collapser.domain.constants import TRACE_SUFFIX_RE
from import_collapser.domain.graph_models import SourceUnit


def specifier_basename(specifier: str) -> str:
    """Basename of a specifier with its script extension removed."""
    return TRACE_SUFFIX_RE.sub("", posixpath.basename(specifier.rstrip("/")))


def matches_target(specifier: str, target: str) -> bool:
    return (
        specifier == target
        or specifier.startswith(f"{target}/")
        or specifier_basename(specifier) == target
    )


def imports_target(unit: SourceUnit, target: str) -> bool:
    """True if any of the unit's direct imports matches the target."""
    return any(matches_target(spec, target) for spec in unit.specifiers)
