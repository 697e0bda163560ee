from __future__ import annotations

"""
Module Path Resolver.

Maps a raw import specifier, seen from a given importing file, to a concrete
file on disk. Relative and absolute specifiers are anchored at the importer's
directory; bare specifiers go through the alias table. Both paths share the
same probe order: the literal path, then each known extension, then a
directory index file.
"""

import logging
import os
from typing import Callable, List, Optional

from import_collapser.core.resolution.alias_table import match_alias
from import_collapser.domain.constants import INDEX_BASENAME, RESOLVE_EXTENSIONS
from import_collapser.domain.graph_models import AliasTable, SpecifierKind
from import_collapser.infra.fs import is_file

logger = logging.getLogger(__name__)

ExistsProbe = Callable[[str], bool]

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def classify_specifier(specifier: str) -> SpecifierKind:
    """Categorize a specifier by its leading character."""
    if specifier.startswith("."):
        return SpecifierKind.RELATIVE
    if specifier.startswith("/"):
        return SpecifierKind.ABSOLUTE
    return SpecifierKind.BARE

# -----------------------------------------------------------------------------
# RESOLUTION
# -----------------------------------------------------------------------------

def probe_candidates(base_path: str) -> List[str]:
    """
    List the filesystem candidates for an extensionless base path, in order.

    Args:
        base_path: Absolute path as written in (or mapped from) the specifier.

    Returns:
        List[str]: Literal path, extension variants, then index files.
    """
    candidates = [base_path]
    candidates.extend(f"{base_path}{ext}" for ext in RESOLVE_EXTENSIONS)
    candidates.extend(
        os.path.join(base_path, f"{INDEX_BASENAME}{ext}") for ext in RESOLVE_EXTENSIONS
    )
    return candidates


def resolve(
        specifier: str,
        importer_path: str,
        alias_table: Optional[AliasTable] = None,
        exists: ExistsProbe = is_file,
) -> Optional[str]:
    """
    Resolve an import specifier to an existing file.

    Args:
        specifier: Raw specifier as written in the import statement.
        importer_path: Absolute path of the importing file.
        alias_table: Optional alias table for bare specifiers.
        exists: File existence probe.

    Returns:
        Optional[str]: Absolute path of the first existing candidate, or None.
    """
    if classify_specifier(specifier) is not SpecifierKind.BARE:
        base_dir = os.path.dirname(importer_path)
        return _first_existing(os.path.normpath(os.path.join(base_dir, specifier)), exists)

    if alias_table is None:
        return None

    mapped = match_alias(specifier, alias_table)
    if mapped is None:
        return None
    return _first_existing(mapped, exists)


def _first_existing(base_path: str, exists: ExistsProbe) -> Optional[str]:
    for candidate in probe_candidates(base_path):
        if exists(candidate):
            return candidate
    logger.debug(f"Resolution miss: no candidate exists for {base_path}")
    return None
