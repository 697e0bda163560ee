from __future__ import annotations

"""
Path Filtering Helpers.

Regex-based exclusion used while enumerating entry directories: directory
names are pruned before descent and file names are skipped on match.
"""

import re
from typing import List

from import_collapser.domain.constants import DEFAULT_EXCLUDE_PATTERNS, SOURCE_EXTENSIONS

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_extensions() -> List[str]:
    """Source file extensions enumerated under an entry directory."""
    return list(SOURCE_EXTENSIONS)


def default_exclude_patterns() -> List[str]:
    """
    Get the system-level exclusion patterns.

    Skips installed packages and hidden directories (VCS metadata, editor
    folders, build caches).
    """
    return list(DEFAULT_EXCLUDE_PATTERNS)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded rather than aborting enumeration.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """Verify if a name matches at least one compiled pattern."""
    return any(rx.search(name) for rx in compiled_patterns)
