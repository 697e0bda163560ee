from __future__ import annotations

"""
Entry File Discovery Service.

Expands an entry path into the list of root files to analyze: a file entry
is its own single root, a directory entry yields every source file beneath
it, with excluded directories pruned before descent.
"""

import logging
import os
import re
from typing import Iterable, List

from import_collapser.core.filters import matches_any

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def collect_entry_files(
        entry_path: str,
        extensions: List[str],
        exclude_rx: List[re.Pattern],
) -> List[str]:
    """
    Resolve an entry path into absolute root file paths.

    Args:
        entry_path: File or directory given by the user.
        extensions: Allowed source extensions for directory entries.
        exclude_rx: Compiled exclusion patterns for names.

    Returns:
        List[str]: Root files in deterministic (sorted walk) order.
    """
    entry_abs = os.path.abspath(entry_path)
    if os.path.isfile(entry_abs):
        return [entry_abs]
    if not os.path.isdir(entry_abs):
        logger.error(f"Entry path is neither a file nor a directory: {entry_abs}")
        return []

    roots = list(yield_source_files(entry_abs, extensions, exclude_rx))
    logger.debug(f"Discovered {len(roots)} source file(s) under {entry_abs}")
    return roots


def yield_source_files(
        input_path: str,
        extensions: List[str],
        exclude_rx: List[re.Pattern],
) -> Iterable[str]:
    """
    Walk a directory tree and yield source files with allowed extensions.

    Yields:
        str: Absolute path of each matching file.
    """
    allowed = {ext.lower() for ext in extensions}

    for root, dirs, files in os.walk(input_path):
        # In-place directory pruning to optimize traversal
        dirs[:] = [d for d in dirs if not matches_any(d, exclude_rx)]
        dirs.sort()
        files.sort()

        for file_name in files:
            if matches_any(file_name, exclude_rx):
                continue
            _, ext = os.path.splitext(file_name)
            if ext.lower() not in allowed:
                continue
            yield os.path.join(root, file_name)
