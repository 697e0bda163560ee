from __future__ import annotations

"""
Per-Run Module Cache.

Memoizes parsed SourceUnits and file sizes for the lifetime of one analysis
run so that files shared by many roots or branches are read and stat'ed once.
Read failures are cached as absences; they are logged once and never raised.
"""

import logging
import os
from typing import Dict, Optional

from import_collapser.core.parsing.import_parser import ImportParseError, parse_source_unit
from import_collapser.domain.graph_models import SourceUnit
from import_collapser.infra.fs import file_size

logger = logging.getLogger(__name__)


class ModuleCache:
    """
    Lazily loads SourceUnits keyed by absolute path.

    Single-threaded by contract: one analysis run owns one cache.
    """

    def __init__(self) -> None:
        self._units: Dict[str, Optional[SourceUnit]] = {}
        self._sizes: Dict[str, int] = {}

    def load(self, path: str) -> Optional[SourceUnit]:
        """
        Return the SourceUnit for a file, parsing it on first access.

        Args:
            path: Path of the file (normalized to absolute form).

        Returns:
            Optional[SourceUnit]: The unit, or None if the file is unreadable.
        """
        key = os.path.abspath(path)
        if key in self._units:
            return self._units[key]

        unit: Optional[SourceUnit]
        try:
            unit = parse_source_unit(key)
        except ImportParseError as e:
            logger.warning(f"Skipping unreadable module: {e}")
            unit = None

        self._units[key] = unit
        return unit

    def size(self, path: str) -> int:
        """Return the cached on-disk size of a file; stat failures count as 0."""
        key = os.path.abspath(path)
        cached = self._sizes.get(key)
        if cached is None:
            measured = file_size(key)
            if measured is None:
                logger.debug(f"Stat failed for {key}; counted as 0 bytes.")
            cached = measured or 0
            self._sizes[key] = cached
        return cached

    @property
    def loaded_count(self) -> int:
        return sum(1 for unit in self._units.values() if unit is not None)

    @property
    def failed_count(self) -> int:
        return sum(1 for unit in self._units.values() if unit is None)
