from __future__ import annotations

"""
Domain Constants.

Centralizes the resolution probe order, source-file extensions and traversal
limits shared by the resolver, the graph walker and the discovery service.
"""

import re
from typing import List, Tuple

# -----------------------------------------------------------------------------
# MODULE RESOLUTION
# -----------------------------------------------------------------------------

# Probe order matters: the first existing candidate wins.
RESOLVE_EXTENSIONS: Tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx", ".mjs")
INDEX_BASENAME = "index"

PROJECT_CONFIG_FILE = "tsconfig.json"
DEFAULT_BASE_URL = "."

# -----------------------------------------------------------------------------
# DISCOVERY
# -----------------------------------------------------------------------------

SOURCE_EXTENSIONS: List[str] = [".ts", ".tsx", ".js", ".jsx"]

DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    r"^node_modules$",
    r"^\.",
]

# -----------------------------------------------------------------------------
# TARGET MATCHING
# -----------------------------------------------------------------------------

TRACE_SUFFIX_RE = re.compile(r"\.(tsx?|jsx?)$")

# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

DEFAULT_MAX_DEPTH = 200

MODE_TREE = "tree"
MODE_SIZE = "size"
MODE_TRACE = "trace"
MODE_FIND = "find"
ALL_MODES: Tuple[str, ...] = (MODE_TREE, MODE_SIZE, MODE_TRACE, MODE_FIND)
