from __future__ import annotations

"""
Import Declaration Parser.

Extracts the module specifiers of top-level import declarations
('import x from "y"' and side-effect 'import "y"') from JavaScript and
TypeScript sources using tree-sitter grammars. Files with an extension
no grammar covers (stylesheets, JSON, assets) are units without imports.
"""

import logging
import os
from typing import Callable, Dict, List, Optional

import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser

from import_collapser.domain.graph_models import SourceUnit

logger = logging.getLogger(__name__)

_GRAMMARS: Dict[str, Callable[[], object]] = {
    ".ts": tstypescript.language_typescript,
    ".mts": tstypescript.language_typescript,
    ".cts": tstypescript.language_typescript,
    ".tsx": tstypescript.language_tsx,
    ".js": tsjavascript.language,
    ".jsx": tsjavascript.language,
    ".mjs": tsjavascript.language,
    ".cjs": tsjavascript.language,
}

_PARSER_CACHE: Dict[str, Parser] = {}


class ImportParseError(Exception):
    """Raised when a source file cannot be read for import extraction."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_source_unit(path: str) -> SourceUnit:
    """
    Read a file and build its SourceUnit.

    Args:
        path: Absolute path of the file.

    Returns:
        SourceUnit: The file path and its import specifiers in source order.

    Raises:
        ImportParseError: If the file cannot be read.
    """
    try:
        with open(path, "rb") as f:
            source = f.read()
    except OSError as e:
        raise ImportParseError(path, str(e)) from e

    ext = os.path.splitext(path)[1].lower()
    return SourceUnit(path=path, specifiers=tuple(extract_specifiers(source, ext)))


def extract_specifiers(source: bytes, ext: str) -> List[str]:
    """
    Extract import specifiers from raw source bytes.

    Args:
        source: File contents.
        ext: Lower-case file extension selecting the grammar.

    Returns:
        List[str]: Specifiers in source order, duplicates preserved.
    """
    parser = _get_parser(ext)
    if parser is None:
        return []

    tree = parser.parse(source)
    specifiers: List[str] = []
    _collect_specifiers(tree.root_node, specifiers, recovering=False)
    return specifiers

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _get_parser(ext: str) -> Optional[Parser]:
    """Return a cached parser for the extension, or None if unsupported."""
    grammar = _GRAMMARS.get(ext)
    if grammar is None:
        return None
    parser = _PARSER_CACHE.get(ext)
    if parser is None:
        parser = Parser(Language(grammar()))
        _PARSER_CACHE[ext] = parser
    return parser


def _collect_specifiers(node: Node, specifiers: List[str], recovering: bool) -> None:
    """
    Append the specifiers of top-level import declarations below a node.

    Top-level ERROR nodes are searched too: a syntax error earlier in the file
    can leave later declarations inside the error subtree, either as whole
    import statements or as bare 'import ... from "x"' tokens.
    """
    in_import = False
    prev_type = ""
    for child in node.children:
        kind = child.type
        if kind == "import_statement":
            source_node = child.child_by_field_name("source")
            # None for TypeScript 'import x = require("y")'
            if source_node is not None:
                _append_value(source_node, specifiers)
        elif not recovering and kind != "ERROR":
            pass
        elif kind == "string":
            if in_import and prev_type in ("from", "import"):
                _append_value(child, specifiers)
                in_import = False
        elif kind == "import":
            in_import = True
        elif kind in (";", "export"):
            in_import = False
        elif child.child_count:
            _collect_specifiers(child, specifiers, recovering=True)
        prev_type = kind


def _append_value(node: Node, specifiers: List[str]) -> None:
    value = _string_value(node)
    if value:
        specifiers.append(value)


def _string_value(node: Node) -> str:
    """Strip the surrounding quotes from a string literal node."""
    text = (node.text or b"").decode("utf-8", errors="replace")
    if len(text) >= 2 and text[0] in "'\"" and text[-1] == text[0]:
        return text[1:-1]
    return text
