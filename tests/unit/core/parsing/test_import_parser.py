from __future__ import annotations

"""
Unit tests for the Import Declaration Parser.

Checks which declaration forms contribute specifiers, ordering and
duplicate preservation, grammar selection by extension and the read
failure contract.
"""

from pathlib import Path

import pytest

from import_collapser.core.parsing.import_parser import (
    ImportParseError,
    extract_specifiers,
    parse_source_unit,
)

# -----------------------------------------------------------------------------
# DECLARATION FORMS
# -----------------------------------------------------------------------------

def test_extracts_all_import_forms() -> None:
    source = b"""
import React from 'react';
import { useState, useEffect } from "react";
import * as utils from './utils';
import Default, { named } from '../lib/mixed';
import './styles.css';
"""
    assert extract_specifiers(source, ".js") == [
        "react",
        "react",
        "./utils",
        "../lib/mixed",
        "./styles.css",
    ]


def test_typescript_type_imports_are_included() -> None:
    source = b"""
import type { Props } from './types';
import { type Theme, palette } from '@app/theme';
const x: number = 1;
"""
    assert extract_specifiers(source, ".ts") == ["./types", "@app/theme"]


def test_tsx_grammar_handles_jsx() -> None:
    source = b"""
import Button from './Button';
export const App = () => <Button label="ok" />;
"""
    assert extract_specifiers(source, ".tsx") == ["./Button"]


def test_non_import_forms_are_ignored() -> None:
    """Re-exports, require calls and dynamic imports are not import declarations."""
    source = b"""
import a from './a';
export { b } from './b';
export * from './c';
const d = require('./d');
async function load() { return import('./e'); }
"""
    assert extract_specifiers(source, ".js") == ["./a"]


def test_imports_after_a_syntax_error_are_recovered() -> None:
    source = b"import a from './a'\nfunction f( {\nimport b from './b';\n"

    assert extract_specifiers(source, ".ts") == ["./a", "./b"]


def test_broken_file_does_not_report_dynamic_imports() -> None:
    source = b"import a from './a';\nconst x = ((;\nconst m = import('./lazy');\n"

    specifiers = extract_specifiers(source, ".js")

    assert specifiers[0] == "./a"
    assert "./lazy" not in specifiers


def test_specifiers_keep_source_order_and_duplicates() -> None:
    source = b"import './z';\nimport './a';\nimport './z';\n"

    assert extract_specifiers(source, ".mjs") == ["./z", "./a", "./z"]


def test_file_without_imports() -> None:
    assert extract_specifiers(b"export const x = 1;\n", ".ts") == []


def test_unknown_extension_yields_no_specifiers() -> None:
    assert extract_specifiers(b"@import 'theme.css';", ".css") == []
    assert extract_specifiers(b'{"import": "x"}', ".json") == []

# -----------------------------------------------------------------------------
# FILE LOADING
# -----------------------------------------------------------------------------

def test_parse_source_unit_reads_file(tmp_path: Path) -> None:
    f = tmp_path / "Widget.jsx"
    f.write_text("import x from 'lodash';\nimport y from './y';\n", encoding="utf-8")

    unit = parse_source_unit(str(f))

    assert unit.path == str(f)
    assert unit.specifiers == ("lodash", "./y")


def test_parse_source_unit_uppercase_extension(tmp_path: Path) -> None:
    f = tmp_path / "LEGACY.JS"
    f.write_text("import x from 'x';\n", encoding="utf-8")

    assert parse_source_unit(str(f)).specifiers == ("x",)


def test_parse_source_unit_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "ghost.ts"

    with pytest.raises(ImportParseError) as exc_info:
        parse_source_unit(str(missing))

    assert exc_info.value.path == str(missing)


def test_parse_source_unit_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ImportParseError):
        parse_source_unit(str(tmp_path))
