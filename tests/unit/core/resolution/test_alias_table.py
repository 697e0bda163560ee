from __future__ import annotations

"""
Unit tests for the Path Alias Table Loader.

Covers upward configuration lookup, comment/trailing-comma tolerance,
baseUrl anchoring, declaration order and first-template-only semantics.
"""

import json
import os
from pathlib import Path

from import_collapser.core.resolution.alias_table import (
    build_alias_table,
    load_alias_table,
    match_alias,
    parse_config_text,
)
from import_collapser.domain.graph_models import AliasRule, AliasTable


def _write_tsconfig(directory: Path, data: object) -> Path:
    path = directory / "tsconfig.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_returns_none_without_config(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert load_alias_table(str(nested), "no-such-config.json") is None


def test_load_searches_upward(tmp_path: Path) -> None:
    _write_tsconfig(tmp_path, {"compilerOptions": {"baseUrl": "src", "paths": {"@/*": ["*"]}}})
    nested = tmp_path / "src" / "deep"
    nested.mkdir(parents=True)

    table = load_alias_table(str(nested))

    assert table is not None
    assert table.base_dir == str(tmp_path / "src")
    assert table.config_path == str(tmp_path / "tsconfig.json")
    assert table.rules == (AliasRule("@/*", "*"),)


def test_load_without_paths_section_returns_none(tmp_path: Path) -> None:
    _write_tsconfig(tmp_path, {"compilerOptions": {"strict": True}})

    assert load_alias_table(str(tmp_path)) is None


def test_base_url_defaults_to_config_dir(tmp_path: Path) -> None:
    _write_tsconfig(tmp_path, {"compilerOptions": {"paths": {"~/*": ["lib/*"]}}})

    table = load_alias_table(str(tmp_path))

    assert table is not None
    assert table.base_dir == str(tmp_path)


def test_invalid_json_disables_aliases(tmp_path: Path) -> None:
    (tmp_path / "tsconfig.json").write_text("{ not json", encoding="utf-8")

    assert load_alias_table(str(tmp_path)) is None


def test_parse_config_text_strips_comments_and_trailing_commas() -> None:
    text = """
    {
      // line comment
      "compilerOptions": {
        /* block comment */
        "baseUrl": ".",
        "paths": {
          "@app/*": ["src/app/*"],
          "@lib/*": ["src/lib/*",],
        },
      },
    }
    """
    data = parse_config_text(text)

    assert data is not None
    assert data["compilerOptions"]["paths"]["@app/*"] == ["src/app/*"]
    assert data["compilerOptions"]["paths"]["@lib/*"] == ["src/lib/*"]


def test_parse_config_text_keeps_comment_markers_inside_strings() -> None:
    """'/*' inside alias patterns must not be mistaken for a comment."""
    text = '{"compilerOptions": {"paths": {"@a/*": ["x/*"], "@b/*": ["y/*"]}, "url": "http://host"}}'

    data = parse_config_text(text)

    assert data is not None
    assert list(data["compilerOptions"]["paths"]) == ["@a/*", "@b/*"]
    assert data["compilerOptions"]["url"] == "http://host"


def test_parse_config_text_rejects_non_object() -> None:
    assert parse_config_text("[1, 2]") is None


def test_rule_order_is_preserved(tmp_path: Path) -> None:
    paths = {"@z/*": ["z/*"], "@a/*": ["a/*"], "@m": ["m/index"]}
    table = build_alias_table({"compilerOptions": {"paths": paths}}, str(tmp_path))

    assert table is not None
    assert [r.pattern for r in table.rules] == ["@z/*", "@a/*", "@m"]


def test_only_first_replacement_is_kept(tmp_path: Path) -> None:
    paths = {"@shared/*": ["first/*", "second/*"]}
    table = build_alias_table({"compilerOptions": {"paths": paths}}, str(tmp_path))

    assert table is not None
    assert table.rules == (AliasRule("@shared/*", "first/*"),)


def test_patterns_without_templates_are_skipped(tmp_path: Path) -> None:
    paths = {"@empty/*": [], "@ok/*": ["ok/*"]}
    table = build_alias_table({"compilerOptions": {"paths": paths}}, str(tmp_path))

    assert table is not None
    assert [r.pattern for r in table.rules] == ["@ok/*"]


def test_match_alias_substitutes_capture() -> None:
    table = AliasTable(base_dir=os.path.abspath("/proj"), rules=(AliasRule("@ui/*", "src/ui/*"),))

    mapped = match_alias("@ui/forms/Input", table)

    assert mapped == os.path.normpath(os.path.join(os.path.abspath("/proj"), "src/ui/forms/Input"))


def test_match_alias_exact_pattern() -> None:
    table = AliasTable(base_dir=os.path.abspath("/proj"), rules=(AliasRule("config", "src/config/index"),))

    assert match_alias("config", table) == os.path.normpath(os.path.join(os.path.abspath("/proj"), "src/config/index"))
    assert match_alias("config/sub", table) is None


def test_match_alias_requires_full_match() -> None:
    table = AliasTable(base_dir=os.path.abspath("/proj"), rules=(AliasRule("@app/*", "src/*"),))

    assert match_alias("lodash", table) is None
    assert match_alias("x@app/y", table) is None


def test_match_alias_escapes_regex_characters() -> None:
    table = AliasTable(base_dir=os.path.abspath("/proj"), rules=(AliasRule("$lib.core/*", "core/*"),))

    assert match_alias("$lib.core/a", table) is not None
    assert match_alias("$libXcore/a", table) is None
