from __future__ import annotations

"""
Unit tests for Entry File Discovery.

Verifies file vs directory entries, extension filtering, exclusion pruning
and deterministic ordering.
"""

from pathlib import Path

from import_collapser.core.discovery.scanner import collect_entry_files
from import_collapser.core.filters import compile_patterns, default_exclude_patterns, default_extensions


def _collect(entry: Path):
    return collect_entry_files(str(entry), default_extensions(), compile_patterns(default_exclude_patterns()))


def test_file_entry_is_single_root(make_project) -> None:
    root = make_project({"app/Main.tsx": ""})

    assert _collect(root / "app" / "Main.tsx") == [str(root / "app" / "Main.tsx")]


def test_file_entry_ignores_extension_filter(make_project) -> None:
    root = make_project({"legacy.mjs": ""})

    assert _collect(root / "legacy.mjs") == [str(root / "legacy.mjs")]


def test_directory_entry_filters_and_sorts(make_project) -> None:
    root = make_project({
        "b.tsx": "",
        "a.ts": "",
        "sub/c.js": "",
        "sub/d.jsx": "",
        "styles.css": "",
        "README.md": "",
        "types.d.ts": "",
    })

    names = [Path(p).relative_to(root).as_posix() for p in _collect(root)]

    assert names == ["a.ts", "b.tsx", "types.d.ts", "sub/c.js", "sub/d.jsx"]


def test_directory_entry_prunes_excluded_dirs(make_project) -> None:
    root = make_project({
        "src/index.ts": "",
        "node_modules/react/index.js": "",
        ".cache/tmp.js": "",
        "src/.hidden.ts": "",
    })

    names = [Path(p).relative_to(root).as_posix() for p in _collect(root)]

    assert names == ["src/index.ts"]


def test_custom_patterns_and_extensions(make_project) -> None:
    root = make_project({"a.ts": "", "a.test.ts": "", "b.js": ""})

    found = collect_entry_files(str(root), [".ts"], compile_patterns([r"\.test\.ts$"]))

    assert found == [str(root / "a.ts")]


def test_missing_entry_yields_nothing(tmp_path: Path) -> None:
    assert _collect(tmp_path / "nope") == []
