from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Mode precedence when several mode flags are given.
3. CSV string parsing logic.
"""

import pytest

from import_collapser.interface.cli.args import _split_csv, args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_default_mode_is_tree():
    overrides = args_to_overrides(parse_args(["src/App.tsx"]))

    assert overrides["input_path"] == "src/App.tsx"
    assert overrides["mode"] == "tree"
    assert "target" not in overrides
    assert "show_tree" not in overrides


def test_tree_and_external_flags():
    overrides = args_to_overrides(parse_args(["src", "--tree", "--external-only"]))

    assert overrides["mode"] == "tree"
    assert overrides["show_tree"] is True
    assert overrides["external_only"] is True


def test_find_sets_target():
    overrides = args_to_overrides(parse_args(["src", "--find", "lodash"]))

    assert overrides["mode"] == "find"
    assert overrides["target"] == "lodash"


def test_trace_sets_target():
    overrides = args_to_overrides(parse_args(["src/App.tsx", "--trace", "Button"]))

    assert overrides["mode"] == "trace"
    assert overrides["target"] == "Button"


def test_mode_precedence_size_trace_find():
    overrides = args_to_overrides(parse_args(["src", "--find", "a", "--trace", "b", "--size"]))
    assert overrides["mode"] == "size"

    overrides = args_to_overrides(parse_args(["src", "--find", "a", "--trace", "b"]))
    assert overrides["mode"] == "trace"
    assert overrides["target"] == "b"


def test_discovery_and_depth_options():
    args = parse_args([
        "src",
        "--ext", "ts, .tsx,,",
        "--exclude", r"^dist$,^coverage$",
        "--max-depth", "25",
        "--project-root", "/repo",
    ])
    overrides = args_to_overrides(args)

    assert overrides["extensions"] == ["ts", ".tsx"]
    assert overrides["exclude_patterns"] == [r"^dist$", r"^coverage$"]
    assert overrides["max_depth"] == 25
    assert overrides["project_root"] == "/repo"


def test_log_file_optional_value():
    assert parse_args(["src"]).log_file is None
    assert parse_args(["src", "--log-file"]).log_file == ""
    assert parse_args(["src", "--log-file", "run.log"]).log_file == "run.log"


def test_missing_path_is_a_usage_error():
    with pytest.raises(SystemExit):
        parse_args([])


def test_split_csv():
    assert _split_csv(None) is None
    assert _split_csv(" a , b ,") == ["a", "b"]
