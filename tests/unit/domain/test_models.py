from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Data integrity of AnalysisResult factories (Success/Error).
2. Immutability of frozen dataclasses.
3. Edge classification helpers.
"""

import dataclasses

import pytest

from import_collapser.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from import_collapser.domain.graph_models import (
    AliasRule,
    ResolvedEdge,
    SizeEntry,
    SpecifierKind,
    TraceMode,
    TreeMode,
)


def test_create_success_result_populates_fields(mock_config_dict):
    mock_config_dict["mode"] = "size"
    sizes = [SizeEntry(path="/p/a.ts", size=10)]

    result = create_success_result(
        cfg=mock_config_dict,
        entry_path="/p",
        project_root="/p",
        roots=["/p/a.ts"],
        alias_config="/p/tsconfig.json",
        sizes=sizes,
        summary_extra={"total_bytes": 10},
    )

    assert isinstance(result, AnalysisResult)
    assert result.ok is True
    assert result.error == ""
    assert result.mode == "size"
    assert result.sizes == sizes
    assert result.trees == []
    assert result.alias_config == "/p/tsconfig.json"
    assert result.summary["total_bytes"] == 10


def test_create_error_result_structure(mock_config_dict):
    mock_config_dict["mode"] = "trace"
    result = create_error_result("Missing target", mock_config_dict, "/p")

    assert result.ok is False
    assert result.error == "Missing target"
    assert result.mode == "trace"
    assert result.roots == []
    assert result.summary == {}


def test_result_is_immutable(mock_config_dict):
    result = create_error_result("boom", mock_config_dict, "/p")

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = True  # type: ignore[misc]


def test_edge_classification():
    bare_unresolved = ResolvedEdge("/p/a.ts", "react", SpecifierKind.BARE)
    bare_aliased = ResolvedEdge("/p/a.ts", "@/x", SpecifierKind.BARE, "/p/src/x.ts")
    relative_missing = ResolvedEdge("/p/a.ts", "./x", SpecifierKind.RELATIVE)

    assert bare_unresolved.is_external
    assert not bare_aliased.is_external
    assert not relative_missing.is_external
    assert relative_missing.is_unresolved_internal
    assert not bare_unresolved.is_unresolved_internal


def test_mode_defaults():
    assert TreeMode().external_only is False
    assert TreeMode().max_depth == 200
    assert TraceMode(target="x").max_depth == 200


def test_alias_rule_is_frozen():
    rule = AliasRule("@/*", "src/*")
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.pattern = "x"  # type: ignore[misc]
