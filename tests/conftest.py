from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A factory fixture that materializes small JS/TS projects on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a factory that writes {relative_path: content} under a fresh root.

    Returns:
        Callable: Factory returning the project root directory.
    """
    root = tmp_path / "project"

    def _make(files: Dict[str, str]) -> Path:
        root.mkdir(exist_ok=True)
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, object]:
    """
    Return a valid, complete run configuration for testing.

    Returns:
        Dict[str, object]: A sample configuration dictionary.
    """
    return {
        "input_path": str(tmp_path),
        "project_root": str(tmp_path),
        "mode": "tree",
        "target": "",
        "show_tree": False,
        "external_only": False,
        "extensions": [".ts", ".tsx", ".js", ".jsx"],
        "exclude_patterns": [r"^node_modules$", r"^\."],
        "config_file_name": "tsconfig.json",
        "max_depth": 200,
    }
