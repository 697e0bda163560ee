from __future__ import annotations

"""
Configuration Domain Management.

Provides the dict-based run configuration consumed by the analysis engine and
an optional persistent layer of user defaults stored as JSON in the user data
directory. Only known keys are honored from disk.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from import_collapser.domain.constants import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_MAX_DEPTH,
    MODE_TREE,
    PROJECT_CONFIG_FILE,
    SOURCE_EXTENSIONS,
)
from import_collapser.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

# Keys a user may persist under {"defaults": {...}}
PERSISTABLE_KEYS = (
    "project_root",
    "show_tree",
    "external_only",
    "extensions",
    "exclude_patterns",
    "max_depth",
    "config_file_name",
)


def get_config_file_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    base = os.getcwd()
    return {
        # IO Paths
        "input_path": base,
        "project_root": base,

        # Mode Selection
        "mode": MODE_TREE,
        "target": "",
        "show_tree": False,
        "external_only": False,

        # Discovery
        "extensions": list(SOURCE_EXTENSIONS),
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),

        # Resolution & Traversal
        "config_file_name": PROJECT_CONFIG_FILE,
        "max_depth": DEFAULT_MAX_DEPTH,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load defaults overlaid with the user's persisted preferences.

    A missing or corrupted file is not an error; built-in defaults are used.

    Args:
        config_file: Optional explicit path to the JSON file.

    Returns:
        Dict[str, Any]: The effective base configuration.
    """
    config = get_default_config()
    path = config_file or get_config_file_path()

    if not os.path.exists(path):
        logger.debug("User config file not found. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load user config '{path}': {e}. Using defaults.")
        return config

    stored = data.get("defaults") if isinstance(data, dict) else None
    if not isinstance(stored, dict):
        logger.warning(f"User config '{path}' has no 'defaults' section. Ignored.")
        return config

    for key in PERSISTABLE_KEYS:
        if key in stored:
            config[key] = stored[key]
    return config
