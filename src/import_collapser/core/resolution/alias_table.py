from __future__ import annotations

"""
Path Alias Table Loader.

Reads the nearest project configuration (tsconfig.json) upward from the
project root and turns its 'compilerOptions.paths' section into an ordered
list of alias rules anchored at 'compilerOptions.baseUrl'. The configuration
dialect allows comments and trailing commas, which are stripped before the
text is handed to the JSON decoder.
"""

import json
import logging
import os
import re
from functools import lru_cache
from typing import Any, Dict, List, Optional, Pattern

from import_collapser.domain.constants import DEFAULT_BASE_URL, PROJECT_CONFIG_FILE
from import_collapser.domain.graph_models import AliasRule, AliasTable
from import_collapser.infra.fs import find_file_upwards, read_text

logger = logging.getLogger(__name__)

# String literals are kept; comments and trailing commas are dropped.
_JSONC_TOKEN_RE = re.compile(
    r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/|,(?=\s*[}\]])',
    re.DOTALL,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_alias_table(
        project_root: str,
        config_file_name: str = PROJECT_CONFIG_FILE,
) -> Optional[AliasTable]:
    """
    Load the alias table for a project.

    Args:
        project_root: Directory where the upward configuration search starts.
        config_file_name: Name of the project configuration file.

    Returns:
        Optional[AliasTable]: The table, or None when no configuration exists
                              or it declares no path mappings.
    """
    config_path = find_file_upwards(project_root, config_file_name)
    if config_path is None:
        logger.debug(f"No {config_file_name} found above {project_root}. Alias resolution disabled.")
        return None

    text = read_text(config_path)
    if text is None:
        logger.warning(f"Project configuration unreadable: {config_path}. Alias resolution disabled.")
        return None

    data = parse_config_text(text)
    if data is None:
        logger.warning(f"Project configuration is not valid JSON: {config_path}. Alias resolution disabled.")
        return None

    table = build_alias_table(data, os.path.dirname(config_path), config_path)
    if table is None:
        logger.debug(f"{config_path} declares no path aliases.")
    else:
        logger.debug(f"Loaded {len(table.rules)} alias rule(s) from {config_path} (baseUrl={table.base_dir})")
    return table


def parse_config_text(text: str) -> Optional[Dict[str, Any]]:
    """
    Decode configuration text that may contain comments and trailing commas.

    Returns:
        Optional[Dict[str, Any]]: The decoded object, or None if the text is
                                  not a JSON object.
    """
    cleaned = _JSONC_TOKEN_RE.sub(lambda m: m.group(1) or "", text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def build_alias_table(
        data: Dict[str, Any],
        config_dir: str,
        config_path: str = "",
) -> Optional[AliasTable]:
    """
    Build an alias table from a decoded configuration object.

    Only the first replacement template of each pattern is kept. Patterns
    with no usable template are skipped.

    Args:
        data: Decoded project configuration.
        config_dir: Directory containing the configuration file.
        config_path: Source path recorded on the table.

    Returns:
        Optional[AliasTable]: The table, or None if no rule survives.
    """
    compiler_options = data.get("compilerOptions")
    if not isinstance(compiler_options, dict):
        return None

    paths = compiler_options.get("paths")
    if not isinstance(paths, dict) or not paths:
        return None

    base_url = compiler_options.get("baseUrl")
    if not isinstance(base_url, str) or not base_url:
        base_url = DEFAULT_BASE_URL
    base_dir = os.path.normpath(os.path.join(os.path.abspath(config_dir), base_url))

    rules: List[AliasRule] = []
    for pattern, templates in paths.items():
        if isinstance(templates, str):
            templates = [templates]
        if not isinstance(templates, list) or not templates or not isinstance(templates[0], str):
            logger.debug(f"Alias '{pattern}' has no usable replacement. Skipped.")
            continue
        if len(templates) > 1:
            logger.debug(f"Alias '{pattern}' declares {len(templates)} replacements; only the first is used.")
        rules.append(AliasRule(pattern=pattern, replacement=templates[0]))

    if not rules:
        return None
    return AliasTable(base_dir=base_dir, rules=tuple(rules), config_path=config_path)


def match_alias(specifier: str, table: AliasTable) -> Optional[str]:
    """
    Map a bare specifier through the first matching alias rule.

    Args:
        specifier: Raw import specifier.
        table: Loaded alias table.

    Returns:
        Optional[str]: Absolute, unprobed target path, or None if no rule matches.
    """
    for rule in table.rules:
        match = _compile_alias_pattern(rule.pattern).match(specifier)
        if match is None:
            continue
        capture = match.group(1) if match.groups() else ""
        replacement = rule.replacement.replace("*", capture or "", 1)
        return os.path.normpath(os.path.join(table.base_dir, replacement))
    return None

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

@lru_cache(maxsize=256)
def _compile_alias_pattern(pattern: str) -> Pattern[str]:
    """Translate an alias pattern into an anchored regex with one lazy capture."""
    prefix, star, suffix = pattern.partition("*")
    if not star:
        return re.compile(f"^{re.escape(pattern)}$")
    # Any further '*' in the suffix is treated literally.
    return re.compile(f"^{re.escape(prefix)}(.*?){re.escape(suffix)}$", re.DOTALL)
