from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem primitives consumed by the analysis core: existence
and size probes, safe text reads, upward configuration lookup and path
normalization. Every probe degrades to "absent" instead of raising, so a
single unreadable file never aborts a traversal.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ImportCollapser"
UNIX_APP_DIR_NAME = ".import_collapser"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent user data.

    Standards:
    - Windows: %LOCALAPPDATA%/ImportCollapser
    - Linux/Mac: ~/.import_collapser

    The directory is not created; callers only read from it.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def relative_label(path: str, base: Optional[str] = None) -> str:
    """
    Express a path relative to a base directory for display.

    Falls back to the absolute path when no relative form exists
    (e.g. different drives on Windows).
    """
    try:
        return os.path.relpath(path, base or os.getcwd())
    except ValueError:
        return path


def find_file_upwards(start_dir: str, file_name: str) -> Optional[str]:
    """
    Locate the nearest file with the given name in start_dir or its ancestors.

    Args:
        start_dir: Directory where the search begins.
        file_name: Exact file name to look for.

    Returns:
        Optional[str]: Absolute path of the first match, or None.
    """
    current = os.path.abspath(start_dir)
    while True:
        candidate = os.path.join(current, file_name)
        if is_file(candidate):
            return candidate
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent

# -----------------------------------------------------------------------------
# FILESYSTEM PROBES
# -----------------------------------------------------------------------------

def is_file(path: str) -> bool:
    """Return True if path names an existing regular file."""
    try:
        return os.path.isfile(path)
    except (OSError, ValueError):
        return False


def file_size(path: str) -> Optional[int]:
    """
    Return the on-disk size of a file in bytes.

    Returns:
        Optional[int]: Size in bytes, or None if the stat call fails.
    """
    try:
        return os.stat(path).st_size
    except (OSError, ValueError):
        return None


def read_text(path: str) -> Optional[str]:
    """
    Read a UTF-8 text file.

    Returns:
        Optional[str]: File contents, or None if the file cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError:
        return None
