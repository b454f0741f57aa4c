from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and user data directory
resolution. Acts as an abstraction over the 'os' module to ensure uniform
behavior across Windows and Unix-like systems.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "IncludeWalker"
UNIX_APP_DIR_NAME = ".includewalker"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/IncludeWalker
    - Linux/Mac: ~/.includewalker

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def strip_root(path: str, root: str) -> str:
    """
    Express a path relative to the scanned root by stripping the root prefix.

    Matching is component-wise: ``/src/lib`` is not a prefix of
    ``/src/library/a.h``.

    Args:
        path: File path as yielded by the directory walk.
        root: Root directory string the walk started from.

    Returns:
        str: The remainder of ``path`` below ``root``.

    Raises:
        ValueError: If ``path`` does not lie under ``root``.
    """
    root_parts = _split_parts(root)
    path_parts = _split_parts(path)

    if len(path_parts) <= len(root_parts) or path_parts[:len(root_parts)] != root_parts:
        raise ValueError(f"'{path}' does not lie under root '{root}'")

    return os.path.join(*path_parts[len(root_parts):])


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _split_parts(path: str) -> Tuple[str, ...]:
    """Split a path into its non-empty, non-'.' components."""
    norm = os.path.normpath(path)
    drive, tail = os.path.splitdrive(norm)
    parts = [p for p in tail.split(os.sep) if p and p != "."]
    if tail.startswith(os.sep):
        parts.insert(0, os.sep)
    if drive:
        parts.insert(0, drive)
    return tuple(parts)
