from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the file classification tables shared by the identity
normalizer, the directory scan filter and the configuration layer.
"""

from typing import FrozenSet, List

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# FILE CLASSIFICATION
# -----------------------------------------------------------------------------

HEADER_EXTENSIONS: FrozenSet[str] = frozenset({"h", "hpp", "hxx"})
SOURCE_EXTENSIONS: FrozenSet[str] = frozenset({"c", "cpp", "cxx"})
SCANNED_EXTENSIONS: FrozenSet[str] = HEADER_EXTENSIONS | SOURCE_EXTENSIONS

HEADER_TAG = "_hdr"
SOURCE_TAG = "_src"

# -----------------------------------------------------------------------------
# SCAN DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    r"^(\.git|\.svn|\.hg)$",
]

OUTPUT_FORMATS: FrozenSet[str] = frozenset({"text", "json"})
