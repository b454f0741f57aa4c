from __future__ import annotations

"""
Path Filtering Engine.

Implements the regex-based exclusion logic applied to directory and file
names during a scan.
"""

import logging
import re
from typing import List

from includewalker.domain.constants import DEFAULT_EXCLUDE_PATTERNS

logger = logging.getLogger(__name__)


def default_exclude_patterns() -> List[str]:
    """
    Get the default exclusion patterns (version control metadata).

    Returns:
        List[str]: Regex strings matched against single path components.
    """
    return list(DEFAULT_EXCLUDE_PATTERNS)


def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are logged and discarded so that one bad
    user-supplied pattern does not abort the scan.

    Args:
        patterns: List of raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a name matches at least one compiled regex pattern.

    Args:
        name: File or directory name to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found, False otherwise.
    """
    return any(rx.search(name) for rx in compiled_patterns)
