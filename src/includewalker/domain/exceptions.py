from __future__ import annotations

"""
Exception hierarchy for the include analysis domain.

Structured, typed exceptions let callers tell a malformed file name
apart from a circular include chain.
"""

from typing import Any, Dict, List, Optional


class IncludeWalkerError(Exception):
    """Base exception for all includewalker errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class NoStemError(IncludeWalkerError, ValueError):
    """A path or include target cannot be reduced to a file stem."""

    def __init__(self, path: str):
        super().__init__(
            f"Cannot determine file stem of '{path}'",
            details={"path": path},
        )
        self.path = path


class CycleError(IncludeWalkerError):
    """The graph contains a circular include chain."""

    def __init__(self, remaining: List[Any]):
        super().__init__(
            f"Circular dependency detected: {len(remaining)} node(s) could not be ordered",
            details={"remaining": len(remaining)},
        )
        self.remaining = remaining
