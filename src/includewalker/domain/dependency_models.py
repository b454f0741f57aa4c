from __future__ import annotations

"""
Dependency Domain Data Models.

Defines the graph vertex used by the dependency forest and the DTO used to
report non-fatal failures during a directory scan.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# GRAPH VERTEX
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class DependencyNode:
    """
    One logical file of the scanned tree.

    Nodes hash and compare by identity; two nodes are the same vertex only
    if they are the same object owned by a forest.

    Attributes:
        key: Canonical identity produced by the normalizer.
        path: Location relative to the scanned root, or None for an external
              node that was only ever referenced by an ``#include``.
        uses: Keys of the files this one includes, in extraction order.
        used_by: Keys of the files that include this one.
    """
    key: str
    path: Optional[str] = None
    uses: List[str] = field(default_factory=list)
    used_by: List[str] = field(default_factory=list)

    @property
    def is_external(self) -> bool:
        return self.path is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "path": self.path,
            "uses": list(self.uses),
            "used_by": list(self.used_by),
        }

# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

class ErrorKind(str, Enum):
    """Categories of recoverable build-phase failures."""
    NO_STEM = "no_stem"
    DIRECTORY_READ_FAILURE = "directory_read_failure"
    FILE_READ_FAILURE = "file_read_failure"


@dataclass(frozen=True)
class ScanError:
    """
    Encapsulates one skipped file, dependency or directory.

    Attributes:
        rel_path: Offending path or include target.
        kind: Failure category.
        error: Descriptive exception or error message.
    """
    rel_path: str
    kind: ErrorKind
    error: str
