from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the result object and factory functions used to communicate an
include analysis between the engine and the interface layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from includewalker.domain.dependency_models import ScanError

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result object of a complete include analysis.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Normalized root directory scanned.
        recursive: Whether subdirectories were scanned.
        with_external: Whether external nodes lead the order.
        node_count: Total number of nodes in the forest.
        external_count: Number of nodes never found under the root.
        order: Node records in include order (dependencies first).
        cycle: Keys that could not be ordered because of a cycle.
        errors: Non-fatal failures collected during the scan.
        error_log_path: Path of the persisted error report, if any.
        summary: Technical execution summary and statistics.
    """
    ok: bool
    error: str

    base_path: str
    recursive: bool
    with_external: bool

    node_count: int = 0
    external_count: int = 0
    order: List[Dict[str, Any]] = field(default_factory=list)
    cycle: List[str] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)
    error_log_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        base_path: str,
        node_count: int = 0,
        cycle: Optional[List[str]] = None,
        errors: Optional[List[ScanError]] = None,
        error_log_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a failed analysis result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        base_path: The target input directory.
        node_count: Size of the forest, if it was built.
        cycle: Keys caught in a circular include chain.
        errors: Scan diagnostics collected before the failure.
        error_log_path: Path to the error report, if one was written.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        base_path=base_path,
        recursive=cfg.get("recursive", True),
        with_external=cfg.get("with_external", True),
        node_count=node_count,
        cycle=cycle or [],
        errors=errors or [],
        error_log_path=error_log_path,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        base_path: str,
        node_count: int,
        external_count: int,
        order: List[Dict[str, Any]],
        errors: Optional[List[ScanError]] = None,
        error_log_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a successful analysis result instance.

    Args:
        cfg: Final configuration used during execution.
        base_path: Normalized input directory.
        node_count: Total number of nodes.
        external_count: Number of external nodes.
        order: Serialized nodes in include order.
        errors: Scan diagnostics.
        error_log_path: Path to the persisted error report.
        summary_extra: Final execution metrics.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        base_path=base_path,
        recursive=cfg.get("recursive", True),
        with_external=cfg.get("with_external", True),
        node_count=node_count,
        external_count=external_count,
        order=order,
        errors=errors or [],
        error_log_path=error_log_path,
        summary=summary_extra or {},
    )
