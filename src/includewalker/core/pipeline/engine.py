from __future__ import annotations

"""
Core analysis pipeline.

Coordinates one include analysis:
1. Validates configuration and the input path.
2. Builds the dependency forest from the source tree.
3. Computes the include order (or reports the cycle).
4. Persists the scan error report when requested.
"""

import logging
import os
from typing import Any, Dict, Optional, Tuple

from includewalker.core.analysis.forest import DependencyForest
from includewalker.core.pipeline.components.filters import compile_patterns
from includewalker.core.pipeline.stages.validator import validate_config
from includewalker.core.services.scanner import finalize_error_reporting
from includewalker.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from includewalker.domain.exceptions import CycleError
from includewalker.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def build_forest(cfg: Dict[str, Any], base_path: str) -> DependencyForest:
    """
    Scan ``base_path`` into a new forest according to a validated config.

    Args:
        cfg: Validated configuration.
        base_path: Normalized root directory.

    Returns:
        DependencyForest: The populated forest.
    """
    forest = DependencyForest()
    forest.fill_from_directory(
        base_path,
        cfg["recursive"],
        exclude_rx=compile_patterns(cfg["exclude_patterns"]),
    )
    return forest


def run_analysis(
        config: Optional[Dict[str, Any]],
) -> Tuple[AnalysisResult, Optional[DependencyForest]]:
    """
    Execute the full include analysis.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        Tuple[AnalysisResult, Optional[DependencyForest]]: The result object
        and the forest it was computed from (None if the scan never ran).
    """
    logger.info("Include analysis started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg.get("input_path", ""), os.getcwd())

    if not os.path.isdir(base_path):
        msg = f"Invalid input directory: {base_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, base_path), None

    # -------------------------------------------------------------------------
    # 2) Forest Construction
    # -------------------------------------------------------------------------
    forest = build_forest(cfg, base_path)
    errors = list(forest.errors)

    error_log_path = ""
    if cfg["save_error_log"]:
        # Relative report paths follow the caller's working directory
        target = os.path.abspath(cfg["error_log_path"])
        error_log_path = finalize_error_reporting(True, target, errors)

    summary = {
        "files": len(forest) - len(forest.external_nodes()),
        "errors": len(errors),
        "error_log": error_log_path,
    }

    # -------------------------------------------------------------------------
    # 3) Ordering
    # -------------------------------------------------------------------------
    try:
        order = forest.include_order(cfg["with_external"])
    except CycleError as e:
        cycle = sorted(node.key for node in e.remaining)
        logger.error(f"{e}: {', '.join(cycle)}")
        return create_error_result(
            str(e), cfg, base_path,
            node_count=len(forest),
            cycle=cycle,
            errors=errors,
            error_log_path=error_log_path,
            summary_extra=summary,
        ), forest

    logger.info(f"Include order computed for {len(order)} node(s).")

    return create_success_result(
        cfg=cfg,
        base_path=base_path,
        node_count=len(forest),
        external_count=len(forest.external_nodes()),
        order=[node.to_dict() for node in order],
        errors=errors,
        error_log_path=error_log_path,
        summary_extra=summary,
    ), forest
