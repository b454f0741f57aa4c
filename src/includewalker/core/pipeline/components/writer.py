from __future__ import annotations

"""
Report Rendering Component.

Turns analysis results and forest queries into terminal text or JSON.
"""

import json
from dataclasses import asdict
from typing import List

from includewalker.core.analysis.forest import DependencyForest
from includewalker.domain.analysis_models import AnalysisResult


def render_text(result: AnalysisResult) -> List[str]:
    """
    Build the human-readable report of an analysis.

    Args:
        result: The analysis outcome.

    Returns:
        List[str]: Report lines, without trailing newlines.
    """
    lines: List[str] = []

    if not result.ok:
        lines.append(f"ERROR: {result.error}")
        if result.cycle:
            lines.append("Files caught in or behind the include cycle:")
            lines.extend(f"  - {key}" for key in result.cycle)
    else:
        lines.append(f"Include order for {result.base_path}:")
        width = len(str(len(result.order)))
        for i, node in enumerate(result.order, start=1):
            location = node["path"] if node["path"] is not None else "<external>"
            lines.append(f"{i:>{width}}. {node['key']}  {location}")
        lines.append("")
        lines.append(f"Nodes: {result.node_count} ({result.external_count} external)")

    if result.errors:
        lines.append(f"Skipped entries: {len(result.errors)}")
        for err in result.errors:
            lines.append(f"  - [{err.kind.value}] {err.rel_path}: {err.error}")

    if result.error_log_path:
        lines.append(f"Error report: {result.error_log_path}")

    return lines


def render_json(result: AnalysisResult) -> str:
    """Serialize an analysis result as indented JSON."""
    return json.dumps(asdict(result), ensure_ascii=False, indent=2)


def render_users(forest: DependencyForest, key: str) -> List[str]:
    """
    Describe which files include ``key``.

    Returns:
        List[str]: Report lines; a single notice if the key is unknown.
    """
    if key not in forest.node_map:
        return [f"No node with key '{key}'."]

    users = forest.users_of(key)
    lines = [f"{key} is used by {len(users)} file(s):"]
    for node in users:
        lines.append(f"  - {node.key}  {node.path if node.path is not None else '<external>'}")
    return lines
