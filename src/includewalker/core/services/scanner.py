from __future__ import annotations

"""
File Discovery Service.

Traverses source directories and yields every regular file below them,
pruning excluded names early. Also persists the diagnostics collected
during a scan.
"""

import logging
import os
import re
from typing import Callable, Iterator, List, Optional

from includewalker.core.pipeline.components.filters import matches_any
from includewalker.domain.dependency_models import ScanError
from includewalker.infra.fs import safe_mkdir

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[str, OSError], None]


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def walk(
        root: str,
        recursive: bool,
        exclude_rx: Optional[List[re.Pattern]] = None,
        on_error: Optional[ErrorCallback] = None,
) -> Iterator[str]:
    """
    Yield the path of every file under ``root``.

    Paths are built by joining onto ``root`` exactly as given, so they can
    be stripped back to root-relative form. Entries are visited in sorted
    order. Directories are never yielded.

    Args:
        root: Directory to scan.
        recursive: Descend into subdirectories if True; otherwise list only
                   the immediate children of ``root``.
        exclude_rx: Compiled patterns; matching directory names are pruned
                    and matching file names skipped.
        on_error: Called with ``(path, exc)`` for every directory that
                  cannot be listed. The subtree is skipped either way.

    Yields:
        str: File paths.
    """
    exclude_rx = exclude_rx or []

    def _on_walk_error(exc: OSError) -> None:
        path = exc.filename or root
        logger.warning(f"Cannot read directory '{path}': {exc}")
        if on_error is not None:
            on_error(path, exc)

    for dirpath, dirs, files in os.walk(root, onerror=_on_walk_error):
        if recursive:
            dirs[:] = sorted(d for d in dirs if not matches_any(d, exclude_rx))
        else:
            dirs[:] = []

        for file_name in sorted(files):
            if matches_any(file_name, exclude_rx):
                continue
            yield os.path.join(dirpath, file_name)


def finalize_error_reporting(
        save_error_log: bool,
        error_output_path: str,
        errors: List[ScanError]
) -> str:
    """
    Persist collected scan errors to a dedicated report file.

    Args:
        save_error_log: Permission flag to write the file.
        error_output_path: Target filesystem path for the error report.
        errors: Collection of errors encountered during the scan.

    Returns:
        str: The path to the generated report, or an empty string if not saved.
    """
    if not (save_error_log and errors):
        return ""

    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(error_output_path)))
    if not ok:
        logger.error(f"Cannot create report directory for '{error_output_path}': {err}")
        return ""

    try:
        with open(error_output_path, "w", encoding="utf-8") as f:
            f.write("INCLUDE SCAN ERRORS REPORT:\n")
            f.write("=" * 80 + "\n")
            for err_item in errors:
                f.write(f"PATH: {err_item.rel_path}\n")
                f.write(f"KIND: {err_item.kind.value}\n")
                f.write(f"ERROR: {err_item.error}\n")
                f.write("-" * 80 + "\n")
    except OSError as e:
        logger.error(f"Failed to persist error report to '{error_output_path}': {e}")
        return ""

    return error_output_path
