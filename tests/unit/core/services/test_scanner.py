from __future__ import annotations

"""
Unit tests for the File Discovery Service.

Verifies recursive and flat walking, name pruning, directory read failure
reporting and persistence of the scan error report.
"""

import os
import re
from pathlib import Path
from unittest.mock import patch

import pytest

from includewalker.core.services.scanner import finalize_error_reporting, walk
from includewalker.domain.dependency_models import ErrorKind, ScanError


@pytest.fixture
def mock_fs_structure(tmp_path: Path) -> Path:
    """Create a temporary source tree for scanning tests."""
    root = tmp_path / "project"
    (root / "include").mkdir(parents=True)
    (root / "src" / "detail").mkdir(parents=True)
    (root / ".git").mkdir()

    (root / "CMakeLists.txt").write_text("", encoding="utf-8")
    (root / "include" / "api.h").write_text("", encoding="utf-8")
    (root / "src" / "api.cpp").write_text("", encoding="utf-8")
    (root / "src" / "detail" / "impl.hpp").write_text("", encoding="utf-8")
    (root / ".git" / "HEAD").write_text("", encoding="utf-8")
    return root


def rel(paths, root: Path):
    return [os.path.relpath(p, str(root)) for p in paths]


def test_walk_recursive_yields_all_files_sorted(mock_fs_structure: Path):
    files = rel(walk(str(mock_fs_structure), True), mock_fs_structure)

    assert files == [
        "CMakeLists.txt",
        os.path.join(".git", "HEAD"),
        os.path.join("include", "api.h"),
        os.path.join("src", "api.cpp"),
        os.path.join("src", "detail", "impl.hpp"),
    ]


def test_walk_flat_yields_immediate_files_only(mock_fs_structure: Path):
    files = rel(walk(str(mock_fs_structure), False), mock_fs_structure)

    assert files == ["CMakeLists.txt"]


def test_walk_never_yields_directories(mock_fs_structure: Path):
    for path in walk(str(mock_fs_structure), True):
        assert os.path.isfile(path)


def test_walk_prunes_excluded_names(mock_fs_structure: Path):
    exclude = [re.compile(r"^\.git$"), re.compile(r"^detail$"), re.compile(r"\.txt$")]

    files = rel(walk(str(mock_fs_structure), True, exclude), mock_fs_structure)

    assert files == [os.path.join("include", "api.h"), os.path.join("src", "api.cpp")]


def test_walk_keeps_root_prefix_verbatim(mock_fs_structure: Path):
    root = str(mock_fs_structure) + os.sep
    for path in walk(root, False):
        assert path.startswith(root)


def test_walk_reports_unreadable_directory(tmp_path: Path):
    missing = str(tmp_path / "missing")
    reported = []

    files = list(walk(missing, True, on_error=lambda p, e: reported.append((p, e))))

    assert files == []
    assert len(reported) == 1
    assert reported[0][0] == missing
    assert isinstance(reported[0][1], OSError)


def test_walk_skips_failing_subtree_and_continues(mock_fs_structure: Path):
    """A listing failure inside os.walk is reported and the walk goes on."""
    real_walk = os.walk

    def flaky_walk(top, onerror=None, **kwargs):
        onerror(PermissionError(13, "Permission denied", os.path.join(top, "locked")))
        yield from real_walk(top, onerror=onerror, **kwargs)

    reported = []
    with patch("includewalker.core.services.scanner.os.walk", side_effect=flaky_walk):
        files = list(walk(str(mock_fs_structure), True, on_error=lambda p, e: reported.append(p)))

    assert reported == [os.path.join(str(mock_fs_structure), "locked")]
    assert len(files) == 5


def test_finalize_error_reporting_persistence(tmp_path: Path):
    error_path = tmp_path / "reports" / "errors.txt"
    errors = [
        ScanError(rel_path="src/weird.h", kind=ErrorKind.NO_STEM, error="Cannot determine file stem"),
        ScanError(rel_path="/locked", kind=ErrorKind.DIRECTORY_READ_FAILURE, error="Permission denied"),
    ]

    path = finalize_error_reporting(True, str(error_path), errors)

    assert path == str(error_path)
    content = error_path.read_text(encoding="utf-8")
    assert "INCLUDE SCAN ERRORS REPORT" in content
    assert "src/weird.h" in content
    assert "directory_read_failure" in content


def test_finalize_error_reporting_skips_when_disabled_or_empty(tmp_path: Path):
    target = tmp_path / "errors.txt"
    err = ScanError(rel_path="x", kind=ErrorKind.NO_STEM, error="e")

    assert finalize_error_reporting(False, str(target), [err]) == ""
    assert finalize_error_reporting(True, str(target), []) == ""
    assert not target.exists()
