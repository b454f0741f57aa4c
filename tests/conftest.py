from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample source trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "input_path": str(tmp_path),
        "recursive": True,
        "exclude_patterns": [r"^(\.git|\.svn|\.hg)$"],
        "with_external": True,
        "output_format": "text",
        "save_error_log": False,
        "error_log_path": "includewalker_errors.txt",
    }


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a factory that writes ``{relative_path: contents}`` under a fresh
    'src' directory and returns that directory.
    """
    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def simple_tree(make_tree: Callable[[Dict[str, str]], Path]) -> Path:
    """
    Two headers sharing a standard library include, plus a source file
    that includes both headers.
    """
    return make_tree({
        "a.h": "#pragma once\n#include <vector>\n",
        "b.h": "#pragma once\n#include <vector>\n",
        "main.cpp": '#include "a.h"\n#include "b.h"\n\nint main() { return 0; }\n',
    })
