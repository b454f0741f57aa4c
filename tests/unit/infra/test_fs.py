from __future__ import annotations

"""
Unit tests for the FileSystem Infrastructure Layer.
"""

import os
from unittest.mock import patch

import pytest

from includewalker.infra.fs import get_user_data_dir, normalize_path, safe_mkdir, strip_root


def test_strip_root_returns_remainder():
    root = os.path.join(os.sep, "proj", "src")
    path = os.path.join(root, "lib", "a.h")

    assert strip_root(path, root) == os.path.join("lib", "a.h")


def test_strip_root_tolerates_trailing_separator_and_dot_root():
    root = os.path.join(os.sep, "proj") + os.sep

    assert strip_root(os.path.join(root, "a.h"), root) == "a.h"
    assert strip_root(os.path.join(".", "a.h"), ".") == "a.h"


def test_strip_root_requires_component_prefix():
    root = os.path.join(os.sep, "proj", "lib")

    with pytest.raises(ValueError):
        strip_root(os.path.join(os.sep, "proj", "library", "a.h"), root)


def test_strip_root_rejects_root_itself_and_outside_paths():
    root = os.path.join(os.sep, "proj")

    with pytest.raises(ValueError):
        strip_root(root, root)
    with pytest.raises(ValueError):
        strip_root(os.path.join(os.sep, "other", "a.h"), root)


def test_normalize_path_uses_fallback(tmp_path):
    assert normalize_path("", str(tmp_path)) == os.path.abspath(str(tmp_path))
    assert normalize_path(None, str(tmp_path)) == os.path.abspath(str(tmp_path))


def test_normalize_path_expands_user(tmp_path):
    with patch.dict(os.environ, {"HOME": str(tmp_path), "USERPROFILE": str(tmp_path)}):
        assert normalize_path("~/code", "/") == os.path.join(str(tmp_path), "code")


def test_get_user_data_dir_creates_folder(tmp_path):
    with patch("includewalker.infra.fs.os.path.expanduser", return_value=str(tmp_path)), \
            patch("includewalker.infra.fs.os.name", "posix"):
        path = get_user_data_dir()

    assert path == os.path.join(str(tmp_path), ".includewalker")
    assert os.path.isdir(path)


def test_safe_mkdir(tmp_path):
    ok, err = safe_mkdir(str(tmp_path / "a" / "b"))

    assert ok is True
    assert err is None
    assert (tmp_path / "a" / "b").is_dir()
