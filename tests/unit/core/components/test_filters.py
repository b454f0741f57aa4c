from __future__ import annotations

"""
Unit tests for the Path Filtering Engine.

Verifies regex compilation, exclusion matching and the default patterns.
"""

import re

from includewalker.core.pipeline.components.filters import (
    compile_patterns,
    default_exclude_patterns,
    matches_any,
)


def test_compile_patterns_handles_valid_and_invalid():
    """Valid patterns compile and invalid ones are dropped."""
    compiled = compile_patterns([r"^build$", r"[invalid_regex", r"third_party"])

    assert len(compiled) == 2
    assert isinstance(compiled[0], re.Pattern)


def test_matches_any_logic():
    compiled = compile_patterns([r"^build", r".*\.generated\.h$"])

    assert matches_any("build-debug", compiled) is True
    assert matches_any("proto.generated.h", compiled) is True
    assert matches_any("proto.h", compiled) is False
    assert matches_any("anything", []) is False


def test_default_exclusions_block_vcs_metadata():
    defaults = compile_patterns(default_exclude_patterns())

    for name in [".git", ".svn", ".hg"]:
        assert matches_any(name, defaults) is True, name

    for name in ["src", "include", ".github", "git.h"]:
        assert matches_any(name, defaults) is False, name


def test_default_exclusions_are_a_fresh_list():
    first = default_exclude_patterns()
    first.append("x")

    assert "x" not in default_exclude_patterns()
