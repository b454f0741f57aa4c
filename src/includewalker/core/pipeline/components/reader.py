from __future__ import annotations

"""
Include Directive Reader.

Extracts ``#include`` targets from C/C++ text, line by line. Files are
streamed with the 'replace' decoding strategy so that stray non-UTF-8 bytes
in comments or string literals do not abort a scan.
"""

import re
from typing import Iterable, Iterator, List, Optional

# `#include "x"` or `#include <x>`, with optional whitespace around the
# directive. Empty targets do not match.
INCLUDE_RE = re.compile(r'^\s*#include\s*(?:"([^"]+)"|<([^>]+)>)')

# -----------------------------------------------------------------------------
# LINE PARSING
# -----------------------------------------------------------------------------

def parse_include(line: str) -> Optional[str]:
    """
    Return the include target of a single line, or None if it has none.

    Args:
        line: One line of source text.

    Returns:
        Optional[str]: The literal target between the delimiters.
    """
    match = INCLUDE_RE.match(line)
    if match is None:
        return None
    return match.group(1) if match.group(1) is not None else match.group(2)


def iter_includes(lines: Iterable[str]) -> Iterator[str]:
    """Yield the include targets of ``lines`` in order of appearance."""
    for line in lines:
        target = parse_include(line)
        if target is not None:
            yield target


def extract_includes(text: str) -> List[str]:
    """
    Extract every include target of a file's contents.

    Args:
        text: Full text of a source or header file.

    Returns:
        List[str]: Targets in order of appearance, duplicates preserved.
    """
    return list(iter_includes(text.splitlines()))

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_content(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Undecodable bytes are replaced with placeholder characters instead of
    raising UnicodeDecodeError.

    Args:
        file_path: Path to the target file.

    Yields:
        str: Lines from the file.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line


def read_includes(file_path: str) -> List[str]:
    """
    Extract every include target of a file on disk.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return list(iter_includes(stream_file_content(file_path)))
