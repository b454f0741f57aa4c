from __future__ import annotations

"""
File Identity Normalization.

Reduces filesystem paths and ``#include`` targets to canonical graph keys.
A key is the file stem tagged ``_hdr`` (no extension, or a header
extension) or ``_src`` (a source extension). Other extensions yield the
bare stem.

Keys ignore directories: ``core/util.h`` and ``net/util.h``
collapse into ``util_hdr``.
"""

import ntpath
import posixpath
from typing import Optional, Tuple

from includewalker.domain.constants import (
    HEADER_EXTENSIONS,
    HEADER_TAG,
    SCANNED_EXTENSIONS,
    SOURCE_EXTENSIONS,
    SOURCE_TAG,
)
from includewalker.domain.exceptions import NoStemError


def normalize(path_or_name: str) -> str:
    """
    Map a path or an include target to its canonical key.

    Args:
        path_or_name: Absolute, relative or bare file reference. Both ``/``
                      and ``\\`` are accepted as separators.

    Returns:
        str: The canonical key, e.g. ``"vector_hdr"`` or ``"main_src"``.

    Raises:
        NoStemError: If the input has no file name component.
    """
    stem, ext = split_name(path_or_name)

    if ext is None or ext in HEADER_EXTENSIONS:
        return stem + HEADER_TAG
    if ext in SOURCE_EXTENSIONS:
        return stem + SOURCE_TAG
    return stem


def split_name(path_or_name: str) -> Tuple[str, Optional[str]]:
    """
    Split the final path component into stem and extension.

    A leading dot does not start an extension (``.profile`` has stem
    ``.profile`` and no extension), matching how file stems are usually
    computed.

    Returns:
        tuple: ``(stem, extension_without_dot or None)``.

    Raises:
        NoStemError: If the input has no file name component.
    """
    name = ntpath.basename(posixpath.basename(path_or_name))
    if name in ("", ".", ".."):
        raise NoStemError(path_or_name)

    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return name, None
    return stem, ext


def is_source_or_header(path: str) -> bool:
    """
    Check whether a file should be parsed for includes.

    Extensionless files pass, since they normalize to header keys.
    """
    try:
        _, ext = split_name(path)
    except NoStemError:
        return False
    return ext is None or ext in SCANNED_EXTENSIONS
