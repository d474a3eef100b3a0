from __future__ import annotations

"""
Path Normalization.

Turns filesystem paths into the key sequences used by the nested mapping.
"""

import os
import re
from typing import List

from embedfiles.domain.tree_models import PathSegments

_SEPARATORS = [sep for sep in (os.sep, os.altsep) if sep]
_SPLIT_RX = re.compile("|".join(re.escape(sep) for sep in _SEPARATORS))


def to_path_segments(path: str) -> PathSegments:
    """
    Normalize a path into its canonical segment sequence.

    '.' and '..' are resolved lexically (symlinks are not followed), empty
    segments are dropped and, for absolute paths, the root marker and any
    drive letter are stripped. Leading '..' segments of a relative path
    survive as keys.

    Args:
        path: Absolute or relative filesystem path.

    Returns:
        PathSegments: The absolute flag and the ordered segment names.
    """
    absolute = os.path.isabs(path)
    normalized = os.path.normpath(path)
    if absolute:
        _, normalized = os.path.splitdrive(normalized)

    parts: List[str] = [p for p in _SPLIT_RX.split(normalized) if p and p != "."]
    return PathSegments(absolute=absolute, parts=tuple(parts))
