from __future__ import annotations

"""
Nested Mapping Data Models.

Provides the recursive type used to represent the embedded directory
structure together with the atomic units fed into it.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

# A leaf is the base64 text of one file; a node maps one segment to a subtree.
Tree = Dict[str, Union["Tree", str]]


@dataclass(frozen=True)
class PathSegments:
    """
    Canonical decomposition of a filesystem path.

    Attributes:
        absolute: Whether the source path was absolute (rooted under ROOT_KEY).
        parts: Ordered directory/file names, root marker and empty parts removed.
    """
    absolute: bool
    parts: Tuple[str, ...]


@dataclass(frozen=True)
class EncodedFile:
    """
    One input file ready for insertion into the tree.

    Attributes:
        path: Filesystem path as discovered (not resolved).
        segments: Normalized key sequence for the tree.
        content: Base64 text of the raw file bytes.
        size: Raw byte length before encoding.
    """
    path: str
    segments: PathSegments
    content: str
    size: int

