from __future__ import annotations

"""
Nested Mapping Builder.

Accumulates encoded files into the Tree model. Every file becomes a leaf
at the position named by its path segments; relative paths start at the
top level and absolute paths below the reserved root key.
"""

import logging
from typing import Iterable, Tuple

from embedfiles.core.scanner import iter_encoded_files
from embedfiles.domain.constants import ROOT_KEY
from embedfiles.domain.errors import PathConflictError
from embedfiles.domain.tree_models import EncodedFile, PathSegments, Tree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(input_paths: Iterable[str]) -> Tuple[Tree, int, int]:
    """
    Walk the inputs and build the nested mapping of base64 contents.

    Args:
        input_paths: Files and/or directories to embed.

    Returns:
        Tuple[Tree, int, int]: (Populated mapping, file count, total raw bytes).

    Raises:
        PathConflictError: If two inputs collide on the same segment sequence.
        OSError: If an input cannot be listed or read.
    """
    tree: Tree = {}
    file_count = 0
    total_bytes = 0

    for encoded in iter_encoded_files(input_paths):
        add_encoded_file(tree, encoded)
        file_count += 1
        total_bytes += encoded.size

    logger.info(f"Collected {file_count} file(s), {total_bytes} bytes.")
    return tree, file_count, total_bytes


def add_encoded_file(tree: Tree, encoded: EncodedFile) -> None:
    """Insert one EncodedFile as a leaf of the tree."""
    set_nested_value(tree, encoded.segments, encoded.content, source=encoded.path)


def set_nested_value(tree: Tree, segments: PathSegments, value: str, source: str = "") -> None:
    """
    Store a leaf at the position named by the segments.

    Missing intermediate nodes are created. Nothing is ever overwritten: a
    leaf in the way of a node, a node in the way of a leaf, or an existing
    leaf at the final position is a conflict.

    Args:
        tree: Mapping being populated.
        segments: Normalized key sequence.
        value: Base64 content to store.
        source: Original path, used in error messages.

    Raises:
        PathConflictError: On any structural collision.
    """
    source = source or "/".join(segments.parts)
    if not segments.parts:
        raise PathConflictError(source, "", "path does not name a file")

    current = tree
    if segments.absolute:
        current = _descend(current, ROOT_KEY, source)

    for part in segments.parts[:-1]:
        current = _descend(current, part, source)

    last = segments.parts[-1]
    if last in current:
        existing = current[last]
        reason = "a directory already occupies this path" if isinstance(existing, dict) \
            else "a file was already embedded at this path"
        raise PathConflictError(source, last, reason)

    current[last] = value

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _descend(node: Tree, key: str, source: str) -> Tree:
    """Step into a child node, creating it when absent."""
    child = node.setdefault(key, {})
    if not isinstance(child, dict):
        raise PathConflictError(source, key, "a file already occupies this directory path")
    return child
