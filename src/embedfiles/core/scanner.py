from __future__ import annotations

"""
Input Discovery Service.

Expands the list of user inputs into the regular files they denote and
reads each one into an EncodedFile. Traversal is lazy: files are read one
at a time as the caller consumes the iterator.
"""

import logging
import os
import stat
from typing import Iterable, Iterator, NoReturn

from embedfiles.core.paths import to_path_segments
from embedfiles.core.reader import read_file_base64
from embedfiles.domain.tree_models import EncodedFile

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def yield_input_files(input_paths: Iterable[str]) -> Iterator[str]:
    """
    Resolve every input into the regular files reachable from it.

    Files are yielded as given. Directories are walked recursively with
    sorted siblings; yielded paths keep the directory prefix exactly as the
    user typed it, so relative inputs stay relative.

    Args:
        input_paths: Files and/or directories.

    Yields:
        str: Path of each regular file.

    Raises:
        OSError: If an input does not exist or a directory cannot be listed.
    """
    for input_path in input_paths:
        # os.stat raises FileNotFoundError for missing inputs
        mode = os.stat(input_path).st_mode
        if stat.S_ISDIR(mode):
            yield from _walk_directory(input_path)
        else:
            yield input_path


def iter_encoded_files(input_paths: Iterable[str]) -> Iterator[EncodedFile]:
    """
    Read and encode every file reachable from the inputs.

    Args:
        input_paths: Files and/or directories.

    Yields:
        EncodedFile: One entry per regular file.
    """
    for file_path in yield_input_files(input_paths):
        content, size = read_file_base64(file_path)
        logger.debug(f"Encoded {file_path} ({size} bytes)")
        yield EncodedFile(
            path=file_path,
            segments=to_path_segments(file_path),
            content=content,
            size=size,
        )


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk_directory(dir_path: str) -> Iterator[str]:
    """Yield regular files below a directory, depth-first, in sorted order."""
    for root, dirs, files in os.walk(dir_path, onerror=_raise_walk_error):
        dirs.sort()
        files.sort()

        for d in dirs:
            full = os.path.join(root, d)
            if os.path.islink(full):
                logger.debug(f"Skipping symlinked directory: {full}")

        for file_name in files:
            full_path = os.path.join(root, file_name)
            if not os.path.isfile(full_path):
                logger.debug(f"Skipping non-regular file: {full_path}")
                continue
            yield full_path


def _raise_walk_error(error: OSError) -> NoReturn:
    """Make os.walk propagate listing failures instead of skipping them."""
    raise error
