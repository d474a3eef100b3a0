from __future__ import annotations

"""
Unit tests for Path Normalization.

Verifies:
1. Relative paths split into plain segments.
2. Absolute paths are flagged and lose their root marker.
3. '.' and '..' are resolved lexically and empty segments dropped.
"""

import os

import pytest

from embedfiles.core.paths import to_path_segments
from embedfiles.domain.tree_models import PathSegments


def test_relative_path_segments() -> None:
    """A plain relative path keeps every component in order."""
    segs = to_path_segments(os.path.join("assets", "sub", "file1"))

    assert segs == PathSegments(absolute=False, parts=("assets", "sub", "file1"))


def test_single_file_name() -> None:
    """A bare file name is a single segment."""
    assert to_path_segments("test_file.txt").parts == ("test_file.txt",)


@pytest.mark.skipif(os.name == "nt", reason="POSIX absolute path layout")
def test_absolute_path_strips_root() -> None:
    """Absolute paths are flagged and the leading root marker is removed."""
    segs = to_path_segments("/a/b/c")

    assert segs.absolute is True
    assert segs.parts == ("a", "b", "c")


def test_dot_segments_are_resolved() -> None:
    """'.' disappears and 'x/..' collapses before splitting."""
    raw = os.path.join(".", "assets", "tmp", "..", "sub", ".", "file1")

    assert to_path_segments(raw).parts == ("assets", "sub", "file1")


def test_redundant_separators_are_dropped() -> None:
    """Doubled and trailing separators do not create empty segments."""
    raw = "assets" + os.sep + os.sep + "sub" + os.sep + "file1"

    assert to_path_segments(raw).parts == ("assets", "sub", "file1")


def test_leading_parent_reference_is_kept() -> None:
    """A relative path escaping the working directory keeps its '..' key."""
    segs = to_path_segments(os.path.join("..", "shared", "logo.png"))

    assert segs.absolute is False
    assert segs.parts == ("..", "shared", "logo.png")


def test_current_directory_has_no_segments() -> None:
    """'.' alone names nothing."""
    assert to_path_segments(".").parts == ()
