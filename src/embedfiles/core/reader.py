from __future__ import annotations

"""
File Reading Component.

Captures the raw bytes of one file and turns them into base64 text. The
file handle is released as soon as the content has been read.
"""

import base64
from typing import Tuple


def read_file_bytes(file_path: str) -> bytes:
    """
    Read the complete binary content of a file.

    Raises:
        OSError: If the file is missing or not readable.
    """
    with open(file_path, "rb") as f:
        return f.read()


def encode_base64(data: bytes) -> str:
    """Encode raw bytes as standard (padded, non-URL-safe) base64 text."""
    return base64.b64encode(data).decode("ascii")


def read_file_base64(file_path: str) -> Tuple[str, int]:
    """
    Read a file and return its base64 text together with the raw size.

    Args:
        file_path: Path of the file to embed.

    Returns:
        Tuple[str, int]: (Base64 content, raw byte count).
    """
    data = read_file_bytes(file_path)
    return encode_base64(data), len(data)
