from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and the atomic write primitive used
to persist generated modules. Acts as an abstraction over the 'os' and
'tempfile' modules so that the core never leaves partial output behind.
"""

import os
import tempfile
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "embedfiles"
UNIX_APP_DIR_NAME = ".embedfiles"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/embedfiles
    - Linux/Mac: ~/.embedfiles

    The directory is not created here; readers simply find nothing in it.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def get_output_file_path(output_dir: str, output_name: str, extension: str) -> str:
    """
    Join the output directory, base name and language extension.

    Args:
        output_dir: Destination directory.
        output_name: File name without extension.
        extension: Extension without the leading dot (e.g. 'js').

    Returns:
        str: Absolute path of the generated file.
    """
    return os.path.abspath(os.path.join(output_dir, f"{output_name}.{extension}"))


def is_plain_file_name(name: str) -> bool:
    """Return True if the name stays inside its directory when joined to it."""
    if not name or name in (".", ".."):
        return False
    return "/" not in name and "\\" not in name

# -----------------------------------------------------------------------------
# FILESYSTEM WRITE API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def write_text_atomic(path: str, content: str, encoding: str = "utf-8") -> None:
    """
    Write text to a sibling temporary file, then move it over the target.

    Readers observe either the previous file or the complete new one.

    Args:
        path: Final destination.
        content: Text to persist.
        encoding: Text encoding for the file.

    Raises:
        OSError: If the directory is not writable or the move fails.
    """
    target_dir = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(
        prefix=".embedfiles-", suffix=".tmp", dir=target_dir
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
