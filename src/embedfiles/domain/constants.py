from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed identifiers shared by the tree builder, the code
generators and the interface layers.
"""

from typing import Tuple

APP_NAME = "embedfiles"

# Key under which entries derived from absolute paths are nested
ROOT_KEY = "/"

DEFAULT_OUTPUT_NAME = "embedded_files"

# Identifiers accepted on the command line
CLI_LANGUAGES: Tuple[str, ...] = ("js", "py")
