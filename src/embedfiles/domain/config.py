from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and loads optional user
overrides from a JSON file, either given explicitly or found in the user
data directory.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from embedfiles.domain.constants import DEFAULT_OUTPUT_NAME
from embedfiles.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    The language is intentionally empty: it must come from the command line
    or from a configuration file.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "input_paths": [],
        "language": "",
        "output_dir": os.getcwd(),
        "output_name": DEFAULT_OUTPUT_NAME,
    }


def get_config_path() -> str:
    """Return the location of the per-user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from disk and merge them over the defaults.

    A missing file is normal and yields the defaults. An unreadable or
    malformed file is logged and also yields the defaults, unless it was
    requested explicitly, in which case the error propagates.

    Args:
        path: Explicit configuration file. Defaults to the user data dir file.

    Returns:
        Dict[str, Any]: The merged configuration.

    Raises:
        OSError: If an explicitly requested file cannot be read.
        ValueError: If an explicitly requested file is not a JSON object.
    """
    config = get_default_config()
    explicit = path is not None
    config_path = path if explicit else get_config_path()

    if not explicit and not os.path.exists(config_path):
        logger.debug("Config file not found. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        if explicit:
            raise
        logger.error(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        msg = f"Config file '{config_path}' must contain a JSON object."
        if explicit:
            raise ValueError(msg)
        logger.warning(f"{msg} Using defaults.")
        return config

    unknown = sorted(set(data) - set(config))
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    for key in config:
        if key in data and data[key] is not None:
            config[key] = data[key]

    logger.debug(f"Configuration loaded from {config_path}")
    return config
