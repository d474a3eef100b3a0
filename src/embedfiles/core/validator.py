from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema
before it reaches the embedder. Handles type coercion, language
normalization and default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from embedfiles.core.generators.registry import normalize_language
from embedfiles.domain.config import get_default_config
from embedfiles.infra.fs import is_plain_file_name

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Language support is not checked here: the generator registry owns that
    decision so that library and CLI callers get the same error.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("language", "output_dir", "output_name"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["input_paths"] = _as_list_str(
        merged.get("input_paths"), defaults["input_paths"], "input_paths", warnings, strict
    )

    merged["language"] = normalize_language(merged["language"])
    merged["output_name"] = _normalize_output_name(merged["output_name"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """
    Ensure input is a list of strings, supporting CSV parsing.

    List items are kept exactly as given: surrounding whitespace is part of
    a file name. Only empty strings are discarded.
    """
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str) and item:
                out.append(item)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected non-empty str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_output_name(name: str, warnings: List[str], strict: bool) -> str:
    """Reject output names that would escape the output directory."""
    if not is_plain_file_name(name):
        msg = f"Invalid output name '{name}': must be a plain file name."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using default.")
        return get_default_config()["output_name"]
    return name
