from __future__ import annotations

"""
Embedding Result Data Models.

Defines the result object and factory functions used to communicate
execution outcomes between the embedder and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EmbedResult:
    """
    Unified result of a complete embedding run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Stable failure identifier (see domain.errors).
        language: Normalized target language identifier.
        input_paths: Inputs as received.
        output_path: Absolute path of the generated file (projected on dry runs).
        file_count: Number of embedded files.
        total_bytes: Sum of raw file sizes before encoding.
        dry_run: Whether the write step was skipped.
        summary: Additional execution metadata.
    """
    ok: bool
    error: str
    error_kind: str

    language: str
    input_paths: List[str] = field(default_factory=list)
    output_path: str = ""

    file_count: int = 0
    total_bytes: int = 0
    dry_run: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        language: str,
        input_paths: Optional[List[str]] = None,
        output_path: str = "",
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> EmbedResult:
    """
    Create a failed embedding result.

    Args:
        error: Detailed error description.
        error_kind: Failure identifier.
        language: Requested language.
        input_paths: Requested inputs.
        output_path: Projected output file, if already known.
        dry_run: Whether the run was a simulation.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        EmbedResult: An immutable error result object.
    """
    return EmbedResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        language=language,
        input_paths=list(input_paths or []),
        output_path=output_path,
        dry_run=dry_run,
        summary=summary_extra or {},
    )


def create_success_result(
        language: str,
        input_paths: List[str],
        output_path: str,
        file_count: int,
        total_bytes: int,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> EmbedResult:
    """Create a successful embedding result."""
    return EmbedResult(
        ok=True,
        error="",
        error_kind="",
        language=language,
        input_paths=list(input_paths),
        output_path=output_path,
        file_count=file_count,
        total_bytes=total_bytes,
        dry_run=dry_run,
        summary=summary_extra or {},
    )
