from __future__ import annotations

"""
Core embedding orchestration.

This module coordinates the whole workflow:
1. Resolves the code generator for the requested language.
2. Walks the inputs and builds the nested mapping of base64 contents.
3. Renders the generated module.
4. Writes it atomically to the output directory.

embed_files raises on failure; run_embed converts failures into an
EmbedResult for the interface layer.
"""

import logging
import os
from typing import Any, Dict, Optional, Sequence

from embedfiles.core.generators.registry import get_generator, normalize_language
from embedfiles.core.tree_builder import build_tree
from embedfiles.core.validator import validate_config
from embedfiles.domain.constants import DEFAULT_OUTPUT_NAME
from embedfiles.domain.embed_models import (
    EmbedResult,
    create_error_result,
    create_success_result,
)
from embedfiles.domain.errors import KIND_IO_FAILURE, EmbedError
from embedfiles.infra.fs import (
    get_output_file_path,
    is_plain_file_name,
    normalize_path,
    safe_mkdir,
    write_text_atomic,
)

logger = logging.getLogger(__name__)


def embed_files(
        input_paths: Sequence[str],
        language: str,
        *,
        output_dir: Optional[str] = None,
        output_name: str = DEFAULT_OUTPUT_NAME,
        dry_run: bool = False,
) -> EmbedResult:
    """
    Embed files and directories into a generated source module.

    Nothing is written unless every step before the write succeeds.

    Args:
        input_paths: Files and/or directories to embed. May be empty.
        language: Target language identifier ('js' or 'py').
        output_dir: Destination directory. Defaults to the working directory.
        output_name: Output file name without extension.
        dry_run: If True, build and render but skip the write.

    Returns:
        EmbedResult: Success result describing the generated module.

    Raises:
        UnsupportedLanguageError: If the language is unknown.
        GeneratorNotImplementedError: If the language has no generator.
        PathConflictError: If two inputs collide in the mapping.
        OSError: If an input cannot be read or the output cannot be written.
        ValueError: If output_name is not a plain file name.
    """
    generator = get_generator(language)
    if not is_plain_file_name(output_name):
        raise ValueError(f"Invalid output name '{output_name}': must be a plain file name.")
    inputs = list(input_paths)

    target_dir = normalize_path(output_dir, os.getcwd())
    output_path = get_output_file_path(target_dir, output_name, generator.extension)

    logger.info(f"Embedding {len(inputs)} input(s) as {generator.display_name}.")
    tree, file_count, total_bytes = build_tree(inputs)
    content = generator.generate(tree)

    if dry_run:
        logger.info(f"Dry run: skipping write of {output_path}")
    else:
        created, err = safe_mkdir(target_dir)
        if not created:
            raise OSError(f"Cannot create output directory {target_dir}: {err}")
        write_text_atomic(output_path, content)
        logger.info(f"Embedded data written to {output_path}")

    return create_success_result(
        language=generator.language,
        input_paths=inputs,
        output_path=output_path,
        file_count=file_count,
        total_bytes=total_bytes,
        dry_run=dry_run,
        summary_extra={
            "generated_chars": len(content),
            "top_level_keys": sorted(tree),
        },
    )


def run_embed(config: Optional[Dict[str, Any]], *, dry_run: bool = False) -> EmbedResult:
    """
    Validate a configuration dictionary and execute the embedding.

    Args:
        config: Raw or partial configuration (see domain.config).
        dry_run: If True, skip the final write.

    Returns:
        EmbedResult: Success or error result; this function does not raise
        for embedding or filesystem failures.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    language = normalize_language(cfg["language"])
    inputs = cfg["input_paths"]

    try:
        return embed_files(
            inputs,
            language,
            output_dir=cfg["output_dir"],
            output_name=cfg["output_name"],
            dry_run=dry_run,
        )
    except EmbedError as e:
        logger.debug(f"Embedding failed: {e}")
        return create_error_result(str(e), e.kind, language, inputs, dry_run=dry_run)
    except OSError as e:
        msg = f"I/O failure: {e}"
        logger.debug(msg)
        return create_error_result(msg, KIND_IO_FAILURE, language, inputs, dry_run=dry_run)
