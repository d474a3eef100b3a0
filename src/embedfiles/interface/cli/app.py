from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, configuration file and command-line overrides),
usage checks, embedding and result rendering.

Exit codes: 0 success, 1 embedding failure, 2 usage error, 130 interrupted.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from embedfiles.core.embedder import run_embed
from embedfiles.core.validator import validate_config
from embedfiles.domain.config import get_default_config, load_config
from embedfiles.domain.constants import CLI_LANGUAGES
from embedfiles.domain.embed_models import EmbedResult
from embedfiles.infra.logging import LoggingConfig, configure_logging, get_logger
from embedfiles.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing (argparse exits 0 on --help, 2 on invalid choices)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Base configuration (defaults, user file or explicit file)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        try:
            base_conf = load_config(args.config_path)
        except (OSError, ValueError) as e:
            return _usage_error(f"Cannot load configuration '{args.config_path}': {e}")

    # 4. Merge and validate
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Usage checks
    inputs = clean_conf["input_paths"]
    language = clean_conf["language"]

    if not inputs or not language:
        return _usage_error("Both input paths and --lang must be specified.")

    if language not in CLI_LANGUAGES:
        return _usage_error(
            f"Unsupported language '{language}'. "
            f"Supported languages are {', '.join(CLI_LANGUAGES)}."
        )

    missing = [p for p in inputs if not os.path.exists(p)]
    if missing:
        return _usage_error(f"Input path does not exist: {', '.join(missing)}")

    # 6. Embedding
    try:
        result = run_embed(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        msg = "Embedding interrupted by user."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    # 7. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with a value are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in ("input_paths", "language", "output_dir", "output_name"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _usage_error(message: str) -> int:
    """Report a usage problem on stderr and return the usage exit code."""
    logger.debug(f"Usage error: {message}")
    print(f"ERROR: {message}", file=sys.stderr)
    print("Use --help for usage information.", file=sys.stderr)
    return EXIT_USAGE


def _print_human_summary(result: EmbedResult) -> None:
    """
    Print the execution result in human readable form.

    Args:
        result: The embedding result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print("DRY RUN: nothing was written.")
        print(f"Target path: {result.output_path}")
    else:
        print(f"Embedded data written to {result.output_path}")

    print(f"Files embedded: {result.file_count}")
    print(f"Raw bytes: {result.total_bytes:,}")


# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
