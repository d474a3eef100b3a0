from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from embedfiles.domain.constants import APP_NAME, CLI_LANGUAGES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the embedfiles CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Embed files and directories as base64 literals in a generated "
            "JavaScript or Python module."
        ),
    )

    # --- Inputs and Target ---
    p.add_argument(
        "inputs",
        nargs="*",
        metavar="PATH",
        help="Input files or directories to embed.",
    )
    p.add_argument(
        "-l", "--lang",
        dest="language",
        choices=CLI_LANGUAGES,
        default=None,
        help="Target language of the generated file.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory receiving the generated file (default: current directory).",
    )
    p.add_argument(
        "--name",
        dest="output_name",
        default=None,
        help="Generated file name without extension (default: embedded_files).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and render the module without writing it.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the execution result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read configuration overrides from this JSON file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the per-user configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Options left unset map to None so that the merge keeps base values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_paths"] = list(args.inputs) if args.inputs else None
    overrides["language"] = args.language
    overrides["output_dir"] = args.output_dir
    overrides["output_name"] = args.output_name

    return overrides
