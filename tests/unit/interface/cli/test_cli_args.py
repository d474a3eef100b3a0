from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Language choices and aliases.
3. Unset options map to None.
"""

import pytest

from embedfiles.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_positional_inputs_and_short_lang() -> None:
    args = parse_args(["a.txt", "assets", "-l", "js"])
    overrides = args_to_overrides(args)

    assert overrides["input_paths"] == ["a.txt", "assets"]
    assert overrides["language"] == "js"


def test_long_options_mapping() -> None:
    args = parse_args([
        "assets",
        "--lang", "py",
        "--output-dir", "/out",
        "--name", "bundle",
        "--dry-run",
        "--json",
    ])
    overrides = args_to_overrides(args)

    assert overrides["language"] == "py"
    assert overrides["output_dir"] == "/out"
    assert overrides["output_name"] == "bundle"
    assert args.dry_run is True
    assert args.json_output is True


def test_defaults_are_explicit_none() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides == {
        "input_paths": None,
        "language": None,
        "output_dir": None,
        "output_name": None,
    }


def test_unsupported_language_choice_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["a.txt", "--lang", "rb"])

    assert excinfo.value.code == 2


def test_help_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["-h"])

    assert excinfo.value.code == 0
    assert "--lang" in capsys.readouterr().out
