from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process to verify configuration resolution,
usage checks, exit codes and output rendering.
"""

import json
from pathlib import Path

import pytest

from embedfiles.interface.cli.app import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, _merge_config, main

pytestmark = pytest.mark.usefixtures("reset_logging")


def test_embeds_into_working_directory(sample_assets: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["assets", "--lang", "js", "--use-defaults"])

    assert code == EXIT_OK
    assert (sample_assets.parent / "embedded_files.js").is_file()
    out = capsys.readouterr().out
    assert "Embedded data written to" in out
    assert "Files embedded: 3" in out


def test_missing_inputs_is_usage_error(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--lang", "js", "--use-defaults"])

    assert code == EXIT_USAGE
    assert "Both input paths and --lang must be specified" in capsys.readouterr().err


def test_missing_language_is_usage_error(sample_assets: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["assets", "--use-defaults"])

    assert code == EXIT_USAGE
    assert not (sample_assets.parent / "embedded_files.js").exists()


def test_missing_input_path_is_usage_error(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["ghost.txt", "--lang", "py", "--use-defaults"])

    assert code == EXIT_USAGE
    assert "does not exist" in capsys.readouterr().err


def test_config_file_supplies_language(sample_assets: Path, tmp_path: Path) -> None:
    cfg = tmp_path / "embed.json"
    cfg.write_text(json.dumps({"language": "py", "output_name": "from_config"}), encoding="utf-8")

    code = main(["assets", "--config", str(cfg)])

    assert code == EXIT_OK
    assert (sample_assets.parent / "from_config.py").is_file()


def test_config_file_language_outside_cli_set(sample_assets: Path, tmp_path: Path,
                                              capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "embed.json"
    cfg.write_text(json.dumps({"language": "rb"}), encoding="utf-8")

    code = main(["assets", "--config", str(cfg)])

    assert code == EXIT_USAGE
    assert "Unsupported language 'rb'" in capsys.readouterr().err


def test_unreadable_config_file_is_usage_error(workdir: Path) -> None:
    assert main(["x", "--lang", "js", "--config", str(workdir / "nope.json")]) == EXIT_USAGE


def test_path_conflict_returns_failure(sample_assets: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["assets", "assets/readme.txt", "--lang", "js", "--use-defaults"])

    assert code == EXIT_FAILURE
    assert "Path conflict" in capsys.readouterr().err
    assert not (sample_assets.parent / "embedded_files.js").exists()


def test_dump_config(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["a", "b", "-l", "py", "--name", "blob", "--use-defaults", "--dump-config"])

    assert code == EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data["input_paths"] == ["a", "b"]
    assert data["language"] == "py"
    assert data["output_name"] == "blob"


def test_json_dry_run_output(sample_assets: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["assets", "-l", "py", "--use-defaults", "--dry-run", "--json"])

    assert code == EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is True
    assert data["dry_run"] is True
    assert data["file_count"] == 3
    assert data["output_path"].endswith("embedded_files.py")
    assert not (sample_assets.parent / "embedded_files.py").exists()


def test_merge_config_ignores_none_and_unknown_keys() -> None:
    base = {"input_paths": [], "language": "js", "output_dir": "/x", "output_name": "n"}
    merged = _merge_config(base, {"language": None, "output_name": "m", "bogus": 1})

    assert merged == {"input_paths": [], "language": "js", "output_dir": "/x", "output_name": "m"}


def test_input_names_with_trailing_space_are_distinct(workdir: Path, load_generated_module,
                                                      capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "a.txt").write_text("plain", encoding="utf-8")
    (workdir / "a.txt ").write_text("spaced", encoding="utf-8")

    code = main(["a.txt ", "a.txt", "-l", "py", "--use-defaults"])

    assert code == EXIT_OK
    mod = load_generated_module(workdir / "embedded_files.py")
    assert sorted(mod.files) == ["a.txt", "a.txt "]
    assert mod.getString(mod.files["a.txt "]) == "spaced"
    assert mod.getString(mod.files["a.txt"]) == "plain"
    assert "Files embedded: 2" in capsys.readouterr().out


def test_failure_is_reported_once(sample_assets: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["assets", "assets", "--lang", "js", "--use-defaults"])

    assert code == EXIT_FAILURE
    err = capsys.readouterr().err
    assert err.count("Path conflict") == 1
    assert err.splitlines()[-1].startswith("ERROR: Path conflict")
