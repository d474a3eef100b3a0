from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample asset trees and generated-module loading.
"""

import importlib.util
import logging
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_assets(workdir: Path) -> Path:
    """
    Create a small asset tree relative to the working directory.

    Structure:
    assets/
      logo.bin        (non UTF-8 bytes)
      readme.txt
      sub/
        file1         (text)
    """
    assets = workdir / "assets"
    (assets / "sub").mkdir(parents=True)
    (assets / "logo.bin").write_bytes(bytes(range(256)))
    (assets / "readme.txt").write_text("Read me\n", encoding="utf-8")
    (assets / "sub" / "file1").write_text("first file", encoding="utf-8")
    return assets


@pytest.fixture
def load_generated_module() -> Callable[[Path], ModuleType]:
    """Return a loader that imports a generated Python module from disk."""
    counter = {"n": 0}

    def _load(path: Path) -> ModuleType:
        counter["n"] += 1
        name = f"_embedded_under_test_{counter['n']}"
        spec = importlib.util.spec_from_file_location(name, str(path))
        assert spec is not None and spec.loader is not None
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load


@pytest.fixture
def reset_logging():
    """Tear down the application's logging handlers before and after a test."""
    from embedfiles.infra.logging import shutdown_logging

    def _reset() -> None:
        shutdown_logging()
        logging.getLogger().setLevel(logging.WARNING)

    _reset()
    yield
    _reset()
