"""Shared fixtures for mcpscout tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def weather_server_dir(tmp_path: Path) -> Path:
    """Copy of the weather server fixture tree (src/, lib/, package.json).

    Discovery order of its candidate files is ``lib/helpers.mjs``,
    ``lib/legacy.js``, ``src/index.ts``.
    """
    target = tmp_path / "weather-server"
    shutil.copytree(FIXTURES / "weather_server", target)
    return target


@pytest.fixture
def write_source(tmp_path: Path):
    """Return a helper that writes a source file below ``tmp_path``."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty directory with no source files."""
    target = tmp_path / "empty"
    target.mkdir()
    return target
