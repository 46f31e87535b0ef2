# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory that writes a pyproject.toml into a fresh directory."""

    def _make(pyproject: str) -> Path:
        project_dir = tmp_path / "project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "pyproject.toml").write_text(pyproject)
        return project_dir

    return _make


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """A directory without pyproject.toml, so the CLI falls back to defaults."""
    project_dir = tmp_path / "empty"
    project_dir.mkdir()
    return project_dir
