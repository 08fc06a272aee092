# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semverkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_pyproject(tmp_path: Path):
    """Return a helper that writes a pyproject.toml into a project directory."""

    def _write(content: str) -> Path:
        project_dir = tmp_path / "test_project"
        project_dir.mkdir(exist_ok=True)
        pyproject = project_dir / "pyproject.toml"
        pyproject.write_text(content)
        return project_dir

    return _write


@pytest.fixture
def temp_project(write_pyproject) -> Path:
    """Create a temporary project directory with a valid version."""
    return write_pyproject(
        """[project]
name = "test-project"
version = "1.2.3"
"""
    )
