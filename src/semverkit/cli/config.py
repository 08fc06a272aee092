# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ..parser import parse_version_result
from ..result import Failure
from ..version import Version


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """Version policy loaded from the ``[tool.semverkit]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml
        project_version: The ``[project].version`` value, if any
        allow_prerelease: Whether the project version may be a pre-release
        allow_build_metadata: Whether the project version may carry build metadata
        minimum_version: Lowest acceptable project version, empty for no minimum
    """

    project_dir: Path
    project_version: str = ""
    allow_prerelease: bool = True
    allow_build_metadata: bool = True
    minimum_version: str = ""

    @property
    def minimum(self) -> Optional[Version]:
        """Return the parsed minimum version, or None if unset."""
        if not self.minimum_version:
            return None
        return parse_version_result(self.minimum_version).get_or_raise()

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "CLIConfig":
        """Load configuration from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or the tool table is malformed
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, path.parent)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any], project_dir: Path) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If ``[tool.semverkit]`` has wrongly typed keys or an
                invalid minimum_version
        """
        project = pyproject.get("project", {})
        if not isinstance(project, dict):
            raise ConfigError("[project] must be a table")
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")
        tool_semverkit = tool.get("semverkit", {})
        if not isinstance(tool_semverkit, dict):
            raise ConfigError("[tool.semverkit] must be a table")

        project_version = project.get("version", "")
        if not isinstance(project_version, str):
            raise ConfigError("[project].version must be a string")

        allow_prerelease = _get_typed(tool_semverkit, "allow_prerelease", bool, True)
        allow_build_metadata = _get_typed(tool_semverkit, "allow_build_metadata", bool, True)
        minimum_version = _get_typed(tool_semverkit, "minimum_version", str, "")

        if minimum_version:
            result = parse_version_result(minimum_version)
            if isinstance(result, Failure):
                raise ConfigError(
                    f"Invalid [tool.semverkit].minimum_version '{minimum_version}': {result.error}"
                )

        return cls(
            project_dir=project_dir,
            project_version=project_version,
            allow_prerelease=allow_prerelease,
            allow_build_metadata=allow_build_metadata,
            minimum_version=minimum_version,
        )


def _get_typed(table: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = table.get(key, default)
    if not isinstance(value, expected):
        raise ConfigError(
            f"[tool.semverkit].{key} must be of type {expected.__name__}, got {type(value).__name__}"
        )
    return value


def load_config(project_dir: Optional[Path] = None) -> CLIConfig:
    """Load CLI configuration from the pyproject.toml in ``project_dir``.

    Args:
        project_dir: Project directory (defaults to current directory)

    Raises:
        ConfigError: If configuration is invalid
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = Path.cwd()
    return CLIConfig.from_pyproject(project_dir / "pyproject.toml")
