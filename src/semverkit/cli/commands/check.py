# SPDX-License-Identifier: MIT
"""Check the project version in pyproject.toml."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ...result import Failure
from ...version import Version
from ..config import CLIConfig, ConfigError
from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context


def _check_policy(version: Version, config: CLIConfig) -> list[str]:
    """Check a parsed version against the configured policy."""
    issues: list[str] = []

    if version.is_prerelease and not config.allow_prerelease:
        issues.append(f"Pre-release versions are not allowed: {version}")

    if version.has_build_metadata and not config.allow_build_metadata:
        issues.append(f"Build metadata is not allowed: {version}")

    minimum = config.minimum
    if minimum is not None and version < minimum:
        issues.append(f"Version {version} is lower than the minimum version {minimum}")

    return issues


@click.command()
@click.option(
    "--pyproject",
    "-p",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to pyproject.toml to check.",
)
@pass_context
def check(ctx: Context, pyproject: Optional[Path]) -> None:
    """Check that [project].version is a valid semantic version.

    The version is also checked against the policy in [tool.semverkit]:
    allow_prerelease, allow_build_metadata and minimum_version.

    \b
    Examples:
        semverkit check
        semverkit check -p path/to/pyproject.toml
    """
    try:
        if pyproject is not None:
            config = CLIConfig.from_pyproject(pyproject)
        else:
            config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if not config.project_version:
        echo_error("Missing required field: [project].version")
        raise SystemExit(1)

    echo_info(f"Checking: {config.project_version}")
    if ctx.verbose:
        echo_info(f"Project: {config.project_dir}")
        echo_info(f"Allow pre-release: {config.allow_prerelease}")
        echo_info(f"Allow build metadata: {config.allow_build_metadata}")
        echo_info(f"Minimum version: {config.minimum_version or 'none'}")

    result = Version.parse(config.project_version)
    if isinstance(result, Failure):
        echo_error(f"Version '{config.project_version}' is not a valid semantic version: {result.error}")
        raise SystemExit(1)

    version = result.value
    if version.is_initial_development_phase:
        echo_warning("Major version zero is for initial development; the public API is not stable")

    issues = _check_policy(version, config)
    if issues:
        for issue in issues:
            echo_error(issue)
        raise SystemExit(1)

    echo_success(f"Version {version} is valid")
