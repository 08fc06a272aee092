# SPDX-License-Identifier: MIT
"""Parse a version and show its components."""

from __future__ import annotations

import json

import click

from ...identifier import join_identifiers
from ...result import Failure
from ...version import Version
from ..main import echo_error, echo_info


def _describe(version: Version) -> dict:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": [str(identifier) for identifier in version.prerelease],
        "build_metadata": [str(identifier) for identifier in version.build_metadata],
        "is_prerelease": version.is_prerelease,
        "canonical": str(version),
    }


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output the components as JSON.",
)
def parse(version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        semverkit parse 1.2.3
        semverkit parse 1.0.0-alpha.1+build.5 --json
    """
    result = Version.parse(version)
    if isinstance(result, Failure):
        echo_error(f"Invalid semantic version '{version}': {result.error}")
        raise SystemExit(1)

    parsed = result.value
    if as_json:
        echo_info(json.dumps(_describe(parsed), indent=2))
        return

    echo_info(f"major:          {parsed.major}")
    echo_info(f"minor:          {parsed.minor}")
    echo_info(f"patch:          {parsed.patch}")
    if parsed.is_prerelease:
        echo_info(f"pre-release:    {join_identifiers(parsed.prerelease)}")
    if parsed.has_build_metadata:
        echo_info(f"build metadata: {join_identifiers(parsed.build_metadata)}")
    if parsed.is_initial_development_phase:
        echo_info("Initial development phase (major version zero)")
