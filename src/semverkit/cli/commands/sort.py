# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import click

from ...compare import sort_versions
from ...result import Failure
from ...version import Version
from ..main import echo_error, echo_info


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest precedence first.",
)
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line.

    Versions of equal precedence keep their input order.

    \b
    Examples:
        semverkit sort 1.0.0 1.0.0-rc.1 0.9.0
        semverkit sort --reverse 2.0.0 10.0.0
    """
    parsed: list[Version] = []
    invalid = []
    for text in versions:
        result = Version.parse(text)
        if isinstance(result, Failure):
            invalid.append(f"'{text}': {result.error}")
        else:
            parsed.append(result.value)

    if invalid:
        for message in invalid:
            echo_error(f"Invalid semantic version {message}")
        raise SystemExit(1)

    for version in sort_versions(parsed, reverse=reverse):
        echo_info(str(version))
