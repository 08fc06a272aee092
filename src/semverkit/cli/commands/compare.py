# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

import click

from ...result import Failure
from ...version import Version
from ..main import echo_error, echo_info

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Compare FIRST and SECOND, printing <, = or >.

    Build metadata is ignored, so 1.0.0+a and 1.0.0+b compare as =.

    \b
    Examples:
        semverkit compare 1.0.0-alpha 1.0.0      # <
        semverkit compare 1.0.0-beta.11 1.0.0-beta.2  # >
    """
    versions = []
    for text in (first, second):
        result = Version.parse(text)
        if isinstance(result, Failure):
            echo_error(f"Invalid semantic version '{text}': {result.error}")
            raise SystemExit(1)
        versions.append(result.value)

    echo_info(_SYMBOLS[versions[0].compare(versions[1])])
