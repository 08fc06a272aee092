# SPDX-License-Identifier: MIT
"""Version comparison helpers that accept text or Version values.

Ordering follows SemVer precedence:
- numeric identifiers compare numerically and sort before alphanumeric ones
- a shorter pre-release sorts before a longer one it is a prefix of
- a release sorts after all of its pre-releases
Build metadata is ignored.
"""

from __future__ import annotations

from typing import Iterable, Union

from .identifier import NumericIdentifier
from .parser import parse_version_result
from .version import Version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    if isinstance(version, Version):
        return version
    return parse_version_result(version).get_or_raise()


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        SemVerParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Two versions get equal keys exactly when they have equal precedence.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Pre-release key: none becomes (1,) to sort after pre-releases,
    # numeric parts (0, value) sort before alphanumeric parts (1, text)
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease:
            if isinstance(part, NumericIdentifier):
                parts.append((0, part.value))
            else:
                parts.append((1, str(part)))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions of equal precedence (differing only in
    build metadata) keep their input order.

    Raises:
        SemVerParseError: If any version string is invalid
    """
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)
