# SPDX-License-Identifier: MIT
"""The semantic version value type.

Equality and precedence differ on purpose: ``==`` compares every field, build
metadata included, while ``<``/``>`` and :meth:`Version.compare` follow SemVer
precedence, which ignores build metadata. Two versions may therefore compare
as neither less nor greater and still be unequal.

Example:
    >>> a = Version.of(1, 0, 0, build_metadata="001")
    >>> b = Version.of(1, 0, 0, build_metadata="002")
    >>> a.compare(b), a == b
    (0, False)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .errors import InvalidVersionError
from .identifier import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    compare_identifiers,
    join_identifiers,
)
from .parser import MAX_CORE_NUMBER, parse_identifier_sequence, parse_version_result
from .result import Failure, ParseResult


@dataclass(frozen=True, slots=True)
class Version:
    """A semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers; empty if this is not a pre-release
        build_metadata: Build metadata identifiers; empty if there are none
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build_metadata: tuple[Identifier, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            _check_core_number(name, getattr(self, name))
        # frozen, so normalise sequences through object.__setattr__
        object.__setattr__(self, "prerelease", _to_identifiers("prerelease", self.prerelease))
        object.__setattr__(
            self, "build_metadata", _to_identifiers("build_metadata", self.build_metadata)
        )

    @classmethod
    def of(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: Optional[str] = None,
        build_metadata: Optional[str] = None,
    ) -> Version:
        """Create a version from raw pre-release and build metadata text.

        Args:
            major: Major version number
            minor: Minor version number
            patch: Patch version number
            prerelease: Pre-release text such as ``"alpha.1"``, or None
            build_metadata: Build metadata text such as ``"build.5"``, or None

        Returns:
            A new Version

        Raises:
            InvalidVersionError: If either text is not a valid identifier
                sequence; the parse error is chained as ``__cause__``
        """
        return cls(
            major,
            minor,
            patch,
            _parse_sequence_text(prerelease, "pre-release"),
            _parse_sequence_text(build_metadata, "build metadata"),
        )

    @classmethod
    def parse(cls, text: str) -> ParseResult[Version]:
        """Parse version text, returning a Success or Failure."""
        return parse_version_result(text)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{join_identifiers(self.prerelease)}"
        if self.build_metadata:
            version += f"+{join_identifiers(self.build_metadata)}"
        return version

    @property
    def is_initial_development_phase(self) -> bool:
        """Return True for major version zero, where anything may change."""
        return self.major == 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def has_build_metadata(self) -> bool:
        return bool(self.build_metadata)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def replace(self, **changes: Any) -> Version:
        """Return a copy of this version with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def compare(self, other: Version) -> int:
        """Compare precedence with another version.

        Returns:
            -1 if self < other, 0 if equal precedence, 1 if self > other

        Raises:
            TypeError: If other is not a Version
        """
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return _compare_prerelease(self.prerelease, other.prerelease)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def _compare_prerelease(pre1: tuple[Identifier, ...], pre2: tuple[Identifier, ...]) -> int:
    """Compare two pre-release sequences.

    Per SemVer: a version without pre-release has higher precedence than one
    with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        result = compare_identifiers(p1, p2)
        if result != 0:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def _check_core_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= MAX_CORE_NUMBER:
        raise ValueError(f"{name} must be between 0 and {MAX_CORE_NUMBER}, got {value}")


def _to_identifiers(name: str, identifiers: Iterable[Identifier]) -> tuple[Identifier, ...]:
    if isinstance(identifiers, str):
        raise TypeError(f"{name} must be a sequence of identifiers, use Version.of() for text")
    result = tuple(identifiers)
    for identifier in result:
        if not isinstance(identifier, (NumericIdentifier, AlphanumericIdentifier)):
            raise TypeError(
                f"{name} must contain NumericIdentifier or AlphanumericIdentifier values, "
                f"got {type(identifier).__name__}"
            )
    return result


def _parse_sequence_text(text: Optional[str], name: str) -> tuple[Identifier, ...]:
    if text is None:
        return ()

    result = parse_identifier_sequence(text)
    if isinstance(result, Failure):
        raise InvalidVersionError(text, f"Invalid {name} '{text}'.") from result.error
    return result.value
