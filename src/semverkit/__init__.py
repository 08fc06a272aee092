# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 parsing, comparison and rendering.

Parsing returns a ``Success`` or ``Failure`` instead of raising, so the error
path is explicit:

Example:
    >>> from semverkit import parse, Version
    >>>
    >>> result = parse("1.2.3-alpha.1+build.456")
    >>> version = result.get_or_raise()
    >>> version.major
    1
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> parse("1.0").error
    UnexpectedEndOfInputError("Expected '.' after minor version, got end of input.")
    >>>
    >>> Version.of(1, 0, 0, "alpha") < Version(1, 0, 0)
    True
"""

__version__ = "0.1.0"

from .errors import (
    SemVerError,
    SemVerParseError,
    UnexpectedEndOfInputError,
    UnexpectedCharacterError,
    InvalidNumberError,
    InvalidIdentifierError,
    InvalidVersionError,
)
from .result import (
    Success,
    Failure,
    ParseResult,
)
from .identifier import (
    Identifier,
    NumericIdentifier,
    AlphanumericIdentifier,
    compare_identifiers,
    MAX_NUMERIC_IDENTIFIER,
)
from .parser import (
    parse_identifier,
    parse_identifier_sequence,
    MAX_CORE_NUMBER,
)
from .version import Version
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
)


def parse(text: str) -> ParseResult[Version]:
    """Parse semantic version text into a Success or Failure."""
    return Version.parse(text)


def parse_version(text: str) -> Version:
    """Parse semantic version text, raising on invalid input.

    Raises:
        SemVerParseError: The error a Failure would have carried
        TypeError: If text is not a string
    """
    return Version.parse(text).get_or_raise()


def is_valid_semver(text: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0-alpha")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(text, str):
        return False
    return Version.parse(text).is_success


__all__ = [
    # Parsing
    "parse",
    "parse_version",
    "is_valid_semver",
    "parse_identifier",
    "parse_identifier_sequence",
    "Success",
    "Failure",
    "ParseResult",
    # Values
    "Version",
    "Identifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "MAX_CORE_NUMBER",
    "MAX_NUMERIC_IDENTIFIER",
    # Comparison
    "compare_identifiers",
    "compare_versions",
    "version_key",
    "sort_versions",
    # Errors
    "SemVerError",
    "SemVerParseError",
    "UnexpectedEndOfInputError",
    "UnexpectedCharacterError",
    "InvalidNumberError",
    "InvalidIdentifierError",
    "InvalidVersionError",
]
