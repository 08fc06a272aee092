# SPDX-License-Identifier: MIT
"""Exceptions raised by semverkit.

Parse failures (:class:`SemVerParseError` and its subclasses) are data errors:
the text-parsing entry points return them wrapped in a
:class:`~semverkit.result.Failure` instead of raising. The ``ValueError``
subclasses are raised directly by the constructors that take raw text.
"""

from __future__ import annotations

from typing import Optional


class SemVerError(Exception):
    """Base class for all semverkit errors."""

    pass


class SemVerParseError(SemVerError):
    """Raised when text does not follow the semantic version grammar.

    Attributes:
        message: Human-readable description of the failure
        position: Index in the input where the failure was detected
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(message)


class UnexpectedEndOfInputError(SemVerParseError):
    """The grammar required more input than was available."""

    pass


class UnexpectedCharacterError(SemVerParseError):
    """The next character is not allowed at the current grammar position."""

    def __init__(self, message: str, character: str, position: int):
        self.character = character
        super().__init__(message, position)


class InvalidNumberError(SemVerParseError):
    """A numeric token does not fit in its integer representation.

    The underlying ``OverflowError`` is chained as ``__cause__``.
    """

    pass


class InvalidIdentifierError(SemVerError, ValueError):
    """Raised when an identifier is built from empty or illegal text."""

    def __init__(self, text: str, message: str = ""):
        self.text = text
        self.message = message or f"Invalid identifier: {text!r}"
        super().__init__(self.message)


class InvalidVersionError(SemVerError, ValueError):
    """Raised when a version is built from an invalid pre-release or build text."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)
