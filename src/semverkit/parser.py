# SPDX-License-Identifier: MIT
"""Recursive-descent parser for semantic version text.

Grammar (SemVer 2.0.0)::

    version     := core '.' core '.' core [ '-' idSeq ] [ '+' idSeq ] END
    core        := DIGIT+
    idSeq       := identifier ( '.' identifier )*
    identifier  := ( DIGIT | ALPHA | '-' )+

Version cores may carry leading zeros (``01.2.3`` is 1.2.3) but must fit in
32 bits. All entry points return a :class:`~semverkit.result.Success` or
:class:`~semverkit.result.Failure`; they never raise on bad input.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, NoReturn, TypeVar

from .errors import (
    InvalidNumberError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from .identifier import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    is_numeric_text,
    numeric_value,
)
from .result import Failure, ParseResult, run_catching

if TYPE_CHECKING:
    from .version import Version

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Largest value accepted for major, minor and patch (32-bit unsigned)
MAX_CORE_NUMBER = 2**32 - 1

_MAX_CORE_DIGITS = len(str(MAX_CORE_NUMBER))

# peek() returns this once the cursor has passed the last character
_END = ""

DIGITS = frozenset("0123456789")
LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
IDENTIFIER_CHARACTERS = DIGITS | LETTERS | {"-"}
DOT = frozenset(".")
HYPHEN = frozenset("-")
PLUS = frozenset("+")
END_OF_INPUT = frozenset({_END})


class _Scanner:
    """Cursor over one input string, used for a single parse call."""

    __slots__ = ("source", "start", "cursor")

    def __init__(self, source: str):
        self.source = source
        self.start = 0
        self.cursor = 0

    def at_end(self) -> bool:
        return self.cursor >= len(self.source)

    def peek(self) -> str:
        return _END if self.at_end() else self.source[self.cursor]

    def advance(self) -> str:
        char = self.source[self.cursor]
        self.cursor += 1
        return char

    def mark(self) -> None:
        """Start a new token at the cursor."""
        self.start = self.cursor

    def token(self) -> str:
        return self.source[self.start : self.cursor]

    def check(self, accepted: frozenset[str]) -> bool:
        return self.peek() in accepted

    def match(self, accepted: frozenset[str]) -> bool:
        """Consume the next character if it is accepted."""
        if not self.check(accepted):
            return False
        if not self.at_end():
            self.advance()
        return True

    def consume(self, accepted: frozenset[str], message: str) -> str:
        """Consume the next character, failing with ``message`` if it is not accepted."""
        if not self.check(accepted):
            self.fail(message)
        return _END if self.at_end() else self.advance()

    def skip_while(self, accepted: frozenset[str]) -> None:
        while self.check(accepted) and not self.at_end():
            self.advance()

    def fail(self, message: str) -> NoReturn:
        """Raise the error describing what was found instead of ``message``."""
        if self.at_end():
            raise UnexpectedEndOfInputError(f"{message}, got end of input.", self.cursor)
        char = self.peek()
        raise UnexpectedCharacterError(
            f"{message}, got '{char}' at index {self.cursor}.", char, self.cursor
        )


def _version(scanner: _Scanner) -> Version:
    from .version import Version

    major = _core_number(scanner, "major")
    scanner.consume(DOT, "Expected '.' after major version")
    minor = _core_number(scanner, "minor")
    scanner.consume(DOT, "Expected '.' after minor version")
    patch = _core_number(scanner, "patch")
    prerelease = _identifier_sequence(scanner, "-") if scanner.match(HYPHEN) else ()
    build_metadata = _identifier_sequence(scanner, "+") if scanner.match(PLUS) else ()
    scanner.consume(END_OF_INPUT, "Expected end of input")
    return Version(major, minor, patch, prerelease, build_metadata)


def _core_number(scanner: _Scanner, name: str) -> int:
    scanner.mark()
    scanner.consume(DIGITS, f"Expected {name} version")
    scanner.skip_while(DIGITS)

    text = scanner.token()
    try:
        return _to_core_number(text)
    except OverflowError as e:
        raise InvalidNumberError(f"'{text}' is not a valid number.", scanner.start) from e


def _to_core_number(text: str) -> int:
    digits = text.lstrip("0") or "0"
    if len(digits) > _MAX_CORE_DIGITS or int(digits) > MAX_CORE_NUMBER:
        raise OverflowError(f"{text} exceeds the maximum version number {MAX_CORE_NUMBER}")
    return int(digits)


def _identifier_sequence(scanner: _Scanner, after: str | None) -> tuple[Identifier, ...]:
    identifiers: list[Identifier] = []
    while True:
        if not scanner.check(IDENTIFIER_CHARACTERS):
            if after is None:
                scanner.fail("Expected identifier at start of sequence")
            scanner.fail(f"Expected identifier after '{after}'")
        identifiers.append(_identifier(scanner))
        if not scanner.match(DOT):
            return tuple(identifiers)
        after = "."


def _identifier(scanner: _Scanner) -> Identifier:
    scanner.mark()
    scanner.consume(IDENTIFIER_CHARACTERS, "Expected identifier")
    scanner.skip_while(IDENTIFIER_CHARACTERS)

    text = scanner.token()
    if not is_numeric_text(text):
        return AlphanumericIdentifier(text)
    try:
        return NumericIdentifier(numeric_value(text))
    except OverflowError as e:
        raise InvalidNumberError(f"'{text}' is not a valid number.", scanner.start) from e


def _run(source: str, rule: Callable[[_Scanner], T]) -> ParseResult[T]:
    if not isinstance(source, str):
        raise TypeError(f"Expected a string to parse, got {type(source).__name__}")

    scanner = _Scanner(source)
    result = run_catching(lambda: rule(scanner))
    if isinstance(result, Failure):
        logger.debug("Failed to parse %r: %s", source, result.error)
    return result


def _whole_sequence(scanner: _Scanner) -> tuple[Identifier, ...]:
    identifiers = _identifier_sequence(scanner, None)
    scanner.consume(END_OF_INPUT, "Expected end of input")
    return identifiers


def _whole_identifier(scanner: _Scanner) -> Identifier:
    identifier = _identifier(scanner)
    scanner.consume(END_OF_INPUT, "Expected end of input after identifier")
    return identifier


def parse_version_result(text: str) -> ParseResult[Version]:
    """Parse semantic version text.

    Args:
        text: Version text, e.g. ``"1.0.0-alpha.1+build.5"``

    Returns:
        Success wrapping the Version, or Failure wrapping the parse error

    Raises:
        TypeError: If text is not a string

    Examples:
        >>> parse_version_result("1.2.3").get_or_raise()
        Version(major=1, minor=2, patch=3, prerelease=(), build_metadata=())
        >>> parse_version_result("1.0").error
        UnexpectedEndOfInputError("Expected '.' after minor version, got end of input.")
    """
    return _run(text, _version)


def parse_identifier_sequence(text: str) -> ParseResult[tuple[Identifier, ...]]:
    """Parse a dot-separated identifier sequence such as ``"alpha.1"``.

    Empty elements are errors, not empty results.
    """
    return _run(text, _whole_sequence)


def parse_identifier(text: str) -> ParseResult[Identifier]:
    """Parse exactly one identifier; the whole input must be consumed."""
    return _run(text, _whole_identifier)
