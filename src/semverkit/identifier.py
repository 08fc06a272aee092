# SPDX-License-Identifier: MIT
"""Pre-release and build metadata identifiers.

An identifier is one dot-separated token of a pre-release or build metadata
sequence. It is either numeric (``0`` or digits without a leading zero) or
alphanumeric (any other non-empty run of ``[0-9A-Za-z-]``).

Numeric identifiers always have lower precedence than alphanumeric ones:

    >>> Identifier.of("9") < Identifier.of("a")
    True
    >>> Identifier.of("01")
    AlphanumericIdentifier(text='01')
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidIdentifierError

if TYPE_CHECKING:
    from .result import ParseResult

# Largest value a numeric identifier may hold (64-bit unsigned)
MAX_NUMERIC_IDENTIFIER = 2**64 - 1

IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")
NUMERIC_PATTERN = re.compile(r"0|[1-9][0-9]*")

_MAX_NUMERIC_DIGITS = len(str(MAX_NUMERIC_IDENTIFIER))


def is_numeric_text(text: str) -> bool:
    """Return True if ``text`` classifies as a numeric identifier."""
    return NUMERIC_PATTERN.fullmatch(text) is not None


def numeric_value(text: str) -> int:
    """Convert numeric identifier text to its value.

    Raises:
        OverflowError: If the value exceeds MAX_NUMERIC_IDENTIFIER
    """
    # Length check first so huge digit runs never reach int()
    if len(text) > _MAX_NUMERIC_DIGITS or int(text) > MAX_NUMERIC_IDENTIFIER:
        raise OverflowError(f"{text} exceeds the maximum identifier value {MAX_NUMERIC_IDENTIFIER}")
    return int(text)


class Identifier:
    """Base class for the two identifier kinds.

    Use :meth:`numeric`, :meth:`of` or :meth:`parse` to create identifiers;
    the concrete classes are :class:`NumericIdentifier` and
    :class:`AlphanumericIdentifier`.
    """

    __slots__ = ()

    def __new__(cls, *args: object, **kwargs: object) -> Identifier:
        if cls is Identifier:
            raise TypeError(
                "Identifier cannot be instantiated directly, use Identifier.numeric() or Identifier.of()"
            )
        return super().__new__(cls)

    @property
    def is_numeric(self) -> bool:
        return isinstance(self, NumericIdentifier)

    @staticmethod
    def numeric(value: int) -> NumericIdentifier:
        """Create a numeric identifier from an integer value."""
        return NumericIdentifier(value)

    @staticmethod
    def of(text: str) -> Identifier:
        """Create an identifier from its text.

        The kind of the returned identifier depends on the text: ``"0"`` or
        digits without a leading zero give a numeric identifier, anything else
        an alphanumeric one.

        Args:
            text: Identifier text, ``[0-9A-Za-z-]+``

        Returns:
            NumericIdentifier or AlphanumericIdentifier

        Raises:
            InvalidIdentifierError: If the text is empty, contains illegal
                characters, or is a numeric value that is too large

        Examples:
            >>> Identifier.of("42")
            NumericIdentifier(value=42)
            >>> Identifier.of("rc")
            AlphanumericIdentifier(text='rc')
        """
        if not isinstance(text, str):
            raise TypeError(f"Identifier text must be a string, got {type(text).__name__}")
        if not text:
            raise InvalidIdentifierError(text, "Identifier should not be empty.")
        if not IDENTIFIER_PATTERN.fullmatch(text):
            raise InvalidIdentifierError(text, f"Identifier contains illegal characters; '{text}'.")
        if not is_numeric_text(text):
            return AlphanumericIdentifier(text)
        try:
            return NumericIdentifier(numeric_value(text))
        except OverflowError as e:
            raise InvalidIdentifierError(text, f"Numeric identifier is too large; '{text}'.") from e

    @staticmethod
    def parse(text: str) -> ParseResult[Identifier]:
        """Parse a single identifier, returning a Success or Failure."""
        from .parser import parse_identifier

        return parse_identifier(text)

    @staticmethod
    def parse_sequence(text: str) -> ParseResult[tuple[Identifier, ...]]:
        """Parse a dot-separated identifier sequence, returning a Success or Failure."""
        from .parser import parse_identifier_sequence

        return parse_identifier_sequence(text)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) >= 0


@dataclass(frozen=True, slots=True)
class NumericIdentifier(Identifier):
    """An identifier that contains only digits, without a leading zero."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Numeric identifier value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MAX_NUMERIC_IDENTIFIER:
            raise ValueError(
                f"Numeric identifier value must be between 0 and {MAX_NUMERIC_IDENTIFIER}, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier(Identifier):
    """An identifier of ``[0-9A-Za-z-]`` characters that is not numeric."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not IDENTIFIER_PATTERN.fullmatch(self.text):
            raise ValueError(f"Alphanumeric identifier text must match [0-9A-Za-z-]+, got {self.text!r}")
        if is_numeric_text(self.text):
            raise ValueError(f"'{self.text}' is a numeric identifier, use Identifier.of() instead")

    def __str__(self) -> str:
        return self.text


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Compare two identifiers by precedence.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if isinstance(a, NumericIdentifier):
        if isinstance(b, NumericIdentifier):
            return (a.value > b.value) - (a.value < b.value)
        # Numeric identifiers always have lower precedence than alphanumeric ones
        return -1
    if isinstance(a, AlphanumericIdentifier):
        if isinstance(b, AlphanumericIdentifier):
            return (a.text > b.text) - (a.text < b.text)
        return 1
    raise TypeError(f"Unknown identifier kind: {type(a).__name__}")


def join_identifiers(identifiers: tuple[Identifier, ...]) -> str:
    """Render an identifier sequence as dot-separated text."""
    return ".".join(str(identifier) for identifier in identifiers)
