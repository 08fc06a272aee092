# SPDX-License-Identifier: MIT
"""Success/failure results returned by the parsing entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from .errors import SemVerParseError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful parse carrying its value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def get_or_raise(self) -> T:
        """Return the parsed value."""
        return self.value

    def get_or_none(self) -> Optional[T]:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed parse carrying the error that stopped it."""

    error: SemVerParseError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    def get_or_raise(self):
        """Raise the carried parse error."""
        raise self.error

    def get_or_none(self) -> None:
        return None


ParseResult = Union[Success[T], Failure]


def run_catching(parse: Callable[[], T]) -> ParseResult[T]:
    """Run ``parse`` and capture a :class:`SemVerParseError` as a Failure.

    Any other exception propagates unchanged.
    """
    try:
        return Success(parse())
    except SemVerParseError as e:
        return Failure(e)
