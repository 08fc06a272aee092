# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, compare, sort, check

__all__ = ["parse", "compare", "sort", "check"]
