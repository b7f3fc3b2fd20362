"""Validation and conversion of command-line arguments to integers."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .strtools import atoi, split

INT_MIN = -2147483648
INT_MAX = 2147483647
_SPACES = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def join_input(args: Iterable[str]) -> str:
    """Concatenate the arguments, each followed by a single space."""
    return "".join(f"{arg} " for arg in args)


def atol(text: str) -> int:
    """Parse a leading decimal integer after whitespace and an optional sign."""
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def is_valid_int_string(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def is_in_int_range(text: str) -> bool:
    """True when the parsed value fits a signed 32-bit integer."""
    return INT_MIN <= atol(text) <= INT_MAX


def is_valid_int(text: str) -> bool:
    """True for a well-formed integer string within the 32-bit range."""
    return is_valid_int_string(text) and is_in_int_range(text)


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn arguments (space-separated numbers allowed) into distinct integers.

    Raises InputError for a malformed token, a value outside the 32-bit
    range, or a repeated value.
    """
    tokens = split(join_input(args), " ")
    for token in tokens:
        if not is_valid_int(token):
            raise InputError(f"invalid integer: {token!r}")
    values = [atoi(token) for token in tokens]
    if has_duplicates(values):
        raise InputError("duplicate values")
    return values