"""String building and conversion helpers: parsing, splitting, trimming."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Union

from .strings import strdup

_INT_BITS = 32
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _wrap_int(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit ``int``.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text without digits yields 0.
    """
    body = strdup(text)
    pos = 0
    while pos < len(body) and body[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(body) and body[pos] in "+-":
        if body[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(body) and "0" <= body[pos] <= "9":
        result = result * 10 + (ord(body[pos]) - ord("0"))
        pos += 1
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(int(n))


def count_words(text: str, sep: str) -> int:
    """Number of non-empty runs of characters other than ``sep``."""
    return len(split(text, sep))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in strdup(text).split(sep) if piece]


def striteri(
    text: Union[str, MutableSequence[str]],
    func: Callable[[int, str], str],
) -> Union[str, MutableSequence[str]]:
    """Replace each character with ``func(index, char)``.

    A mutable sequence of characters is updated in place and returned; a
    string, being immutable, is returned as a new string.
    """
    if isinstance(text, str):
        return strmapi(text, func)
    for index, char in enumerate(list(text)):
        text[index] = func(index, char)
    return text


def strjoin(first: str, second: str) -> str:
    """Concatenation of two strings."""
    return strdup(first) + strdup(second)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(strdup(text)))


def strtrim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    return strdup(text).strip(strdup(chars))


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = strdup(text)
    if start >= len(body):
        return ""
    return body[start : start + length]