"""printf-style formatting and writing of text to streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_NULL_TEXT = "(null)"


def _as_int32(n: int) -> int:
    """Wrap ``n`` to a signed 32-bit integer."""
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >= 1 << 31 else n


def _as_uint32(n: int) -> int:
    """Wrap ``n`` to an unsigned 32-bit integer."""
    return n & 0xFFFFFFFF


def _to_base16(n: int, digits: str) -> str:
    if n == 0:
        return "0"
    out = []
    while n > 0:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _as_char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def format_number(n: int) -> str:
    """Signed decimal text of ``n`` taken as a 32-bit ``int``."""
    return str(_as_int32(n))


def format_unsigned(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit unsigned ``int``."""
    return str(_as_uint32(n))


def format_hex(n: int, uppercase: bool = False) -> str:
    """Hexadecimal text of ``n`` taken as a 32-bit unsigned ``int``."""
    digits = _UPPER_DIGITS if uppercase else _LOWER_DIGITS
    return _to_base16(_as_uint32(n), digits)


def format_pointer(address: Optional[int]) -> str:
    """Address as ``0x`` followed by lower-case hex digits; ``None`` is zero."""
    value = 0 if address is None else address
    if value < 0:
        raise ValueError("address must not be negative")
    return "0x" + _to_base16(value, _LOWER_DIGITS)


def format_string(s: Optional[str]) -> str:
    """The string itself, or ``(null)`` for ``None``."""
    return _NULL_TEXT if s is None else s


def _convert(spec: str, args: list) -> str:
    if spec == "%":
        return "%"
    handlers = {
        "d": format_number,
        "i": format_number,
        "s": format_string,
        "c": _as_char,
        "p": format_pointer,
        "u": format_unsigned,
        "x": lambda v: format_hex(v, False),
        "X": lambda v: format_hex(v, True),
    }
    handler = handlers.get(spec)
    if handler is None:
        return ""
    if not args:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return handler(args.pop(0))


def format_printf(fmt: str, *args) -> str:
    """Expand ``%d %i %s %c %p %u %x %X %%`` in ``fmt``.

    An unknown conversion character is consumed and produces nothing; a
    lone ``%`` at the end of the format produces nothing.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    pending = list(args)
    parts = []
    pos = 0
    while pos < len(fmt):
        char = fmt[pos]
        if char != "%":
            parts.append(char)
            pos += 1
            continue
        spec = fmt[pos + 1] if pos + 1 < len(fmt) else ""
        pos += 2
        if spec:
            parts.append(_convert(spec, pending))
    return "".join(parts)


def printf(fmt: str, *args) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _target(stream).write(_as_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s``; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    put_str(s, stream)
    _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` as a signed 32-bit decimal number."""
    _target(stream).write(format_number(n))