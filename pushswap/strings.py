"""C-style string helpers with NUL-terminated semantics on Python strings."""

from __future__ import annotations

from typing import Optional, Tuple

NUL = "\0"


def _terminated(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.split(NUL, 1)[0]


def strlen(s: str) -> int:
    """Length of ``s`` up to its first NUL character."""
    return len(_terminated(s))


def strdup(s: str) -> str:
    """Copy of ``s`` up to its first NUL character."""
    return _terminated(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied string and the full length of ``src``; the copy was
    truncated when that length is ``>= size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _terminated(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full concatenation
    would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_text = _terminated(dst)
    src_text = _terminated(src)
    dst_len = min(len(dst_text), size)
    if size <= dst_len:
        return dst_text, size + len(src_text)
    available = size - dst_len - 1
    return dst_text + src_text[:available], dst_len + len(src_text)


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL ``c`` finds the terminator."""
    text = _terminated(s)
    if c == NUL:
        return len(text)
    index = text.find(c)
    return index if index >= 0 else None


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL ``c`` finds the terminator."""
    text = _terminated(s)
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, returning the code difference."""
    a = _terminated(s1)
    b = _terminated(s2)
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``."""
    wanted = _terminated(needle)
    if not wanted:
        return 0
    window = _terminated(haystack)[: max(length, 0)]
    index = window.find(wanted)
    return index if index >= 0 else None