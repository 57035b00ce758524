"""Portable string helpers: bounded copy/concatenate, case-insensitive
comparison and search, and delimiter tokenizing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import AnyStr

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _lower_code(ch: str) -> int:
    """Code of ``ch`` lowered the way the C locale does (ASCII only)."""
    code = ord(ch)
    if 0x41 <= code <= 0x5A:
        return code + 0x20
    return code


def strlcpy(source: AnyStr, size: int) -> tuple[AnyStr, int]:
    """Copy ``source`` into a buffer of ``size`` slots (one kept for NUL).

    Returns the copied text and the full length of ``source``; a returned
    length of ``size`` or more means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return source[: max(size - 1, 0)], len(source)


def strlcat(dest: AnyStr, source: AnyStr, size: int) -> tuple[AnyStr, int]:
    """Append ``source`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the result would have had
    without truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    length = len(dest)
    room = 0 if length > size else size - length
    copied, source_len = strlcpy(source, room)
    return dest + copied, length + source_len


def strcasecmp(a: str, b: str) -> int:
    """Compare two strings ignoring ASCII case.

    Returns a negative, zero or positive number like the C function.
    """
    for ca, cb in zip(a, b):
        la, lb = _lower_code(ca), _lower_code(cb)
        if la != lb:
            return la - lb
    common = min(len(a), len(b))
    tail_a = _lower_code(a[common]) if len(a) > common else 0
    tail_b = _lower_code(b[common]) if len(b) > common else 0
    return tail_a - tail_b


def strcasestr(haystack: str, needle: str) -> int | None:
    """Index of the first case-insensitive occurrence of ``needle``.

    Returns ``None`` when ``needle`` does not occur in ``haystack``.
    """
    if len(needle) > len(haystack):
        return None
    index = haystack.translate(_ASCII_LOWER).find(needle.translate(_ASCII_LOWER))
    return None if index < 0 else index


def isblank(c: str | int) -> bool:
    """True for a space or a horizontal tab."""
    if isinstance(c, int):
        return c in (0x20, 0x09)
    return c in (" ", "\t") and len(c) == 1


def tokenize(text: str, delims: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` separated by any of ``delims``."""
    token: list[str] = []
    for ch in text:
        if ch in delims:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)