"""UTF-8, UTF-16 and UTF-32 conversion helpers working on raw code units."""

from __future__ import annotations

import locale
import os
import struct
from collections.abc import Iterable, Sequence
from itertools import takewhile

from retrocommon.strcompat import strlcpy

_UTF8_LIMITS = (0xC0, 0xE0, 0xF0, 0xF8, 0xFC)


def _until_nul(data: bytes) -> bytes:
    data = bytes(data)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def _next_char(data: bytes, pos: int) -> int:
    """Offset of the character following the one that starts at ``pos``."""
    pos = min(pos + 1, len(data))
    while pos < len(data) and _is_continuation(data[pos]):
        pos += 1
    return pos


def _leading_ones(byte: int) -> int:
    ones = 0
    while byte & 0x80:
        ones += 1
        byte = (byte << 1) & 0xFF
    return ones


def utf8_conv_utf32(data: bytes, out_chars: int) -> list[int]:
    """Decode at most ``out_chars`` code points from UTF-8 ``data``.

    Decoding stops quietly at an invalid lead byte or a truncated sequence.
    """
    result: list[int] = []
    pos = 0
    size = len(data)
    while pos < size and len(result) < out_chars:
        first = data[pos]
        ones = _leading_ones(first)
        if ones > 6 or ones == 1:
            break
        extra = ones - 1 if ones else 0
        if 1 + extra > size - pos:
            break
        pos += 1
        value = (first & ((1 << (7 - ones)) - 1)) << (6 * extra)
        shift = (extra - 1) * 6
        for byte in data[pos : pos + extra]:
            value |= (byte & 0x3F) << shift
            shift -= 6
        pos += extra
        result.append(value & 0xFFFFFFFF)
    return result


def utf16_conv_utf8(units: Iterable[int]) -> bytes:
    """Encode a sequence of UTF-16 code units as UTF-8.

    Raises ValueError on a malformed surrogate pair or an out-of-range unit.
    """
    out = bytearray()
    unit_iter = iter(units)
    for value in unit_iter:
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"not a UTF-16 code unit: {value!r}")
        if value < 0x80:
            out.append(value)
            continue
        if 0xD800 <= value < 0xE000:
            if value >= 0xDC00:
                raise ValueError(f"unpaired low surrogate 0x{value:04X}")
            low = next(unit_iter, None)
            if low is None or not 0xDC00 <= low < 0xE000:
                raise ValueError(f"unpaired high surrogate 0x{value:04X}")
            value = (((value - 0xD800) << 10) | (low - 0xDC00)) + 0x10000
        num_adds = next(
            (n for n in range(1, 5) if value < (1 << (n * 5 + 6))), 5
        )
        out.append((_UTF8_LIMITS[num_adds - 1] + (value >> (6 * num_adds))) & 0xFF)
        for shift in range(num_adds - 1, -1, -1):
            out.append(0x80 + ((value >> (6 * shift)) & 0x3F))
    return bytes(out)


def utf8cpy(data: bytes, d_len: int, chars: int) -> bytes:
    """Copy up to ``chars`` UTF-8 characters, at most ``d_len - 1`` bytes.

    Never copies half a character. ``data`` ends at its first NUL byte.
    """
    if d_len < 1:
        raise ValueError("d_len must leave room for the terminator")
    data = _until_nul(data)
    end = 0
    while end < len(data) and chars > 0:
        chars -= 1
        end = _next_char(data, end)
    if end > d_len - 1:
        end = d_len - 1
        while end > 0 and _is_continuation(data[end]):
            end -= 1
    return data[:end]


def utf8skip(data: bytes, chars: int) -> int:
    """Byte offset just past the first ``chars`` UTF-8 characters."""
    pos = 0
    for _ in range(chars):
        pos = _next_char(data, pos)
    return pos


def utf8len(data: bytes) -> int:
    """Number of UTF-8 characters before the first NUL byte."""
    return sum(1 for byte in _until_nul(data) if not _is_continuation(byte))


def utf8_walk(data: bytes, pos: int) -> tuple[int, int]:
    """Decode the code point at ``pos``; return it and the next offset.

    The input is not validated.
    """
    first = data[pos]
    pos += 1
    if first < 0x80:
        return first, pos
    value = data[pos] & 0x3F
    pos += 1
    if first >= 0xE0:
        value = (value << 6) | (data[pos] & 0x3F)
        pos += 1
        if first >= 0xF0:
            value = (value << 6) | (data[pos] & 0x3F)
            pos += 1
            return value | (first & 7) << 18, pos
        return value | (first & 15) << 12, pos
    return value | (first & 31) << 6, pos


def utf16_to_char_string(units: Iterable[int], size: int) -> bytes:
    """Convert NUL-terminated UTF-16 units to UTF-8 bounded by ``size``."""
    encoded = utf16_conv_utf8(takewhile(lambda unit: unit != 0, units))
    return strlcpy(encoded, size)[0]


def _local_encoding() -> str:
    return locale.getpreferredencoding(False)


def _recode(data: bytes, source: str, target: str) -> bytes | None:
    if os.name != "nt":
        return bytes(data)
    try:
        converted = bytes(data).decode(source).encode(target)
    except (UnicodeError, LookupError):
        return bytes(data)
    return converted or None


def utf8_to_local_string(text: bytes) -> bytes | None:
    """Convert UTF-8 bytes to the local code page; ``None`` for empty input."""
    if not text:
        return None
    return _recode(text, "utf-8", _local_encoding())


def local_to_utf8_string(text: bytes) -> bytes | None:
    """Convert local code page bytes to UTF-8; ``None`` for empty input."""
    if not text:
        return None
    return _recode(text, _local_encoding(), "utf-8")


def utf8_to_utf16(text: bytes) -> list[int] | None:
    """Decode NUL-terminated UTF-8 into UTF-16 code units.

    Returns ``None`` for empty input; raises ValueError on undecodable input.
    """
    text = _until_nul(text)
    if not text:
        return None
    try:
        decoded = text.decode("utf-8")
    except UnicodeDecodeError:
        if os.name != "nt":
            raise
        decoded = text.decode(_local_encoding(), errors="replace")
    raw = decoded.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def utf16_to_utf8(units: Sequence[int]) -> bytes | None:
    """Encode NUL-terminated UTF-16 code units as UTF-8.

    Returns ``None`` for empty input; raises ValueError on malformed input.
    """
    values = list(takewhile(lambda unit: unit != 0, units))
    if not values:
        return None
    try:
        raw = struct.pack(f"<{len(values)}H", *values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc
    return raw.decode("utf-16-le").encode("utf-8")