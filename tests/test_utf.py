import pytest

from retrocommon.utf import (
    local_to_utf8_string,
    utf16_conv_utf8,
    utf16_to_char_string,
    utf16_to_utf8,
    utf8_conv_utf32,
    utf8_to_local_string,
    utf8_to_utf16,
    utf8_walk,
    utf8cpy,
    utf8len,
    utf8skip,
)

SAMPLE = "h\u00e9llo \u20ac \U0001d11e!"


def _units(text):
    raw = text.encode("utf-16-le")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def test_utf8_conv_utf32_decodes_all():
    data = SAMPLE.encode("utf-8")
    assert utf8_conv_utf32(data, 100) == [ord(c) for c in SAMPLE]


def test_utf8_conv_utf32_respects_limit():
    data = SAMPLE.encode("utf-8")
    assert utf8_conv_utf32(data, 3) == [ord(c) for c in SAMPLE[:3]]


def test_utf8_conv_utf32_stops_at_stray_continuation():
    assert utf8_conv_utf32(b"ab\x80cd", 10) == [ord("a"), ord("b")]


def test_utf8_conv_utf32_stops_at_truncated_sequence():
    data = b"a" + "\u20ac".encode("utf-8")[:2]
    assert utf8_conv_utf32(data, 10) == [ord("a")]


def test_utf16_conv_utf8_matches_codec():
    assert utf16_conv_utf8(_units(SAMPLE)) == SAMPLE.encode("utf-8")


def test_utf16_conv_utf8_euro_sign():
    assert utf16_conv_utf8([0x20AC]) == b"\xe2\x82\xac"


@pytest.mark.parametrize(
    "units", [[0xDC00], [0x41, 0xD800], [0xD800, 0x41], [0x10000]]
)
def test_utf16_conv_utf8_rejects_malformed(units):
    with pytest.raises(ValueError):
        utf16_conv_utf8(units)


@pytest.mark.parametrize("d_len", range(1, 20))
def test_utf8cpy_never_splits_characters(d_len):
    data = SAMPLE.encode("utf-8")
    copied = utf8cpy(data, d_len, 100)
    assert len(copied) <= d_len - 1
    assert data.startswith(copied)
    copied.decode("utf-8")
    assert SAMPLE.startswith(copied.decode("utf-8"))


def test_utf8cpy_char_limit():
    data = SAMPLE.encode("utf-8")
    assert utf8cpy(data, 100, 2) == SAMPLE[:2].encode("utf-8")


def test_utf8cpy_stops_at_nul():
    assert utf8cpy(b"ab\x00cd", 100, 10) == b"ab"


def test_utf8cpy_rejects_zero_length():
    with pytest.raises(ValueError):
        utf8cpy(b"abc", 0, 1)


@pytest.mark.parametrize("n", range(0, len(SAMPLE) + 1))
def test_utf8skip_offsets(n):
    data = SAMPLE.encode("utf-8")
    assert utf8skip(data, n) == len(SAMPLE[:n].encode("utf-8"))


def test_utf8len_counts_characters():
    assert utf8len(SAMPLE.encode("utf-8")) == len(SAMPLE)


def test_utf8len_stops_at_nul():
    assert utf8len("\u00e9a".encode("utf-8") + b"\x00xyz") == 2


def test_utf8_walk_visits_each_code_point():
    data = SAMPLE.encode("utf-8")
    pos = 0
    seen = []
    while pos < len(data):
        code, pos = utf8_walk(data, pos)
        seen.append(code)
    assert seen == [ord(c) for c in SAMPLE]
    assert pos == len(data)


def test_utf16_to_char_string_full():
    assert utf16_to_char_string(_units(SAMPLE) + [0], 100) == SAMPLE.encode("utf-8")


def test_utf16_to_char_string_stops_at_nul_and_truncates():
    units = _units("abc") + [0] + _units("def")
    assert utf16_to_char_string(units, 3) == b"ab"
    assert utf16_to_char_string(units, 100) == b"abc"


def test_local_strings_empty_give_none():
    assert utf8_to_local_string(b"") is None
    assert local_to_utf8_string(b"") is None


def test_local_strings_ascii_round_trip():
    text = b"plain ascii path"
    local = utf8_to_local_string(text)
    assert local == text
    assert local_to_utf8_string(local) == text


def test_utf8_to_utf16_round_trip():
    data = SAMPLE.encode("utf-8")
    units = utf8_to_utf16(data)
    assert units == _units(SAMPLE)
    assert utf16_to_utf8(units) == data


def test_utf8_to_utf16_stops_at_nul():
    assert utf8_to_utf16(b"ab\x00cd") == _units("ab")


def test_utf16_empty_inputs_give_none():
    assert utf8_to_utf16(b"") is None
    assert utf16_to_utf8([]) is None
    assert utf16_to_utf8([0, 0x41]) is None


def test_utf16_to_utf8_rejects_lone_surrogate():
    with pytest.raises(ValueError):
        utf16_to_utf8([0xD800, 0x41])