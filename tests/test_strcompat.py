import re

import pytest

from retrocommon.strcompat import (
    isblank,
    strcasecmp,
    strcasestr,
    strlcat,
    strlcpy,
    tokenize,
)


def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", 5)


def test_strlcpy_truncates_and_reports_full_length():
    source = "hello world"
    copied, length = strlcpy(source, 4)
    assert copied == source[:3]
    assert length == len(source)


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcpy_works_on_bytes():
    assert strlcpy(b"abcdef", 3) == (b"ab", 6)


def test_strlcpy_negative_size_raises():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_appends():
    assert strlcat("foo", "bar", 10) == ("foo" + "bar", 6)


def test_strlcat_truncates():
    result, length = strlcat("foo", "bar", 5)
    assert result == "foo" + "b"
    assert length == 6


def test_strlcat_dest_already_too_long():
    assert strlcat("foobar", "x", 3) == ("foobar", 7)


def test_strlcat_exactly_full():
    assert strlcat("abc", "de", 3) == ("abc", 5)


def test_strcasecmp_equal_ignoring_case():
    assert strcasecmp("HeLLo", "hello") == 0


@pytest.mark.parametrize(
    "a,b",
    [("apple", "Banana"), ("ab", "abc"), ("", "a"), ("ABC", "abd")],
)
def test_strcasecmp_ordering_is_antisymmetric(a, b):
    assert strcasecmp(a, b) < 0
    assert strcasecmp(b, a) > 0


def test_strcasecmp_non_ascii_not_folded():
    assert strcasecmp("\u00c9", "\u00e9") < 0


@pytest.mark.parametrize(
    "haystack,needle",
    [
        ("Hello World", "world"),
        ("aaaAB", "ab"),
        ("libretro.ZIP", ".zip"),
        ("abc", "abc"),
    ],
)
def test_strcasestr_finds_first_match(haystack, needle):
    index = strcasestr(haystack, needle)
    assert index == haystack.lower().find(needle.lower())
    assert haystack[index : index + len(needle)].lower() == needle.lower()


def test_strcasestr_missing():
    assert strcasestr("Hello", "xyz") is None


def test_strcasestr_needle_longer():
    assert strcasestr("ab", "abc") is None


def test_strcasestr_empty_needle_matches_start():
    assert strcasestr("abc", "") == 0


@pytest.mark.parametrize("c,expected", [(" ", True), ("\t", True), ("\n", False), ("a", False), (32, True), (9, True), (10, False)])
def test_isblank(c, expected):
    assert isblank(c) is expected


@pytest.mark.parametrize(
    "text",
    ["a,b;c", ",,a,,b,,", "   leading and trailing   ", "one", ";;;", ""],
)
def test_tokenize_matches_split(text):
    expected = [part for part in re.split("[,; ]", text) if part]
    assert list(tokenize(text, ",; ")) == expected


def test_tokenize_without_delims_yields_whole_text():
    assert list(tokenize("a b", "")) == ["a b"]