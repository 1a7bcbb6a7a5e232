import pytest

from cliptext.models.platform_context import OSFamily
from cliptext.utils.codec import (
    decode_bytes,
    encode_text,
    encoding_for,
    normalize_newlines,
    strip_trailing_newline,
)


@pytest.mark.parametrize("os_family, expected", [
    (OSFamily.WINDOWS, "utf-16-le"),
    (OSFamily.MACOS, "utf-8"),
    (OSFamily.LINUX, "utf-8"),
])
def test_encoding_per_platform(os_family, expected):
    assert encoding_for(os_family) == expected


def test_windows_encoding_has_no_bom():
    data = encode_text("hé", OSFamily.WINDOWS)
    assert data == b"h\x00\xe9\x00"
    assert not data.startswith(b"\xff\xfe")


def test_utf8_encoding_has_no_bom():
    data = encode_text("€uro", OSFamily.LINUX)
    assert data == "€uro".encode("utf-8")
    assert not data.startswith(b"\xef\xbb\xbf")


def test_decode_is_inverse_of_encode_for_non_ascii():
    text = "naïve 日本語 🎉\r\nline"
    for family in OSFamily:
        assert decode_bytes(encode_text(text, family), family) == text


def test_decode_replaces_malformed_bytes():
    assert decode_bytes(b"ok\xff", OSFamily.LINUX) == "ok�"


def test_normalize_newlines_leaves_bare_cr():
    assert normalize_newlines("a\r\nb\nc\rd", "\r\n") == "a\r\nb\r\nc\rd"
    assert normalize_newlines("a\r\nb\n", "\n") == "a\nb\n"


@pytest.mark.parametrize("text, expected", [
    ("abc\n", "abc"),
    ("abc\r\n", "abc"),
    ("abc\n\n", "abc\n"),
    ("abc\r\n\r\n", "abc\r\n"),
    ("abc", "abc"),
    ("abc\r", "abc\r"),
    ("\n", ""),
    ("", ""),
])
def test_strip_trailing_newline_removes_exactly_one(text, expected):
    assert strip_trailing_newline(text) == expected
