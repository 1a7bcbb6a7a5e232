"""
Byte encoding and newline handling shared by every backend.

Windows' clip.exe only keeps full Unicode when fed UTF-16LE, so that is
the transfer encoding there; every other platform uses UTF-8. Neither
writes a byte-order mark.
"""

import re

from cliptext.models.platform_context import OSFamily

NEWLINE_PATTERN = re.compile(r"\r?\n")
_TRAILING_NEWLINE = re.compile(r"\r?\n\Z")


def encoding_for(os_family: OSFamily) -> str:
    if os_family is OSFamily.WINDOWS:
        return "utf-16-le"
    return "utf-8"


def encode_text(text: str, os_family: OSFamily) -> bytes:
    return text.encode(encoding_for(os_family))


def decode_bytes(data: bytes, os_family: OSFamily) -> str:
    """Decode utility output; malformed sequences become U+FFFD."""
    return data.decode(encoding_for(os_family), errors="replace")


def normalize_newlines(text: str, newline: str) -> str:
    return NEWLINE_PATTERN.sub(newline, text)


def strip_trailing_newline(text: str) -> str:
    """Remove exactly one trailing LF or CRLF, if present."""
    return _TRAILING_NEWLINE.sub("", text, count=1)
