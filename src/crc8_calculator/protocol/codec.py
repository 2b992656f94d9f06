"""Conversion of user-entered hex and text input to bytes."""

import re
from typing import Union

from .constants import InputFormat

# Unicode spaces and line breaks plus U+FEFF; the U+001C-U+001F separators are not whitespace
_WHITESPACE_RE = re.compile("[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")
_HEX_PREFIX_RE = re.compile(r"0x", re.IGNORECASE)
_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]*")


class DecodeError(ValueError):
    """Input could not be converted to a byte sequence."""


class InvalidHexFormatError(DecodeError):
    """Hex input contains characters other than hex digits."""


def replace_lone_surrogates(text: str) -> str:
    """Replace unpaired UTF-16 surrogates with U+FFFD."""
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def text_to_bytes(text: str) -> bytes:
    """
    Encode free text as UTF-8.

    Lone surrogates cannot be encoded and are replaced with U+FFFD,
    so every string has a byte representation.

    Example:
        >>> text_to_bytes("A")
        b'A'
        >>> text_to_bytes("a\\udcff")
        b'a\\xef\\xbf\\xbd'
    """
    return replace_lone_surrogates(text).encode("utf-8")


def hex_to_bytes(hex_string: str) -> bytes:
    """
    Parse a hex string into bytes.

    Whitespace and any "0x" prefixes (case-insensitive) are ignored.
    An odd number of digits is left-padded with a single zero, so a
    lone digit becomes the low nibble of the first byte.

    Args:
        hex_string: Hex digits as entered by a user

    Returns:
        Decoded bytes, in input order

    Raises:
        InvalidHexFormatError: If non-hex characters remain after cleaning

    Example:
        >>> hex_to_bytes("0xC8 0x64")
        b'\\xc8d'
        >>> hex_to_bytes("A")
        b'\\n'
    """
    cleaned = _WHITESPACE_RE.sub("", hex_string)
    cleaned = _HEX_PREFIX_RE.sub("", cleaned)

    if not _HEX_DIGITS_RE.fullmatch(cleaned):
        invalid = "".join(dict.fromkeys(c for c in cleaned if c not in "0123456789abcdefABCDEF"))
        raise InvalidHexFormatError(f"Invalid hexadecimal format: unexpected characters '{invalid}'")

    if len(cleaned) % 2:
        cleaned = "0" + cleaned

    return bytes(int(cleaned[i : i + 2], 16) for i in range(0, len(cleaned), 2))


def cells_to_hex(cells: list[str]) -> str:
    """
    Join a hex byte grid into a single hex string.

    Only cells holding exactly two characters take part; empty and
    half-filled cells are skipped.

    Example:
        >>> cells_to_hex(["C8", "", "6", "54"])
        'C854'
    """
    return "".join(cell.strip() for cell in cells if len(cell.strip()) == 2)


def decode_input(data: str, fmt: Union[InputFormat, str]) -> bytes:
    """
    Convert user input to bytes according to its format.

    Args:
        data: Raw input string
        fmt: Input format ("hex" or "text")

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If hex input is malformed
        ValueError: If the format is not recognized
    """
    fmt = InputFormat(fmt)

    if fmt == InputFormat.HEX:
        return hex_to_bytes(data)

    elif fmt == InputFormat.TEXT:
        return text_to_bytes(data)

    else:
        raise ValueError(f"Unsupported input format: {fmt}")
