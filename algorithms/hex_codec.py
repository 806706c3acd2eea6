"""
Hex text form of run-code bytes, used by the text entry.
"""
import binascii
import re
import string

from algorithms.errors import MalformedInput
from algorithms.RLE import decode, encode

HEX_DIGITS = frozenset(string.hexdigits)
_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def bytes_to_hex(data) -> str:
    """Two lowercase hex digits per byte."""
    return binascii.hexlify(bytes(data)).decode("ascii")


def hex_to_bytes(text: str) -> bytes:
    """
    Parses a hex string two characters at a time.

    Upper and lower case digits are both accepted.

    Raises:
        MalformedInput: on odd length or a group that is not hex
    """
    if len(text) % 2:
        raise MalformedInput(
            f"Hex string has odd length {len(text)}: "
            f"trailing character {text[-1]!r} at offset {len(text) - 1}"
        )
    if _HEX_RE.fullmatch(text) is None:
        for offset in range(0, len(text), 2):
            group = text[offset:offset + 2]
            if not HEX_DIGITS.issuperset(group):
                raise MalformedInput(f"Invalid hex group {group!r} at offset {offset}")
    return binascii.unhexlify(text)


def encode_text(text: str) -> str:
    """RLE-encodes the UTF-8 bytes of text and renders them as hex."""
    return bytes_to_hex(encode(text.encode("utf-8")))


def decode_text(hex_text: str) -> str:
    """
    Inverse of encode_text.

    Bytes that are not valid UTF-8 are shown as U+FFFD.
    """
    return decode(hex_to_bytes(hex_text)).decode("utf-8", errors="replace")
