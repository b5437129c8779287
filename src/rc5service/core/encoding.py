import re

from .errors import InvalidHexError

__all__ = ["bytes_to_hex", "bytes_to_text", "hex_to_bytes", "text_to_bytes"]

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]*")


def bytes_to_hex(data: bytes) -> str:
    return data.hex().upper()


def hex_to_bytes(text: str) -> bytes:
    """Parse a separator-free hex string, in either case."""
    if len(text) % 2 != 0:
        raise InvalidHexError("Invalid hex length.")

    if not _HEX_DIGITS.fullmatch(text):
        raise InvalidHexError("Invalid hex characters.")

    return bytes.fromhex(text)


def text_to_bytes(text: str) -> bytes:
    # lone surrogates cannot be encoded and become "?"
    return text.encode("utf-8", errors="replace")


def bytes_to_text(data: bytes) -> str:
    # wrong keys produce invalid UTF-8; decode it as U+FFFD instead of failing
    return data.decode("utf-8", errors="replace")
