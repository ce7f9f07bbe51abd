"""Hex encoding for embedding sealed values in text storage."""

import binascii

from fieldseal.crypto.errors import EncodingError


def encode(data: bytes) -> str:
    """Encode bytes as a lowercase hex string."""
    return binascii.hexlify(data).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode a hex string.

    Args:
        text: Hex digits, either case, no separators

    Returns:
        Decoded bytes

    Raises:
        EncodingError: On odd length, non-hex digits or non-ASCII text
    """
    if len(text) % 2 != 0:
        raise EncodingError(f"odd-length hex string ({len(text)} characters)")
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError, TypeError) as e:
        raise EncodingError(f"invalid hex string: {e}") from e
