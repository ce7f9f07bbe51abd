"""
Repeating-key XOR masking.

SECURITY NOTE: XOR masking on its own is NOT cryptographically secure. It is
applied before and after the AEAD stage only to make the stored artifact
harder to recognise and to reverse engineer.
"""

from typing import Union


def apply(key: bytes, data: Union[bytes, bytearray]) -> bytes:
    """
    XOR data with a repeating key.

    The same call masks and unmasks: apply(key, apply(key, data)) == data.

    Args:
        key: Non-empty key bytes
        data: Bytes to mask or unmask

    Returns:
        XOR'd bytes, same length as data

    Raises:
        ValueError: If key is empty
        TypeError: If data is not bytes-like
    """
    if not key:
        raise ValueError("XOR key must not be empty")
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("XOR mask expects bytes-like input")

    key_len = len(key)
    return bytes(b ^ key[i % key_len] for i, b in enumerate(data))


class XorMask:
    """
    XOR mask bound to a single key.
    """

    def __init__(self, key: Union[str, bytes]):
        if not key:
            raise ValueError("XOR key must not be empty")

        if isinstance(key, str):
            key = key.encode("utf-8")

        self._key = bytes(key)

    def apply(self, data: Union[bytes, bytearray]) -> bytes:
        """Mask or unmask data with the bound key."""
        return apply(self._key, data)
