"""
AES-256-GCM sealing of masked, compressed values.

Envelope layout is nonce (12 bytes) | ciphertext | tag (16 bytes), with no
length field. The nonce is drawn from the OS CSPRNG for every seal.
"""

import secrets
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from fieldseal.crypto.errors import AuthenticationError, CipherInitError

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
BLOCK_SIZE = 16

# Legacy artifacts pad plaintext with spaces to a whole block
PADDING_BYTE = b" "


def _pad(plaintext: bytes) -> bytes:
    # Always adds 1..BLOCK_SIZE bytes, a full block when already aligned
    return plaintext + PADDING_BYTE * (BLOCK_SIZE - len(plaintext) % BLOCK_SIZE)


class AeadCipher:
    """
    AES-256-GCM cipher bound to one key.

    Legacy padding is not needed by GCM. It is kept so artifacts stay
    byte-compatible with values sealed by earlier releases; the matching trim
    in open() strips all trailing ASCII whitespace, which is why the
    decompressor has to accept a stream missing its final bytes.
    """

    def __init__(self, key: bytes, legacy_padding: bool = True):
        """
        Args:
            key: 32-byte AES key
            legacy_padding: Pad to block size on seal, trim on open

        Raises:
            CipherInitError: If key is not exactly 32 bytes
        """
        if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_SIZE:
            size = len(key) if isinstance(key, (bytes, bytearray)) else type(key).__name__
            raise CipherInitError(f"AES-256 key must be {KEY_SIZE} bytes, got {size}")
        try:
            self._aesgcm = AESGCM(bytes(key))
        except ValueError as e:
            raise CipherInitError(f"error creating AES cipher: {e}") from e
        self.legacy_padding = legacy_padding

    def seal(self, plaintext: bytes, nonce: Optional[bytes] = None) -> bytes:
        """
        Encrypt and authenticate plaintext.

        Args:
            plaintext: Bytes to seal
            nonce: Only for known-answer tests. Never pass a nonce in
                production code; reuse under one key breaks GCM.

        Returns:
            nonce | ciphertext | tag
        """
        if nonce is None:
            nonce = secrets.token_bytes(NONCE_SIZE)
        elif len(nonce) != NONCE_SIZE:
            raise CipherInitError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")

        if self.legacy_padding:
            plaintext = _pad(plaintext)

        return nonce + self._aesgcm.encrypt(nonce, plaintext, None)

    def open(self, envelope: bytes) -> bytes:
        """
        Verify and decrypt an envelope produced by seal().

        Raises:
            AuthenticationError: If the envelope is too short or its tag does
                not verify (wrong key, corruption, tampering)
        """
        if len(envelope) < NONCE_SIZE + TAG_SIZE:
            raise AuthenticationError(
                f"envelope too short ({len(envelope)} bytes, need at least {NONCE_SIZE + TAG_SIZE})"
            )

        nonce, ciphertext = envelope[:NONCE_SIZE], envelope[NONCE_SIZE:]
        try:
            plaintext = self._aesgcm.decrypt(nonce, ciphertext, None)
        except InvalidTag as e:
            raise AuthenticationError(
                "error decrypting (wrong key, or the value was corrupted or tampered with)"
            ) from e

        if self.legacy_padding:
            plaintext = plaintext.rstrip()
        return plaintext


def seal(key: bytes, plaintext: bytes) -> bytes:
    """Seal plaintext under key with legacy padding."""
    return AeadCipher(key).seal(plaintext)


def open_envelope(key: bytes, envelope: bytes) -> bytes:
    """Open an envelope sealed by seal()."""
    return AeadCipher(key).open(envelope)
