"""Key derivation for the masking and cipher stages."""

import hashlib
from typing import Union

from fieldseal.crypto.errors import KeyDerivationError

# Secrets at least this long are used as the XOR key without hashing
VERBATIM_KEY_MIN_LENGTH = 64


def _to_bytes(secret: Union[str, bytes]) -> bytes:
    if isinstance(secret, (bytes, bytearray)):
        return bytes(secret)
    try:
        return secret.encode("utf-8")
    except (UnicodeEncodeError, AttributeError) as e:
        raise KeyDerivationError(f"secret cannot be encoded: {e}") from e


def _sha256(data: bytes) -> bytes:
    try:
        return hashlib.sha256(data).digest()
    except (TypeError, ValueError) as e:
        raise KeyDerivationError(f"digest failed: {e}") from e


def derive_secret_key(secret: Union[str, bytes]) -> bytes:
    """
    Derive the first-pass XOR key from the secret passphrase.

    Args:
        secret: Passphrase string (or its bytes)

    Returns:
        The passphrase bytes verbatim if 64 bytes or longer, otherwise
        their 32-byte SHA-256 digest

    Raises:
        KeyDerivationError: If the passphrase cannot be encoded
    """
    data = _to_bytes(secret)
    if len(data) >= VERBATIM_KEY_MIN_LENGTH:
        return data
    return _sha256(data)


def derive_cipher_key(password: Union[str, bytes]) -> bytes:
    """
    Derive the AES-256 key from the cipher password.

    Always the SHA-256 digest, whatever the password length.
    """
    return _sha256(_to_bytes(password))
