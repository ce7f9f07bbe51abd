"""Error taxonomy for the sealing pipeline."""


class FieldSealError(Exception):
    """Base exception for pipeline failures."""
    stage = "pipeline"

    def __init__(self, message: str):
        super().__init__(f"{self.stage}: {message}")
        self.message = message


class KeyDerivationError(FieldSealError):
    """Secret material could not be turned into a key."""
    stage = "key_derivation"


class CompressionError(FieldSealError):
    """Plaintext could not be compressed."""
    stage = "compress"


class DecompressionError(FieldSealError):
    """Corrupt compressed stream, or a stream that inflates to nothing."""
    stage = "decompress"


class CipherInitError(FieldSealError):
    """AEAD cipher could not be built (wrong key size, build misconfiguration)."""
    stage = "cipher_init"


class AuthenticationError(FieldSealError):
    """AEAD tag mismatch: wrong key, corrupted or tampered ciphertext."""
    stage = "authenticate"


class EncodingError(FieldSealError):
    """Stored text is not valid hex."""
    stage = "encoding"
