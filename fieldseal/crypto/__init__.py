"""Sealing pipeline stages and the orchestrator that composes them."""

from fieldseal.crypto.errors import (
    FieldSealError,
    KeyDerivationError,
    CompressionError,
    DecompressionError,
    CipherInitError,
    AuthenticationError,
    EncodingError,
)
from fieldseal.crypto.material import SecretMaterial, default_material
from fieldseal.crypto.pipeline import FieldSealer

__all__ = [
    'FieldSealError',
    'KeyDerivationError',
    'CompressionError',
    'DecompressionError',
    'CipherInitError',
    'AuthenticationError',
    'EncodingError',
    'SecretMaterial',
    'default_material',
    'FieldSealer',
]
