"""
fieldseal - at-rest obfuscation of configuration values

Compresses, masks, seals with AES-256-GCM and hex-encodes single text values
so they can be stored in configuration files, and reverses the process on
load.
"""

from functools import lru_cache

__version__ = "0.1.0"


@lru_cache(maxsize=None)
def _default_sealer():
    from fieldseal.crypto import FieldSealer, default_material
    return FieldSealer(default_material())


def obfuscate(value: str) -> str:
    """Obfuscate a value with the secret material built into this release."""
    return _default_sealer().obfuscate(value)


def deobfuscate(value: str) -> str:
    """Deobfuscate a value sealed with the built-in secret material."""
    return _default_sealer().deobfuscate(value)
