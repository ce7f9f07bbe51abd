"""
Shared pytest fixtures and utilities for the fieldseal test suite.
"""

import zlib
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest
import yaml

from fieldseal.crypto import keys, xor_mask
from fieldseal.crypto.material import SecretMaterial
from fieldseal.crypto.pipeline import FieldSealer

# Bytes stripped by the legacy padding trim
TRIMMED_BYTES = b" \t\n\r\x0b\x0c"


@pytest.fixture
def material() -> SecretMaterial:
    """Secret material used instead of the release constants."""
    return SecretMaterial(
        passphrase="test-passphrase",
        cipher_password=b"test-cipher-password",
        mask_key=bytes([0x5A, 0xA5, 0x3C]),
    )


@pytest.fixture
def other_material() -> SecretMaterial:
    """Material from a different build."""
    return SecretMaterial(
        passphrase="test-passphrase",
        cipher_password=b"another-cipher-password",
        mask_key=bytes([0x5A, 0xA5, 0x3C]),
    )


@pytest.fixture
def sealer(material: SecretMaterial) -> FieldSealer:
    return FieldSealer(material)


@pytest.fixture
def trimmed_trailer_value(material: SecretMaterial) -> str:
    """
    A value whose masked zlib stream ends in a whitespace byte.

    The padding trim after decryption removes that byte, so the stream
    reaches the decompressor without the end of its adler32 trailer.
    """
    secret_key = keys.derive_secret_key(material.passphrase)
    for i in range(20000):
        value = f"value-{i}"
        masked = xor_mask.apply(secret_key, zlib.compress(value.encode("utf-8")))
        if masked[-1] in TRIMMED_BYTES:
            return value
    pytest.fail("no value with a whitespace-terminated stream found")


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[[Optional[Dict[str, Any]]], Path]:
    """
    Write an options file into the temp workspace.

    Usage:
        path = make_config({"crypto": {"legacy_padding": False}})
    """

    def _builder(data: Optional[Dict[str, Any]] = None) -> Path:
        cfg_path = tmp_path / "fieldseal.yaml"
        cfg_path.write_text(yaml.safe_dump(data or {}))
        return cfg_path

    return _builder
