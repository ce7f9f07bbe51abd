"""Process-wide secret material."""

from dataclasses import dataclass
from functools import lru_cache

from fieldseal.config.loader import ConfigError
from fieldseal.crypto import constants


@dataclass(frozen=True)
class SecretMaterial:
    """
    Immutable secrets shared by every sealing operation.

    Attributes:
        passphrase: Secret string behind the first XOR key
        cipher_password: Bytes hashed into the AES-256 key
        mask_key: Key for the second XOR pass
    """
    passphrase: str
    cipher_password: bytes
    mask_key: bytes

    def __post_init__(self):
        errors = []
        if not self.passphrase:
            errors.append("passphrase is empty")
        if not self.cipher_password:
            errors.append("cipher password is empty")
        if not self.mask_key:
            errors.append("mask key is empty")
        if errors:
            raise ConfigError(
                "Invalid secret material (build misconfiguration): " + ", ".join(errors)
            )

    def __repr__(self) -> str:
        return "SecretMaterial(<redacted>)"


@lru_cache(maxsize=None)
def default_material() -> SecretMaterial:
    """Secret material built into this release, resolved once per process."""
    return SecretMaterial(
        passphrase=constants.SECRET_PASSPHRASE,
        cipher_password=bytes(constants.CIPHER_PASSWORD),
        mask_key=bytes(constants.MASK_KEY),
    )
