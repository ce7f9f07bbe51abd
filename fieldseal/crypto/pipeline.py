"""
Sealing pipeline for configuration values.

Obfuscate: compress -> XOR(secret key) -> AES-GCM seal -> XOR(mask key) -> hex
Deobfuscate runs the mirror sequence. The empty string means "unset" and
passes through both directions untouched.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from fieldseal.config.validator import validate_config
from fieldseal.crypto import aead, compressor, keys, text_codec
from fieldseal.crypto.errors import CompressionError, DecompressionError, FieldSealError
from fieldseal.crypto.material import SecretMaterial, default_material
from fieldseal.crypto.xor_mask import XorMask

logger = logging.getLogger(__name__)


class FieldSealer:
    """
    Obfuscates and deobfuscates single text values.

    Keys are derived once at construction; the instance holds no other state
    and can be shared between threads.

    Example:
        sealer = FieldSealer(default_material())
        stored = sealer.obfuscate("hunter2")
        assert sealer.deobfuscate(stored) == "hunter2"
    """

    def __init__(
        self,
        material: SecretMaterial,
        legacy_padding: bool = True,
        tolerate_truncation: bool = True,
        fields: Optional[Iterable[str]] = None
    ):
        """
        Args:
            material: Secret material for this process
            legacy_padding: Space-pad before sealing and trim after opening
            tolerate_truncation: Accept a zlib stream missing its trailer
            fields: Default field names for the *_fields helpers

        Raises:
            KeyDerivationError: If the passphrase cannot be turned into a key
            CipherInitError: If the derived cipher key is unusable
        """
        self._secret_mask = XorMask(keys.derive_secret_key(material.passphrase))
        self._outer_mask = XorMask(material.mask_key)
        self._cipher = aead.AeadCipher(
            keys.derive_cipher_key(material.cipher_password),
            legacy_padding=legacy_padding,
        )
        self.tolerate_truncation = tolerate_truncation
        self.fields = list(fields or [])

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        material: Optional[SecretMaterial] = None
    ) -> "FieldSealer":
        """
        Build a sealer from the options dictionary.

        Args:
            config: Options from load_config()
            material: Secret material (defaults to the built-in material)

        Raises:
            ValidationError: If the options are invalid
        """
        validate_config(config)

        crypto = config.get('crypto') or {}
        return cls(
            material or default_material(),
            legacy_padding=crypto.get('legacy_padding', True),
            tolerate_truncation=crypto.get('tolerate_truncation', True),
            fields=crypto.get('fields', []),
        )

    def obfuscate(self, value: str) -> str:
        """
        Turn a plaintext value into its stored form.

        Args:
            value: Plaintext value ("" is returned unchanged)

        Returns:
            Hex string safe for text storage

        Raises:
            FieldSealError: Subclass naming the failing stage
        """
        if value == "":
            return ""

        try:
            try:
                data = value.encode("utf-8")
            except UnicodeEncodeError as e:
                raise CompressionError(f"value is not encodable: {e}") from e
            data = compressor.compress(data)
            data = self._secret_mask.apply(data)
            data = self._cipher.seal(data)
            data = self._outer_mask.apply(data)
            return text_codec.encode(data)
        except FieldSealError as e:
            logger.error(f"Failed to obfuscate value ({len(value)} chars) at {e.stage}: {e.message}")
            raise

    def deobfuscate(self, value: str) -> str:
        """
        Recover the plaintext of a stored value.

        Args:
            value: Stored hex string ("" is returned unchanged)

        Returns:
            Plaintext value

        Raises:
            EncodingError: Malformed hex
            AuthenticationError: Wrong key, corruption or tampering
            DecompressionError: Corrupt stream or empty result
        """
        if value == "":
            return ""

        try:
            data = text_codec.decode(value)
            data = self._outer_mask.apply(data)
            data = self._cipher.open(data)
            data = self._secret_mask.apply(data)
            data = compressor.decompress(data, tolerate_truncation=self.tolerate_truncation)
            try:
                return data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecompressionError(f"decompressed value is not UTF-8: {e}") from e
        except FieldSealError as e:
            logger.error(f"Failed to deobfuscate value ({len(value)} chars) at {e.stage}: {e.message}")
            raise

    def obfuscate_fields(
        self,
        record: Dict[str, Any],
        fields: Optional[Iterable[str]] = None
    ) -> Dict[str, Any]:
        """
        Obfuscate named string fields of a record in place.

        Missing fields and None values are skipped. If a field fails, the
        error propagates and fields already processed stay obfuscated.

        Args:
            record: Mapping holding the values
            fields: Field names (defaults to the configured crypto.fields)

        Returns:
            The same record, for chaining
        """
        for field in (self.fields if fields is None else fields):
            if record.get(field) is not None:
                record[field] = self.obfuscate(record[field])
        return record

    def deobfuscate_fields(
        self,
        record: Dict[str, Any],
        fields: Optional[Iterable[str]] = None
    ) -> Dict[str, Any]:
        """Deobfuscate named string fields of a record in place."""
        for field in (self.fields if fields is None else fields):
            if record.get(field) is not None:
                record[field] = self.deobfuscate(record[field])
        return record
