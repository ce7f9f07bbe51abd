"""Runtime options validation."""

import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

# Secret material is build-time only; these keys must not appear in options
FORBIDDEN_CRYPTO_KEYS = ('passphrase', 'cipher_password', 'mask_key', 'secret', 'key')


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    # Validate crypto section
    errors.extend(_validate_crypto(config.get('crypto', {})))

    # Validate logging section
    errors.extend(_validate_logging(config.get('logging', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )

    logger.debug("Configuration validated")


def _validate_crypto(section: Dict[str, Any]) -> List[str]:
    """Validate crypto options section."""
    errors = []

    if not isinstance(section, dict):
        return ["crypto must be a dictionary"]

    for key in FORBIDDEN_CRYPTO_KEYS:
        if key in section:
            errors.append(f"crypto.{key} is not allowed (secrets are built into the release)")

    for flag in ('legacy_padding', 'tolerate_truncation'):
        if not isinstance(section.get(flag, True), bool):
            errors.append(f"crypto.{flag} must be a boolean")

    fields = section.get('fields', [])
    if not isinstance(fields, list):
        errors.append("crypto.fields must be a list")
    elif any(not isinstance(f, str) or not f for f in fields):
        errors.append("crypto.fields entries must be non-empty strings")

    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging options section."""
    errors = []

    if not isinstance(section, dict):
        return ["logging must be a dictionary"]

    # Validate level
    level = section.get('level', 'INFO')
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
    if level not in valid_levels:
        errors.append(f"logging.level must be one of: {', '.join(valid_levels)}")

    # Validate console flag
    console = section.get('console', True)
    if not isinstance(console, bool):
        errors.append("logging.console must be a boolean")

    # Validate optional log file
    if 'file' in section and section['file'] is not None:
        if not isinstance(section['file'], str):
            errors.append("logging.file must be a string path or null")

    return errors
