"""Logging configuration from runtime options."""

import logging
from pathlib import Path
from typing import Any, Dict

from fieldseal.config.loader import ConfigError

PACKAGE_LOGGER = 'fieldseal'


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """
    Configure the package logger from the logging section.

    Only the 'fieldseal' logger is configured; the host application's root
    logger is left alone. Nothing in the package logs plaintext or key bytes.

    Args:
        config: Configuration dictionary

    Returns:
        The configured package logger

    Raises:
        ConfigError: If the log file cannot be created
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = logging_config.get('level', 'INFO').upper()
    level = getattr(logging, level_str, logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)

    if logging_config.get('console', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        package_logger.addHandler(console_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file)
            # Create parent directory if it doesn't exist
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            raise ConfigError(f"Could not create log file '{log_file}': {e}")

    # Records stop at the package handlers when any are attached
    package_logger.propagate = not package_logger.handlers

    return package_logger
