"""Runtime options: loading, validation and logging setup."""
