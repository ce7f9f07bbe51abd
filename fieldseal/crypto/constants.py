"""
Build-time secret constants.

These values are replaced with random material when a release is built.
Values sealed by one build cannot be opened by a build with different
constants. Never load them from a runtime configuration file.
"""

# Passphrase for the first XOR pass. Hashed when shorter than 64 bytes.
SECRET_PASSPHRASE = "HASH_HERE"

# Password whose SHA-256 digest is the AES-256 key
CIPHER_PASSWORD = bytes([
    0x01,
])

# Key for the second XOR pass over the sealed envelope
MASK_KEY = bytes([
    0x01,
])
