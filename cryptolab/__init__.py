"""Textbook cryptography: AES, DES, ElGamal, classical ciphers, entropy and number theory."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "aes_tables",
    "bitdes",
    "classical",
    "cli",
    "des",
    "elgamal",
    "entropy",
    "numtheory",
]