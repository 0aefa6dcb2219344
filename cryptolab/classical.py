"""Classical ciphers: Caesar, columnar transposition and Vernam."""

from __future__ import annotations

import random
import string

ALPHABET = string.ascii_lowercase
_ALPHA_CODE = {letter: i for i, letter in enumerate(ALPHABET)}
PAD_CHAR = "_"


def caesar_encrypt(text: str, shift: int) -> str:
    """Shift each letter by `shift`; anything not upper case uses the lower-case wheel."""

    def shift_char(c: str) -> str:
        base = ord("A") if c.isupper() else ord("a")
        return chr((ord(c) + shift - base) % 26 + base)

    return "".join(shift_char(c) for c in text)


def column_order(key: str) -> list[int]:
    """Rank key characters by code point, 1-based; ties go to the earlier one."""
    ranks = [0] * len(key)
    ordered = sorted(range(len(key)), key=lambda i: (key[i], i))
    for rank, index in enumerate(ordered, start=1):
        ranks[index] = rank
    return ranks


def _columns_in_order(key: str) -> list[int]:
    order = column_order(key)
    return sorted(range(len(key)), key=order.__getitem__)


def transposition_encrypt(message: str, key: str) -> str:
    """Columnar transposition; the grid gets one row more than the message fills."""
    if not key:
        raise ValueError("key must not be empty")
    width = len(key)
    rows = len(message) // width + 1
    padded = message.ljust(rows * width, PAD_CHAR)
    grid = [padded[r * width:(r + 1) * width] for r in range(rows)]
    return "".join(
        "".join(row[col] for row in grid) for col in _columns_in_order(key)
    )


def transposition_decrypt(cipher: str, key: str) -> str:
    """Undo transposition_encrypt, turning padding characters into spaces."""
    if not key:
        raise ValueError("key must not be empty")
    width = len(key)
    if len(cipher) % width:
        raise ValueError("cipher length must be a multiple of the key length")
    rows = len(cipher) // width
    columns: dict[int, str] = {}
    for n, col in enumerate(_columns_in_order(key)):
        columns[col] = cipher[n * rows:(n + 1) * rows]
    message = "".join(
        columns[col][r] for r in range(rows) for col in range(width)
    )
    return message.replace(PAD_CHAR, " ")


def generate_vernam_key(length: int, rng: random.Random | None = None) -> str:
    """Return a random key of lower-case letters."""
    rng = rng or random.Random()
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def vernam_encrypt(plaintext: str, key: str) -> str:
    """Add key letters to plaintext letters modulo 26; unknown characters count as 'a'."""
    if len(key) < len(plaintext):
        raise ValueError("key must be at least as long as the plaintext")
    return "".join(
        ALPHABET[(_ALPHA_CODE.get(p, 0) + _ALPHA_CODE.get(k, 0)) % 26]
        for p, k in zip(plaintext, key)
    )