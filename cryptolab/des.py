"""DES on 64-character strings of binary digits, encryption and decryption."""

from __future__ import annotations

from collections.abc import Sequence

from .bitdes import E, IP, IP_INVERSE, P, PC1, PC2, S, SHIFT_SCHEDULE

BLOCK_BITS = 64
ROUND_KEY_BITS = 48
ROUND_COUNT = 16


def _permute(bits: str, table: Sequence[int]) -> str:
    return "".join(bits[position - 1] for position in table)


def _check_binary(text: str, length: int, what: str) -> None:
    if len(text) != length or not set(text) <= {"0", "1"}:
        raise ValueError(f"{what} must be a {length}-bit binary string")


def decimal_to_binary(value: int) -> str:
    """Binary digits of a non-negative integer, padded to at least 4 digits."""
    if value < 0:
        raise ValueError("value must not be negative")
    return format(value, "04b")


def binary_to_decimal(bits: str) -> int:
    """Value of a binary string; any character other than '1' counts as 0."""
    return sum(1 << power for power, c in enumerate(reversed(bits)) if c == "1")


def shift_left(chunk: str, count: int) -> str:
    """Rotate a string of bits left by `count` places."""
    if count < 0:
        raise ValueError("count must not be negative")
    if not chunk:
        return chunk
    count %= len(chunk)
    return chunk[count:] + chunk[:count]


def xor_bits(a: str, b: str) -> str:
    """Bitwise exclusive or over the length of b."""
    if len(a) < len(b):
        raise ValueError("first operand is shorter than the second")
    return "".join("1" if x != y else "0" for x, y in zip(a, b))


def generate_round_keys(key: str) -> list[str]:
    """Derive the sixteen 48-bit round keys from a 64-bit binary key string."""
    _check_binary(key, BLOCK_BITS, "key")
    permuted = _permute(key, PC1)
    left, right = permuted[:28], permuted[28:]
    round_keys = []
    for shift in SHIFT_SCHEDULE:
        left = shift_left(left, shift)
        right = shift_left(right, shift)
        round_keys.append(_permute(left + right, PC2))
    return round_keys


def _feistel(right: str, round_key: str) -> str:
    xored = xor_bits(round_key, _permute(right, E))
    substituted = []
    for index, box in enumerate(S):
        chunk = xored[index * 6:index * 6 + 6]
        row = binary_to_decimal(chunk[0] + chunk[5])
        col = binary_to_decimal(chunk[1:5])
        substituted.append(decimal_to_binary(box[row][col]))
    return _permute("".join(substituted), P)


def des_block(bits: str, round_keys: Sequence[str]) -> str:
    """Run the sixteen DES rounds on a 64-bit block with the given round keys."""
    _check_binary(bits, BLOCK_BITS, "block")
    if len(round_keys) != ROUND_COUNT:
        raise ValueError(f"expected {ROUND_COUNT} round keys, got {len(round_keys)}")
    for round_key in round_keys:
        _check_binary(round_key, ROUND_KEY_BITS, "round key")
    permuted = _permute(bits, IP)
    left, right = permuted[:32], permuted[32:]
    for round_key in round_keys:
        left, right = right, xor_bits(_feistel(right, round_key), left)
    # The last round does not swap the halves.
    return _permute(right + left, IP_INVERSE)


def encrypt(plaintext: str, key: str) -> str:
    """Encrypt a 64-bit binary string with a 64-bit binary key."""
    return des_block(plaintext, generate_round_keys(key))


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt a 64-bit binary string by applying the round keys in reverse."""
    return des_block(ciphertext, generate_round_keys(key)[::-1])