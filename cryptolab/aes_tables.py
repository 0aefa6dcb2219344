"""Lookup tables and key schedule for 128-bit AES.

The tables are derived from arithmetic in GF(2^8) with the Rijndael
polynomial x^8 + x^4 + x^3 + x + 1, and match the standard published tables.
"""

from __future__ import annotations

from collections.abc import Iterable

BLOCK_SIZE = 16
ROUNDS = 10
EXPANDED_KEY_SIZE = BLOCK_SIZE * (ROUNDS + 1)

_REDUCTION = 0x11B


def _xtime(a: int) -> int:
    a <<= 1
    if a & 0x100:
        a ^= _REDUCTION
    return a


def _gf_mul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _gf_inverse(a: int) -> int:
    if a == 0:
        return 0
    # a ** 254 is the multiplicative inverse in GF(2^8).
    result, power, exp = 1, a, 254
    while exp:
        if exp & 1:
            result = _gf_mul(result, power)
        power = _gf_mul(power, power)
        exp >>= 1
    return result


def _rotl8(b: int, n: int) -> int:
    return ((b << n) | (b >> (8 - n))) & 0xFF


def _sbox_entry(x: int) -> int:
    b = _gf_inverse(x)
    return b ^ _rotl8(b, 1) ^ _rotl8(b, 2) ^ _rotl8(b, 3) ^ _rotl8(b, 4) ^ 0x63


def _mul_table(factor: int) -> bytes:
    return bytes(_gf_mul(x, factor) for x in range(256))


def _rcon_table() -> bytes:
    values = [0x8D]
    while len(values) < 256:
        values.append(_xtime(values[-1]))
    return bytes(values)


SBOX: bytes = bytes(_sbox_entry(x) for x in range(256))
INV_SBOX: bytes = bytes(sorted(range(256), key=SBOX.__getitem__))
RCON: bytes = _rcon_table()

MUL2: bytes = _mul_table(2)
MUL3: bytes = _mul_table(3)
MUL9: bytes = _mul_table(9)
MUL11: bytes = _mul_table(11)
MUL13: bytes = _mul_table(13)
MUL14: bytes = _mul_table(14)


def _core(word: bytes, iteration: int) -> list[int]:
    rotated = word[1:] + word[:1]
    substituted = [SBOX[b] for b in rotated]
    substituted[0] ^= RCON[iteration]
    return substituted


def key_expansion(key: bytes | Iterable[int]) -> bytes:
    """Expand a 16-byte key into the 176 bytes of the eleven round keys."""
    expanded = bytearray(key)
    if len(expanded) != BLOCK_SIZE:
        raise ValueError(f"key must be {BLOCK_SIZE} bytes, got {len(expanded)}")
    rcon_iteration = 1
    while len(expanded) < EXPANDED_KEY_SIZE:
        temp = bytes(expanded[-4:])
        if len(expanded) % BLOCK_SIZE == 0:
            temp = bytes(_core(temp, rcon_iteration))
            rcon_iteration += 1
        word = [a ^ b for a, b in zip(expanded[-16:-12], temp)]
        expanded.extend(word)
    return bytes(expanded)