"""128-bit AES block encryption and decryption with zero padding."""

from __future__ import annotations

from collections.abc import Iterable

from .aes_tables import (
    BLOCK_SIZE,
    EXPANDED_KEY_SIZE,
    INV_SBOX,
    MUL2,
    MUL3,
    MUL9,
    MUL11,
    MUL13,
    MUL14,
    ROUNDS,
    SBOX,
    key_expansion,
)

_IDENTITY = bytes(range(256))
# Coefficient tables for the first row of the (inverse) MixColumns matrix;
# later rows use the same coefficients rotated right.
_MIX_TABLES = (MUL2, MUL3, _IDENTITY, _IDENTITY)
_INV_MIX_TABLES = (MUL14, MUL11, MUL13, MUL9)

# The state is stored column by column: byte i is row i % 4 of column i // 4.
_SHIFT_ROWS = tuple((i + 4 * (i % 4)) % BLOCK_SIZE for i in range(BLOCK_SIZE))
_INV_SHIFT_ROWS = tuple((i - 4 * (i % 4)) % BLOCK_SIZE for i in range(BLOCK_SIZE))


def _add_round_key(state: bytes, round_key: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(state, round_key))


def _substitute(state: bytes, box: bytes) -> bytes:
    return bytes(box[b] for b in state)


def _shift(state: bytes, order: tuple[int, ...]) -> bytes:
    return bytes(state[i] for i in order)


def _mix(state: bytes, tables: tuple[bytes, ...]) -> bytes:
    out = bytearray()
    for start in range(0, BLOCK_SIZE, 4):
        column = state[start:start + 4]
        for row in range(4):
            acc = 0
            for k, value in enumerate(column):
                acc ^= tables[(k - row) % 4][value]
            out.append(acc)
    return bytes(out)


def _round_key(expanded_key: bytes, index: int) -> bytes:
    return expanded_key[BLOCK_SIZE * index:BLOCK_SIZE * (index + 1)]


def _check_block(block: bytes, expanded_key: bytes) -> tuple[bytes, bytes]:
    block = bytes(block)
    expanded_key = bytes(expanded_key)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    if len(expanded_key) != EXPANDED_KEY_SIZE:
        raise ValueError(
            f"expanded key must be {EXPANDED_KEY_SIZE} bytes, got {len(expanded_key)}"
        )
    return block, expanded_key


def parse_hex_key(text: str) -> bytes:
    """Parse 16 whitespace-separated hexadecimal byte values into a key."""
    values = []
    for token in text.split():
        try:
            value = int(token, 16)
        except ValueError:
            raise ValueError(f"invalid hexadecimal value {token!r}") from None
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value {token!r} does not fit in a byte")
        values.append(value)
    if len(values) != BLOCK_SIZE:
        raise ValueError(f"key must have {BLOCK_SIZE} bytes, got {len(values)}")
    return bytes(values)


def pad_message(message: bytes) -> bytes:
    """Pad with zero bytes up to a multiple of the block size."""
    message = bytes(message)
    remainder = len(message) % BLOCK_SIZE
    if remainder:
        message += bytes(BLOCK_SIZE - remainder)
    return message


def encrypt_block(block: bytes, expanded_key: bytes) -> bytes:
    """Encrypt one 16-byte block with a 176-byte expanded key."""
    state, expanded_key = _check_block(block, expanded_key)
    state = _add_round_key(state, _round_key(expanded_key, 0))
    for index in range(1, ROUNDS):
        state = _substitute(state, SBOX)
        state = _shift(state, _SHIFT_ROWS)
        state = _mix(state, _MIX_TABLES)
        state = _add_round_key(state, _round_key(expanded_key, index))
    state = _substitute(state, SBOX)
    state = _shift(state, _SHIFT_ROWS)
    return _add_round_key(state, _round_key(expanded_key, ROUNDS))


def decrypt_block(block: bytes, expanded_key: bytes) -> bytes:
    """Decrypt one 16-byte block with a 176-byte expanded key."""
    state, expanded_key = _check_block(block, expanded_key)
    state = _add_round_key(state, _round_key(expanded_key, ROUNDS))
    state = _shift(state, _INV_SHIFT_ROWS)
    state = _substitute(state, INV_SBOX)
    for index in range(ROUNDS - 1, 0, -1):
        state = _add_round_key(state, _round_key(expanded_key, index))
        state = _mix(state, _INV_MIX_TABLES)
        state = _shift(state, _INV_SHIFT_ROWS)
        state = _substitute(state, INV_SBOX)
    return _add_round_key(state, _round_key(expanded_key, 0))


def _blocks(data: bytes) -> Iterable[bytes]:
    return (data[i:i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE))


def encrypt_message(message: str | bytes, key: bytes) -> bytes:
    """Zero-pad a message and encrypt it block by block with a 16-byte key."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    expanded = key_expansion(key)
    return b"".join(encrypt_block(b, expanded) for b in _blocks(pad_message(message)))


def decrypt_message(data: bytes, key: bytes) -> bytes:
    """Decrypt data block by block with a 16-byte key; padding is kept."""
    data = bytes(data)
    if len(data) % BLOCK_SIZE:
        raise ValueError(
            f"ciphertext length must be a multiple of {BLOCK_SIZE}, got {len(data)}"
        )
    expanded = key_expansion(key)
    return b"".join(decrypt_block(b, expanded) for b in _blocks(data))