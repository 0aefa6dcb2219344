import pytest

from cryptolab.bitdes import (
    des_encrypt,
    encrypt_binary,
    expansion,
    generate_subkeys,
    initial_permutation,
    is_valid_binary_string,
    permutation,
    sbox,
)

BLOCK = 0x0123456789ABCDEF
KEY_VALUE = 0x133457799BBCDFF1
MASK64 = (1 << 64) - 1


def test_classic_worked_example_ciphertext():
    assert des_encrypt(BLOCK, KEY_VALUE) == 0x85E813540F0AB405


def test_classic_worked_example_first_subkey():
    subkeys = generate_subkeys(KEY_VALUE)
    assert len(subkeys) == 16
    assert subkeys[0] == 0x1B02EFFC7072
    assert all(0 <= k < (1 << 48) for k in subkeys)


def test_classic_worked_example_initial_permutation():
    assert initial_permutation(BLOCK) == 0xCC00CCFFF0AAF0AA


def test_initial_permutation_preserves_bit_count():
    for value in (0, MASK64, BLOCK, KEY_VALUE):
        assert bin(initial_permutation(value)).count("1") == bin(value).count("1")


def test_permutation_is_bijective_on_single_bits():
    images = {permutation(1 << k) for k in range(32)}
    assert len(images) == 32
    assert all(bin(v).count("1") == 1 for v in images)


def test_expansion_extremes():
    assert expansion(0) == 0
    assert expansion((1 << 32) - 1) == (1 << 48) - 1
    for k in range(32):
        assert bin(expansion(1 << k)).count("1") in (1, 2)


def test_sbox_output_width():
    for value in (0, (1 << 48) - 1, 0x123456789ABC):
        assert 0 <= sbox(value) < (1 << 32)


def test_complementation_property():
    plain = 0x0F1E2D3C4B5A6978
    key_value = 0x1122334455667788
    assert des_encrypt(plain ^ MASK64, key_value ^ MASK64) == (
        des_encrypt(plain, key_value) ^ MASK64
    )


def test_weak_key_is_an_involution():
    for plain in (BLOCK, 0, MASK64):
        assert des_encrypt(des_encrypt(plain, 0), 0) == plain


def test_is_valid_binary_string():
    assert is_valid_binary_string("01" * 32)
    assert not is_valid_binary_string("01" * 31)
    assert not is_valid_binary_string("2" + "0" * 63)


def test_encrypt_binary_matches_integer_form():
    plain_bits = format(BLOCK, "064b")
    key_bits = format(KEY_VALUE, "064b")
    result = encrypt_binary(plain_bits, key_bits)
    assert len(result) == 64
    assert int(result, 2) == des_encrypt(BLOCK, KEY_VALUE)


def test_encrypt_binary_rejects_bad_plaintext():
    with pytest.raises(ValueError, match="Plaintext"):
        encrypt_binary("0101", "0" * 64)


def test_encrypt_binary_rejects_bad_key():
    with pytest.raises(ValueError, match="Key"):
        encrypt_binary("0" * 64, "x" * 64)