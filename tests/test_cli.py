import io

import pytest

from cryptolab.aes import encrypt_message, parse_hex_key
from cryptolab.cli import main
from cryptolab.numtheory import six_digit_primes

KEY_LINE = "01 04 02 03 01 03 04 0A 09 0B 07 0F 0F 06 03 00\n"


@pytest.fixture
def keyfile(tmp_path):
    path = tmp_path / "keyfile"
    path.write_text(KEY_LINE)
    return path


def test_primes_lists_hundred_six_digit_primes(capsys):
    assert main(["primes"]) == 0
    lines = capsys.readouterr().out.split()
    assert [int(x) for x in lines] == six_digit_primes(100)
    assert lines[0] == "100003"
    assert len(lines) == 100


def test_primes_count_option(capsys):
    assert main(["primes", "--count", "3"]) == 0
    assert [int(x) for x in capsys.readouterr().out.split()] == six_digit_primes(3)


def test_encrypt_writes_ciphertext_file(tmp_path, keyfile, capsys):
    out = tmp_path / "message.aes"
    status = main(["aes-encrypt", "--message", "hello world",
                   "--keyfile", str(keyfile), "--output", str(out)])
    assert status == 0
    expected = encrypt_message("hello world", parse_hex_key(KEY_LINE))
    assert out.read_bytes() == expected
    text = capsys.readouterr().out
    assert "128-bit AES Encryption Tool" in text
    assert " ".join(format(b, "x") for b in expected) in text


def test_encrypt_reads_message_from_stdin(tmp_path, keyfile, monkeypatch, capsys):
    out = tmp_path / "cipher.bin"
    monkeypatch.setattr("sys.stdin", io.StringIO("secret plans\n"))
    assert main(["aes-encrypt", "--keyfile", str(keyfile), "--output", str(out)]) == 0
    assert out.read_bytes() == encrypt_message("secret plans", parse_hex_key(KEY_LINE))
    assert "secret plans" in capsys.readouterr().out


def test_round_trip_through_files(tmp_path, keyfile, capsys):
    out = tmp_path / "message.aes"
    message = "a message that spans more than one block"
    assert main(["aes-encrypt", "--message", message,
                 "--keyfile", str(keyfile), "--output", str(out)]) == 0
    capsys.readouterr()
    assert main(["aes-decrypt", "--input", str(out), "--keyfile", str(keyfile)]) == 0
    text = capsys.readouterr().out
    assert f"Decrypted message: {message}\n" in text
    assert "128-bit AES Decryption Tool" in text


def test_encrypt_missing_keyfile_fails(tmp_path, capsys):
    status = main(["aes-encrypt", "--message", "x",
                   "--keyfile", str(tmp_path / "absent"),
                   "--output", str(tmp_path / "out")])
    assert status == 1
    assert "Unable to open file" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_decrypt_missing_input_fails(tmp_path, keyfile, capsys):
    status = main(["aes-decrypt", "--input", str(tmp_path / "absent"),
                   "--keyfile", str(keyfile)])
    assert status == 1
    assert "Unable to open file" in capsys.readouterr().err


def test_decrypt_rejects_partial_block(tmp_path, keyfile, capsys):
    data = tmp_path / "message.aes"
    data.write_bytes(b"short")
    assert main(["aes-decrypt", "--input", str(data), "--keyfile", str(keyfile)]) == 1
    assert "multiple of 16" in capsys.readouterr().err


def test_bad_key_is_reported(tmp_path, capsys):
    bad = tmp_path / "keyfile"
    bad.write_text("zz 01\n")
    status = main(["aes-encrypt", "--message", "x", "--keyfile", str(bad),
                   "--output", str(tmp_path / "out")])
    assert status == 1
    assert "Invalid key" in capsys.readouterr().err


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2