"""Command-line entry point: six-digit primes and 128-bit AES file tools."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .aes import decrypt_message, encrypt_message, pad_message, parse_hex_key
from .numtheory import six_digit_primes

DEFAULT_KEYFILE = "keyfile"
DEFAULT_CIPHERFILE = "message.aes"
MAX_MESSAGE_LENGTH = 1023
_RULE = "============================="


class _CliError(Exception):
    """A failure reported to the user with a non-zero exit status."""


def _banner(title: str) -> None:
    print(_RULE)
    print(title)
    print(_RULE)


def _hex_bytes(data: bytes) -> str:
    return " ".join(format(b, "x") for b in data)


def _read_key(path: Path) -> bytes:
    try:
        with path.open("r", encoding="ascii", errors="replace") as handle:
            first_line = handle.readline()
    except OSError as exc:
        raise _CliError(f"Unable to open file {path}: {exc.strerror}") from None
    try:
        return parse_hex_key(first_line)
    except ValueError as exc:
        raise _CliError(f"Invalid key in {path}: {exc}") from None


def _run_primes(args: argparse.Namespace) -> None:
    for prime in six_digit_primes(args.count):
        print(prime)


def _run_encrypt(args: argparse.Namespace) -> None:
    _banner(" 128-bit AES Encryption Tool   ")
    message = args.message
    if message is None:
        try:
            message = input("Enter the message to encrypt: ")
        except EOFError:
            message = ""
    message_bytes = message.encode("utf-8")[:MAX_MESSAGE_LENGTH]
    print(message_bytes.decode("utf-8", errors="replace"))

    key = _read_key(Path(args.keyfile))
    encrypted = encrypt_message(pad_message(message_bytes), key)

    print("Encrypted message in hex:")
    print(_hex_bytes(encrypted))

    output = Path(args.output)
    try:
        output.write_bytes(encrypted)
    except OSError as exc:
        raise _CliError(f"Unable to open file {output}: {exc.strerror}") from None
    print(f"Wrote encrypted message to file {output}")


def _run_decrypt(args: argparse.Namespace) -> None:
    _banner(" 128-bit AES Decryption Tool ")
    source = Path(args.input)
    try:
        data = source.read_bytes()
    except OSError as exc:
        raise _CliError(f"Unable to open file {source}: {exc.strerror}") from None
    print(f"Read in encrypted message from {source}")

    key = _read_key(Path(args.keyfile))
    print(f"Read in the 128-bit key from {args.keyfile}")

    try:
        decrypted = decrypt_message(data, key)
    except ValueError as exc:
        raise _CliError(str(exc)) from None

    print("Decrypted message in hex:")
    print(_hex_bytes(decrypted))
    text = decrypted.rstrip(b"\0").decode("utf-8", errors="replace")
    print(f"Decrypted message: {text}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptolab", description="Small cryptography tools."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    primes = commands.add_parser("primes", help="list primes from 100000 upward")
    primes.add_argument("--count", type=int, default=100, help="how many primes")
    primes.set_defaults(handler=_run_primes)

    enc = commands.add_parser("aes-encrypt", help="encrypt a message with AES-128")
    enc.add_argument("--message", help="message to encrypt; read from stdin if absent")
    enc.add_argument("--keyfile", default=DEFAULT_KEYFILE,
                     help="file whose first line holds 16 hex bytes")
    enc.add_argument("--output", default=DEFAULT_CIPHERFILE,
                     help="file to write the ciphertext to")
    enc.set_defaults(handler=_run_encrypt)

    dec = commands.add_parser("aes-decrypt", help="decrypt a file with AES-128")
    dec.add_argument("--input", default=DEFAULT_CIPHERFILE,
                     help="file holding the ciphertext")
    dec.add_argument("--keyfile", default=DEFAULT_KEYFILE,
                     help="file whose first line holds 16 hex bytes")
    dec.set_defaults(handler=_run_decrypt)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except _CliError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())