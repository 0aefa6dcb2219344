# cryptolab

A small collection of textbook cryptography and information-theory tools.
It is meant for learning and experimenting, not for protecting real data.

## Contents

- `cryptolab.aes` – AES-128 encryption and decryption of 16-byte blocks, and
  of whole messages padded with zero bytes and processed block by block.
- `cryptolab.aes_tables` – the S-boxes, round constants and GF(2^8)
  multiplication tables, plus `key_expansion`, which turns a 16-byte key into
  the 176 bytes of the eleven round keys.
- `cryptolab.des` – DES on strings of `0`/`1` characters: round-key
  generation and encryption and decryption of one 64-bit block.
- `cryptolab.bitdes` – DES encryption of one 64-bit block, working on Python
  integers as bit vectors; `encrypt_binary` takes and returns 64-character
  binary strings.
- `cryptolab.elgamal` – ElGamal key generation (`p = 23`, `g = 5`),
  encryption and decryption, with `mod_exp` and `mod_inverse` helpers.
- `cryptolab.classical` – Caesar, columnar transposition and Vernam ciphers.
- `cryptolab.entropy` – Shannon entropy of a probability distribution or of
  the character frequencies in a piece of text.
- `cryptolab.numtheory` – two primality tests, a search for primes from
  100000 upward, the greatest common divisor and the extended Euclidean
  algorithm.
- `cryptolab.cli` – the `cryptolab` command.

The package uses only the Python standard library and supports Python 3.10
and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Classical ciphers:

```python
from cryptolab.classical import caesar_encrypt, transposition_encrypt, transposition_decrypt

caesar_encrypt("ATTACKATONCE", 4)          # 'EXXEGOEXSRGI'

cipher = transposition_encrypt("Khoa Cong nghe thong tin", "HACK")
transposition_decrypt(cipher, "HACK")      # the message back, followed by padding spaces
```

The transposition grid always gets one row more than the message fills, and
padding `_` characters come back as spaces. `vernam_encrypt` adds key letters
to plaintext letters modulo 26; `generate_vernam_key` makes a random key of
lower-case letters.

Number theory:

```python
from cryptolab.numtheory import extended_gcd, find_gcd, is_prime, six_digit_primes

find_gcd(35, 15)          # 5
is_prime(29)              # True
six_digit_primes(3)       # [100003, 100019, 100043]
extended_gcd(35, 15)      # (g, x, y) with 35*x + 15*y == g
```

Entropy:

```python
from cryptolab.entropy import shannon_entropy, text_entropy

shannon_entropy([0.5, 0.5])   # 1.0
text_entropy("aabb")          # 1.0
```

`shannon_entropy` accepts 1 to 100 probabilities, each in `[0, 1]` with at
most two decimal places and together summing to one; anything else raises
`InvalidDistributionError` (a subclass of `ValueError`).

ElGamal takes an optional `random.Random` so that results can be reproduced:

```python
import random
from cryptolab import elgamal

rng = random.Random(0)
keys = elgamal.generate_keys(rng)
c1, c2 = elgamal.encrypt(7, keys.p, keys.g, keys.y, rng)
elgamal.decrypt(c1, c2, keys.p, keys.x)    # 7
```

Messages are integers and are recovered modulo `p`.

AES works on bytes. `aes.parse_hex_key` reads a key written as sixteen
whitespace-separated hexadecimal byte values, `aes.encrypt_message` zero-pads
and encrypts a `str` or `bytes` message, and `aes.decrypt_message` decrypts
it again, keeping the zero padding. `aes.encrypt_block` and
`aes.decrypt_block` work on a single block with an expanded key from
`aes_tables.key_expansion`.

## Command line

Installing the package provides a `cryptolab` command with three
subcommands:

```
cryptolab primes [--count N]
cryptolab aes-encrypt [--message TEXT] [--keyfile PATH] [--output PATH]
cryptolab aes-decrypt [--input PATH] [--keyfile PATH]
```

- `primes` prints the first `N` primes from 100000 upward (100 by default).
- `aes-encrypt` encrypts a message (asked for on standard input when
  `--message` is not given, and cut to 1023 bytes), prints the ciphertext in
  hex and writes it to `message.aes` unless `--output` says otherwise.
- `aes-decrypt` reads `message.aes` (or `--input`), prints the decrypted
  bytes in hex and the message with its trailing zero bytes removed.

Both AES commands read the key from the first line of `keyfile` (or
`--keyfile`), written as sixteen hexadecimal byte values separated by spaces.
Errors such as a missing file or a malformed key are printed to standard
error and give exit status 1.

Run `cryptolab --help` or `cryptolab <subcommand> --help` for details.

## What it does not do

- The command line offers only prime listing and AES; the DES, ElGamal,
  classical-cipher and entropy tools are available from Python only.
- AES messages are encrypted block by block with zero padding; there are no
  chaining modes, no authentication and no padding removal in
  `decrypt_message`.
- `cryptolab.bitdes` encrypts only; decryption of binary strings is in
  `cryptolab.des`.
- ElGamal uses the fixed tiny group `p = 23`, `g = 5`.

These implementations follow the classic textbook descriptions and are not
constant-time. Use them to study how the algorithms work, not to secure
anything.