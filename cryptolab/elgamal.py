"""ElGamal encryption over a small fixed prime group."""

from __future__ import annotations

import random
from dataclasses import dataclass

DEFAULT_P = 23
DEFAULT_G = 5


@dataclass(frozen=True)
class ElGamalKeys:
    """A key pair: public (p, g, y) and private x."""

    p: int
    g: int
    x: int
    y: int

    @property
    def public_key(self) -> tuple[int, int, int]:
        return self.p, self.g, self.y

    @property
    def private_key(self) -> int:
        return self.x

    def __str__(self) -> str:
        return (
            f"Public Key: (p={self.p}, g={self.g}, y={self.y})\n"
            f"Private Key: (x={self.x})"
        )


def mod_exp(base: int, exp: int, mod: int) -> int:
    """Compute base**exp % mod by square and multiply; 1 for a non-positive exponent."""
    if exp <= 0:
        return 1
    return pow(base, exp, mod)


def mod_inverse(a: int, mod: int) -> int:
    """Return the inverse of a modulo mod; 0 when mod is 1."""
    if mod == 1:
        return 0
    try:
        return pow(a, -1, mod)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {mod}") from None


def _random_exponent(p: int, rng: random.Random | None) -> int:
    rng = rng or random.Random()
    return rng.randrange(p - 2) + 1


def generate_keys(rng: random.Random | None = None) -> ElGamalKeys:
    """Generate a key pair with p = 23, g = 5 and a random private exponent."""
    p, g = DEFAULT_P, DEFAULT_G
    x = _random_exponent(p, rng)
    return ElGamalKeys(p=p, g=g, x=x, y=mod_exp(g, x, p))


def encrypt(
    message: int, p: int, g: int, y: int, rng: random.Random | None = None
) -> tuple[int, int]:
    """Encrypt an integer message, returning the ciphertext pair (c1, c2)."""
    k = _random_exponent(p, rng)
    c1 = mod_exp(g, k, p)
    c2 = (message * mod_exp(y, k, p)) % p
    return c1, c2


def decrypt(c1: int, c2: int, p: int, x: int) -> int:
    """Recover the message from the ciphertext pair with private exponent x."""
    shared = mod_exp(c1, x, p)
    return (c2 * mod_inverse(shared, p)) % p