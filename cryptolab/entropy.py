"""Shannon entropy of probability distributions and of text."""

from __future__ import annotations

import math
import struct
from collections import Counter
from collections.abc import Iterable

MAX_SYMBOLS = 100


class InvalidDistributionError(ValueError):
    """Raised when a list of probabilities is not an acceptable distribution."""


def _as_float32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


def has_two_decimal_places(x: float) -> bool:
    """Return True if x * 100 is exactly a whole number."""
    scaled = x * 100
    return scaled == int(scaled)


def validate_probabilities(probabilities: Iterable[float]) -> list[float]:
    """Check a distribution and return it as a list of floats.

    It must have 1 to 100 entries, each in [0, 1] with at most two decimal
    places, summing to 1 at single precision.
    """
    probs = [float(p) for p in probabilities]
    if not 0 < len(probs) <= MAX_SYMBOLS:
        raise InvalidDistributionError(
            f"number of symbols must be between 1 and {MAX_SYMBOLS}"
        )
    for p in probs:
        if p < 0.0 or p > 1.0 or not has_two_decimal_places(p):
            raise InvalidDistributionError(
                f"invalid probability {p!r}: must be in [0, 1] with at most "
                "two decimal places"
            )
    total = 0.0
    for p in probs:
        total += p
    if _as_float32(total) != _as_float32(1.0):
        raise InvalidDistributionError("probabilities do not sum to 1")
    return probs


def shannon_entropy(probabilities: Iterable[float]) -> float:
    """Entropy in bits of a validated probability distribution."""
    probs = validate_probabilities(probabilities)
    return -sum(p * math.log2(p) for p in probs if p > 0.0)


def text_entropy(text: str) -> float:
    """Entropy in bits per character of the character frequencies in text."""
    total = len(text)
    return -sum(
        (n / total) * math.log2(n / total) for n in Counter(text).values()
    )