"""
random_source.py — The randomness the genome core is allowed to use.

The core never touches a global RNG. Callers hand in a source with two
methods:

    random_byte()     -> int in [0, 255]
    random_below(n)   -> int in [0, n)

and the core reads it only through draw_byte / draw_below, which reject
anything out of range instead of clamping it.
"""

import random

import numpy as np

from definitions import BYTE_MAX


class InvalidRandomSource(ValueError):
    """A randomness source returned a value outside its contract"""


class RandomSource:
    """Source backed by the standard library Mersenne Twister"""

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def random_byte(self):
        return self.rng.randint(0, BYTE_MAX)

    def random_below(self, n):
        return self.rng.randrange(n)


class NumpyRandomSource:
    """Source backed by a numpy Generator (PCG64)"""

    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def random_byte(self):
        return int(self.rng.integers(0, BYTE_MAX + 1))

    def random_below(self, n):
        return int(self.rng.integers(0, n))


def _check_draw(value, upper, what):
    # bool is an int subclass but never a legitimate draw
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidRandomSource(f"{what} returned non-integer {value!r}")
    if not 0 <= value < upper:
        raise InvalidRandomSource(f"{what} returned {value!r}, expected [0, {upper})")
    return int(value)


def draw_byte(source) -> int:
    """Read one uniform byte from source, failing fast on a bad value"""
    return _check_draw(source.random_byte(), BYTE_MAX + 1, "random_byte()")


def draw_below(source, n: int) -> int:
    """Read one uniform integer in [0, n) from source, failing fast on a bad value"""
    if n <= 0:
        raise ValueError(f"upper bound must be positive, got {n}")
    return _check_draw(source.random_below(n), n, f"random_below({n})")
