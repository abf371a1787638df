"""Modular exponentiation with Montgomery multiplication and a fixed 4-bit window."""

from __future__ import annotations

WORD_BITS = 64
_WINDOW = 4


def _word_count(value: int) -> int:
    """Number of machine words needed to hold ``value`` (zero needs none)."""
    return (value.bit_length() + WORD_BITS - 1) // WORD_BITS


class _MontgomeryReducer:
    """Almost-Montgomery multiplication modulo an odd ``m`` with R = 2**(W*len(m))."""

    def __init__(self, modulus: int) -> None:
        self.modulus = modulus
        self.shift = WORD_BITS * _word_count(modulus)
        self.mask = (1 << self.shift) - 1
        # k = -m**-1 mod R
        self.k = (-pow(modulus, -1, 1 << self.shift)) & self.mask

    def multiply(self, x: int, y: int) -> int:
        """Return a value congruent to x * y / R mod m, below R but not always below m."""
        t = x * y
        u = (t * self.k) & self.mask
        z = (t + u * self.modulus) >> self.shift
        if z > self.mask:
            z -= self.modulus
        return z


def _exponent_windows(y: int):
    """Yield the 4-bit windows of ``y`` from the most significant word downwards."""
    total = _word_count(y) * (WORD_BITS // _WINDOW)
    for index in reversed(range(total)):
        yield (y >> (index * _WINDOW)) & ((1 << _WINDOW) - 1)


def monty_modpow(x: int, y: int, m: int) -> int:
    """Compute ``x ** y mod m`` for non-negative ``x``, ``y`` and an odd modulus ``m``."""
    if x < 0 or y < 0 or m < 0:
        raise ValueError("operands must be non-negative")
    if m & 1 != 1:
        raise ValueError("modulus must be odd")

    reducer = _MontgomeryReducer(m)

    if _word_count(x) > _word_count(m):
        x %= m

    rr = (1 << (2 * reducer.shift)) % m

    powers = [reducer.multiply(1, rr), reducer.multiply(x, rr)]
    while len(powers) < 1 << _WINDOW:
        powers.append(reducer.multiply(powers[-1], powers[1]))

    z = powers[0]
    for position, window in enumerate(_exponent_windows(y)):
        if position:
            for _ in range(_WINDOW):
                z = reducer.multiply(z, z)
        z = reducer.multiply(z, powers[window])

    result = reducer.multiply(z, 1)
    if result >= m:
        result -= m
        if result >= m:
            result %= m
    return result