"""Extended Euclidean algorithm and modular inverses."""

from __future__ import annotations


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b) >= 0`` and ``a*x + b*y == g``."""
    old_r, r = abs(a), abs(b)
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    x = -old_s if a < 0 else old_s
    y = -old_t if b < 0 else old_t
    return old_r, x, y


def mod_inverse(a: int, m: int) -> int | None:
    """Return the inverse of ``a`` modulo ``m`` in ``[0, m)``, or None if none exists."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        return None
    return x % m