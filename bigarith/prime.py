"""Probabilistic primality tests and prime search for non-negative integers."""

from __future__ import annotations

import math
import random

_PRIMES_A = 3 * 5 * 7 * 11 * 13 * 17 * 19 * 23 * 37
_PRIMES_B = 29 * 31 * 41 * 43 * 47 * 53

_SMALL_PRIMES_A = (3, 5, 7, 11, 13, 17, 19, 23, 37)
_SMALL_PRIMES_B = (29, 31, 41, 43, 47, 53)

# Bit i is set when i is a prime below 64.
_PRIME_BIT_MASK = sum(
    1 << p
    for p in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61)
)

_NUMBER_OF_PRIMES = 127
_PRIME_GAP = (
    2, 2, 4, 2, 4, 2, 4, 6, 2, 6, 4, 2, 4, 6, 6, 2, 6, 4, 2, 6, 4, 6, 8, 4, 2, 4, 2, 4, 14, 4, 6,
    2, 10, 2, 6, 6, 4, 6, 6, 2, 10, 2, 4, 2, 12, 12, 4, 2, 4, 6, 2, 10, 6, 6, 6, 2, 6, 4, 2, 10,
    14, 4, 2, 4, 14, 6, 10, 2, 4, 6, 8, 6, 6, 4, 6, 8, 4, 8, 10, 2, 10, 2, 6, 4, 6, 8, 4, 2, 4, 12,
    8, 4, 8, 4, 6, 12, 2, 18, 6, 10, 6, 6, 2, 6, 10, 6, 6, 2, 6, 6, 4, 2, 12, 10, 2, 4, 6, 6, 2,
    12, 4, 6, 8, 10, 8, 10, 8, 6, 6, 4, 8, 6, 4, 8, 4, 14, 10, 12, 2, 10, 2, 4, 2, 10, 14, 4, 2, 4,
    14, 4, 2, 4, 20, 4, 8, 10, 8, 4, 6, 6, 14, 4, 6, 6, 8, 6, 12,
)

_INCR_LIMIT = 0x10000
_LUCAS_P_LIMIT = 10000


def _require_non_negative(value: int) -> None:
    if value < 0:
        raise ValueError("value must be non-negative")


def _trailing_zeros(value: int) -> int:
    return (value & -value).bit_length() - 1


def _jacobi(a: int, n: int) -> int:
    """Jacobi symbol (a/n) for odd positive ``n``."""
    if n <= 0 or n % 2 == 0:
        raise ValueError("Jacobi symbol needs an odd positive modulus")
    a %= n
    result = 1
    while a:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def _small_prime_orbit(limit: int):
    """Yield the first ``limit`` odd primes, starting from 3."""
    prime = 3
    for gap in _PRIME_GAP[:limit]:
        yield prime
        prime += gap


def probably_prime(x: int, n: int) -> bool:
    """Report whether ``x`` is probably prime.

    Applies ``n + 1`` Miller-Rabin rounds (the last with base 2) and a Lucas
    test. Exact for inputs below 2**64.
    """
    _require_non_negative(x)
    if x == 0:
        return False
    if x < 64:
        return bool(_PRIME_BIT_MASK & (1 << x))
    if x % 2 == 0:
        return False

    r_a = x % _PRIMES_A
    r_b = x % _PRIMES_B
    if any(r_a % p == 0 for p in _SMALL_PRIMES_A) or any(
        r_b % p == 0 for p in _SMALL_PRIMES_B
    ):
        return False

    return probably_prime_miller_rabin(x, n + 1, True) and probably_prime_lucas(x)


def next_prime(n: int) -> int:
    """Return the smallest probable prime strictly greater than ``n``."""
    _require_non_negative(n)
    if n < 2:
        return 2

    res = (n + 1) | 1
    if res < 7:
        return res

    prime_limit = min(res.bit_length() // 2, _NUMBER_OF_PRIMES - 1)
    primes = list(_small_prime_orbit(prime_limit))

    while True:
        start = res
        residues = [(start % p, p) for p in primes]
        for incr in range(0, _INCR_LIMIT, 2):
            if any((r + incr) % p == 0 for r, p in residues):
                continue
            res = start + incr
            if probably_prime(res, 20):
                return res
        res = start + _INCR_LIMIT


def probably_prime_miller_rabin(n: int, reps: int, force2: bool) -> bool:
    """Report whether ``n`` passes ``reps`` Miller-Rabin rounds.

    Bases are pseudo-random, seeded from ``n``; with ``force2`` the last
    round uses base 2.
    """
    if n < 3:
        raise ValueError("Miller-Rabin test needs n >= 3")
    nm1 = n - 1
    k = _trailing_zeros(nm1)
    q = nm1 >> k
    nm3 = n - 3

    rng = random.Random(n & 0xFFFFFFFFFFFFFFFF)

    for i in range(reps):
        if i == reps - 1 and force2:
            base = 2
        else:
            base = rng.randrange(nm3) + 2 if nm3 > 0 else 2

        y = pow(base, q, n)
        if y == 1 or y == nm1:
            continue

        for _ in range(1, k):
            y = pow(y, 2, n)
            if y == nm1:
                break
            if y == 1:
                return False
        else:
            return False

    return True


def probably_prime_lucas(n: int) -> bool:
    """Report whether ``n`` passes the almost extra strong Lucas test."""
    _require_non_negative(n)
    if n <= 1 or n == 2:
        return False
    if n % 2 == 0:
        raise ValueError("Lucas test needs an odd n")

    p = 3
    while True:
        if p > _LUCAS_P_LIMIT:
            raise RuntimeError(f"cannot find (D/n) = -1 for {n}")
        j = _jacobi(p * p - 4, n)
        if j == -1:
            break
        if j == 0:
            # D = (p-2)(p+2) shares the factor p+2 with n.
            return n == p + 2
        if p == 40 and math.isqrt(n) ** 2 == n:
            return False
        p += 1

    s = n + 1
    r = _trailing_zeros(s)
    s >>= r
    nm2 = n - 2

    vk, vk1 = 2, p
    for i in reversed(range(s.bit_length())):
        if (s >> i) & 1:
            vk = (vk * vk1 + n - p) % n
            vk1 = (vk1 * vk1 + nm2) % n
        else:
            vk1 = (vk * vk1 + n - p) % n
            vk = (vk * vk + nm2) % n

    if vk == 2 or vk == nm2:
        if abs(vk * p - (vk1 << 1)) % n == 0:
            return True

    for _ in range(r - 1):
        if vk == 0:
            return True
        if vk == 2:
            return False
        vk = (vk * vk - 2) % n

    return False


def get_bit(x: int, i: int) -> int:
    """Return bit ``i`` of ``x`` (0 beyond its length)."""
    _require_non_negative(x)
    if i < 0:
        raise ValueError("bit index must be non-negative")
    if i >= x.bit_length():
        return 0
    return (x >> i) & 1


def is_bit_set(x: int, i: int) -> bool:
    """Report whether bit ``i`` of ``x`` is set."""
    return get_bit(x, i) == 1