import random

import pytest

from bigarith.numtheory import extended_gcd, mod_inverse


@pytest.mark.parametrize(
    "a, b",
    [(10, 2), (10, 3), (0, 3), (3, 3), (56, 42), (3, -3), (-6, 3), (-4, -2)],
)
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g >= 0
    assert a * x + b * y == g
    if g:
        assert a % g == 0 and b % g == 0


def test_extended_gcd_known_value():
    g, _, _ = extended_gcd(56, 42)
    assert g == 14


def test_extended_gcd_both_zero():
    assert extended_gcd(0, 0)[0] == 0


@pytest.mark.parametrize("seed", range(10))
def test_extended_gcd_random_large(seed):
    rng = random.Random(seed)
    a = rng.getrandbits(1024) - (1 << 1023)
    b = rng.getrandbits(1024) - (1 << 1023)
    g, x, y = extended_gcd(a, b)
    assert a * x + b * y == g
    assert a % g == 0 and b % g == 0


@pytest.mark.parametrize("seed", range(10))
def test_mod_inverse_round_trip(seed):
    rng = random.Random(seed)
    m = (1 << 127) - 1
    a = rng.randrange(1, m)
    inv = mod_inverse(a, m)
    assert 0 <= inv < m
    assert (a * inv) % m == 1


def test_mod_inverse_negative_operand():
    inv = mod_inverse(-3, 7)
    assert (-3 * inv) % 7 == 1
    assert 0 <= inv < 7


def test_mod_inverse_none_when_not_coprime():
    assert mod_inverse(6, 9) is None


def test_mod_inverse_bad_modulus():
    with pytest.raises(ValueError):
        mod_inverse(3, 0)