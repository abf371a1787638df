# bigarith

Number-theoretic routines for non-negative integers of any size. The
routines work on Python's built-in `int`.

## Installation

```
pip install bigarith
```

## Modules

### `bigarith.montgomery`

- `monty_modpow(x, y, m)` computes `x ** y % m` for non-negative `x` and `y`
  and an odd modulus `m`. It uses almost-Montgomery multiplication over
  64-bit words with a fixed 4-bit exponent window. It raises `ValueError`
  when an operand is negative or when `m` is even.

### `bigarith.numtheory`

- `extended_gcd(a, b)` returns `(g, x, y)` such that `g = gcd(a, b) >= 0`
  and `a*x + b*y == g`. It also accepts negative arguments.
- `mod_inverse(a, m)` returns the inverse of `a` modulo `m` as a value in
  `[0, m)`. It returns `None` when `a` and `m` are not coprime, and raises
  `ValueError` when `m` is not positive.

### `bigarith.prime`

- `probably_prime(x, n)` first rejects zero, even numbers and multiples of
  small primes. Values below 64 are answered from a table. It then runs
  `n + 1` Miller–Rabin rounds, the last with base 2, and finishes with a
  Lucas test. The documented behaviour is that it is exact for inputs below
  2⁶⁴.
- `next_prime(n)` returns the smallest probable prime strictly greater than
  `n`. Candidates are sieved by small primes before they are tested.
- `probably_prime_miller_rabin(n, reps, force2)` runs `reps` Miller–Rabin
  rounds. The bases are pseudo-random and seeded from `n`, so the result for
  a given `n` is always the same. When `force2` is true, the last round uses
  base 2. It raises `ValueError` when `n < 3`.
- `probably_prime_lucas(n)` runs the "almost extra strong" Lucas
  probable-prime test. It returns `False` for 0, 1 and 2, and raises
  `ValueError` for other even numbers.
- `get_bit(x, i)` returns bit `i` of `x`, which is 0 beyond the length of
  `x`. `is_bit_set(x, i)` returns the same bit as a `bool`.

## Example

```python
from bigarith.montgomery import monty_modpow
from bigarith.numtheory import extended_gcd, mod_inverse
from bigarith.prime import next_prime, probably_prime

assert monty_modpow(4, 13, 497) == 445
assert extended_gcd(240, 46)[0] == 2
assert mod_inverse(3, 11) == 4
assert probably_prime(2**255 - 19, 20)
assert next_prime(100) == 101
```

## Limits

The package is a library only. It has no command-line tool, it does not
generate random primes of a given bit size, and it provides no integer type
of its own. The primality tests should not be used to judge numbers that an
adversary may have crafted to fool them.

## Running the tests

```
pip install -e ".[test]"
pytest
```