"""Number theory on arbitrary-precision integers: Montgomery modular exponentiation, extended GCD, modular inverses and primality tests."""

__version__ = "0.5.0"
__all__ = ["montgomery", "numtheory", "prime"]