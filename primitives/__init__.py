"""Primitives - Prime field descriptors shared by the parameter search."""

from primitives.field import (
    FF,
    GOLDILOCKS_PRIME,
    NAMED_PRIMES,
    named_field,
    named_prime,
    prime_field,
    size_in_bits,
)

__all__ = [
    # Field
    "FF",
    "GOLDILOCKS_PRIME",
    "NAMED_PRIMES",
    "named_field",
    "named_prime",
    "prime_field",
    "size_in_bits",
]
