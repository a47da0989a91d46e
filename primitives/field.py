"""Prime field descriptors for non-native parameter selection.

Uses galois for field construction. Parameter selection only ever needs the
bit length of a field's modulus, so `size_in_bits` accepts a galois field
class, a registered field name, or the prime itself.

Building a galois field for a ~256-bit prime factors p - 1 to find a
primitive element, so fields are built lazily and memoised:
    from primitives.field import prime_field, BN254_SCALAR_PRIME
    Fr = prime_field(BN254_SCALAR_PRIME)
"""

from functools import lru_cache
from typing import Dict, Type, Union

import galois

# --- Named Primes ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

BN254_SCALAR_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617
BN254_BASE_PRIME = 21888242871839275222246405745257275088696311157297823662689037894645226208583

BLS12_377_SCALAR_PRIME = 0x12AB655E9A2CA55660B44D1E5C37B00159AA76FED00000010A11800000000001
BLS12_377_BASE_PRIME = (
    0x01AE3A4617C510EAC63B05C06CA1493B1A22D9F300F5138F1EF3622FBA094800170B5D44300000008508C00000000001
)

BLS12_381_SCALAR_PRIME = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
BLS12_381_BASE_PRIME = (
    0x1A0111EA397FE69A4B1BA7B6434BACD764774B84F38512BF6730D2A0F6B0F6241EABFFFEB153FFFFB9FEFFFFFFFFAAAB
)

PALLAS_BASE_PRIME = 0x40000000000000000000000000000000224698FC094CF91B992D30ED00000001
VESTA_BASE_PRIME = 0x40000000000000000000000000000000224698FC0994A8DD8C46EB2100000001

SECP256K1_BASE_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_SCALAR_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

NAMED_PRIMES: Dict[str, int] = {
    "goldilocks": GOLDILOCKS_PRIME,
    "bn254_scalar": BN254_SCALAR_PRIME,
    "bn254_base": BN254_BASE_PRIME,
    "bls12_377_scalar": BLS12_377_SCALAR_PRIME,
    "bls12_377_base": BLS12_377_BASE_PRIME,
    "bls12_381_scalar": BLS12_381_SCALAR_PRIME,
    "bls12_381_base": BLS12_381_BASE_PRIME,
    "pallas_base": PALLAS_BASE_PRIME,
    "vesta_base": VESTA_BASE_PRIME,
    "secp256k1_base": SECP256K1_BASE_PRIME,
    "secp256k1_scalar": SECP256K1_SCALAR_PRIME,
}

# Pasta cycle: each curve's scalar field is the other's base field
NAMED_PRIMES["pallas_scalar"] = VESTA_BASE_PRIME
NAMED_PRIMES["vesta_scalar"] = PALLAS_BASE_PRIME

FieldLike = Union[Type[galois.FieldArray], str, int]

# --- Field Construction ---

@lru_cache(maxsize=None)
def prime_field(prime: int) -> Type[galois.FieldArray]:
    """Return the galois prime field GF(prime).

    Primality is not re-verified; callers pass one of the registered primes
    or a prime they already trust.
    """
    if prime < 2:
        raise ValueError(f"Field modulus must be >= 2, got {prime}")
    return galois.GF(prime, verify=False)


FF = prime_field(GOLDILOCKS_PRIME)
"""Goldilocks prime field GF(p), the smallest registered field."""


def named_field(name: str) -> Type[galois.FieldArray]:
    """Return the galois prime field registered under `name`."""
    return prime_field(named_prime(name))


def named_prime(name: str) -> int:
    """Look up a registered prime by name (case-insensitive)."""
    key = name.lower()
    if key not in NAMED_PRIMES:
        raise ValueError(
            f"Unknown field '{name}'. Available: {sorted(NAMED_PRIMES.keys())}"
        )
    return NAMED_PRIMES[key]


# --- Bit Lengths ---

def size_in_bits(field: FieldLike) -> int:
    """Bit length of a prime field's modulus.

    Args:
        field: galois prime field class, registered field name, or the prime

    Returns:
        Number of bits needed to write the modulus

    Raises:
        ValueError: If the field is an extension field, the name is unknown,
            or the modulus is < 2
        TypeError: If `field` is none of the accepted descriptors
    """
    if isinstance(field, type) and issubclass(field, galois.FieldArray):
        if field.degree != 1:
            raise ValueError(
                f"Non-native parameters need a prime field, got degree {field.degree} extension"
            )
        return int(field.characteristic).bit_length()
    if isinstance(field, str):
        return named_prime(field).bit_length()
    # bool is an int subclass but never a modulus
    if isinstance(field, int) and not isinstance(field, bool):
        if field < 2:
            raise ValueError(f"Field modulus must be >= 2, got {field}")
        return field.bit_length()
    raise TypeError(f"Unsupported field descriptor: {type(field).__name__}")
