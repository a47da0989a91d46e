"""Limb decomposition search for non-native field gadgets.

A target-field element is carried inside base-field constraints as
`num_limbs` limbs of `bits_per_limb` bits each. Every candidate limb size is
costed with a fixed model and the cheapest one wins:

    limb_size    in 1 ..= (base_bits - 1 - SURFEIT - 1) // 2
    num_limbs    = ceil(target_bits / limb_size)
    group_size   = (base_bits - 1 - SURFEIT - 1) // (2 * limb_size)
    num_groups   = ceil((2 * num_limbs - 1) / group_size)

    CONSTRAINTS: (2*num_limbs - 1) + num_groups
                 + (num_groups - 1) * (2*limb_size + 1 + 2*SURFEIT) + 1
    DENSITY:     num_limbs**2 // 2 + 3*num_groups
                 + (num_groups - 1) * (2*limb_size + 1 + 2*SURFEIT) + 2

Equal costs keep the smallest limb size.

Example:
    params = gen_params(254, 256, OptimizationType.CONSTRAINTS)
    params.num_limbs * params.bits_per_limb >= 256
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

SURFEIT = 10
"""Bits of headroom kept free for overflow while accumulating limb products."""

MIN_BASE_FIELD_BITS = 2 * SURFEIT + 4
"""Smallest base field bit length accepted by the search."""


class FieldTooSmallError(ValueError):
    """Base field cannot hold a limb product plus the surfeit headroom."""

    def __init__(self, base_bits: int):
        self.base_bits = base_bits
        super().__init__(
            f"Base field too small for non-native representation: {base_bits} bits, "
            f"need at least {MIN_BASE_FIELD_BITS} (surfeit = {SURFEIT})"
        )


class OptimizationType(Enum):
    """Cost formula minimised by the search."""
    CONSTRAINTS = "constraints"
    DENSITY = "density"

    @classmethod
    def from_string(cls, s: str) -> "OptimizationType":
        """Parse "constraints" or "density" (case-insensitive)."""
        try:
            return cls(s.lower())
        except ValueError:
            raise ValueError(
                f"Unknown optimization type '{s}'. "
                f"Available: {[t.value for t in cls]}"
            ) from None


@dataclass(frozen=True)
class NonNativeFieldParams:
    """How a target-field element is split into limbs."""
    num_limbs: int
    bits_per_limb: int

    @property
    def capacity_bits(self) -> int:
        """Total bits representable by the limbs."""
        return self.num_limbs * self.bits_per_limb


# --- Cost Model ---

def candidate_costs(
    base_bits: int,
    target_bits: int,
    optimization_type: OptimizationType,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Evaluate the cost model for every admissible limb size.

    Args:
        base_bits: Bit length of the base field modulus
        target_bits: Bit length of the target field modulus
        optimization_type: Which cost formula to apply

    Returns:
        (limb_sizes, num_limbs, costs) as object arrays of Python ints indexed
        by candidate, limb sizes ascending from 1

    Raises:
        FieldTooSmallError: If base_bits <= 2 * SURFEIT + 3
        ValueError: If target_bits < 1
    """
    if base_bits < MIN_BASE_FIELD_BITS:
        raise FieldTooSmallError(base_bits)
    if target_bits < 1:
        raise ValueError(f"Target field bit length must be positive, got {target_bits}")

    # Room left in a base field element after the sign bit and surfeit
    headroom = base_bits - 1 - SURFEIT - 1
    max_limb_size = headroom // 2

    # Object arrays hold Python ints, so num_limbs**2 cannot wrap for huge targets
    limb_sizes = np.array(range(1, max_limb_size + 1), dtype=object)
    num_limbs = (target_bits + limb_sizes - 1) // limb_sizes
    group_size = headroom // (2 * limb_sizes)
    num_groups = (2 * num_limbs - 1 + group_size - 1) // group_size

    reduction = (num_groups - 1) * (2 * limb_sizes + 1 + 2 * SURFEIT)
    if optimization_type == OptimizationType.CONSTRAINTS:
        costs = (2 * num_limbs - 1) + num_groups + reduction + 1
    else:
        costs = (num_limbs * num_limbs) // 2 + 3 * num_groups + reduction + 2

    return limb_sizes, num_limbs, costs


def select_min_cost(costs: np.ndarray) -> int:
    """Index of the cheapest candidate; the first one wins ties.

    np.argmin returns the first occurrence of the minimum, which is the same
    as scanning in order and only replacing on a strict improvement.
    """
    if len(costs) == 0:
        raise ValueError("No candidates to select from")
    return int(np.argmin(costs))


# --- Search ---

class ParamsSearching:
    """A search instance for non-native field parameters.

    Problem fields are set at construction; solution fields stay None until
    `solve()` runs.

    Attributes:
        base_field_prime_length: Bit length of the base field modulus
        target_field_prime_bit_length: Bit length of the target field modulus
        optimization_type: Constraints or density
        num_of_limbs: Solved number of limbs
        limb_size: Solved bits per limb
    """

    def __init__(
        self,
        base_field_prime_length: int,
        target_field_prime_bit_length: int,
        optimization_type: OptimizationType = OptimizationType.CONSTRAINTS,
    ):
        self.base_field_prime_length = base_field_prime_length
        self.target_field_prime_bit_length = target_field_prime_bit_length
        self.optimization_type = optimization_type

        self.num_of_limbs: Optional[int] = None
        self.limb_size: Optional[int] = None
        self.min_cost: Optional[int] = None

    @property
    def solved(self) -> bool:
        return self.limb_size is not None

    def solve(self) -> None:
        """Run the exhaustive search and record the cheapest candidate."""
        limb_sizes, num_limbs, costs = candidate_costs(
            self.base_field_prime_length,
            self.target_field_prime_bit_length,
            self.optimization_type,
        )
        best = select_min_cost(costs)

        self.limb_size = int(limb_sizes[best])
        self.num_of_limbs = int(num_limbs[best])
        self.min_cost = int(costs[best])

    def params(self) -> NonNativeFieldParams:
        """Solution as a NonNativeFieldParams, solving first if needed."""
        if not self.solved:
            self.solve()
        return NonNativeFieldParams(
            num_limbs=self.num_of_limbs,
            bits_per_limb=self.limb_size,
        )

    def __repr__(self) -> str:
        return (
            f"ParamsSearching(base={self.base_field_prime_length}, "
            f"target={self.target_field_prime_bit_length}, "
            f"type={self.optimization_type.value}, "
            f"num_of_limbs={self.num_of_limbs}, limb_size={self.limb_size})"
        )


def gen_params(
    base_bits: int,
    target_bits: int,
    optimization_type: OptimizationType = OptimizationType.CONSTRAINTS,
) -> NonNativeFieldParams:
    """Compute parameters directly, without touching any cache."""
    return ParamsSearching(base_bits, target_bits, optimization_type).params()
