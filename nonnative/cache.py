"""Cached access to non-native field parameters."""

from primitives.field import FieldLike, size_in_bits
from nonnative.context import ConstraintSystem
from nonnative.hit_rate import HitRate
from nonnative.params import NonNativeFieldParams, gen_params


def get_params(cs: ConstraintSystem, target_field: FieldLike) -> NonNativeFieldParams:
    """Obtain parameters for `target_field` from the cache of `cs`, or generate them.

    Args:
        cs: Constraint system whose base field hosts the arithmetic
        target_field: Field being emulated (galois class, name, or prime)

    Returns:
        Parameters for (cs.base_field, target_field)

    Raises:
        FieldTooSmallError: If the base field of `cs` is too small
    """
    return get_params_for_bits(cs, cs.base_bits, size_in_bits(target_field))


def get_params_for_bits(cs: ConstraintSystem, base_bits: int, target_bits: int) -> NonNativeFieldParams:
    """Same as get_params, for callers that only know the bit lengths.

    Fields with equal bit lengths share a cache entry.
    """
    if cs.is_none:
        return gen_params(base_bits, target_bits, cs.optimization_type)

    key = (base_bits, target_bits)
    with cs.lock:
        if cs.params_cache is not None and key in cs.params_cache:
            params = cs.params_cache[key]
            HitRate.update(cs, True)
            return params

        # A failing search leaves both cache and counters untouched
        params = gen_params(base_bits, target_bits, cs.optimization_type)

        if cs.params_cache is None:
            cs.params_cache = {}
        cs.params_cache[key] = params
        HitRate.update(cs, False)
        return params
