"""Nonnative - Limb parameter selection for non-native field gadgets."""

from nonnative.params import (
    MIN_BASE_FIELD_BITS,
    SURFEIT,
    FieldTooSmallError,
    NonNativeFieldParams,
    OptimizationType,
    ParamsSearching,
    candidate_costs,
    gen_params,
    select_min_cost,
)
from nonnative.config import ParamsConfig
from nonnative.hit_rate import HitRate
from nonnative.context import ConstraintSystem, ParamsMap
from nonnative.cache import get_params, get_params_for_bits

__all__ = [
    # Search
    "SURFEIT",
    "MIN_BASE_FIELD_BITS",
    "FieldTooSmallError",
    "NonNativeFieldParams",
    "OptimizationType",
    "ParamsSearching",
    "candidate_costs",
    "select_min_cost",
    "gen_params",
    # Context and cache
    "ParamsConfig",
    "ConstraintSystem",
    "ParamsMap",
    "get_params",
    "get_params_for_bits",
    # Telemetry
    "HitRate",
]
