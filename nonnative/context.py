"""Constraint system context owning the parameter cache.

Gadgets thread a ConstraintSystem through construction. The context carries
the base field and the settings that decide how parameters are obtained:

- A regular context caches one NonNativeFieldParams per
  (base_bits, target_bits) key for its whole lifetime and, when telemetry is
  active, counts hits and misses.
- A null context (`ConstraintSystem.none(...)`) has no storage; every lookup
  runs the search directly.

Storage is created on first use. One lock guards the full
lookup-or-insert-and-record sequence, so concurrent callers populate each key
once and the counters stay exact.

Example:
    cs = ConstraintSystem("bn254_scalar", ParamsConfig(telemetry=True))
    params = get_params(cs, "secp256k1_base")
    HitRate.report(cs)
"""

import threading
from typing import Dict, Optional, Tuple

from primitives.field import FieldLike, size_in_bits
from nonnative.config import ParamsConfig
from nonnative.hit_rate import HitRate
from nonnative.params import NonNativeFieldParams, OptimizationType

ParamsMap = Dict[Tuple[int, int], NonNativeFieldParams]
"""Cache map keyed by (base_bits, target_bits)."""


class ConstraintSystem:
    """Host context for non-native parameter lookups.

    Attributes:
        base_field: Field the constraints are defined over
        config: Settings fixed at construction
        params_cache: Cached parameters, None until the first lookup
        hit_rate: Hit/miss counters, None unless telemetry is active
        lock: Guards params_cache and hit_rate
    """

    def __init__(self, base_field: FieldLike, config: Optional[ParamsConfig] = None):
        self.base_field = base_field
        self.config = config if config is not None else ParamsConfig()
        self.base_bits = size_in_bits(base_field)

        self.params_cache: Optional[ParamsMap] = None
        self.hit_rate: Optional[HitRate] = None
        self.lock = threading.RLock()

        if self.config.telemetry:
            HitRate.init(self)

    @classmethod
    def none(
        cls,
        base_field: FieldLike,
        optimization_type: OptimizationType = OptimizationType.CONSTRAINTS,
    ) -> "ConstraintSystem":
        """Null context: no cache, no telemetry."""
        return cls(base_field, ParamsConfig(optimization_type=optimization_type, cache_enabled=False))

    @classmethod
    def from_config(cls, base_field: FieldLike, config_path: str) -> "ConstraintSystem":
        """Build a context from a JSON config file."""
        return cls(base_field, ParamsConfig.from_json(config_path))

    @property
    def is_none(self) -> bool:
        return not self.config.cache_enabled

    @property
    def optimization_type(self) -> OptimizationType:
        return self.config.optimization_type

    def cached_keys(self) -> list[Tuple[int, int]]:
        """Keys currently in the cache, sorted."""
        with self.lock:
            if self.params_cache is None:
                return []
            return sorted(self.params_cache)

    def __repr__(self) -> str:
        kind = "none" if self.is_none else f"{len(self.cached_keys())} cached"
        return f"ConstraintSystem(base_bits={self.base_bits}, {kind})"
