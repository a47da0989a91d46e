"""Configuration for parameter caching on a constraint system.

Example config.json:
    {
        "optimization_type": "density",
        "cache_enabled": true,
        "telemetry": true,
        "enable_stdout": false
    }
"""

import json
from dataclasses import dataclass, fields

from nonnative.params import OptimizationType


@dataclass(frozen=True)
class ParamsConfig:
    """Per-context settings chosen when the constraint system is built.

    Attributes:
        optimization_type: Cost formula used on cache misses
        cache_enabled: False builds a null context that never caches
        telemetry: Activate hit/miss counting at construction
        enable_stdout: Allow HitRate.print_report to write to stdout
    """
    optimization_type: OptimizationType = OptimizationType.CONSTRAINTS
    cache_enabled: bool = True
    telemetry: bool = False
    enable_stdout: bool = False

    @classmethod
    def from_json(cls, path: str) -> "ParamsConfig":
        """Load config from a JSON file."""
        with open(path) as f:
            j = json.load(f)
        return cls.from_dict(j)

    @classmethod
    def from_dict(cls, j: dict) -> "ParamsConfig":
        """Build config from parsed JSON. Missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        unknown = set(j) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        kwargs = dict(j)
        opt = kwargs.get("optimization_type")
        if isinstance(opt, str):
            kwargs["optimization_type"] = OptimizationType.from_string(opt)
        elif opt is not None and not isinstance(opt, OptimizationType):
            raise ValueError(f"Config key 'optimization_type' must be a string, got {opt!r}")

        for name in ("cache_enabled", "telemetry", "enable_stdout"):
            if name in kwargs and not isinstance(kwargs[name], bool):
                raise ValueError(f"Config key '{name}' must be a boolean, got {kwargs[name]!r}")

        return cls(**kwargs)
