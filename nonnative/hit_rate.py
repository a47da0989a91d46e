"""Hit/miss statistics for the parameter cache."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from nonnative.context import ConstraintSystem


@dataclass
class HitRate:
    """Statistics for hit rate of the parameter cache."""
    hit: int = 0
    miss: int = 0

    @property
    def total(self) -> int:
        return self.hit + self.miss

    @staticmethod
    def init(cs: "ConstraintSystem") -> None:
        """Install zeroed counters on `cs`. Calling again resets them."""
        if cs.is_none:
            return
        with cs.lock:
            cs.hit_rate = HitRate()

    @staticmethod
    def update(cs: "ConstraintSystem", hit: bool) -> None:
        """Count one lookup. No-op unless telemetry was activated."""
        with cs.lock:
            stat = cs.hit_rate
            if stat is None:
                return
            if hit:
                stat.hit += 1
            else:
                stat.miss += 1

    @staticmethod
    def report(cs: "ConstraintSystem") -> Optional[Tuple[int, int, float]]:
        """Return (hit, miss, hit / (hit + miss)).

        None if telemetry is inactive or no lookup has been counted yet.
        """
        if cs.is_none:
            return None
        with cs.lock:
            stat = cs.hit_rate
            if stat is None or stat.total == 0:
                return None
            return stat.hit, stat.miss, stat.hit / stat.total

    @staticmethod
    def print_report(cs: "ConstraintSystem") -> None:
        """Print the statistics when the context allows stdout."""
        if not cs.config.enable_stdout:
            return
        result = HitRate.report(cs)
        if result is None:
            return
        hit, miss, rate = result
        print(f"Hit: {hit}, Miss: {miss}, Hit Rate = {rate}")
