"""Tests for cached parameter lookup on a constraint system."""

import threading

import pytest

from nonnative import (
    ConstraintSystem,
    FieldTooSmallError,
    HitRate,
    NonNativeFieldParams,
    OptimizationType,
    ParamsConfig,
    gen_params,
    get_params,
    get_params_for_bits,
)
from primitives.field import FF, GOLDILOCKS_PRIME, prime_field


class TestGetParams:
    """Lookup behaviour of a caching context."""

    def test_first_lookup_matches_direct_search(self, cs: ConstraintSystem) -> None:
        params = get_params(cs, "secp256k1_base")
        assert params == gen_params(254, 256, OptimizationType.CONSTRAINTS)

    def test_second_lookup_equal(self, cs: ConstraintSystem) -> None:
        first = get_params(cs, "secp256k1_base")
        second = get_params(cs, "secp256k1_base")
        assert first == second
        assert cs.cached_keys() == [(254, 256)]

    def test_storage_created_lazily(self) -> None:
        cs = ConstraintSystem("bn254_scalar")
        assert cs.params_cache is None
        get_params(cs, "goldilocks")
        assert cs.params_cache == {(254, 64): gen_params(254, 64)}

    def test_key_is_bit_lengths(self, cs: ConstraintSystem) -> None:
        """Distinct primes with equal bit lengths share one entry."""
        get_params(cs, "secp256k1_base")
        get_params(cs, "secp256k1_scalar")
        assert cs.cached_keys() == [(254, 256)]
        assert HitRate.report(cs)[:2] == (1, 1)

    def test_accepts_galois_field(self, cs: ConstraintSystem) -> None:
        assert get_params(cs, FF) == get_params(cs, GOLDILOCKS_PRIME)
        assert cs.cached_keys() == [(254, 64)]

    def test_galois_base_field(self) -> None:
        cs = ConstraintSystem(prime_field(GOLDILOCKS_PRIME))
        assert cs.base_bits == 64
        assert get_params(cs, "bn254_scalar") == gen_params(64, 254)

    def test_uses_context_goal(self, density_cs: ConstraintSystem) -> None:
        params = get_params(density_cs, "secp256k1_base")
        assert params == NonNativeFieldParams(num_limbs=13, bits_per_limb=20)

    def test_cached_value_never_replaced(self, cs: ConstraintSystem) -> None:
        first = get_params_for_bits(cs, 254, 381)
        for _ in range(5):
            get_params_for_bits(cs, 254, 381)
        assert cs.params_cache[(254, 381)] is first

    def test_explicit_bits(self, cs: ConstraintSystem) -> None:
        assert get_params_for_bits(cs, 255, 381) == gen_params(255, 381)
        assert cs.cached_keys() == [(255, 381)]


class TestNullContext:
    """A null context always computes directly."""

    def test_matches_direct_search(self) -> None:
        cs = ConstraintSystem.none("bn254_scalar")
        assert get_params(cs, "bls12_381_base") == gen_params(254, 381)

    def test_nothing_stored(self) -> None:
        cs = ConstraintSystem.none("bn254_scalar")
        get_params(cs, "bls12_381_base")
        get_params(cs, "bls12_381_base")
        assert cs.params_cache is None
        assert cs.cached_keys() == []

    def test_goal_respected(self) -> None:
        cs = ConstraintSystem.none("bn254_scalar", OptimizationType.DENSITY)
        assert get_params(cs, "secp256k1_base") == gen_params(254, 256, OptimizationType.DENSITY)

    def test_telemetry_ignored(self) -> None:
        cs = ConstraintSystem("bn254_scalar", ParamsConfig(cache_enabled=False, telemetry=True))
        get_params(cs, "goldilocks")
        assert cs.hit_rate is None
        assert HitRate.report(cs) is None


class TestErrors:
    """Search errors pass through the cache unchanged."""

    def test_small_base_field(self) -> None:
        cs = ConstraintSystem(2**20 + 7, ParamsConfig(telemetry=True))
        with pytest.raises(FieldTooSmallError):
            get_params(cs, "bn254_scalar")
        assert cs.params_cache is None
        assert HitRate.report(cs) is None

    def test_small_base_field_null_context(self) -> None:
        cs = ConstraintSystem.none(2**20 + 7)
        with pytest.raises(FieldTooSmallError):
            get_params(cs, "bn254_scalar")

    def test_failed_key_not_cached(self, cs: ConstraintSystem) -> None:
        get_params(cs, "goldilocks")
        with pytest.raises(FieldTooSmallError):
            get_params_for_bits(cs, 20, 64)
        assert cs.cached_keys() == [(254, 64)]


class TestConcurrentLookups:
    """The context lock keeps one search per key and exact counters."""

    def test_same_key_from_many_threads(self, cs: ConstraintSystem) -> None:
        n_threads = 16
        results: list[NonNativeFieldParams] = []
        barrier = threading.Barrier(n_threads)

        def worker() -> None:
            barrier.wait()
            results.append(get_params(cs, "bls12_381_base"))

        threads = [threading.Thread(target=worker) for _ in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == n_threads
        assert all(r == results[0] for r in results)
        hit, miss, _ = HitRate.report(cs)
        assert (hit, miss) == (n_threads - 1, 1)
