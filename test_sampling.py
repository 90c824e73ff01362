"""
Tests for weighted sampling.
"""

import random
from collections import Counter

import pytest

from sampling import EmptyDistributionError, sample_weighted


def test_single_entry_is_deterministic(fixed_random):
    """A lone entry is returned without drawing at all"""
    for value in (0.0, 0.5, 0.999):
        rng = fixed_random(value)
        assert sample_weighted({"x": 3}, rng) == "x"
        assert rng.calls == 0, "Single-entry sampling should not consume randomness"

    assert sample_weighted({"x": 0}, fixed_random(0.5)) == "x"


def test_empty_distribution_fails():
    with pytest.raises(EmptyDistributionError):
        sample_weighted({})
    assert issubclass(EmptyDistributionError, ValueError)


def test_cumulative_scan_picks_by_draw(fixed_random):
    """Entries own consecutive slices of [0, 1) in insertion order"""
    dist = {"a": 1, "b": 1, "c": 2}

    assert sample_weighted(dist, fixed_random(0.0)) == "a"
    assert sample_weighted(dist, fixed_random(0.3)) == "b"
    assert sample_weighted(dist, fixed_random(0.6)) == "c"
    assert sample_weighted(dist, fixed_random(0.999)) == "c"


def test_order_is_not_resorted(fixed_random):
    """Same weights in a different order give a different pick"""
    assert sample_weighted({"a": 1, "b": 3}, fixed_random(0.2)) == "a"
    assert sample_weighted({"b": 3, "a": 1}, fixed_random(0.2)) == "b"


def test_falls_back_to_last_entry(fixed_random):
    """If no cumulative step clears the draw, the last key wins"""
    dist = {"a": 1, "b": 1, "c": 1}

    assert sample_weighted(dist, fixed_random(1.0)) == "c"


def test_all_zero_weights_returns_last_entry(fixed_random):
    assert sample_weighted({"a": 0, "b": 0}, fixed_random(0.0)) == "b"


def test_negative_weight_rejected(fixed_random):
    with pytest.raises(ValueError):
        sample_weighted({"a": 1, "b": -1}, fixed_random(0.0))
    with pytest.raises(ValueError):
        sample_weighted({"x": -1}, fixed_random(0.0))


def test_sampling_is_proportional():
    """Heavier keys come up more often over many draws"""
    rng = random.Random(1234)
    dist = {"a": 2, "b": 1, "c": 1, "d": 1}

    seen = Counter(sample_weighted(dist, rng) for _ in range(2000))

    assert set(seen) == set(dist)
    for key in ("b", "c", "d"):
        assert seen["a"] > seen[key], f"a should beat {key}: {seen}"


def test_seeded_sampling_is_reproducible():
    dist = {"a": 5, "b": 2, "c": 7}

    rng_a, rng_b = random.Random(7), random.Random(7)
    first = [sample_weighted(dist, rng_a) for _ in range(20)]
    second = [sample_weighted(dist, rng_b) for _ in range(20)]
    assert first == second


def test_default_random_source():
    random.seed(0)
    assert sample_weighted({"a": 1, "b": 1}) in ("a", "b")
