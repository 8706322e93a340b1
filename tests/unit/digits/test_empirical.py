import dataclasses
import math

import numpy as np
import pytest

from benford_engine.digits.empirical import (
    EmpiricalDistribution,
    build_distribution,
    build_distribution_from_strings,
)
from benford_engine.exceptions import InvalidBaseError, NoValidSamplesError


def test_build_distribution_drops_zeros_and_nans():
    dist, count = build_distribution([1, 2, 0, float("nan"), 10, 20, 300], 10)
    assert count == 5
    assert dist.n_samples == 5
    assert dist.counts[:3] == (2, 2, 1)
    assert dist.frequency(1) == pytest.approx(0.4)
    assert dist.frequency(2) == pytest.approx(0.4)
    assert dist.frequency(3) == pytest.approx(0.2)
    assert sum(dist.frequencies) == pytest.approx(1.0)


def test_build_distribution_drops_infinities_and_counts_negatives():
    dist, count = build_distribution([float("inf"), -float("inf"), -5.0, 0.05], 10)
    assert count == 2
    assert dist.frequency(5) == pytest.approx(1.0)


def test_build_distribution_has_one_bin_per_digit():
    dist, _ = build_distribution(np.arange(1, 200, dtype=float), 16)
    assert len(dist) == 15
    assert dist.domain() == list(range(1, 16))
    assert list(dist.as_dict()) == list(range(1, 16))
    assert dist.to_array().shape == (15,)


@pytest.mark.parametrize(
    "values",
    [[0, 0, 0], [float("nan")] * 4, [], [0.0, float("nan"), float("inf")]],
)
def test_build_distribution_without_valid_samples_fails(values):
    with pytest.raises(NoValidSamplesError, match="no valid samples"):
        build_distribution(values, 10)


@pytest.mark.parametrize("base", [2, 1, 0, -10])
def test_build_distribution_rejects_small_base(base):
    with pytest.raises(InvalidBaseError):
        build_distribution([1.0, 2.0], base)


def test_frequency_outside_domain_is_zero():
    dist, _ = build_distribution([1.0, 2.0, 3.0], 10)
    assert dist.frequency(0) == 0.0
    assert dist.frequency(10) == 0.0
    assert dist.frequency(-3) == 0.0


def test_empirical_distribution_is_immutable():
    dist, _ = build_distribution([1.0, 2.0], 10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        dist.n_samples = 5  # type: ignore[misc]


def test_build_distribution_from_strings_drops_unparseable():
    tokens = ["123", "abc", "", "0", "nan", "-45.6", " 7e3 ", "1.2.3"]
    dist, count = build_distribution_from_strings(tokens, 10)
    assert count == 3
    assert dist.frequency(1) == pytest.approx(1 / 3)
    assert dist.frequency(4) == pytest.approx(1 / 3)
    assert dist.frequency(7) == pytest.approx(1 / 3)


def test_build_distribution_from_strings_matches_numeric_builder():
    values = [3.5, 0.0071, 42.0, 19.0, 8e10]
    from_numbers, n1 = build_distribution(values, 8)
    from_text, n2 = build_distribution_from_strings([repr(v) for v in values], 8)
    assert n1 == n2
    assert from_numbers == from_text


def test_build_distribution_from_strings_all_garbage_fails():
    with pytest.raises(NoValidSamplesError):
        build_distribution_from_strings(["x", "y", "0"], 10)


def test_frequencies_sum_to_one_for_lognormal_data():
    values = np.random.default_rng(5).lognormal(5, 2, 10_000)
    dist, count = build_distribution(values, 10)
    assert count == 10_000
    assert isinstance(dist, EmpiricalDistribution)
    assert math.isclose(sum(dist.frequencies), 1.0, rel_tol=1e-12)
