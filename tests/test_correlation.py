"""Tests for covariance, correlation and Fisher-z inference."""

import math

import numpy as np
import pytest

from statcore.errors import (
    InsufficientSampleError,
    InvalidProbabilityError,
    SizeMismatchError,
    UndefinedStatisticError,
)
from statcore.stats.correlation import (
    correlation,
    correlation_confidence_interval,
    correlation_interval_from_r,
    correlation_significance_test,
    covariance,
    fisher_z,
    fisher_z_inverse,
)

X = [1, 2, 3, 4, 5]
Y = [2, 4, 6, 8, 10]


def test_covariance_and_correlation_of_doubled_sample():
    assert math.isclose(covariance(X, Y), 4.0)
    assert math.isclose(correlation(X, Y), 1.0)


def test_covariance_is_symmetric(rng):
    x = rng.normal(size=25)
    y = rng.normal(size=25)
    assert covariance(x, y) == covariance(y, x)


def test_correlation_with_self_is_one(rng):
    x = rng.normal(size=40)
    assert math.isclose(correlation(x, x), 1.0)


def test_correlation_bounded(rng):
    for _ in range(25):
        x = rng.normal(size=10)
        y = 0.3 * x + rng.normal(size=10)
        assert -1.0 <= correlation(x, y) <= 1.0


def test_negative_correlation():
    assert math.isclose(correlation(X, [10, 8, 6, 4, 2]), -1.0)


def test_unequal_lengths_raise():
    with pytest.raises(SizeMismatchError):
        covariance([1, 2, 3], [1, 2])
    with pytest.raises(SizeMismatchError):
        correlation([1, 2, 3], [1, 2])


def test_correlation_undefined_for_constant_operand():
    with pytest.raises(UndefinedStatisticError):
        correlation([1, 1, 1], [1, 2, 3])


class TestFisherZ:
    def test_round_trip(self):
        for r in np.linspace(-0.99, 0.99, 41):
            assert math.isclose(fisher_z_inverse(fisher_z(r)), r, abs_tol=1e-12)

    def test_known_value(self):
        assert math.isclose(fisher_z(0.5), 0.5 * math.log(3.0))

    def test_boundaries_undefined(self):
        with pytest.raises(UndefinedStatisticError):
            fisher_z(1.0)
        with pytest.raises(UndefinedStatisticError):
            fisher_z(-1.0)


def test_interval_from_known_r_and_n():
    low, high = correlation_interval_from_r(0.95, 0.5, 30)
    assert low == pytest.approx(0.1704, abs=5e-4)
    assert high == pytest.approx(0.7290, abs=5e-4)


def test_interval_contains_sample_correlation(rng):
    x = rng.normal(size=50)
    y = x + rng.normal(size=50)
    r = correlation(x, y)
    low, high = correlation_confidence_interval(0.9, x, y)
    assert low < r < high


def test_interval_needs_more_than_three_pairs():
    with pytest.raises(InsufficientSampleError):
        correlation_confidence_interval(0.95, [1, 2, 3], [3, 1, 2])
    with pytest.raises(InsufficientSampleError):
        correlation_interval_from_r(0.95, 0.2, 3)


def test_significance_test_degrees_of_freedom():
    x = [1, 2, 3, 4, 5, 6]
    y = [2, 1, 4, 3, 6, 5]
    result = correlation_significance_test(x, y)
    r = correlation(x, y)
    assert result.degrees_of_freedom == (4.0,)
    assert math.isclose(result.statistic, r * math.sqrt(4 / (1 - r * r)))
    assert 0.0 <= result.p_value <= 1.0


def test_significance_test_uncorrelated_has_large_p():
    x = [1, 2, 3, 4, 5]
    y = [2, 4, 1, 5, 3]
    # r = 0.3 here, far from significant with 3 degrees of freedom
    assert correlation_significance_test(x, y).p_value > 0.5


def test_significance_test_perfect_correlation():
    result = correlation_significance_test(X, Y)
    assert result.statistic > 1e6
    assert result.p_value < 1e-12


@pytest.mark.parametrize("confidence", [0.0, 1.0, 1.5])
def test_interval_rejects_invalid_confidence(confidence):
    x = [1, 2, 3, 4, 5, 6]
    y = [2, 1, 4, 3, 6, 5]
    with pytest.raises(InvalidProbabilityError):
        correlation_confidence_interval(confidence, x, y)


@pytest.mark.parametrize("n", [math.nan, math.inf, 30.5, True])
def test_interval_from_r_rejects_non_integral_n(n):
    with pytest.raises(ValueError, match="finite integer"):
        correlation_interval_from_r(0.95, 0.5, n)


def test_interval_from_r_accepts_integral_float_n():
    assert correlation_interval_from_r(0.95, 0.5, 30.0) == correlation_interval_from_r(
        0.95, 0.5, 30
    )
