"""Tests for standard errors, z/t-tests, ANOVA and effect sizes."""

import math

import numpy as np
import pytest
from scipy import stats as scipy_stats

from statcore.errors import (
    InsufficientSampleError,
    InvalidProbabilityError,
    UndefinedStatisticError,
)
from statcore.stats.hypothesis import (
    bonferroni_adjusted_alpha,
    cohens_d,
    confidence_interval,
    one_sample_t_test,
    one_way_anova,
    one_way_f_test,
    pooled_standard_error,
    standard_error,
    two_sample_statistic,
    two_sample_t_test,
    two_sample_z_test,
)

A = [10, 12, 14]
B = [20, 22, 24]


def test_standard_error_uses_population_sd():
    xs = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert math.isclose(standard_error(xs), 2.0 / math.sqrt(8))


def test_confidence_interval_is_symmetric_about_mean():
    xs = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    low, high = confidence_interval(0.95, xs)
    half = 1.959963984540054 * 2.0 / math.sqrt(8)
    assert math.isclose(low, 5.0 - half)
    assert math.isclose(high, 5.0 + half)


def test_wider_confidence_gives_wider_interval():
    xs = [1, 4, 2, 8, 5, 7]
    low90, high90 = confidence_interval(0.90, xs)
    low99, high99 = confidence_interval(0.99, xs)
    assert low99 < low90 and high99 > high90


@pytest.mark.parametrize("confidence", [0.0, 1.0, -0.5, 95])
def test_confidence_outside_unit_interval(confidence):
    with pytest.raises(InvalidProbabilityError):
        confidence_interval(confidence, [1, 2, 3])


class TestTwoSample:
    def test_statistic_for_separated_groups(self):
        se = math.sqrt(2 * (8.0 / 3.0) / 3.0)
        assert math.isclose(pooled_standard_error(A, B), se)
        assert math.isclose(two_sample_statistic(A, B), -10.0 / se)

    def test_t_test_detects_difference(self):
        result = two_sample_t_test(A, B)
        assert result.method == "t"
        assert result.degrees_of_freedom == (4.0,)
        assert result.p_value < 0.01

    def test_z_and_t_share_statistic_and_are_two_tailed(self):
        z = two_sample_z_test(A, B)
        t = two_sample_t_test(A, B)
        assert z.statistic == t.statistic
        assert math.isclose(z.p_value, 2 * scipy_stats.norm.sf(abs(z.statistic)))
        assert math.isclose(t.p_value, 2 * scipy_stats.t.sf(abs(t.statistic), 4))
        assert z.degrees_of_freedom == (math.inf,)

    def test_swapping_samples_keeps_p_value(self):
        forward = two_sample_z_test(A, B)
        backward = two_sample_z_test(B, A)
        assert math.isclose(forward.statistic, -backward.statistic)
        assert math.isclose(forward.p_value, backward.p_value)

    def test_z_test_interval_for_mean_difference(self):
        result = two_sample_z_test(A, B, confidence=0.95)
        low, high = result.confidence_interval
        half = 1.959963984540054 * pooled_standard_error(A, B)
        assert math.isclose(low, -10.0 - half)
        assert math.isclose(high, -10.0 + half)
        assert two_sample_z_test(A, B).confidence_interval is None

    def test_interval_for_mean_difference(self):
        result = two_sample_t_test(A, B, confidence=0.95)
        low, high = result.confidence_interval
        assert math.isclose((low + high) / 2.0, -10.0)
        assert high < 0

    def test_zero_spread_is_undefined(self):
        with pytest.raises(UndefinedStatisticError):
            two_sample_statistic([1, 1], [2, 2])

    def test_t_test_needs_degrees_of_freedom(self):
        with pytest.raises(InsufficientSampleError):
            two_sample_t_test([1.0], [2.0])


class TestOneSample:
    def test_statistic_and_df(self):
        xs = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        result = one_sample_t_test(xs, 3.0)
        assert math.isclose(result.statistic, 2.0 / (2.0 / math.sqrt(8)))
        assert result.degrees_of_freedom == (7.0,)
        assert math.isclose(
            result.p_value, 2 * scipy_stats.t.sf(abs(result.statistic), 7)
        )

    def test_mean_equal_to_mu_gives_p_of_one(self):
        result = one_sample_t_test([1, 2, 3, 4, 5], 3.0)
        assert result.statistic == 0.0
        assert math.isclose(result.p_value, 1.0)

    def test_interval_attached_when_requested(self):
        result = one_sample_t_test([1, 2, 3, 4, 5], 0.0, confidence=0.95)
        low, high = result.confidence_interval
        assert low < 3.0 < high

    def test_single_observation(self):
        with pytest.raises(InsufficientSampleError):
            one_sample_t_test([4.0], 3.0)

    def test_constant_sample(self):
        with pytest.raises(UndefinedStatisticError):
            one_sample_t_test([4.0, 4.0, 4.0], 3.0)


class TestAnova:
    def test_identical_groups_have_no_between_variation(self):
        result = one_way_anova([[1, 2, 3], [1, 2, 3], [1, 2, 3]])
        assert result["SSB"] == pytest.approx(0.0, abs=1e-12)
        assert result["F"] == pytest.approx(0.0, abs=1e-12)
        assert result["pvalue"] == pytest.approx(1.0)
        assert result["df1"] == 2.0
        assert result["df2"] == 6.0

    def test_f_statistic_matches_scipy(self, rng):
        groups = [rng.normal(loc=mu, size=8) for mu in (0.0, 0.5, 1.5)]
        result = one_way_f_test(groups)
        ref = scipy_stats.f_oneway(*groups)
        assert result.method == "F"
        assert math.isclose(result.statistic, ref.statistic, rel_tol=1e-9)
        assert math.isclose(result.p_value, ref.pvalue, rel_tol=1e-6)
        assert result.degrees_of_freedom == (2.0, 21.0)

    def test_accepts_grouped_mapping(self):
        grouped = {"a": [1.0, 2.0, 3.0], ("b", 2): [4.0, 5.0, 6.0]}
        result = one_way_anova(grouped)
        assert math.isclose(result["SST"], result["SSB"] + result["SSW"])
        assert result["SSB"] == pytest.approx(13.5)

    def test_needs_two_groups(self):
        with pytest.raises(InsufficientSampleError):
            one_way_f_test([[1, 2, 3]])

    def test_empty_group(self):
        with pytest.raises(InsufficientSampleError):
            one_way_f_test([[1, 2, 3], []])

    def test_one_observation_per_group(self):
        with pytest.raises(InsufficientSampleError):
            one_way_f_test([[1.0], [2.0]])

    def test_no_within_group_variation(self):
        with pytest.raises(UndefinedStatisticError):
            one_way_f_test([[1.0, 1.0], [2.0, 2.0]])


class TestBonferroni:
    def test_divides_alpha(self):
        assert math.isclose(bonferroni_adjusted_alpha(0.05, 10), 0.005)

    def test_strictly_decreasing(self):
        values = [bonferroni_adjusted_alpha(0.05, k) for k in range(1, 20)]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_invalid_alpha(self):
        with pytest.raises(InvalidProbabilityError):
            bonferroni_adjusted_alpha(1.2, 3)

    def test_invalid_comparison_count(self):
        with pytest.raises(ValueError, match="positive integer"):
            bonferroni_adjusted_alpha(0.05, 0)


def test_cohens_d_sums_variances():
    d = cohens_d([1, 2, 3], [4, 5, 6])
    assert math.isclose(d, 3.0 / math.sqrt(4.0 / 3.0))
    assert math.isclose(cohens_d([4, 5, 6], [1, 2, 3]), -d)


def test_cohens_d_undefined_for_constant_samples():
    with pytest.raises(UndefinedStatisticError):
        cohens_d([1, 1], [2, 2])


def test_groups_are_not_mutated():
    groups = {"a": np.array([1.0, 2.0, 3.0]), "b": np.array([3.0, 5.0, 9.0])}
    snapshot = {k: v.copy() for k, v in groups.items()}
    one_way_anova(groups)
    for key, values in groups.items():
        assert np.array_equal(values, snapshot[key])
