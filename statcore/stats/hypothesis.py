"""Hypothesis tests and interval estimates for sample means.

All tests are two-tailed. The two-sample z- and t-tests share one statistic,
``(mean(a) - mean(b)) / sqrt(SE(a)^2 + SE(b)^2)``, and differ only in the
reference distribution used to turn it into a p-value: the standard normal
for the z-test and Student-t with ``n_a + n_b - 2`` degrees of freedom for
the t-test. Standard errors use the population standard deviation, matching
:mod:`statcore.stats.descriptive`.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from scipy import stats as scipy_stats

from statcore.errors import (
    InsufficientSampleError,
    UndefinedStatisticError,
)
from statcore.schema import TestResult
from statcore.stats._validation import as_sample, check_probability
from statcore.stats.descriptive import mean, std_dev

logger = logging.getLogger(__name__)

Groups = Union[Mapping[Any, Sequence[float]], Sequence[Sequence[float]]]


def _z_critical(confidence: float) -> float:
    confidence = check_probability(confidence)
    return float(scipy_stats.norm.ppf(1.0 - (1.0 - confidence) / 2.0))


def _t_critical(confidence: float, df: float) -> float:
    confidence = check_probability(confidence)
    return float(scipy_stats.t.ppf(1.0 - (1.0 - confidence) / 2.0, df))


def standard_error(xs: Sequence[float]) -> float:
    """Return ``std_dev(xs) / sqrt(n)``."""
    arr = as_sample(xs)
    return std_dev(arr) / math.sqrt(len(arr))


def confidence_interval(confidence: float, xs: Sequence[float]) -> Tuple[float, float]:
    """Return the normal-theory interval ``mean +/- z_crit * SE``.

    Raises:
        InvalidProbabilityError: If ``confidence`` is outside (0, 1).
    """
    crit = _z_critical(confidence)
    arr = as_sample(xs)
    centre = mean(arr)
    half = crit * standard_error(arr)
    return centre - half, centre + half


def pooled_standard_error(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(standard_error(a) ** 2 + standard_error(b) ** 2)


def two_sample_statistic(a: Sequence[float], b: Sequence[float]) -> float:
    """Return ``(mean(a) - mean(b)) / pooled_standard_error(a, b)``.

    Raises:
        UndefinedStatisticError: If both samples have zero spread.
    """
    a_arr = as_sample(a, "a")
    b_arr = as_sample(b, "b")
    se = pooled_standard_error(a_arr, b_arr)
    if se == 0:
        raise UndefinedStatisticError(
            "Two-sample statistic is undefined when the pooled standard error is zero."
        )
    return (mean(a_arr) - mean(b_arr)) / se


def two_sample_z_test(
    a: Sequence[float], b: Sequence[float], confidence: Optional[float] = None
) -> TestResult:
    """Two-tailed z-test of H0: mean(a) == mean(b).

    When ``confidence`` is given, the result carries a normal-theory interval
    for ``mean(a) - mean(b)``.
    """
    a_arr = as_sample(a, "a")
    b_arr = as_sample(b, "b")
    z = two_sample_statistic(a_arr, b_arr)
    p_value = float(2.0 * scipy_stats.norm.sf(abs(z)))

    interval = None
    if confidence is not None:
        diff = mean(a_arr) - mean(b_arr)
        half = _z_critical(confidence) * pooled_standard_error(a_arr, b_arr)
        interval = (diff - half, diff + half)

    return TestResult(
        statistic=float(z),
        degrees_of_freedom=(math.inf,),
        p_value=min(1.0, p_value),
        confidence_interval=interval,
        method="z",
    )


def two_sample_t_test(
    a: Sequence[float], b: Sequence[float], confidence: Optional[float] = None
) -> TestResult:
    """Two-tailed t-test of H0: mean(a) == mean(b) with ``df = n_a + n_b - 2``.

    Raises:
        InsufficientSampleError: If ``n_a + n_b - 2 < 1``.
        UndefinedStatisticError: If both samples have zero spread.
    """
    a_arr = as_sample(a, "a")
    b_arr = as_sample(b, "b")
    df = len(a_arr) + len(b_arr) - 2
    if df < 1:
        raise InsufficientSampleError(
            f"Two-sample t-test needs n_a + n_b > 2, got {len(a_arr)} and {len(b_arr)}."
        )
    t_stat = two_sample_statistic(a_arr, b_arr)
    p_value = float(2.0 * scipy_stats.t.sf(abs(t_stat), df))

    interval = None
    if confidence is not None:
        diff = mean(a_arr) - mean(b_arr)
        half = _t_critical(confidence, df) * pooled_standard_error(a_arr, b_arr)
        interval = (diff - half, diff + half)

    return TestResult(
        statistic=float(t_stat),
        degrees_of_freedom=(float(df),),
        p_value=min(1.0, p_value),
        confidence_interval=interval,
        method="t",
    )


def one_sample_t_test(
    xs: Sequence[float], mu: float, confidence: Optional[float] = None
) -> TestResult:
    """Two-tailed t-test of H0: mean(xs) == mu with ``df = n - 1``.

    Raises:
        InsufficientSampleError: If ``xs`` has fewer than two observations.
        UndefinedStatisticError: If ``xs`` has zero spread.
    """
    arr = as_sample(xs)
    n = len(arr)
    if n < 2:
        raise InsufficientSampleError(f"One-sample t-test needs n >= 2, got n={n}.")
    se = standard_error(arr)
    if se == 0:
        raise UndefinedStatisticError(
            "One-sample t statistic is undefined for a constant sample."
        )
    df = n - 1
    t_stat = (mean(arr) - float(mu)) / se
    p_value = float(2.0 * scipy_stats.t.sf(abs(t_stat), df))

    interval = None
    if confidence is not None:
        half = _t_critical(confidence, df) * se
        interval = (mean(arr) - half, mean(arr) + half)

    return TestResult(
        statistic=float(t_stat),
        degrees_of_freedom=(float(df),),
        p_value=min(1.0, p_value),
        confidence_interval=interval,
        method="t",
    )


def _group_arrays(groups: Groups) -> list[np.ndarray]:
    values = list(groups.values()) if isinstance(groups, Mapping) else list(groups)
    if len(values) < 2:
        raise InsufficientSampleError(
            f"One-way ANOVA needs at least 2 groups, got {len(values)}."
        )
    arrays = []
    for idx, grp in enumerate(values):
        if np.asarray(grp).size == 0:
            raise InsufficientSampleError(f"Group {idx} has no observations.")
        arrays.append(as_sample(grp, f"group {idx}"))
    return arrays


def one_way_anova(groups: Groups) -> Dict[str, float]:
    """Partition total variation into between- and within-group sums of squares.

    Args:
        groups: Either a mapping from group key to sample (a grouped sample)
            or a plain sequence of samples.

    Returns:
        dict[str, float]: Keys ``SSB``, ``SSW``, ``SST``, ``df1``, ``df2``,
        ``MSB``, ``MSW``, ``F`` and ``pvalue``.

    Raises:
        InsufficientSampleError: If there are fewer than two groups, a group
            is empty, or ``n - k <= 0``.
        UndefinedStatisticError: If every group is internally constant
            (``SSW == 0``).
    """
    arrays = _group_arrays(groups)
    k = len(arrays)
    pooled = np.concatenate(arrays)
    n_total = int(len(pooled))

    df1 = k - 1
    df2 = n_total - k
    if df2 <= 0:
        raise InsufficientSampleError(
            f"One-way ANOVA needs more observations than groups, got n={n_total}, k={k}."
        )

    grand_mean = float(np.mean(pooled))
    ssw = float(sum(np.sum((g - np.mean(g)) ** 2) for g in arrays))
    sst = float(np.sum((pooled - grand_mean) ** 2))
    # SST - SSW can dip below zero by rounding when the group means coincide
    ssb = max(0.0, sst - ssw)
    if ssw == 0:
        raise UndefinedStatisticError(
            "F statistic is undefined when there is no within-group variation."
        )

    msb = ssb / df1
    msw = ssw / df2
    f_stat = msb / msw
    pvalue = float(scipy_stats.f.sf(f_stat, df1, df2))
    logger.debug("ANOVA k=%d n=%d F=%.4g p=%.4g", k, n_total, f_stat, pvalue)

    return {
        "SSB": ssb,
        "SSW": ssw,
        "SST": sst,
        "df1": float(df1),
        "df2": float(df2),
        "MSB": msb,
        "MSW": msw,
        "F": float(f_stat),
        "pvalue": pvalue,
    }


def one_way_f_test(groups: Groups) -> TestResult:
    """Return the one-way ANOVA F-test as a :class:`TestResult`."""
    table = one_way_anova(groups)
    return TestResult(
        statistic=table["F"],
        degrees_of_freedom=(table["df1"], table["df2"]),
        p_value=min(1.0, table["pvalue"]),
        method="F",
    )


def bonferroni_adjusted_alpha(alpha: float, k: int) -> float:
    """Return ``alpha / k`` for ``k`` simultaneous comparisons."""
    alpha = check_probability(alpha, "Alpha")
    if isinstance(k, bool) or int(k) != k or k < 1:
        raise ValueError(f"Number of comparisons must be a positive integer, got {k!r}.")
    return alpha / int(k)


def cohens_d(a: Sequence[float], b: Sequence[float]) -> float:
    """Return ``(mean(b) - mean(a)) / sqrt(std_dev(a)^2 + std_dev(b)^2)``.

    Note:
        The denominator sums the two variances instead of averaging them, so
        values are a factor ``sqrt(2)`` smaller than the textbook pooled-SD
        form for equal group sizes.
    """
    a_arr = as_sample(a, "a")
    b_arr = as_sample(b, "b")
    denom = math.sqrt(std_dev(a_arr) ** 2 + std_dev(b_arr) ** 2)
    if denom == 0:
        raise UndefinedStatisticError(
            "Cohen's d is undefined when both samples have zero spread."
        )
    return (mean(b_arr) - mean(a_arr)) / denom
