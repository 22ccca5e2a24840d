"""Covariance, Pearson correlation and Fisher z-based inference on r."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np
from scipy import stats as scipy_stats

from statcore.errors import InsufficientSampleError, UndefinedStatisticError
from statcore.schema import TestResult
from statcore.stats._validation import as_paired, check_probability
from statcore.stats.descriptive import std_dev


def covariance(x: Sequence[float], y: Sequence[float]) -> float:
    """Return the population covariance ``(1/n) * sum((x - xbar) * (y - ybar))``.

    Raises:
        SizeMismatchError: If ``x`` and ``y`` differ in length.
    """
    x_arr, y_arr = as_paired(x, y)
    dx = x_arr - np.mean(x_arr)
    dy = y_arr - np.mean(y_arr)
    return float(np.mean(dx * dy))


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Return Pearson's r, ``covariance(x, y) / (std_dev(x) * std_dev(y))``.

    Raises:
        UndefinedStatisticError: If either operand has zero variance.
    """
    x_arr, y_arr = as_paired(x, y)
    sx = std_dev(x_arr)
    sy = std_dev(y_arr)
    if sx == 0 or sy == 0:
        raise UndefinedStatisticError(
            "Correlation is undefined when either sample has zero variance."
        )
    r = covariance(x_arr, y_arr) / (sx * sy)
    # rounding can push |r| a few ulps past 1
    return float(min(1.0, max(-1.0, r)))


def fisher_z(r: float) -> float:
    """Return ``0.5 * ln((1 + r) / (1 - r))`` for ``r`` in (-1, 1)."""
    r = float(r)
    if not -1.0 < r < 1.0:
        raise UndefinedStatisticError(f"Fisher z is undefined for r={r!r}.")
    return math.atanh(r)


def fisher_z_inverse(z: float) -> float:
    """Return ``(e^(2z) - 1) / (e^(2z) + 1)``, the inverse of :func:`fisher_z`."""
    return math.tanh(float(z))


def correlation_interval_from_r(
    confidence: float, r: float, n: int
) -> Tuple[float, float]:
    """Return a normal-theory confidence interval for a correlation.

    Args:
        confidence (float): Confidence level in (0, 1), e.g. ``0.95``.
        r (float): Observed correlation in (-1, 1).
        n (int): Number of paired observations behind ``r``.

    Returns:
        tuple[float, float]: ``(low, high)`` on the correlation scale.

    Raises:
        ValueError: If ``n`` is not a finite integer.
        InsufficientSampleError: If ``n <= 3`` (the Fisher standard error
            ``1 / sqrt(n - 3)`` is undefined).

    References:
        Fisher (1915) variance-stabilizing transformation of r.
    """
    confidence = check_probability(confidence)
    if isinstance(n, bool) or not float(n).is_integer():
        raise ValueError(f"n must be a finite integer, got {n!r}.")
    n = int(n)
    if n <= 3:
        raise InsufficientSampleError(
            f"Correlation confidence interval needs n > 3, got n={n}."
        )
    z_r = fisher_z(r)
    se_z = 1.0 / math.sqrt(n - 3)
    crit = float(scipy_stats.norm.ppf(1.0 - (1.0 - confidence) / 2.0))
    return (
        fisher_z_inverse(z_r - crit * se_z),
        fisher_z_inverse(z_r + crit * se_z),
    )


def correlation_confidence_interval(
    confidence: float, x: Sequence[float], y: Sequence[float]
) -> Tuple[float, float]:
    """Return the Fisher-z confidence interval for ``correlation(x, y)``."""
    x_arr, y_arr = as_paired(x, y)
    n = len(x_arr)
    if n <= 3:
        raise InsufficientSampleError(
            f"Correlation confidence interval needs n > 3, got n={n}."
        )
    return correlation_interval_from_r(confidence, correlation(x_arr, y_arr), n)


def correlation_significance_test(
    x: Sequence[float], y: Sequence[float]
) -> TestResult:
    """Test H0: rho = 0 with ``t = r * sqrt(df / (1 - r^2))``, ``df = n - 2``.

    Note:
        A perfect correlation yields an infinite statistic and a p-value of
        exactly zero, which is the limit of the formula rather than a
        substituted value.
    """
    x_arr, y_arr = as_paired(x, y)
    n = len(x_arr)
    if n <= 2:
        raise InsufficientSampleError(
            f"Correlation significance test needs n > 2, got n={n}."
        )
    r = correlation(x_arr, y_arr)
    df = n - 2
    denom = 1.0 - r * r
    if denom <= 0:
        t_stat = math.copysign(math.inf, r)
        p_value = 0.0
    else:
        t_stat = r * math.sqrt(df / denom)
        p_value = float(2.0 * scipy_stats.t.sf(abs(t_stat), df))
    return TestResult(
        statistic=float(t_stat),
        degrees_of_freedom=(float(df),),
        p_value=min(1.0, p_value),
        method="t",
    )
