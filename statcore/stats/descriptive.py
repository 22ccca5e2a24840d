"""Descriptive statistics over a single sample.

All spread measures use the population convention (divisor ``n``), and every
downstream module builds on the functions defined here rather than calling
``numpy.var`` or ``numpy.std`` directly, so the convention cannot drift.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Callable, Dict, Hashable, Iterable, Sequence

import numpy as np

from statcore.errors import (
    DegenerateRangeError,
    EmptyInputError,
    InvalidProbabilityError,
    UndefinedStatisticError,
)
from statcore.stats._validation import as_sample


def mean(xs: Sequence[float]) -> float:
    """Return the arithmetic mean of ``xs``.

    Raises:
        EmptyInputError: If ``xs`` is empty.
    """
    return float(np.mean(as_sample(xs)))


def median(xs: Sequence[float]) -> float:
    """Return the middle sorted value, or the mean of the two middle values."""
    arr = np.sort(as_sample(xs))
    n = len(arr)
    mid = n // 2
    if n % 2:
        return float(arr[mid])
    return float((arr[mid - 1] + arr[mid]) / 2.0)


def variance(xs: Sequence[float]) -> float:
    """Return the population variance (mean squared deviation, divisor ``n``).

    Note:
        A constant sample returns exactly ``0.0`` regardless of how its mean
        rounds in floating point.
    """
    arr = as_sample(xs)
    if np.all(arr == arr[0]):
        return 0.0
    dev = arr - np.mean(arr)
    return float(np.mean(dev**2))


def std_dev(xs: Sequence[float]) -> float:
    return math.sqrt(variance(xs))


def skewness(xs: Sequence[float]) -> float:
    """Return the third standardized moment ``mean((x - mean)^3) / std_dev^3``.

    Raises:
        UndefinedStatisticError: If the sample has zero spread.
    """
    arr = as_sample(xs)
    sd = std_dev(arr)
    if sd == 0:
        raise UndefinedStatisticError("Skewness is undefined for a constant sample.")
    dev = arr - np.mean(arr)
    return float(np.mean(dev**3) / sd**3)


def quantile(q: float, xs: Sequence[float]) -> float:
    """Return the nearest-rank quantile of ``xs``.

    The selected element sits at index ``floor((n - 1) * q + 0.5)`` of the
    ascending sort, so ``q=0`` gives the minimum and ``q=1`` the maximum.

    Raises:
        InvalidProbabilityError: If ``q`` lies outside ``[0, 1]``.
    """
    qf = float(q)
    if not math.isfinite(qf) or not 0.0 <= qf <= 1.0:
        raise InvalidProbabilityError(f"Quantile must lie in [0, 1], got {q!r}.")
    arr = np.sort(as_sample(xs))
    idx = int(math.floor((len(arr) - 1) * qf + 0.5))
    return float(arr[idx])


def bin(n_bins: int, xs: Sequence[float]) -> np.ndarray:  # noqa: A001
    """Assign each observation an integer bin id in ``[0, n_bins - 1]``.

    Bins split ``[min(xs), max(xs)]`` into ``n_bins`` equal-width intervals;
    the maximum falls in the last bin.

    Raises:
        ValueError: If ``n_bins`` is not a positive integer.
        DegenerateRangeError: If every observation is identical.
    """
    if isinstance(n_bins, bool) or int(n_bins) != n_bins or n_bins < 1:
        raise ValueError(f"n_bins must be a positive integer, got {n_bins!r}.")
    n_bins = int(n_bins)
    arr = as_sample(xs)
    lo = float(np.min(arr))
    hi = float(np.max(arr))
    if hi == lo:
        raise DegenerateRangeError("Cannot bin a sample whose range is zero.")
    ids = np.floor((arr - lo) / (hi - lo) * n_bins).astype(int)
    return np.clip(ids, 0, n_bins - 1)


def empirical_cdf(xs: Sequence[float]) -> Callable[[float], float]:
    """Return the right-continuous step function ``v -> fraction of xs <= v``."""
    arr = np.sort(as_sample(xs))
    n = len(arr)

    def cdf(v: float) -> float:
        return float(np.searchsorted(arr, float(v), side="right") / n)

    return cdf


def pmf(bin_ids: Iterable[Hashable]) -> Dict[Hashable, float]:
    """Normalize per-bin frequency counts into probabilities summing to 1.

    Keys keep the order in which each bin id first appears.
    """
    counts = Counter(
        int(b) if isinstance(b, np.integer) else b for b in bin_ids
    )
    total = sum(counts.values())
    if total == 0:
        raise EmptyInputError("pmf requires at least one bin id.")
    return {key: count / total for key, count in counts.items()}


def describe(xs: Sequence[float]) -> Dict[str, float]:
    """Summarize a sample in a single record.

    Returns:
        dict[str, float]: Keys ``n``, ``mean``, ``median``, ``variance``,
        ``std_dev``, ``min``, ``q1``, ``q3``, ``max`` and ``skewness``.

    Raises:
        UndefinedStatisticError: If the sample is constant, since its
            skewness is undefined.
    """
    arr = as_sample(xs)
    skew = skewness(arr)
    return {
        "n": int(len(arr)),
        "mean": mean(arr),
        "median": median(arr),
        "variance": variance(arr),
        "std_dev": std_dev(arr),
        "min": float(np.min(arr)),
        "q1": quantile(0.25, arr),
        "q3": quantile(0.75, arr),
        "max": float(np.max(arr)),
        "skewness": skew,
    }
