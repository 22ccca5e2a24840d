"""Bootstrap resampling of an arbitrary statistic.

Randomness comes only from the ``rng`` argument. Pass an integer seed or a
``numpy.random.Generator`` for reproducible output; a shared Generator must
not be used from several threads at once.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Tuple, Union

import numpy as np

from statcore.config import DEFAULT_BOOTSTRAP_SIZE, DEFAULT_CONFIDENCE
from statcore.stats._validation import as_sample, check_probability
from statcore.stats.descriptive import quantile, std_dev

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def _resolve_rng(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def bootstrap(
    xs: Sequence[float],
    statistic_fn: Callable[[np.ndarray], float],
    size: int = DEFAULT_BOOTSTRAP_SIZE,
    rng: RandomSource = None,
) -> np.ndarray:
    """Return the empirical sampling distribution of ``statistic_fn``.

    Args:
        xs (Sequence[float]): Observed sample to resample from.
        statistic_fn (Callable): Function applied to each resample.
        size (int): Number of resamples, each of length ``len(xs)``, drawn
            with replacement.
        rng: ``numpy.random.Generator``, integer seed, or ``None`` for fresh
            OS entropy.

    Returns:
        numpy.ndarray: ``size`` statistic values, in draw order.

    Raises:
        ValueError: If ``size`` is not a positive integer.
        Exception: Whatever ``statistic_fn`` raises on any resample; no
            resample is ever skipped.
    """
    if isinstance(size, bool) or int(size) != size or size < 1:
        raise ValueError(f"Bootstrap size must be a positive integer, got {size!r}.")
    size = int(size)
    arr = as_sample(xs)
    n = len(arr)
    generator = _resolve_rng(rng)
    logger.debug("Drawing %d bootstrap resamples of length %d", size, n)

    out = np.empty(size, dtype=float)
    for i in range(size):
        # one index row per resample; memory stays O(n)
        idx = generator.integers(0, n, size=n)
        try:
            out[i] = statistic_fn(arr[idx])
        except Exception:
            logger.error("Statistic failed on bootstrap resample %d of %d", i + 1, size)
            raise
    return out


def bootstrap_confidence_interval(
    distribution: Sequence[float], confidence: float = DEFAULT_CONFIDENCE
) -> Tuple[float, float]:
    """Return the percentile interval of a bootstrap distribution.

    The bounds are the nearest-rank ``(1 - c) / 2`` and ``1 - (1 - c) / 2``
    quantiles for confidence ``c``.
    """
    confidence = check_probability(confidence)
    tail = (1.0 - confidence) / 2.0
    return quantile(tail, distribution), quantile(1.0 - tail, distribution)


def bootstrap_standard_error(distribution: Sequence[float]) -> float:
    return std_dev(distribution)


def bootstrap_summary(
    xs: Sequence[float],
    statistic_fn: Callable[[np.ndarray], float],
    size: int = DEFAULT_BOOTSTRAP_SIZE,
    confidence: float = DEFAULT_CONFIDENCE,
    rng: RandomSource = None,
) -> dict:
    """Bootstrap ``statistic_fn`` and summarize the resulting distribution.

    Returns:
        dict: Keys ``estimate`` (statistic on the original sample),
        ``bootstrap_mean``, ``standard_error``, ``ci_low``, ``ci_high`` and
        ``size``.
    """
    arr = as_sample(xs)
    dist = bootstrap(arr, statistic_fn, size=size, rng=rng)
    low, high = bootstrap_confidence_interval(dist, confidence)
    return {
        "estimate": float(statistic_fn(arr)),
        "bootstrap_mean": float(np.mean(dist)),
        "standard_error": bootstrap_standard_error(dist),
        "ci_low": low,
        "ci_high": high,
        "size": int(size),
    }
