"""
Tabular summaries and comparisons over grouped samples.

This module turns a grouped sample (a mapping from group key to a sequence
of observations, typically produced by a DataFrame ``groupby``) into pandas
tables:
- per-group descriptive summaries with normal-theory confidence intervals,
- every pairwise two-sample t-test with a Bonferroni-adjusted threshold and
  Cohen's d effect size, and
- the one-way ANOVA partition of variation.

The numerical work is delegated to :mod:`statcore.stats`; this module only
arranges results into rows using the labels in :data:`statcore.schema.COLUMNS`.
"""

from __future__ import annotations

import logging
import warnings
from typing import Hashable, Mapping, Sequence

import numpy as np
import pandas as pd

from .config import DEFAULT_ALPHA, DEFAULT_CONFIDENCE
from .grouping import map_groups, pairwise_comparisons
from .schema import COLUMNS
from .stats.descriptive import mean, median, std_dev
from .stats.hypothesis import (
    Groups,
    bonferroni_adjusted_alpha,
    cohens_d,
    confidence_interval,
    one_way_anova,
    standard_error,
    two_sample_t_test,
)

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    COLUMNS.group,
    COLUMNS.n,
    COLUMNS.mean,
    COLUMNS.median,
    COLUMNS.std_dev,
    COLUMNS.standard_error,
    COLUMNS.ci_low,
    COLUMNS.ci_high,
]

PAIRWISE_COLUMNS = [
    COLUMNS.group_a,
    COLUMNS.group_b,
    COLUMNS.statistic,
    COLUMNS.df,
    COLUMNS.p_value,
    COLUMNS.adjusted_alpha,
    COLUMNS.significant,
    COLUMNS.effect_size,
]

ANOVA_COLUMNS = [
    COLUMNS.source,
    COLUMNS.ss,
    COLUMNS.df,
    COLUMNS.ms,
    COLUMNS.f,
    COLUMNS.p_value,
]


def _group_summary(sample: Sequence[float], confidence: float) -> dict:
    low, high = confidence_interval(confidence, sample)
    return {
        COLUMNS.n: int(len(np.asarray(sample))),
        COLUMNS.mean: mean(sample),
        COLUMNS.median: median(sample),
        COLUMNS.std_dev: std_dev(sample),
        COLUMNS.standard_error: standard_error(sample),
        COLUMNS.ci_low: low,
        COLUMNS.ci_high: high,
    }


def summarize_groups(
    grouped: Mapping[Hashable, Sequence[float]],
    confidence: float = DEFAULT_CONFIDENCE,
) -> pd.DataFrame:
    """Build one descriptive-summary row per group.

    Args:
        grouped: Mapping from group key to observations.
        confidence (float): Confidence level for the interval columns.

    Returns:
        pandas.DataFrame: Columns ``Group``, ``n``, ``Mean``, ``Median``,
        ``Std Dev``, ``Standard Error``, ``CI Low`` and ``CI High``, in the
        input group order.
    """
    if not grouped:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    summaries = map_groups(grouped, lambda s: _group_summary(s, confidence))
    rows = [{COLUMNS.group: key, **summary} for key, summary in summaries.items()]
    return pd.DataFrame.from_records(rows, columns=SUMMARY_COLUMNS)


def pairwise_t_tests(
    grouped: Mapping[Hashable, Sequence[float]], alpha: float = DEFAULT_ALPHA
) -> pd.DataFrame:
    """Run a two-sample t-test for every pair of groups.

    Significance is judged against the Bonferroni-adjusted threshold
    ``alpha / m`` where ``m`` is the number of pairs.

    Returns:
        pandas.DataFrame: Columns ``Group A``, ``Group B``, ``t``, ``df``,
        ``p-value``, ``Adjusted Alpha``, ``Significant`` and ``Cohen's d``,
        sorted by ascending p-value.

    Raises:
        InsufficientSampleError: If fewer than two groups are supplied.
        UndefinedStatisticError: If some pair has zero pooled spread.

    Note:
        Groups with a single observation are still compared (their standard
        error is zero), but a ``RuntimeWarning`` is emitted because such a
        comparison rests entirely on the other group's spread.
    """
    small = [key for key, sample in grouped.items() if len(np.asarray(sample)) < 2]
    if small:
        warnings.warn(
            f"Groups with fewer than 2 observations: {small}; their t-tests "
            "depend only on the other group's spread.",
            RuntimeWarning,
            stacklevel=2,
        )

    results = pairwise_comparisons(grouped, two_sample_t_test)
    adjusted = bonferroni_adjusted_alpha(alpha, len(results))
    logger.info(
        "Ran %d pairwise t-tests; Bonferroni threshold %.4g", len(results), adjusted
    )

    rows = []
    for (key_a, key_b), result in results.items():
        rows.append(
            {
                COLUMNS.group_a: key_a,
                COLUMNS.group_b: key_b,
                COLUMNS.statistic: result.statistic,
                COLUMNS.df: result.degrees_of_freedom[0],
                COLUMNS.p_value: result.p_value,
                COLUMNS.adjusted_alpha: adjusted,
                COLUMNS.significant: bool(result.is_significant(adjusted)),
                COLUMNS.effect_size: cohens_d(grouped[key_a], grouped[key_b]),
            }
        )

    return (
        pd.DataFrame.from_records(rows, columns=PAIRWISE_COLUMNS)
        .sort_values(COLUMNS.p_value, kind="mergesort")
        .reset_index(drop=True)
    )


def anova_table(groups: Groups) -> pd.DataFrame:
    """Lay out the one-way ANOVA partition as a classic source table.

    Returns:
        pandas.DataFrame: Rows ``Between``, ``Within`` and ``Total`` with
        columns ``Source``, ``SS``, ``df``, ``MS``, ``F`` and ``p-value``.
        Cells that have no meaning for a row (e.g. ``F`` for ``Within``) are
        ``NaN``.
    """
    res = one_way_anova(groups)
    rows = [
        {
            COLUMNS.source: "Between",
            COLUMNS.ss: res["SSB"],
            COLUMNS.df: res["df1"],
            COLUMNS.ms: res["MSB"],
            COLUMNS.f: res["F"],
            COLUMNS.p_value: res["pvalue"],
        },
        {
            COLUMNS.source: "Within",
            COLUMNS.ss: res["SSW"],
            COLUMNS.df: res["df2"],
            COLUMNS.ms: res["MSW"],
            COLUMNS.f: np.nan,
            COLUMNS.p_value: np.nan,
        },
        {
            COLUMNS.source: "Total",
            COLUMNS.ss: res["SST"],
            COLUMNS.df: res["df1"] + res["df2"],
            COLUMNS.ms: np.nan,
            COLUMNS.f: np.nan,
            COLUMNS.p_value: np.nan,
        },
    ]
    return pd.DataFrame.from_records(rows, columns=ANOVA_COLUMNS)
