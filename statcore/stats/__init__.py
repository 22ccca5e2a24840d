"""
Numerical core of statcore.

This subpackage provides the statistical routines themselves. All functions
operate on plain numeric sequences and numpy arrays and return scalars,
intervals, or result records; no pandas or presentation logic is included.

Modules:
    descriptive:
        Mean, median, population variance and standard deviation, skewness,
        nearest-rank quantiles, equal-width binning, empirical CDF and PMF.

    correlation:
        Population covariance, Pearson correlation, Fisher z-transform, and
        confidence intervals and significance tests for r.

    regression:
        Simple and normal-equation OLS fits, predictions, residuals, R^2 and
        adjusted R^2.

    hypothesis:
        Standard errors, z/t-tests, one-way ANOVA, Bonferroni correction and
        Cohen's d.

    resampling:
        Bootstrap sampling distributions with an explicit random source.

Design Principle:
    Data flows strictly upward: regression and hypothesis build on
    correlation and descriptive, and nothing here holds state between calls.
"""

from .correlation import (
    correlation,
    correlation_confidence_interval,
    correlation_interval_from_r,
    correlation_significance_test,
    covariance,
    fisher_z,
    fisher_z_inverse,
)
from .descriptive import (
    bin,
    describe,
    empirical_cdf,
    mean,
    median,
    pmf,
    quantile,
    skewness,
    std_dev,
    variance,
)
from .hypothesis import (
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
from .regression import (
    add_bias_column,
    adjusted_r_squared,
    fitted_values,
    multiple_fit,
    predict,
    r_squared,
    residuals,
    simple_fit,
    simple_regression_summary,
)
from .resampling import (
    bootstrap,
    bootstrap_confidence_interval,
    bootstrap_standard_error,
    bootstrap_summary,
)

__all__ = [
    # Descriptive
    "mean",
    "median",
    "variance",
    "std_dev",
    "skewness",
    "quantile",
    "bin",
    "empirical_cdf",
    "pmf",
    "describe",
    # Covariance / correlation
    "covariance",
    "correlation",
    "fisher_z",
    "fisher_z_inverse",
    "correlation_interval_from_r",
    "correlation_confidence_interval",
    "correlation_significance_test",
    # Regression
    "add_bias_column",
    "simple_fit",
    "multiple_fit",
    "predict",
    "fitted_values",
    "residuals",
    "r_squared",
    "adjusted_r_squared",
    "simple_regression_summary",
    # Hypothesis testing
    "standard_error",
    "confidence_interval",
    "pooled_standard_error",
    "two_sample_statistic",
    "two_sample_z_test",
    "two_sample_t_test",
    "one_sample_t_test",
    "one_way_anova",
    "one_way_f_test",
    "bonferroni_adjusted_alpha",
    "cohens_d",
    # Resampling
    "bootstrap",
    "bootstrap_confidence_interval",
    "bootstrap_standard_error",
    "bootstrap_summary",
]
