"""
A Python package of formula-exact statistical computations.

Computes descriptive statistics, covariance and correlation, least-squares
regression, hypothesis tests and bootstrap distributions over plain numeric
sequences, and arranges grouped comparisons into pandas tables.

Modules:
    - stats: Numerical core (descriptive, correlation, regression,
      hypothesis, resampling).
    - grouping: Combinators applying flat-sample statistics across groups.
    - analysis: pandas tables for grouped summaries, pairwise tests and ANOVA.
    - reporting: String formatting of estimates, intervals and test results.
    - errors: Typed computation errors.
"""

__version__ = "1.0.0"

from .analysis import anova_table, pairwise_t_tests, summarize_groups
from .config import configure_logging
from .errors import (
    DegenerateRangeError,
    EmptyInputError,
    InsufficientSampleError,
    InvalidProbabilityError,
    SingularDesignError,
    SizeMismatchError,
    StatsError,
    UndefinedStatisticError,
)
from .grouping import map_groups, pairwise_comparisons
from .reporting import (
    format_estimate,
    format_interval,
    format_p_value,
    format_test_result,
)
from .schema import FittedModel, TestResult
from .stats import (
    add_bias_column,
    adjusted_r_squared,
    bin,
    bonferroni_adjusted_alpha,
    bootstrap,
    bootstrap_confidence_interval,
    bootstrap_standard_error,
    bootstrap_summary,
    cohens_d,
    confidence_interval,
    correlation,
    correlation_confidence_interval,
    correlation_interval_from_r,
    correlation_significance_test,
    covariance,
    describe,
    empirical_cdf,
    fisher_z,
    fisher_z_inverse,
    fitted_values,
    mean,
    median,
    multiple_fit,
    one_sample_t_test,
    one_way_anova,
    one_way_f_test,
    pmf,
    pooled_standard_error,
    predict,
    quantile,
    r_squared,
    residuals,
    simple_fit,
    simple_regression_summary,
    skewness,
    standard_error,
    std_dev,
    two_sample_statistic,
    two_sample_t_test,
    two_sample_z_test,
    variance,
)

__all__ = [
    # Records
    "FittedModel",
    "TestResult",
    # Errors
    "StatsError",
    "EmptyInputError",
    "InsufficientSampleError",
    "SizeMismatchError",
    "DegenerateRangeError",
    "UndefinedStatisticError",
    "SingularDesignError",
    "InvalidProbabilityError",
    # Grouping
    "map_groups",
    "pairwise_comparisons",
    # Analysis tables
    "summarize_groups",
    "pairwise_t_tests",
    "anova_table",
    # Reporting
    "format_estimate",
    "format_interval",
    "format_p_value",
    "format_test_result",
    # Configuration
    "configure_logging",
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
