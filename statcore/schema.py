"""Define result records and standardized column names for result tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class FittedModel:
    """Container for an ordinary least-squares fit.

    Attributes:
        coefficients: One coefficient per design-matrix column. For a fit that
            included a bias column in position 0, ``coefficients[0]`` is the
            intercept.
        n: Number of observations (rows) the model was fit on.
        p: Number of design-matrix columns, bias column included.
    """

    coefficients: np.ndarray
    n: int
    p: int

    def __post_init__(self) -> None:
        coef = np.array(self.coefficients, dtype=float)
        coef.setflags(write=False)
        object.__setattr__(self, "coefficients", coef)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FittedModel):
            return NotImplemented
        return (
            self.n == other.n
            and self.p == other.p
            and np.array_equal(self.coefficients, other.coefficients)
        )

    def __hash__(self) -> int:
        return hash((tuple(self.coefficients.tolist()), self.n, self.p))


@dataclass(frozen=True)
class TestResult:
    """Container for a hypothesis test outcome.

    Attributes:
        statistic: Value of the test statistic (z, t, or F).
        degrees_of_freedom: One entry for z/t tests (``inf`` for the normal
            reference), two for F-tests.
        p_value: Probability in ``[0, 1]`` under the null hypothesis.
        confidence_interval: Optional ``(low, high)`` interval for the
            estimated quantity.
        method: Short label of the reference distribution, one of ``"z"``,
            ``"t"`` or ``"F"``.
    """

    __test__ = False

    statistic: float
    degrees_of_freedom: Tuple[float, ...]
    p_value: float
    confidence_interval: Optional[Tuple[float, float]] = None
    method: str = "t"

    def is_significant(self, alpha: float) -> bool:
        return self.p_value < alpha


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    These column names are used in all DataFrames produced by
    :mod:`statcore.analysis`, so summary, comparison and ANOVA tables can be
    joined or rendered without renaming.
    """

    group: str = "Group"
    group_a: str = "Group A"
    group_b: str = "Group B"
    n: str = "n"
    mean: str = "Mean"
    median: str = "Median"
    std_dev: str = "Std Dev"
    standard_error: str = "Standard Error"
    ci_low: str = "CI Low"
    ci_high: str = "CI High"
    statistic: str = "t"
    df: str = "df"
    p_value: str = "p-value"
    adjusted_alpha: str = "Adjusted Alpha"
    significant: str = "Significant"
    effect_size: str = "Cohen's d"
    source: str = "Source"
    ss: str = "SS"
    ms: str = "MS"
    f: str = "F"


COLUMNS = ResultColumns()
