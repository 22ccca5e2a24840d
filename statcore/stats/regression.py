"""Provide ordinary least-squares regression on samples and design matrices.

This module supports:
- simple (one-predictor) fits from covariance and variance,
- multiple fits from the normal equation ``beta = (X^T X)^-1 X^T y``, and
- goodness-of-fit measures (residuals, R^2, adjusted R^2) for either.

A model fit on a design matrix expects the same column layout at prediction
time. The bias column is never added implicitly; use :func:`add_bias_column`
when an intercept is wanted. A :func:`simple_fit` model uses the layout
``[1, x]``.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Sequence

import numpy as np
from scipy import stats as scipy_stats

from statcore.config import CONDITION_WARNING_THRESHOLD
from statcore.errors import (
    DegenerateRangeError,
    InsufficientSampleError,
    SingularDesignError,
    SizeMismatchError,
    UndefinedStatisticError,
)
from statcore.schema import FittedModel
from statcore.stats._validation import as_design, as_paired
from statcore.stats.correlation import covariance
from statcore.stats.descriptive import mean, variance

logger = logging.getLogger(__name__)


def add_bias_column(X: Sequence) -> np.ndarray:
    """Prepend a column of ones to ``X``.

    Args:
        X: A 1-D sample (treated as a single feature column) or a 2-D
            ``(n, p)`` matrix.

    Returns:
        numpy.ndarray: An ``(n, p + 1)`` matrix whose first column is ones.
    """
    arr = np.asarray(X, dtype=float)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 1-D or 2-D input, got shape {arr.shape}.")
    return np.hstack([np.ones((arr.shape[0], 1)), arr])


def simple_fit(x: Sequence[float], y: Sequence[float]) -> FittedModel:
    """Fit ``y = a + b * x`` with ``b = cov(x, y) / var(x)``, ``a = ybar - b * xbar``.

    Returns:
        FittedModel: Coefficients ``[a, b]`` for the design row ``[1, x]``.

    Raises:
        SizeMismatchError: If ``x`` and ``y`` differ in length.
        DegenerateRangeError: If ``x`` has zero variance.
    """
    x_arr, y_arr = as_paired(x, y)
    var_x = variance(x_arr)
    if var_x == 0:
        raise DegenerateRangeError("Cannot fit a slope when x has zero variance.")
    slope = covariance(x_arr, y_arr) / var_x
    intercept = mean(y_arr) - slope * mean(x_arr)
    return FittedModel(coefficients=np.array([intercept, slope]), n=len(x_arr), p=2)


def multiple_fit(X: Sequence[Sequence[float]], y: Sequence[float]) -> FittedModel:
    """Fit OLS coefficients by solving the normal equation.

    Args:
        X: ``(n, p)`` design matrix. Include a column of ones for an
            intercept; none is added here.
        y: Response of length ``n``.

    Returns:
        FittedModel: One coefficient per column of ``X``.

    Raises:
        SingularDesignError: If ``p > n`` or the columns of ``X`` are
            linearly dependent, so that ``X^T X`` has no inverse.
    """
    X_arr, y_arr = as_design(X, y)
    n, p = X_arr.shape
    if p > n:
        raise SingularDesignError(
            f"Design has more columns ({p}) than observations ({n})."
        )
    xtx = X_arr.T @ X_arr
    rank = int(np.linalg.matrix_rank(X_arr))
    logger.debug("Normal-equation fit: n=%d, p=%d, rank=%d", n, p, rank)
    if rank < p:
        raise SingularDesignError(
            f"X^T X is singular: design rank {rank} is below column count {p}."
        )
    cond = float(np.linalg.cond(xtx))
    if cond > CONDITION_WARNING_THRESHOLD:
        logger.warning("X^T X is ill-conditioned (condition number %.3g)", cond)
    try:
        beta = np.linalg.solve(xtx, X_arr.T @ y_arr)
    except np.linalg.LinAlgError as exc:
        raise SingularDesignError(f"X^T X could not be inverted: {exc}") from exc
    return FittedModel(coefficients=beta, n=n, p=p)


def _check_columns(model: FittedModel, X_arr: np.ndarray) -> None:
    if X_arr.shape[1] != model.p:
        raise SizeMismatchError(
            f"Model has {model.p} coefficients but rows have {X_arr.shape[1]} columns."
        )


def predict(model: FittedModel, x_row: Sequence[float]) -> float:
    """Return the dot product of the coefficients with a length-``p`` row."""
    row = np.asarray(x_row, dtype=float).ravel()
    if len(row) != model.p:
        raise SizeMismatchError(
            f"Model has {model.p} coefficients but the row has {len(row)} values."
        )
    return float(row @ model.coefficients)


def fitted_values(model: FittedModel, X: Sequence[Sequence[float]]) -> np.ndarray:
    X_arr = np.asarray(X, dtype=float)
    if X_arr.ndim != 2:
        raise ValueError(f"Design matrix must be two-dimensional, got shape {X_arr.shape}.")
    _check_columns(model, X_arr)
    return X_arr @ model.coefficients


def residuals(
    model: FittedModel, X: Sequence[Sequence[float]], y: Sequence[float]
) -> np.ndarray:
    """Return ``y - X @ coefficients`` for every row."""
    X_arr, y_arr = as_design(X, y)
    _check_columns(model, X_arr)
    return y_arr - X_arr @ model.coefficients


def r_squared(
    model: FittedModel, X: Sequence[Sequence[float]], y: Sequence[float]
) -> float:
    """Return ``1 - RSS / TSS`` with ``TSS = sum((y - ybar)^2)``.

    Raises:
        UndefinedStatisticError: If ``y`` is constant (``TSS == 0``).
    """
    X_arr, y_arr = as_design(X, y)
    if variance(y_arr) == 0:
        raise UndefinedStatisticError("R^2 is undefined when y has zero variance.")
    resid = residuals(model, X_arr, y_arr)
    rss = float(np.sum(resid**2))
    tss = float(np.sum((y_arr - np.mean(y_arr)) ** 2))
    return 1.0 - rss / tss


def adjusted_r_squared(
    model: FittedModel, X: Sequence[Sequence[float]], y: Sequence[float]
) -> float:
    """Return ``1 - (1 - R^2) * (n - 1) / (n - p - 1)``.

    Raises:
        InsufficientSampleError: If ``n - p - 1 <= 0``.
    """
    X_arr, y_arr = as_design(X, y)
    n = len(y_arr)
    dof = n - model.p - 1
    if dof <= 0:
        raise InsufficientSampleError(
            f"Adjusted R^2 needs n - p - 1 > 0, got n={n}, p={model.p}."
        )
    r2 = r_squared(model, X_arr, y_arr)
    return 1.0 - (1.0 - r2) * (n - 1) / dof


def simple_regression_summary(
    x: Sequence[float], y: Sequence[float], min_points: int = 3
) -> Dict[str, float]:
    """Fit a straight line and report inferential diagnostics.

    Args:
        x (Sequence[float]): Predictor values.
        y (Sequence[float]): Response values paired with ``x``.
        min_points (int, optional): Minimum number of pairs required.
            Defaults to ``3`` so that the residual degrees of freedom are
            positive.

    Returns:
        dict[str, float]: Regression diagnostics with keys ``m`` (slope),
        ``b`` (intercept), ``r2``, ``se_m``, ``se_b``, ``ci95_m``, ``ci95_b``
        (95% half-widths), ``p_m`` (two-tailed p-value for the slope),
        ``n``, ``dof`` and ``mse``.

    Raises:
        InsufficientSampleError: If fewer than ``min_points`` pairs are given.
        DegenerateRangeError: If ``x`` has zero variance.
        UndefinedStatisticError: If ``y`` has zero variance.

    Note:
        Slope and intercept standard errors use the residual mean square with
        ``n - 2`` degrees of freedom. With a
        perfect fit the standard errors are zero, the slope statistic is
        infinite, and ``p_m`` is ``0``.
    """
    x_arr, y_arr = as_paired(x, y)
    n = int(len(x_arr))
    if n < max(min_points, 3):
        raise InsufficientSampleError(
            f"Regression summary needs at least {max(min_points, 3)} points, got {n}."
        )

    model = simple_fit(x_arr, y_arr)
    b, m = (float(c) for c in model.coefficients)
    design = add_bias_column(x_arr)
    resid = residuals(model, design, y_arr)

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - np.mean(y_arr)) ** 2))
    if sst <= 0:
        raise UndefinedStatisticError("Insufficient variance in y for regression.")
    r2 = 1.0 - sse / sst

    dof = n - 2
    xbar = float(np.mean(x_arr))
    ssxx = float(np.sum((x_arr - xbar) ** 2))
    mse = sse / dof

    se_m = math.sqrt(mse / ssxx)
    se_b = math.sqrt(mse * (1.0 / n + (xbar**2) / ssxx))
    t_crit = float(scipy_stats.t.ppf(0.975, dof))
    if se_m > 0:
        p_m = float(2.0 * scipy_stats.t.sf(abs(m / se_m), dof))
    else:
        p_m = 0.0

    return {
        "m": m,
        "b": b,
        "r2": float(r2),
        "se_m": se_m,
        "se_b": se_b,
        "ci95_m": t_crit * se_m,
        "ci95_b": t_crit * se_b,
        "p_m": p_m,
        "n": n,
        "dof": dof,
        "mse": mse,
    }
