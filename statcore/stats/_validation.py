"""Coerce inbound sequences into validated numpy arrays."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from statcore.errors import (
    EmptyInputError,
    InvalidProbabilityError,
    SizeMismatchError,
)


def as_sample(xs: Sequence[float], name: str = "sample") -> np.ndarray:
    """Return ``xs`` as a non-empty, finite, one-dimensional float array.

    Args:
        xs (Sequence[float]): Observations in any array-like form.
        name (str): Label used in error messages.

    Returns:
        numpy.ndarray: A fresh float array; the caller's data is never aliased.

    Raises:
        EmptyInputError: If ``xs`` has no observations.
        ValueError: If ``xs`` is not one-dimensional or holds NaN/inf.
    """
    arr = np.array(xs, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}.")
    if arr.size == 0:
        raise EmptyInputError(f"{name} must contain at least one observation.")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values.")
    return arr


def as_paired(
    x: Sequence[float], y: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(x, y)`` as validated samples of equal length."""
    x_arr = as_sample(x, "x")
    y_arr = as_sample(y, "y")
    if len(x_arr) != len(y_arr):
        raise SizeMismatchError(
            f"Paired samples must have equal length, got {len(x_arr)} and {len(y_arr)}."
        )
    return x_arr, y_arr


def as_design(
    X: Sequence[Sequence[float]], y: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray]:
    """Return a validated ``(n, p)`` design matrix and its length-``n`` response."""
    X_arr = np.array(X, dtype=float)
    if X_arr.ndim != 2:
        raise ValueError(f"Design matrix must be two-dimensional, got shape {X_arr.shape}.")
    if X_arr.shape[0] == 0 or X_arr.shape[1] == 0:
        raise EmptyInputError("Design matrix must have at least one row and column.")
    if not np.all(np.isfinite(X_arr)):
        raise ValueError("Design matrix contains non-finite values.")
    y_arr = as_sample(y, "y")
    if X_arr.shape[0] != len(y_arr):
        raise SizeMismatchError(
            f"Design matrix has {X_arr.shape[0]} rows but y has {len(y_arr)} values."
        )
    return X_arr, y_arr


def check_probability(value: float, name: str = "Confidence level") -> float:
    """Return ``value`` as a float, requiring it to lie strictly in (0, 1)."""
    p = float(value)
    if not math.isfinite(p) or not 0.0 < p < 1.0:
        raise InvalidProbabilityError(f"{name} must lie in (0, 1), got {value!r}.")
    return p
