"""Typed failures raised by the statistical engine.

Every error derives from :class:`StatsError`, which is itself a
``ValueError``, so callers can catch a precise kind, the package base, or the
builtin they already handle.
"""

from __future__ import annotations


class StatsError(ValueError):
    """Base class for all computation errors raised by statcore."""


class EmptyInputError(StatsError):
    """An operation required at least one observation and received none."""


class InsufficientSampleError(StatsError):
    """Sample size too small for the degrees of freedom a statistic needs."""


class SizeMismatchError(StatsError):
    """Paired inputs (or a matrix and its response) differ in length."""


class DegenerateRangeError(StatsError):
    """Zero range or variance where division by spread is required."""


class UndefinedStatisticError(StatsError):
    """A statistic is mathematically undefined for the given input."""


class SingularDesignError(StatsError):
    """The normal-equation matrix X^T X is not invertible."""


class InvalidProbabilityError(StatsError):
    """A confidence level, alpha, or quantile lies outside its valid range."""


__all__ = [
    "StatsError",
    "EmptyInputError",
    "InsufficientSampleError",
    "SizeMismatchError",
    "DegenerateRangeError",
    "UndefinedStatisticError",
    "SingularDesignError",
    "InvalidProbabilityError",
]
