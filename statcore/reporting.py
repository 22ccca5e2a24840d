"""Format estimates and test results for human-readable reports.

This module is used after numerical analysis to give every printed estimate,
interval and test outcome the same presentation. Numeric results are never
modified; only strings are produced.
"""

from __future__ import annotations

import math
from typing import Tuple

from .schema import TestResult


def _round_standard_error(se: float) -> Tuple[float, int]:
    """Round a standard error to 1 significant figure (2 if it leads with 1).

    Args:
        se (float): Positive, finite standard error.

    Returns:
        tuple[float, int]: Rounded value and the number of decimal places
        used. The decimal count may be negative for errors of 10 or more.
    """
    se = abs(float(se))
    exponent = math.floor(math.log10(se))
    leading = se / (10**exponent)

    sig_figs = 2 if 1.0 <= leading < 2.0 else 1
    ndigits = sig_figs - 1 - exponent
    rounded = round(se, ndigits)

    if rounded == 0:
        ndigits = sig_figs - exponent
        rounded = round(se, ndigits)

    return float(rounded), int(ndigits)


def _format_number(x: float, ndigits: int) -> str:
    xr = round(float(x), ndigits)
    if ndigits > 0:
        return f"{xr:.{ndigits}f}"
    return f"{xr:.0f}"


def format_estimate(value: float, standard_error: float) -> str:
    """Format ``value ± standard_error`` at matching precision.

    Args:
        value (float): Point estimate.
        standard_error (float): Standard error of ``value``.

    Returns:
        str: For example ``"3.0 ± 0.6"``. When the standard error is zero or
        non-finite both numbers are printed with 6 significant figures.
    """
    se = float(standard_error)
    if not math.isfinite(se) or se == 0:
        return f"{value:.6g} ± {se:.6g}"
    rounded, ndigits = _round_standard_error(se)
    return f"{_format_number(value, ndigits)} ± {_format_number(rounded, ndigits)}"


def format_p_value(value: float) -> str:
    """Format p-values consistently for tables and annotations."""
    if not math.isfinite(value):
        return "NaN"
    if value < 1e-3:
        return "<0.001"
    return f"{value:.3f}"


def format_interval(interval: Tuple[float, float], digits: int = 3) -> str:
    low, high = interval
    return f"[{low:.{digits}f}, {high:.{digits}f}]"


def _format_df(df: float) -> str:
    if math.isinf(df):
        return "inf"
    if float(df).is_integer():
        return str(int(df))
    return f"{df:.2f}"


def format_test_result(result: TestResult, digits: int = 3) -> str:
    """Render a test result in the conventional ``stat(df) = value, p = ...`` form.

    Examples:
        ``"t(4) = -7.500, p = 0.002"``, ``"F(2, 6) = 0.000, p = 1.000"`` and
        ``"z = 1.960, p = 0.050"``. An attached confidence interval is appended
        as ``", CI [low, high]"``.
    """
    p_text = format_p_value(result.p_value)
    p_part = f"p < {p_text[1:]}" if p_text.startswith("<") else f"p = {p_text}"

    if result.method == "z":
        head = "z"
    else:
        dfs = ", ".join(_format_df(df) for df in result.degrees_of_freedom)
        head = f"{result.method}({dfs})"

    text = f"{head} = {result.statistic:.{digits}f}, {p_part}"
    if result.confidence_interval is not None:
        text += f", CI {format_interval(result.confidence_interval, digits)}"
    return text
