"""Smoothing recursions for SES, Holt and Holt-Winters.

Every filter runs over a float array and returns the one-step-ahead
predictions, the terminal state and the sum of squared errors. Errors are
accumulated from the first time step that has a genuine prediction:
t = 1 for SES, t = 2 for Holt and t = period for Holt-Winters.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from fintsa.exceptions import InvalidInputError


class FilterResult(NamedTuple):
    """Output of a smoothing recursion."""

    fitted: np.ndarray
    level: float
    trend: float
    seasonal: np.ndarray
    sse: float


_EMPTY = np.empty(0, dtype=float)


def ses_filter(y: np.ndarray, alpha: float) -> FilterResult:
    """Simple exponential smoothing with initial level y[0]."""
    n = y.size
    fitted = np.full(n, np.nan)
    level = float(y[0])
    sse = 0.0
    for t in range(1, n):
        fitted[t] = level
        err = y[t] - level
        sse += err * err
        level = alpha * y[t] + (1.0 - alpha) * level
    return FilterResult(fitted, level, 0.0, _EMPTY, float(sse))


def holt_filter(y: np.ndarray, alpha: float, beta: float) -> FilterResult:
    """Holt's method with level y[1] and trend y[1] - y[0] at t = 1."""
    n = y.size
    fitted = np.full(n, np.nan)
    level = float(y[1])
    trend = float(y[1] - y[0])
    sse = 0.0
    for t in range(2, n):
        pred = level + trend
        fitted[t] = pred
        err = y[t] - pred
        sse += err * err
        prev_level = level
        level = alpha * y[t] + (1.0 - alpha) * (level + trend)
        trend = beta * (level - prev_level) + (1.0 - beta) * trend
    return FilterResult(fitted, level, trend, _EMPTY, float(sse))


def initial_seasonal_state(
    y: np.ndarray, period: int, seasonal_mode: str
) -> tuple[float, float, np.ndarray]:
    """Initial level, trend and seasonal indices from the first two seasons.

    level = mean of season 1, trend = (mean season 2 - mean season 1) / m,
    seasonal indices = season-1 ratios (multiplicative) or differences
    (additive) to that level.
    """
    first = y[:period]
    second = y[period : 2 * period]
    level = float(np.mean(first))
    trend = float((np.mean(second) - level) / period)
    if seasonal_mode == "multiplicative":
        seasonal = first / level
    else:
        seasonal = first - level
    return level, trend, np.asarray(seasonal, dtype=float)


def holt_winters_filter(
    y: np.ndarray,
    alpha: float,
    beta: float,
    gamma: float,
    period: int,
    seasonal_mode: str,
) -> FilterResult:
    """Holt-Winters recursion with additive or multiplicative seasonality."""
    if seasonal_mode not in ("additive", "multiplicative"):
        raise InvalidInputError(f"Unknown seasonal mode: {seasonal_mode!r}")
    multiplicative = seasonal_mode == "multiplicative"

    n = y.size
    fitted = np.full(n, np.nan)
    level, trend, init_seasonal = initial_seasonal_state(y, period, seasonal_mode)
    seasonal = np.empty(n, dtype=float)
    seasonal[:period] = init_seasonal
    sse = 0.0

    for t in range(period, n):
        s_prev = seasonal[t - period]
        if multiplicative:
            pred = (level + trend) * s_prev
            new_level = alpha * (y[t] / s_prev) + (1.0 - alpha) * (level + trend)
        else:
            pred = level + trend + s_prev
            new_level = alpha * (y[t] - s_prev) + (1.0 - alpha) * (level + trend)
        fitted[t] = pred
        err = y[t] - pred
        sse += err * err

        trend = beta * (new_level - level) + (1.0 - beta) * trend
        level = new_level
        if multiplicative:
            seasonal[t] = gamma * (y[t] / level) + (1.0 - gamma) * s_prev
        else:
            seasonal[t] = gamma * (y[t] - level) + (1.0 - gamma) * s_prev

    return FilterResult(fitted, level, trend, seasonal[n - period :].copy(), float(sse))
