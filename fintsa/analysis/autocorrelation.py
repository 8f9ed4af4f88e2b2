"""Autocorrelation (ACF) and partial autocorrelation (PACF) of a series.

The ACF uses a mean-centered series with the biased denominator (sum of
squares over the full sample), the estimator used by most statistics
packages. The PACF is obtained from the ACF with the Durbin-Levinson
recursion. Plotting lives in ``fintsa.visualization``.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np
import pandas as pd

from fintsa.constants import ACF_CONFIDENCE_Z, ACF_MIN_OBSERVATIONS
from fintsa.exceptions import InvalidInputError
from fintsa.utils import as_finite_array, get_logger, validate_min_length

logger = get_logger(__name__)


@dataclass(frozen=True)
class AutocorrelationResult:
    """ACF (lags 0..max_lag), PACF (lags 1..max_lag) and the white-noise band."""

    acf: np.ndarray
    pacf: np.ndarray
    confidence_bound: float
    n: int
    max_lag: int

    def significant_acf_lags(self) -> list[int]:
        """Lags k >= 1 whose |ACF| exceeds the confidence bound."""
        return [k for k in range(1, self.max_lag + 1) if abs(self.acf[k]) > self.confidence_bound]

    def significant_pacf_lags(self) -> list[int]:
        """Lags k >= 1 whose |PACF| exceeds the confidence bound."""
        return [
            k for k in range(1, self.max_lag + 1) if abs(self.pacf[k - 1]) > self.confidence_bound
        ]


def default_max_lag(n: int) -> int:
    """Default lag count: floor(10 * log10(n)), bounded by n - 1."""
    if n < 2:
        return 0
    return max(1, min(int(math.floor(10.0 * math.log10(n))), n - 1))


def _resolve_max_lag(n: int, max_lag: int | None) -> int:
    if max_lag is None:
        return default_max_lag(n)
    if max_lag < 1:
        raise InvalidInputError(f"max_lag must be >= 1, got {max_lag}")
    if max_lag >= n:
        logger.warning(f"Series length ({n}) <= requested lags ({max_lag}). Using {n - 1}")
        return n - 1
    return int(max_lag)


def _centered(series: pd.Series | np.ndarray) -> np.ndarray:
    x = as_finite_array(series)
    validate_min_length(x, ACF_MIN_OBSERVATIONS, "Autocorrelation")
    xc = x - float(np.mean(x))
    if float(np.dot(xc, xc)) <= 0.0:
        raise InvalidInputError("Autocorrelation is undefined for a constant series")
    return xc


def _autocorr(xc: np.ndarray, max_lag: int) -> np.ndarray:
    """Return r_k for k = 0..max_lag of an already centered series."""
    denom = float(np.dot(xc, xc))
    r = np.empty(max_lag + 1, dtype=float)
    r[0] = 1.0
    for k in range(1, max_lag + 1):
        r[k] = float(np.dot(xc[k:], xc[:-k])) / denom
    return r


def pacf_from_autocorr(r: np.ndarray, max_lag: int) -> np.ndarray:
    """Durbin-Levinson recursion: PACF(1..max_lag) from r[0..max_lag].

    phi_kk = (r_k - sum_j phi_{k-1,j} r_{k-j}) / v_{k-1}, with
    v_k = 1 - sum_j phi_{k,j} r_j.
    """
    pacf = np.zeros(max_lag, dtype=float)
    phi = np.zeros(max_lag, dtype=float)
    v = 1.0
    for k in range(1, max_lag + 1):
        num = r[k] - float(np.dot(phi[: k - 1], r[1:k][::-1]))
        phi_kk = 0.0 if v <= 0.0 or not np.isfinite(v) else num / v
        phi[: k - 1] = phi[: k - 1] - phi_kk * phi[: k - 1][::-1]
        phi[k - 1] = phi_kk
        v = 1.0 - float(np.dot(phi[:k], r[1 : k + 1]))
        pacf[k - 1] = float(np.clip(phi_kk, -1.0, 1.0))
    return pacf


def compute_acf(series: pd.Series | np.ndarray, max_lag: int | None = None) -> np.ndarray:
    """Sample autocorrelation for lags 0..max_lag (lag 0 is 1.0).

    Raises:
        InsufficientDataError: If fewer than 2 observations.
        InvalidInputError: If the series is constant or max_lag < 1.
    """
    xc = _centered(series)
    return _autocorr(xc, _resolve_max_lag(xc.size, max_lag))


def compute_pacf(series: pd.Series | np.ndarray, max_lag: int | None = None) -> np.ndarray:
    """Sample partial autocorrelation for lags 1..max_lag."""
    xc = _centered(series)
    lags = _resolve_max_lag(xc.size, max_lag)
    return pacf_from_autocorr(_autocorr(xc, lags), lags)


def analyze_autocorrelation(
    series: pd.Series | np.ndarray,
    max_lag: int | None = None,
    *,
    z: float = ACF_CONFIDENCE_Z,
) -> AutocorrelationResult:
    """Compute ACF, PACF and the +-z/sqrt(n) significance band.

    Args:
        series: Input series (prices, returns or residuals).
        max_lag: Maximum lag; None uses ``default_max_lag``. Values >= n are
            clamped to n - 1.
        z: Normal quantile of the band (1.96 for 95%).

    Returns:
        AutocorrelationResult.
    """
    xc = _centered(series)
    lags = _resolve_max_lag(xc.size, max_lag)
    r = _autocorr(xc, lags)
    result = AutocorrelationResult(
        acf=r,
        pacf=pacf_from_autocorr(r, lags),
        confidence_bound=float(z / math.sqrt(xc.size)),
        n=int(xc.size),
        max_lag=lags,
    )
    logger.debug(
        "ACF/PACF up to lag %d: significant ACF lags %s",
        lags,
        result.significant_acf_lags(),
    )
    return result
