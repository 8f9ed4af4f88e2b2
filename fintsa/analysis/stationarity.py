"""Stationarity checks for time series (ADF + KPSS).

Prices of a stock behave like a random walk (unit root); their log returns
should pass both tests. This module runs ADF and KPSS on a pandas Series and
combines the results into a single verdict.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal, TypedDict
import warnings

import numpy as np
import pandas as pd
from statsmodels.tools.sm_exceptions import InterpolationWarning
from statsmodels.tsa.stattools import adfuller, kpss

from fintsa.constants import STATIONARITY_DEFAULT_ALPHA
from fintsa.utils import get_logger, validate_alpha, validate_series

logger = get_logger(__name__)


class StationarityTestResult(TypedDict):
    """Typed structure for a single stationarity test result."""

    statistic: float
    p_value: float
    lags: int | None
    nobs: int | None
    critical_values: dict[str, float] | None


@dataclass(frozen=True)
class StationarityReport:
    """Combined ADF + KPSS stationarity report."""

    stationary: bool
    alpha: float
    adf: StationarityTestResult
    kpss: StationarityTestResult

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _convert_test_result(
    stat: float,
    pval: float,
    lags: int | None,
    nobs: int | None,
    crit: dict[str, float] | None,
) -> StationarityTestResult:
    """Convert raw test outputs to a StationarityTestResult mapping."""
    return {
        "statistic": float(stat),
        "p_value": float(pval),
        "lags": int(lags) if lags is not None else None,
        "nobs": int(nobs) if nobs is not None else None,
        "critical_values": (
            {str(k): float(v) for k, v in crit.items()} if crit is not None else None
        ),
    }


def adf_test(series: pd.Series, *, autolag: str = "AIC") -> StationarityTestResult:
    """Run Augmented Dickey-Fuller test (H0: unit root).

    The number of lags is selected by the given criterion (default: AIC).

    Args:
        series: Input time series.
        autolag: Criterion for lag selection ("AIC", "BIC" or "t-stat").

    Returns:
        StationarityTestResult with statistic, p-value, lags, nobs, and
        critical values.
    """
    s = validate_series(series)
    result = adfuller(s, autolag=autolag)
    stat, pval, lags, nobs, crit = result[0], result[1], result[2], result[3], result[4]
    lags_int = int(lags) if isinstance(lags, (int, np.integer)) else None
    nobs_int = int(nobs) if isinstance(nobs, (int, np.integer)) else None
    crit_dict = {str(k): float(v) for k, v in crit.items()} if isinstance(crit, dict) else None
    return _convert_test_result(float(stat), float(pval), lags_int, nobs_int, crit_dict)


def kpss_test(
    series: pd.Series,
    *,
    regression: Literal["c", "ct"] = "c",
) -> StationarityTestResult:
    """Run KPSS test for (trend-)stationarity (H0: stationary).

    KPSS p-values are interpolated from a table bounded to [0.01, 0.1];
    the interpolation warning is silenced.

    Args:
        series: Input time series.
        regression: "c" (level) or "ct" (trend).

    Returns:
        StationarityTestResult with statistic, p-value, lags (Newey-West
        bandwidth), nobs and critical values.
    """
    s = validate_series(series)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=InterpolationWarning)
        stat, pval, lags, crit = kpss(s, regression=regression, nlags="auto")
    return _convert_test_result(stat, pval, lags, s.size, crit)


def _determine_stationarity(
    adf_res: StationarityTestResult,
    kpss_res: StationarityTestResult,
    alpha: float,
) -> bool:
    """ADF p < alpha (reject unit root) and KPSS p > alpha ⇒ stationary."""
    adf_rejects_unit_root = adf_res["p_value"] < alpha
    kpss_p = kpss_res["p_value"]
    kpss_accepts_stationarity = np.isnan(kpss_p) or kpss_p > alpha
    return bool(adf_rejects_unit_root and kpss_accepts_stationarity)


def evaluate_stationarity(
    series: pd.Series,
    *,
    alpha: float = STATIONARITY_DEFAULT_ALPHA,
) -> StationarityReport:
    """Combine ADF and KPSS into a single verdict.

    Args:
        series: Input time series.
        alpha: Significance level (must be between 0 and 1).

    Returns:
        StationarityReport with combined verdict and test results.

    Raises:
        ValueError: If alpha is not in (0, 1).
    """
    validate_alpha(alpha)
    adf_res = adf_test(series)
    kpss_res = kpss_test(series)
    report = StationarityReport(
        stationary=_determine_stationarity(adf_res, kpss_res, alpha),
        alpha=float(alpha),
        adf=adf_res,
        kpss=kpss_res,
    )
    logger.info(
        "Stationarity of %s: %s (ADF p=%.4f, KPSS p=%.4f)",
        getattr(series, "name", None) or "series",
        report.stationary,
        adf_res["p_value"],
        kpss_res["p_value"],
    )
    return report
