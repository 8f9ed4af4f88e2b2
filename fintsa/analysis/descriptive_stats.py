"""Descriptive statistics and Jarque-Bera normality test for return series.

Skewness and kurtosis are the third and fourth standardized central moments
(divisor n). Kurtosis is raw, so a normal sample has kurtosis close to 3.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from fintsa.constants import (
    JARQUE_BERA_DF,
    JARQUE_BERA_LOW_POWER_THRESHOLD,
    NORMAL_KURTOSIS,
    STATS_MIN_OBSERVATIONS,
)
from fintsa.exceptions import InvalidInputError
from fintsa.utils import (
    as_finite_array,
    central_moment,
    chi2_sf,
    get_logger,
    validate_alpha,
    validate_min_length,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class DescriptiveStats:
    """Snapshot of the moments of a return series."""

    n: int
    mean: float
    std: float
    std_population: float
    skewness: float
    kurtosis: float
    minimum: float
    maximum: float

    @property
    def excess_kurtosis(self) -> float:
        """Kurtosis minus 3 (0 for a normal distribution)."""
        return self.kurtosis - NORMAL_KURTOSIS


@dataclass(frozen=True)
class JarqueBeraResult:
    """Jarque-Bera statistic with its chi-squared(2) p-value."""

    statistic: float
    p_value: float
    n: int
    skewness: float
    kurtosis: float

    def is_normal(self, alpha: float = 0.05) -> bool:
        """True when normality is not rejected at level alpha."""
        validate_alpha(alpha)
        return self.p_value > alpha


def _standardized_moments(x: np.ndarray) -> tuple[float, float]:
    m2 = central_moment(x, 2)
    if m2 <= 0.0:
        raise InvalidInputError("Series has zero variance; skewness and kurtosis are undefined")
    skewness = central_moment(x, 3) / m2**1.5
    kurtosis = central_moment(x, 4) / m2**2
    return float(skewness), float(kurtosis)


def compute_descriptive_stats(returns: pd.Series | np.ndarray) -> DescriptiveStats:
    """Compute mean, standard deviations, skewness, raw kurtosis and range.

    Args:
        returns: ReturnSeries (or any numeric sample).

    Returns:
        DescriptiveStats. ``std`` is the sample standard deviation (ddof=1),
        ``std_population`` uses ddof=0.

    Raises:
        InsufficientDataError: If fewer than 2 observations.
        InvalidInputError: If the sample has zero variance or missing values.
    """
    x = as_finite_array(returns)
    validate_min_length(x, STATS_MIN_OBSERVATIONS, "Descriptive statistics")
    skewness, kurtosis = _standardized_moments(x)

    stats = DescriptiveStats(
        n=int(x.size),
        mean=float(np.mean(x)),
        std=float(np.std(x, ddof=1)),
        std_population=float(np.std(x, ddof=0)),
        skewness=skewness,
        kurtosis=kurtosis,
        minimum=float(np.min(x)),
        maximum=float(np.max(x)),
    )
    logger.info(
        "Descriptive stats: n=%d, mean=%.6f, sd=%.6f, skew=%.4f, kurtosis=%.4f",
        stats.n,
        stats.mean,
        stats.std,
        stats.skewness,
        stats.kurtosis,
    )
    return stats


def jarque_bera_statistic(n: int, skewness: float, kurtosis: float) -> float:
    """JB = n/6 * (S^2 + (K - 3)^2 / 4) with raw kurtosis K."""
    return float(n / 6.0 * (skewness**2 + (kurtosis - NORMAL_KURTOSIS) ** 2 / 4.0))


def jarque_bera_test(returns: pd.Series | np.ndarray) -> JarqueBeraResult:
    """Jarque-Bera test for normality.

    H0: the sample moments match a normal distribution (S = 0, K = 3).

    Args:
        returns: ReturnSeries.

    Returns:
        JarqueBeraResult with the statistic and chi-squared(2) p-value.

    Raises:
        InsufficientDataError: If fewer than 2 observations.
        InvalidInputError: If the sample has zero variance.

    Note:
        The test is asymptotic; below ~30 observations its power is poor
        and a warning is logged.
    """
    x = as_finite_array(returns)
    validate_min_length(x, STATS_MIN_OBSERVATIONS, "Jarque-Bera test")
    if x.size < JARQUE_BERA_LOW_POWER_THRESHOLD:
        logger.warning(
            "Jarque-Bera on %d observations has low power (< %d)",
            x.size,
            JARQUE_BERA_LOW_POWER_THRESHOLD,
        )

    skewness, kurtosis = _standardized_moments(x)
    statistic = jarque_bera_statistic(int(x.size), skewness, kurtosis)
    result = JarqueBeraResult(
        statistic=statistic,
        p_value=chi2_sf(statistic, JARQUE_BERA_DF),
        n=int(x.size),
        skewness=skewness,
        kurtosis=kurtosis,
    )
    logger.info("Jarque-Bera: X-squared=%.4f, df=2, p-value=%.4g", result.statistic, result.p_value)
    return result
