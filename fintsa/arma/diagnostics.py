"""Residual diagnostics for fitted ARMA models.

A good model leaves residuals that behave as white noise. The Ljung-Box
test checks the first h residual autocorrelations jointly:

    Q = n (n + 2) * sum_{k=1}^{h} r_k^2 / (n - k)  ~  chi2(h - p - q)

H0: residuals are independently distributed. A high p-value means the model
captured the autocorrelation structure.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from fintsa.analysis.autocorrelation import AutocorrelationResult, analyze_autocorrelation
from fintsa.arma.arma_model import FittedARMAModel
from fintsa.constants import ARMA_LJUNG_BOX_LAGS_DEFAULT
from fintsa.exceptions import InsufficientDataError, InvalidInputError
from fintsa.utils import as_finite_array, chi2_sf, get_logger, validate_alpha

logger = get_logger(__name__)


@dataclass(frozen=True)
class LjungBoxResult:
    """Ljung-Box Q statistic with its chi-squared p-value."""

    statistic: float
    p_value: float
    lags: int
    df: int
    n: int

    def rejects_white_noise(self, alpha: float = 0.05) -> bool:
        """True when residual autocorrelation is significant at level alpha."""
        validate_alpha(alpha)
        return self.p_value < alpha


@dataclass(frozen=True)
class ResidualDiagnostics:
    """Residual ACF and Ljung-Box test of one fitted model."""

    model_name: str
    order: tuple[int, int, int]
    ljung_box: LjungBoxResult
    residual_acf: AutocorrelationResult


def ljung_box_test(
    residuals: pd.Series | np.ndarray,
    lags: int = ARMA_LJUNG_BOX_LAGS_DEFAULT,
    *,
    fitted_params: int = 0,
) -> LjungBoxResult:
    """Ljung-Box portmanteau test on a residual series.

    Args:
        residuals: Residual series.
        lags: Number of autocorrelations h included in Q.
        fitted_params: Number of estimated ARMA coefficients (p + q),
            subtracted from the degrees of freedom.

    Returns:
        LjungBoxResult.

    Raises:
        InvalidInputError: If lags < 1 or lags <= fitted_params.
        InsufficientDataError: If the series is not longer than lags.
    """
    if lags < 1:
        raise InvalidInputError(f"lags must be >= 1, got {lags}")
    if fitted_params < 0:
        raise InvalidInputError(f"fitted_params must be >= 0, got {fitted_params}")
    df = lags - fitted_params
    if df < 1:
        raise InvalidInputError(
            f"lags ({lags}) must exceed the number of fitted ARMA parameters ({fitted_params})"
        )

    x = as_finite_array(residuals)
    n = int(x.size)
    if n <= lags:
        raise InsufficientDataError(f"Ljung-Box with {lags} lags needs more than {lags} residuals, got {n}")

    acf = analyze_autocorrelation(x, max_lag=lags).acf
    k = np.arange(1, lags + 1)
    q_stat = float(n * (n + 2.0) * np.sum(acf[1:] ** 2 / (n - k)))
    return LjungBoxResult(
        statistic=q_stat,
        p_value=chi2_sf(q_stat, df),
        lags=int(lags),
        df=int(df),
        n=n,
    )


def diagnose_residuals(
    model: FittedARMAModel,
    *,
    lags: int = ARMA_LJUNG_BOX_LAGS_DEFAULT,
    acf_max_lag: int | None = None,
) -> ResidualDiagnostics:
    """Residual ACF plus Ljung-Box test with p + q degrees of freedom removed.

    Args:
        model: Fitted ARMA model.
        lags: Ljung-Box lags h.
        acf_max_lag: Lags of the residual ACF (None = default rule).

    Returns:
        ResidualDiagnostics.
    """
    lb = ljung_box_test(model.residuals, lags, fitted_params=model.n_arma_params)
    residual_acf = analyze_autocorrelation(model.residuals, max_lag=acf_max_lag)
    verdict = "autocorrelated" if lb.rejects_white_noise() else "white noise"
    logger.info(
        "%s residuals: Ljung-Box X-squared=%.4f, df=%d, p-value=%.4f (%s)",
        model.name,
        lb.statistic,
        lb.df,
        lb.p_value,
        verdict,
    )
    return ResidualDiagnostics(
        model_name=model.name,
        order=model.order,
        ljung_box=lb,
        residual_acf=residual_acf,
    )
