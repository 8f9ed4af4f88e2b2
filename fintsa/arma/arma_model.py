"""ARMA model creation and fitting.

ARMA(p, q) models with a constant are fitted by exact maximum likelihood
through the statsmodels state-space SARIMAX implementation. Only stationary
input is in scope, so the differencing order must be 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import warnings

import numpy as np
import pandas as pd
from statsmodels.tools.sm_exceptions import ConvergenceWarning
from statsmodels.tsa.statespace.sarimax import SARIMAX

from fintsa.constants import ARMA_DEFAULT_MAXITER, ARMA_DEFAULT_TREND, ARMA_MIN_OBSERVATIONS
from fintsa.exceptions import ConvergenceError, InvalidInputError
from fintsa.utils import (
    get_logger,
    suppress_statsmodels_warnings,
    validate_min_length,
    validate_series,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class FittedARMAModel:
    """Result of an ARMA fit.

    Attributes:
        order: (p, d, q) with d == 0.
        params: Estimated coefficients keyed by statsmodels name
            ("intercept", "ar.L1", "ma.L1", "sigma2", ...).
        residuals: One-step-ahead residuals aligned with the input index.
        log_likelihood: Maximized log-likelihood.
        aic: Akaike information criterion.
        bic: Bayesian information criterion.
        sigma2: Innovation variance.
        nobs: Number of observations used.
        converged: Optimizer convergence flag.
        results: Underlying statsmodels results (used for forecasting).
    """

    order: tuple[int, int, int]
    params: dict[str, float]
    residuals: pd.Series
    log_likelihood: float
    aic: float
    bic: float
    sigma2: float
    nobs: int
    converged: bool
    results: Any = field(repr=False, compare=False, default=None)

    @property
    def name(self) -> str:
        p, d, q = self.order
        return f"ARMA({p},{q})" if d == 0 else f"ARIMA({p},{d},{q})"

    @property
    def n_arma_params(self) -> int:
        """p + q, the degrees of freedom lost in residual tests."""
        return self.order[0] + self.order[2]

    @property
    def mean(self) -> float:
        """Unconditional mean implied by the intercept and AR coefficients."""
        intercept = self.params.get("intercept", 0.0)
        ar_sum = sum(v for k, v in self.params.items() if k.startswith("ar.L"))
        if np.isclose(ar_sum, 1.0):
            return float("nan")
        return float(intercept / (1.0 - ar_sum))


def _validate_order(order: tuple[int, int, int]) -> tuple[int, int, int]:
    """Check that order is (p, 0, q) with non-negative integers.

    Raises:
        InvalidInputError: If the order is malformed or d != 0.
    """
    if len(order) != 3:
        raise InvalidInputError(f"ARMA order must be a (p, d, q) tuple, got {order}")
    p, d, q = (int(v) for v in order)
    if p < 0 or q < 0 or d < 0:
        raise InvalidInputError(f"ARMA orders must be non-negative, got {order}")
    if d != 0:
        raise InvalidInputError(
            f"Only stationary ARMA models are supported (d must be 0), got {order}"
        )
    return p, d, q


def _create_and_fit_model(
    values: np.ndarray,
    order: tuple[int, int, int],
    trend: str,
    maxiter: int,
) -> Any:
    """Create and fit the SARIMAX model.

    Raises:
        ConvergenceError: If the optimizer raises during fitting.
    """
    with warnings.catch_warnings():
        suppress_statsmodels_warnings()
        warnings.simplefilter("ignore", ConvergenceWarning)
        try:
            model = SARIMAX(
                values,
                order=order,
                trend=trend,
                seasonal_order=(0, 0, 0, 0),
            )
            # disp=False suppresses L-BFGS-B optimization output
            return model.fit(disp=False, maxiter=maxiter)
        except Exception as e:
            msg = f"Failed to fit ARIMA{order} model: {e}"
            logger.error(msg)
            raise ConvergenceError(msg) from e


def _has_converged(results: Any) -> bool:
    retvals = getattr(results, "mle_retvals", None) or {}
    return bool(retvals.get("converged", True))


def fit_arma_model(
    series: pd.Series,
    order: tuple[int, int, int],
    *,
    maxiter: int = ARMA_DEFAULT_MAXITER,
    trend: str = ARMA_DEFAULT_TREND,
) -> FittedARMAModel:
    """Fit an ARMA(p, q) model with a constant by maximum likelihood.

    Args:
        series: Stationary series (typically log returns).
        order: ARIMA order (p, d, q); d must be 0.
        maxiter: Iteration cap for the likelihood optimizer.
        trend: Deterministic trend ("c" for a constant, "n" for none).

    Returns:
        FittedARMAModel.

    Raises:
        InvalidInputError: If the order is invalid or the series is malformed.
        InsufficientDataError: If fewer than p + q + 10 observations.
        ConvergenceError: If the optimizer fails or does not converge
            within ``maxiter`` iterations.
    """
    p, d, q = _validate_order(order)
    y = validate_series(series)
    validate_min_length(y, p + q + ARMA_MIN_OBSERVATIONS, f"ARMA({p},{q})")

    logger.info(f"Fitting ARIMA({p},{d},{q}) on {len(y)} observations")
    results = _create_and_fit_model(y.to_numpy(), (p, d, q), trend, maxiter)

    if not _has_converged(results):
        msg = f"ARIMA({p},{d},{q}) optimizer did not converge within {maxiter} iterations"
        logger.error(msg)
        raise ConvergenceError(msg)

    params = {
        str(name): float(value)
        for name, value in zip(results.model.param_names, np.asarray(results.params))
    }
    fitted = FittedARMAModel(
        order=(p, d, q),
        params=params,
        residuals=pd.Series(np.asarray(results.resid), index=y.index, name="residual"),
        log_likelihood=float(results.llf),
        aic=float(results.aic),
        bic=float(results.bic),
        sigma2=float(params.get("sigma2", np.nan)),
        nobs=int(results.nobs),
        converged=True,
        results=results,
    )
    logger.info(
        "%s fitted - log-likelihood: %.2f, AIC: %.2f, coefficients: %s",
        fitted.name,
        fitted.log_likelihood,
        fitted.aic,
        {k: round(v, 6) for k, v in params.items()},
    )
    return fitted
