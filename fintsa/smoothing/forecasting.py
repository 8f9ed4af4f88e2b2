"""Forecasts from fitted exponential smoothing models.

Prediction intervals assume Gaussian one-step errors with variance
``sse / n_scored``. The k-step variance is ``sigma2 * (1 + sum_{j<k} psi_j^2)``
with ``psi_j = alpha (1 + j beta) + gamma (1 - alpha) [j mod m == 0]``
(beta and gamma are 0 for the models that lack them). Multiplicative
Holt-Winters reuses the additive multipliers.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from scipy import stats

from fintsa.exceptions import InvalidInputError
from fintsa.forecast import Forecast, future_index, validate_horizon
from fintsa.smoothing.models import (
    ExponentialSmoothingModel,
    HoltModel,
    HoltWintersModel,
    SESModel,
)
from fintsa.utils import get_logger, validate_alpha

logger = get_logger(__name__)


def _point_forecasts(model: ExponentialSmoothingModel, horizon: int) -> np.ndarray:
    steps = np.arange(1, horizon + 1, dtype=float)
    if isinstance(model, SESModel):
        return np.full(horizon, model.level)
    if isinstance(model, HoltModel):
        return model.level + steps * model.trend
    if isinstance(model, HoltWintersModel):
        season = model.seasonal[(np.arange(horizon)) % model.period]
        base = model.level + steps * model.trend
        if model.seasonal_mode == "multiplicative":
            return base * season
        return base + season
    raise InvalidInputError(f"Unknown exponential smoothing model: {type(model).__name__}")


def variance_multipliers(model: ExponentialSmoothingModel, horizon: int) -> np.ndarray:
    """Ratio of the k-step to the one-step forecast variance, k = 1..horizon."""
    j = np.arange(1, horizon, dtype=float)
    if isinstance(model, SESModel):
        psi = np.full(j.size, model.alpha)
    elif isinstance(model, HoltModel):
        psi = model.alpha * (1.0 + j * model.beta)
    elif isinstance(model, HoltWintersModel):
        seasonal_step = (j % model.period == 0).astype(float)
        psi = model.alpha * (1.0 + j * model.beta)
        psi = psi + model.gamma * (1.0 - model.alpha) * seasonal_step
    else:
        raise InvalidInputError(f"Unknown exponential smoothing model: {type(model).__name__}")
    return 1.0 + np.concatenate(([0.0], np.cumsum(psi**2)))


def one_step_variance(model: ExponentialSmoothingModel) -> float | None:
    """SSE divided by the number of scored one-step errors (None if there are none)."""
    n_scored = int(model.fitted.notna().sum())
    if n_scored == 0:
        return None
    return float(model.sse) / n_scored


def forecast_smoothing(
    model: ExponentialSmoothingModel,
    horizon: int,
    *,
    alpha: float = 0.05,
) -> Forecast:
    """Forecast ``horizon`` steps past the end of the fitted series.

    SES stays flat at the last level, Holt extrapolates the trend and
    Holt-Winters cycles the last ``period`` seasonal indices on top of it.

    Args:
        model: Fitted smoothing model.
        horizon: Number of steps ahead.
        alpha: Significance level of the (1 - alpha) prediction intervals.

    Returns:
        Forecast with ``lower`` / ``upper`` bounds. The bounds are None when
        the model carries no scored one-step errors.

    Raises:
        InvalidInputError: If horizon < 1.
    """
    validate_horizon(horizon)
    validate_alpha(alpha)
    horizon = int(horizon)
    values = _point_forecasts(model, horizon)
    index = future_index(model.fitted.index, horizon)

    lower = upper = None
    sigma2 = one_step_variance(model)
    if sigma2 is not None:
        z = float(stats.norm.ppf(1.0 - alpha / 2.0))
        half_width = z * np.sqrt(sigma2 * variance_multipliers(model, horizon))
        lower = pd.Series(values - half_width, index=index, name="lower")
        upper = pd.Series(values + half_width, index=index, name="upper")
    else:
        logger.warning("%s has no scored one-step errors; forecast has no intervals", model.name)

    logger.info("%s forecast over %d steps", model.name, horizon)
    return Forecast(
        values=pd.Series(values, index=index, name=model.name),
        horizon=horizon,
        model_name=model.name,
        lower=lower,
        upper=upper,
    )
