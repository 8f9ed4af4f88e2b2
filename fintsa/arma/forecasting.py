"""Multi-step forecasts from a fitted ARMA model."""

from __future__ import annotations

import numpy as np
import pandas as pd

from fintsa.arma.arma_model import FittedARMAModel
from fintsa.forecast import Forecast, future_index, validate_horizon
from fintsa.utils import get_logger, validate_alpha

logger = get_logger(__name__)


def forecast_arma(model: FittedARMAModel, horizon: int, *, alpha: float = 0.05) -> Forecast:
    """Forecast ``horizon`` steps with (1 - alpha) prediction intervals.

    Args:
        model: Fitted ARMA model (must carry its statsmodels results).
        horizon: Number of steps ahead.
        alpha: Significance level of the intervals.

    Returns:
        Forecast indexed after the last residual timestamp.
    """
    validate_horizon(horizon)
    validate_alpha(alpha)
    if model.results is None:
        raise ValueError(f"{model.name} has no statsmodels results to forecast from")

    prediction = model.results.get_forecast(steps=horizon)
    mean = np.asarray(prediction.predicted_mean, dtype=float)
    bounds = np.asarray(prediction.conf_int(alpha=alpha), dtype=float)
    index = future_index(model.residuals.index, horizon)

    logger.info("%s forecast over %d steps", model.name, horizon)
    return Forecast(
        values=pd.Series(mean, index=index, name=model.name),
        horizon=int(horizon),
        model_name=model.name,
        lower=pd.Series(bounds[:, 0], index=index, name="lower"),
        upper=pd.Series(bounds[:, 1], index=index, name="upper"),
    )
