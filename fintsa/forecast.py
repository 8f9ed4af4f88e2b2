"""Forecast container shared by the ARMA and exponential smoothing models."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from fintsa.exceptions import InvalidInputError

__all__ = ["Forecast", "future_index", "validate_horizon"]


@dataclass(frozen=True)
class Forecast:
    """Predicted values beyond the end of the observed series.

    ``lower`` / ``upper`` hold prediction-interval bounds when the model
    provides them (ARMA); smoothing forecasts leave them empty.
    """

    values: pd.Series
    horizon: int
    model_name: str
    lower: pd.Series | None = None
    upper: pd.Series | None = None


def validate_horizon(horizon: int) -> None:
    """Raises InvalidInputError when the horizon is < 1."""
    if int(horizon) < 1:
        raise InvalidInputError(f"Forecast horizon must be >= 1, got {horizon}")


def future_index(index: pd.Index, horizon: int) -> pd.Index:
    """Index of the ``horizon`` points that follow ``index``.

    Datetime indexes continue their (declared or inferred) frequency;
    irregular trading-day indexes continue on business days. Other indexes
    continue positionally.
    """
    validate_horizon(horizon)
    if isinstance(index, pd.DatetimeIndex) and len(index) > 0:
        freq = index.freq or (pd.infer_freq(index) if len(index) >= 3 else None) or "B"
        offset = pd.tseries.frequencies.to_offset(freq)
        return pd.date_range(index[-1] + offset, periods=horizon, freq=offset, name=index.name)
    return pd.RangeIndex(len(index), len(index) + horizon)
