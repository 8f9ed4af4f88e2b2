"""Exponential smoothing (SES, Holt, Holt-Winters) and forecasting."""

from __future__ import annotations

from fintsa.smoothing.fitting import (
    fit_holt,
    fit_holt_winters,
    fit_ses,
    fit_smoothing,
    validate_period,
)
from fintsa.smoothing.forecasting import forecast_smoothing, variance_multipliers
from fintsa.smoothing.models import (
    ExponentialSmoothingModel,
    ExponentialSmoothingSpec,
    HoltModel,
    HoltSpec,
    HoltWintersModel,
    HoltWintersSpec,
    SESModel,
    SESSpec,
)

__all__ = [
    "ExponentialSmoothingModel",
    "ExponentialSmoothingSpec",
    "HoltModel",
    "HoltSpec",
    "HoltWintersModel",
    "HoltWintersSpec",
    "SESModel",
    "SESSpec",
    "fit_holt",
    "fit_holt_winters",
    "fit_ses",
    "fit_smoothing",
    "forecast_smoothing",
    "validate_period",
    "variance_multipliers",
]
