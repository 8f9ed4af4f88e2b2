"""ARMA fitting, residual diagnostics and forecasting."""

from __future__ import annotations

from fintsa.arma.arma_model import FittedARMAModel, fit_arma_model
from fintsa.arma.diagnostics import (
    LjungBoxResult,
    ResidualDiagnostics,
    diagnose_residuals,
    ljung_box_test,
)
from fintsa.arma.forecasting import forecast_arma

__all__ = [
    "FittedARMAModel",
    "LjungBoxResult",
    "ResidualDiagnostics",
    "diagnose_residuals",
    "fit_arma_model",
    "forecast_arma",
    "ljung_box_test",
]
