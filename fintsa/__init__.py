"""Exploratory financial time-series analysis.

Subpackages:
- data_fetching: price download and the AirPassengers dataset
- data_preparation: price ingestion and log returns
- analysis: descriptive statistics, normality, ACF/PACF, stationarity
- arma: ARMA fitting and residual diagnostics
- smoothing: SES, Holt and Holt-Winters exponential smoothing
- visualization, reporting: plot and report sinks
- pipeline: the linear analysis pass
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
