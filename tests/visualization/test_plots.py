"""Tests for the analysis figures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import numpy as np
import pandas as pd
import pytest

from fintsa.analysis import analyze_autocorrelation
from fintsa.arma import diagnose_residuals, fit_arma_model
from fintsa.forecast import Forecast
from fintsa.visualization import (
    plot_acf_pacf,
    plot_forecast_comparison,
    plot_residual_acfs,
    plot_returns_histogram,
    plot_returns_qq,
    plot_series,
)


@pytest.fixture
def returns() -> pd.Series:
    idx = pd.date_range("2020-01-01", periods=300, freq="B")
    return pd.Series(np.random.default_rng(3).normal(0, 0.01, 300), index=idx)


def test_series_plots(tmp_path: Path, returns: pd.Series) -> None:
    out = plot_series(returns, tmp_path / "r.png", title="Returns", ylabel="r", zero_line=True)
    assert out.exists()
    assert plot_returns_histogram(returns, tmp_path / "h.png").exists()
    assert plot_returns_qq(returns, tmp_path / "q.png").exists()


def test_acf_pacf_plot(tmp_path: Path, returns: pd.Series) -> None:
    result = analyze_autocorrelation(returns, 20)
    assert plot_acf_pacf(result, tmp_path / "acf.png", label="returns").exists()


def test_residual_acf_panels(tmp_path: Path, returns: pd.Series) -> None:
    diags = [
        diagnose_residuals(fit_arma_model(returns, order), lags=10)
        for order in ((0, 0, 0), (1, 0, 0))
    ]
    assert plot_residual_acfs(diags, tmp_path / "res.png").exists()


def test_residual_acf_panels_require_models(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        plot_residual_acfs([], tmp_path / "res.png")


def test_forecast_comparison(tmp_path: Path, air_passengers: pd.Series) -> None:
    idx = pd.date_range("1961-01-01", periods=12, freq="MS")
    forecasts = [
        Forecast(values=pd.Series(400.0, index=idx), horizon=12, model_name="SES"),
        Forecast(values=pd.Series(np.linspace(400, 450, 12), index=idx), horizon=12, model_name="Holt"),
    ]
    out = plot_forecast_comparison(air_passengers, forecasts, tmp_path / "fc.png")
    assert out.exists()


def test_forecast_comparison_shades_last_interval(
    tmp_path: Path, air_passengers: pd.Series
) -> None:
    idx = pd.date_range("1961-01-01", periods=12, freq="MS")
    flat = pd.Series(400.0, index=idx)
    forecasts = [
        Forecast(flat, 12, "SES", lower=flat - 50.0, upper=flat + 50.0),
        Forecast(
            flat + 10.0,
            12,
            "Holt-Winters (multiplicative)",
            lower=flat - 20.0,
            upper=flat + 40.0,
        ),
        Forecast(flat + 5.0, 12, "Holt"),
    ]
    with patch("fintsa.visualization.plots.add_prediction_band") as band:
        plot_forecast_comparison(air_passengers, forecasts, tmp_path / "fc.png")
    band.assert_called_once()
    assert band.call_args.args[1].iloc[0] == 380.0
    assert band.call_args.kwargs["label"] == "Holt-Winters (multiplicative) prediction interval"

    with patch("fintsa.visualization.plots.add_prediction_band") as band:
        plot_forecast_comparison(
            air_passengers, forecasts, tmp_path / "fc2.png", shade_last_interval=False
        )
    band.assert_not_called()
