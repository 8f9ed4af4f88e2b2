"""End-to-end tests of the analysis pass on synthetic prices."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import numpy as np
import pandas as pd
import pytest

from fintsa.config import AnalysisConfig
from fintsa.exceptions import InvalidInputError, InvalidPeriodError
from fintsa.path import ANALYSIS_REPORT_FILENAME
from fintsa.pipeline import AnalysisResults, run_analysis


def _prices(n: int = 400, seed: int = 11) -> pd.Series:
    gen = np.random.default_rng(seed)
    idx = pd.date_range("2015-01-01", periods=n, freq="B")
    return pd.Series(100.0 * np.exp(np.cumsum(gen.normal(0.0004, 0.012, n))), index=idx)


@pytest.fixture(scope="module")
def results(tmp_path_factory) -> AnalysisResults:
    out = tmp_path_factory.mktemp("analysis")
    config = AnalysisConfig(
        ticker="SYN",
        results_dir=out,
        plots_dir=out / "plots",
        forecast_horizon=24,
    )
    return run_analysis(config, prices=_prices())


class TestRunAnalysis:
    def test_returns_stage(self, results: AnalysisResults) -> None:
        ret = results.returns
        assert len(ret.returns) == len(ret.prices) - 1
        assert ret.prices.name == "SYN"
        assert ret.price_autocorrelation.acf[0] == 1.0
        assert ret.returns_autocorrelation.max_lag == 50
        assert ret.price_stationarity.stationary is False

    def test_arma_stage(self, results: AnalysisResults) -> None:
        orders = [m.order for m in results.arma.models]
        assert orders == [(0, 0, 0), (1, 0, 0), (0, 0, 1)]
        assert [d.ljung_box.df for d in results.arma.diagnostics] == [10, 9, 9]
        assert results.arma.best_by_aic() in results.arma.models

    def test_smoothing_stage(self, results: AnalysisResults) -> None:
        names = [m.name for m in results.smoothing.models]
        assert names == ["SES", "Holt", "Holt-Winters (multiplicative)"]
        assert all(fc.horizon == 24 for fc in results.smoothing.forecasts)
        assert all(fc.lower is not None for fc in results.smoothing.forecasts)
        assert results.smoothing.models[2].sse < results.smoothing.models[0].sse

    def test_plots_written(self, results: AnalysisResults) -> None:
        assert len(results.plot_paths) == 10
        assert all(p.exists() and p.suffix == ".png" for p in results.plot_paths)

    def test_report_written(self, results: AnalysisResults) -> None:
        assert results.report_path == results.config.results_dir / ANALYSIS_REPORT_FILENAME
        report = json.loads(results.report_path.read_text())
        assert report["config"]["ticker"] == "SYN"
        assert len(report["arma"]) == 3


class TestPipelineConfiguration:
    def test_downloads_when_no_prices_given(self, tmp_path: Path) -> None:
        config = AnalysisConfig(ticker="DL", make_plots=False, results_dir=tmp_path)
        with patch("fintsa.pipeline.download_price_series", return_value=_prices(300)) as dl:
            result = run_analysis(config, write_report=False)
        dl.assert_called_once_with("DL", config.start_date, None)
        assert result.report_path is None
        assert result.plot_paths == []

    def test_failing_stage_is_logged_and_raised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        prices = _prices(100)
        prices.iloc[50] = -1.0
        config = AnalysisConfig(make_plots=False, results_dir=tmp_path)
        with pytest.raises(InvalidInputError):
            run_analysis(config, prices=prices, write_report=False)
        assert "Stage 'Return analysis' failed" in caplog.text
        assert not (tmp_path / ANALYSIS_REPORT_FILENAME).exists()

    def test_invalid_seasonal_period_raises(self, tmp_path: Path) -> None:
        config = AnalysisConfig(make_plots=False, seasonal_period=5, results_dir=tmp_path)
        with pytest.raises(InvalidPeriodError):
            run_analysis(config, prices=_prices(300), write_report=False)

    def test_additive_mode_and_custom_series(self, tmp_path: Path) -> None:
        idx = pd.date_range("2000-01-01", periods=40, freq="QS")
        seasonal = pd.Series(
            50.0 + np.arange(40.0) + np.tile([5.0, -3.0, 2.0, -4.0], 10), index=idx
        )
        config = AnalysisConfig(
            make_plots=False,
            seasonal_period=4,
            seasonal_mode="additive",
            forecast_horizon=8,
            results_dir=tmp_path,
        )
        result = run_analysis(
            config, prices=_prices(300), seasonal_series=seasonal, write_report=False
        )
        hw_forecast = result.smoothing.forecasts[2]
        assert hw_forecast.values.index[0] == pd.Timestamp("2010-01-01")
        assert len(hw_forecast.values) == 8
