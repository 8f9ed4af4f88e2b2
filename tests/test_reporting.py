"""Tests for the report sink."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from fintsa.config import AnalysisConfig
from fintsa.pipeline import AnalysisResults, run_analysis
from fintsa.reporting import build_report, log_summary, save_report


@pytest.fixture(scope="module")
def results(tmp_path_factory) -> AnalysisResults:
    gen = np.random.default_rng(5)
    idx = pd.date_range("2018-01-01", periods=350, freq="B")
    prices = pd.Series(50.0 * np.exp(np.cumsum(gen.normal(0.0, 0.01, 350))), index=idx)
    config = AnalysisConfig(
        ticker="REP",
        make_plots=False,
        forecast_horizon=12,
        results_dir=tmp_path_factory.mktemp("report"),
    )
    return run_analysis(config, prices=prices, write_report=False)


def test_build_report_structure(results: AnalysisResults) -> None:
    report = build_report(results)
    assert set(report) == {
        "config",
        "prices",
        "returns",
        "arma",
        "best_arma_by_aic",
        "smoothing",
        "plots",
    }
    assert report["returns"]["descriptive_stats"]["n"] == 349
    assert report["arma"][1]["order"] == [1, 0, 0]
    assert report["arma"][1]["ljung_box"]["df"] == 9
    assert report["smoothing"][0]["params"].keys() == {"alpha"}
    assert report["smoothing"][2]["period"] == 12
    assert len(report["smoothing"][2]["forecast"]) == 12
    assert len(report["smoothing"][2]["forecast_lower"]) == 12


def test_save_report_is_valid_json(results: AnalysisResults, tmp_path: Path) -> None:
    path = save_report(results, tmp_path / "report.json")
    data = json.loads(path.read_text())
    assert data["config"]["ticker"] == "REP"
    assert data["prices"]["start"] == "2018-01-01"
    assert "1961-01-01" in data["smoothing"][0]["forecast"]


def test_log_summary(results: AnalysisResults, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="fintsa.reporting"):
        log_summary(results)
    assert "ANALYSIS SUMMARY - REP" in caplog.text
    assert "Jarque-Bera" in caplog.text
    assert "Holt-Winters (multiplicative)" in caplog.text
