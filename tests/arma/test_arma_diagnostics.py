"""Tests for Ljung-Box and residual diagnostics."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest
from statsmodels.stats.diagnostic import acorr_ljungbox

from fintsa.arma import diagnose_residuals, fit_arma_model, ljung_box_test
from fintsa.exceptions import InsufficientDataError, InvalidInputError


class TestLjungBox:
    def test_matches_statsmodels(self, ar1_series: pd.Series) -> None:
        result = ljung_box_test(ar1_series, 10, fitted_params=2)
        reference = acorr_ljungbox(ar1_series.to_numpy(), lags=[10], model_df=2)
        assert result.statistic == pytest.approx(float(reference["lb_stat"].iloc[0]), rel=1e-8)
        assert result.p_value == pytest.approx(float(reference["lb_pvalue"].iloc[0]), abs=1e-10)
        assert result.df == 8
        assert result.lags == 10
        assert result.n == len(ar1_series)

    def test_white_noise_mostly_not_rejected(self) -> None:
        not_rejected = 0
        for seed in range(20):
            x = np.random.default_rng(seed).normal(size=1000)
            if ljung_box_test(x, 10).p_value > 0.05:
                not_rejected += 1
        assert not_rejected >= 15

    def test_autocorrelated_series_rejected(self, ar1_series: pd.Series) -> None:
        assert ljung_box_test(ar1_series, 10).rejects_white_noise(0.05)

    @pytest.mark.parametrize("lags,fitted", [(2, 2), (1, 3), (0, 0)])
    def test_lags_must_exceed_fitted_params(self, lags: int, fitted: int) -> None:
        with pytest.raises(InvalidInputError):
            ljung_box_test(np.arange(50.0) % 3, lags, fitted_params=fitted)

    def test_series_shorter_than_lags_raises(self) -> None:
        with pytest.raises(InsufficientDataError):
            ljung_box_test(np.array([0.1, -0.2, 0.3, 0.0, 0.5]), 5)


class TestDiagnoseResiduals:
    def test_ar1_residuals_are_white(self, ar1_series: pd.Series) -> None:
        model = fit_arma_model(ar1_series, (1, 0, 0))
        diag = diagnose_residuals(model, lags=10, acf_max_lag=20)
        assert diag.order == (1, 0, 0)
        assert diag.model_name == "ARMA(1,0)"
        assert diag.ljung_box.df == 9
        assert diag.ljung_box.p_value > 0.01
        assert diag.residual_acf.max_lag == 20

    def test_misspecified_model_leaves_autocorrelation(self, ar1_series: pd.Series) -> None:
        model = fit_arma_model(ar1_series, (0, 0, 0))
        diag = diagnose_residuals(model, lags=10)
        assert diag.ljung_box.rejects_white_noise()
        assert 1 in diag.residual_acf.significant_acf_lags()
