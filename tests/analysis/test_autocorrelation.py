"""Tests for ACF / PACF computations."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest
from statsmodels.tsa.stattools import acf as sm_acf
from statsmodels.tsa.stattools import pacf as sm_pacf

from fintsa.analysis import analyze_autocorrelation, compute_acf, compute_pacf, default_max_lag
from fintsa.exceptions import InsufficientDataError, InvalidInputError


class TestACF:
    def test_lag_zero_is_one(self, white_noise: pd.Series) -> None:
        assert compute_acf(white_noise, 10)[0] == 1.0

    def test_matches_statsmodels(self, ar1_series: pd.Series) -> None:
        ours = compute_acf(ar1_series, 30)
        reference = sm_acf(ar1_series.to_numpy(), nlags=30, adjusted=False, fft=False)
        np.testing.assert_allclose(ours, reference, atol=1e-10)

    def test_ar1_lag_one_close_to_phi(self, ar1_series: pd.Series) -> None:
        assert compute_acf(ar1_series, 5)[1] == pytest.approx(0.6, abs=0.08)

    def test_default_max_lag_rule(self) -> None:
        assert default_max_lag(1000) == 30
        assert default_max_lag(5) == 4
        assert len(compute_acf(pd.Series(np.arange(100.0) % 7))) == default_max_lag(100) + 1

    def test_lag_clamped_to_series_length(self) -> None:
        acf = compute_acf(pd.Series([1.0, 3.0, 2.0, 5.0]), 50)
        assert len(acf) == 4

    def test_constant_series_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="constant"):
            compute_acf(pd.Series([2.0] * 10), 3)

    def test_too_short_series_raises(self) -> None:
        with pytest.raises(InsufficientDataError):
            compute_acf(pd.Series([1.0]), 1)

    def test_non_positive_lag_raises(self, white_noise: pd.Series) -> None:
        with pytest.raises(InvalidInputError):
            compute_acf(white_noise, 0)


class TestPACF:
    def test_lag_one_equals_acf_lag_one(self, ar1_series: pd.Series) -> None:
        assert compute_pacf(ar1_series, 5)[0] == pytest.approx(compute_acf(ar1_series, 5)[1])

    def test_matches_statsmodels_levinson_durbin(self, ar1_series: pd.Series) -> None:
        ours = compute_pacf(ar1_series, 20)
        reference = sm_pacf(ar1_series.to_numpy(), nlags=20, method="ldb")
        np.testing.assert_allclose(ours, reference[1:], atol=1e-8)

    def test_ar1_cuts_off_after_lag_one(self, ar1_series: pd.Series) -> None:
        pacf = compute_pacf(ar1_series, 10)
        bound = 1.96 / np.sqrt(len(ar1_series))
        assert pacf[0] > 0.5
        assert np.sum(np.abs(pacf[1:]) > bound) <= 2


class TestAnalyzeAutocorrelation:
    def test_result_fields(self, white_noise: pd.Series) -> None:
        result = analyze_autocorrelation(white_noise, 20)
        assert result.n == 1000
        assert result.max_lag == 20
        assert result.acf.shape == (21,)
        assert result.pacf.shape == (20,)
        assert result.confidence_bound == pytest.approx(1.96 / np.sqrt(1000))

    def test_white_noise_has_few_significant_lags(self, white_noise: pd.Series) -> None:
        result = analyze_autocorrelation(white_noise, 20)
        assert len(result.significant_acf_lags()) <= 3

    def test_ar1_lag_one_significant(self, ar1_series: pd.Series) -> None:
        result = analyze_autocorrelation(ar1_series, 10)
        assert 1 in result.significant_acf_lags()
        assert 1 in result.significant_pacf_lags()
