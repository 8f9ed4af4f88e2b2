"""Tests for log-return computations."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from fintsa.data_preparation import compute_log_returns, reconstruct_prices, squared_returns
from fintsa.exceptions import InvalidInputError


class TestComputeLogReturns:
    def test_known_values(self) -> None:
        returns = compute_log_returns(pd.Series([100.0, 105.0, 102.9]))
        np.testing.assert_allclose(returns.to_numpy(), [0.04879, -0.02020], atol=1e-5)

    def test_length_and_index_alignment(self, price_series: pd.Series) -> None:
        returns = compute_log_returns(price_series)
        assert len(returns) == len(price_series) - 1
        assert returns.index.equals(price_series.index[1:])
        assert returns.name == "log_return"

    def test_constant_prices_give_zero_returns(self) -> None:
        returns = compute_log_returns(pd.Series([50.0] * 5))
        assert (returns == 0.0).all()

    @pytest.mark.parametrize("prices", [[100.0], []])
    def test_fewer_than_two_prices_raise(self, prices: list[float]) -> None:
        with pytest.raises(InvalidInputError):
            compute_log_returns(pd.Series(prices, dtype=float))

    @pytest.mark.parametrize("bad", [0.0, -1.0])
    def test_non_positive_prices_raise(self, bad: float) -> None:
        with pytest.raises(InvalidInputError, match="strictly positive"):
            compute_log_returns(pd.Series([100.0, bad, 101.0]))

    def test_missing_price_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            compute_log_returns(pd.Series([100.0, np.nan, 101.0]))


class TestReconstructPrices:
    def test_recovers_original_prices(self, price_series: pd.Series) -> None:
        returns = compute_log_returns(price_series)
        rebuilt = reconstruct_prices(returns, float(price_series.iloc[0]))
        np.testing.assert_allclose(rebuilt.to_numpy(), price_series.to_numpy(), rtol=1e-10)

    def test_invalid_initial_price(self) -> None:
        with pytest.raises(InvalidInputError):
            reconstruct_prices(pd.Series([0.01]), 0.0)


def test_squared_returns() -> None:
    result = squared_returns(pd.Series([0.1, -0.2]))
    np.testing.assert_allclose(result.to_numpy(), [0.01, 0.04])
    assert result.name == "squared_log_return"
