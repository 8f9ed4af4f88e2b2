"""Shared fixtures for data_fetching tests."""

from __future__ import annotations

import pandas as pd
import pytest


@pytest.fixture
def sample_yf_history() -> pd.DataFrame:
    """OHLCV frame shaped like a yfinance download with Adj Close.

    Returns:
        DataFrame indexed by date with Open, High, Low, Close, Adj Close, Volume.
    """
    dates = pd.date_range("2024-01-01", periods=5, freq="B", name="Date")
    return pd.DataFrame(
        {
            "Open": [100.0, 101.0, 102.0, 103.0, 104.0],
            "High": [101.0, 102.0, 103.0, 104.0, 105.0],
            "Low": [99.0, 100.0, 101.0, 102.0, 103.0],
            "Close": [100.5, 101.5, 102.5, 103.5, 104.5],
            "Adj Close": [99.5, 100.5, 101.5, 102.5, 103.5],
            "Volume": [1000, 1100, 1200, 1300, 1400],
        },
        index=dates,
    )
