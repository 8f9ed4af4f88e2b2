"""Pytest configuration for fintsa tests.

yfinance is never reached over the network: tests that exercise the download
path patch ``fintsa.data_fetching.download.yf``.
"""

from __future__ import annotations

from pathlib import Path
import sys

# Set matplotlib to non-interactive backend for tests (no GUI required)
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

# Add project root to Python path for direct execution
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from fintsa.data_fetching import load_air_passengers


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def business_dates():
    """Factory of business-day indexes starting 2020-01-01."""

    def _make(n: int) -> pd.DatetimeIndex:
        return pd.date_range("2020-01-01", periods=n, freq="B", name="date")

    return _make


@pytest.fixture
def white_noise(rng: np.random.Generator, business_dates) -> pd.Series:
    """1000 Gaussian observations with a business-day index."""
    return pd.Series(rng.normal(0.0, 0.01, size=1000), index=business_dates(1000), name="wn")


@pytest.fixture
def ar1_series(business_dates) -> pd.Series:
    """AR(1) with phi=0.6 and mean 0.001, 800 observations."""
    gen = np.random.default_rng(123)
    n = 800
    eps = gen.normal(0.0, 0.01, size=n)
    y = np.empty(n)
    y[0] = eps[0]
    for t in range(1, n):
        y[t] = 0.0004 + 0.6 * y[t - 1] + eps[t]
    return pd.Series(y, index=business_dates(n), name="ar1")


@pytest.fixture
def price_series(business_dates) -> pd.Series:
    """Geometric random walk of 300 positive prices named 'TEST'."""
    gen = np.random.default_rng(7)
    n = 300
    log_prices = np.log(100.0) + np.cumsum(gen.normal(0.0005, 0.015, size=n))
    return pd.Series(np.exp(log_prices), index=business_dates(n), name="TEST")


@pytest.fixture
def air_passengers() -> pd.Series:
    return load_air_passengers()
