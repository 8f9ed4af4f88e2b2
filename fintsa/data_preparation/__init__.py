"""Price ingestion and return computation."""

from __future__ import annotations

from fintsa.data_preparation.computations import (
    compute_log_returns,
    reconstruct_prices,
    squared_returns,
)
from fintsa.data_preparation.price_series import build_price_series

__all__ = [
    "build_price_series",
    "compute_log_returns",
    "reconstruct_prices",
    "squared_returns",
]
