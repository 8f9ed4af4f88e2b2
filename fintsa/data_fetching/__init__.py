"""Data fetching module for price series and benchmark datasets."""

from __future__ import annotations

from fintsa.data_fetching.datasets import load_air_passengers
from fintsa.data_fetching.download import download_price_series

__all__ = ["download_price_series", "load_air_passengers"]
