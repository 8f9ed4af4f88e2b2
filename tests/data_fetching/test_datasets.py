"""Tests for the bundled AirPassengers dataset."""

from __future__ import annotations

import pandas as pd

from fintsa.data_fetching import load_air_passengers


def test_air_passengers_shape_and_index() -> None:
    series = load_air_passengers()
    assert len(series) == 144
    assert series.name == "passengers"
    assert isinstance(series.index, pd.DatetimeIndex)
    assert series.index[0] == pd.Timestamp("1949-01-01")
    assert series.index[-1] == pd.Timestamp("1960-12-01")
    assert series.index.freqstr == "MS"


def test_air_passengers_known_values() -> None:
    series = load_air_passengers()
    assert series.iloc[0] == 112.0
    assert series.iloc[-1] == 432.0
    assert series.max() == 622.0
    assert series.dtype == float
