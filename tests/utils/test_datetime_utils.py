"""Tests for datetime utilities."""

from __future__ import annotations

from datetime import datetime

import pandas as pd
import pytest

from fintsa.utils.datetime_utils import normalize_timestamp_to_datetime, parse_date_value


class TestNormalizeTimestamp:
    def test_timezone_is_dropped(self) -> None:
        ts = pd.Timestamp("2024-01-01 10:00", tz="UTC")
        assert normalize_timestamp_to_datetime(ts).tzinfo is None

    def test_naive_timestamp_unchanged(self) -> None:
        ts = pd.Timestamp("2024-01-01")
        assert normalize_timestamp_to_datetime(ts) == ts


class TestParseDateValue:
    @pytest.mark.parametrize(
        "value",
        ["2024-03-15", datetime(2024, 3, 15), pd.Timestamp("2024-03-15")],
    )
    def test_supported_inputs(self, value: object) -> None:
        assert parse_date_value(value) == pd.Timestamp("2024-03-15")

    def test_unparseable_string(self) -> None:
        with pytest.raises(ValueError, match="start_date"):
            parse_date_value("not-a-date", context="start_date")

    def test_unsupported_type(self) -> None:
        with pytest.raises(ValueError, match="unsupported type"):
            parse_date_value(20240315)
