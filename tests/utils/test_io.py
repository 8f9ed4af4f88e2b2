"""Tests for JSON I/O utilities."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from fintsa.utils.io import load_json_data, save_json_pretty, to_json_compatible


class TestToJsonCompatible:
    def test_numpy_and_pandas_values(self) -> None:
        idx = pd.date_range("2024-01-01", periods=2, freq="D")
        data = {
            "int": np.int64(3),
            "float": np.float64(1.5),
            "nan": float("nan"),
            "bool": np.bool_(True),
            "array": np.array([1.0, 2.0]),
            "series": pd.Series([1.0, 2.0], index=idx),
            "ts": pd.Timestamp("2024-01-01"),
            "path": Path("a/b"),
            "tuple": (1, 2),
        }
        out = to_json_compatible(data)
        assert out["int"] == 3 and isinstance(out["int"], int)
        assert out["nan"] is None
        assert out["bool"] is True
        assert out["array"] == [1.0, 2.0]
        assert out["series"] == {"2024-01-01": 1.0, "2024-01-02": 2.0}
        assert out["ts"] == "2024-01-01"
        assert out["path"] == str(Path("a/b"))
        assert out["tuple"] == [1, 2]
        json.dumps(out)


class TestJsonRoundTrip:
    def test_save_creates_directories(self, tmp_path: Path) -> None:
        path = save_json_pretty({"aic": np.float64(-12.5)}, tmp_path / "x" / "out.json")
        assert json.loads(path.read_text()) == {"aic": -12.5}

    def test_load_required_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"ticker": "AAPL"}))
        assert load_json_data(path, required_keys=["ticker"]) == {"ticker": "AAPL"}
        with pytest.raises(KeyError):
            load_json_data(path, required_keys=["missing"])

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_json_data(tmp_path / "nope.json")

    def test_load_rejects_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            load_json_data(path)
