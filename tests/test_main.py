"""Tests for the CLI entry point."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from fintsa.exceptions import InsufficientDataError
from fintsa.main import build_parser, config_from_args, main


class TestConfigFromArgs:
    def test_defaults(self) -> None:
        config = config_from_args(build_parser().parse_args([]))
        assert config.ticker == "AAPL"
        assert config.make_plots is True

    def test_flags_override(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            [
                "--ticker",
                "MSFT",
                "--start-date",
                "2012-01-01",
                "--horizon",
                "24",
                "--acf-lags",
                "30",
                "--ljung-box-lags",
                "15",
                "--seasonal-mode",
                "additive",
                "--no-plots",
                "--output-dir",
                str(tmp_path),
            ]
        )
        config = config_from_args(args)
        assert config.ticker == "MSFT"
        assert config.start_date == datetime(2012, 1, 1)
        assert config.forecast_horizon == 24
        assert config.acf_max_lag == 30
        assert config.ljung_box_lags == 15
        assert config.seasonal_mode == "additive"
        assert config.make_plots is False
        assert config.results_dir == tmp_path
        assert config.plots_dir == tmp_path / "plots"

    def test_config_file_then_flags(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"ticker": "IBM", "forecast_horizon": 12}))
        args = build_parser().parse_args(["--config", str(path), "--horizon", "36"])
        config = config_from_args(args)
        assert config.ticker == "IBM"
        assert config.forecast_horizon == 36


class TestMain:
    @patch("fintsa.main.run_analysis")
    def test_success_returns_zero(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(report_path=Path("r.json"))
        assert main(["--ticker", "MSFT", "--no-plots"]) == 0
        config = mock_run.call_args.args[0]
        assert config.ticker == "MSFT"

    @patch("fintsa.main.run_analysis")
    def test_analysis_error_returns_one(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = InsufficientDataError("too short")
        assert main([]) == 1

    @patch("fintsa.main.run_analysis")
    def test_bad_config_file_returns_one(self, mock_run: MagicMock, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"unknown": 1}))
        assert main(["--config", str(path)]) == 1
        mock_run.assert_not_called()

    @patch("fintsa.main.run_analysis")
    def test_unknown_log_level_is_rejected(self, mock_run: MagicMock) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--log-level", "chatty"])
        assert excinfo.value.code == 2
        mock_run.assert_not_called()

    def test_log_level_is_case_insensitive(self) -> None:
        assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"
