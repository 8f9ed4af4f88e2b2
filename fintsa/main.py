"""CLI entry point for the financial time-series analysis.

Usage:
    python -m fintsa.main --ticker AAPL --start-date 2010-01-01
    fintsa --config config.json --no-plots
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Sequence

# Add project root to Python path for direct execution
_script_dir = Path(__file__).parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from fintsa.config import AnalysisConfig
from fintsa.config_logging import LOG_LEVELS, setup_logging
from fintsa.constants import (
    ACF_PACF_DEFAULT_LAGS,
    ARMA_LJUNG_BOX_LAGS_DEFAULT,
    DEFAULT_TICKER,
    SMOOTHING_DEFAULT_HORIZON,
    SMOOTHING_DEFAULT_SEASONAL_MODE,
    SMOOTHING_SEASONAL_MODES,
)
from fintsa.exceptions import AnalysisError
from fintsa.pipeline import run_analysis
from fintsa.utils import get_logger, load_json_data

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exploratory analysis of a stock's log returns plus exponential smoothing"
    )
    parser.add_argument(
        "--ticker",
        type=str,
        default=None,
        help=f"Ticker symbol to download (default: {DEFAULT_TICKER})",
    )
    parser.add_argument("--start-date", type=str, default=None, help="First date (YYYY-MM-DD)")
    parser.add_argument("--end-date", type=str, default=None, help="Last date (YYYY-MM-DD)")
    parser.add_argument(
        "--horizon",
        type=int,
        default=None,
        help=f"Smoothing forecast horizon (default: {SMOOTHING_DEFAULT_HORIZON})",
    )
    parser.add_argument(
        "--acf-lags",
        type=int,
        default=None,
        help=f"Maximum ACF/PACF lag (default: {ACF_PACF_DEFAULT_LAGS})",
    )
    parser.add_argument(
        "--ljung-box-lags",
        type=int,
        default=None,
        help=f"Ljung-Box lags on ARMA residuals (default: {ARMA_LJUNG_BOX_LAGS_DEFAULT})",
    )
    parser.add_argument(
        "--seasonal-mode",
        choices=SMOOTHING_SEASONAL_MODES,
        default=None,
        help=f"Holt-Winters seasonality (default: {SMOOTHING_DEFAULT_SEASONAL_MODE})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with configuration values; CLI flags override it",
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip writing PNG plots")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the report and plots (plots go to <output-dir>/plots)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AnalysisConfig:
    """Merge the optional JSON config file with CLI overrides."""
    if args.config is not None:
        config = AnalysisConfig.from_dict(load_json_data(args.config))
    else:
        config = AnalysisConfig()

    output_dir = args.output_dir
    return config.with_overrides(
        ticker=args.ticker,
        start_date=args.start_date,
        end_date=args.end_date,
        forecast_horizon=args.horizon,
        acf_max_lag=args.acf_lags,
        ljung_box_lags=args.ljung_box_lags,
        seasonal_mode=args.seasonal_mode,
        make_plots=False if args.no_plots else None,
        results_dir=output_dir,
        plots_dir=output_dir / "plots" if output_dir is not None else None,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analysis from the command line.

    Returns:
        Process exit code (0 on success, 1 on analysis or configuration errors).
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = config_from_args(args)
    except (KeyError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        results = run_analysis(config)
    except AnalysisError as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    logger.info(f"Report written to {results.report_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
