"""Download functions for fetching price data from yfinance."""

from __future__ import annotations

from datetime import datetime

import pandas as pd
import yfinance as yf

from fintsa.constants import YF_ADJ_CLOSE_COLUMN, YF_CLOSE_COLUMN
from fintsa.exceptions import InvalidInputError
from fintsa.utils import get_logger

logger = get_logger(__name__)


def _validate_ticker_input(ticker: str) -> None:
    """Validate ticker symbol input.

    Args:
        ticker: Ticker symbol.

    Raises:
        InvalidInputError: If ticker is empty or only whitespace.
    """
    if not ticker or not ticker.strip():
        raise InvalidInputError("Ticker symbol must be a non-empty string")


def _validate_date_range(start_date: datetime, end_date: datetime | None) -> None:
    """Validate the date range for download.

    Args:
        start_date: Start date.
        end_date: End date (None = up to the last trading day).

    Raises:
        InvalidInputError: If start_date >= end_date.
    """
    if end_date is not None and start_date >= end_date:
        msg = f"Invalid date range: start_date {start_date} >= end_date {end_date}"
        raise InvalidInputError(msg)


def _download_yfinance_data(
    ticker: str,
    start_date: datetime,
    end_date: datetime | None,
) -> pd.DataFrame:
    """Download raw OHLCV data from yfinance.

    Tries ``yf.download`` first. If the result is empty, falls back to
    ``Ticker.history``. Prices are requested unadjusted so the
    ``Adj Close`` column is available.

    Args:
        ticker: Ticker symbol.
        start_date: Start date.
        end_date: End date.

    Returns:
        DataFrame indexed by date with flat column names.
    """
    hist = yf.download(
        ticker, start=start_date, end=end_date, progress=False, auto_adjust=False
    )
    if hist is None or hist.empty:
        logger.warning("yf.download returned no data for %s, trying Ticker.history", ticker)
        hist = yf.Ticker(ticker).history(
            start=start_date, end=end_date, auto_adjust=False, actions=False
        )

    hist = hist.copy()

    # Handle MultiIndex columns from yf.download() (e.g., ('Adj Close', 'AAPL'))
    if isinstance(hist.columns, pd.MultiIndex):
        hist.columns = hist.columns.get_level_values(0)

    return hist


def _extract_adjusted_close(hist: pd.DataFrame, ticker: str) -> pd.Series:
    """Pick the adjusted close column, falling back to the close column."""
    if YF_ADJ_CLOSE_COLUMN in hist.columns:
        column = YF_ADJ_CLOSE_COLUMN
    elif YF_CLOSE_COLUMN in hist.columns:
        logger.warning(
            "No '%s' column for %s, using '%s'", YF_ADJ_CLOSE_COLUMN, ticker, YF_CLOSE_COLUMN
        )
        column = YF_CLOSE_COLUMN
    else:
        raise InvalidInputError(
            f"Downloaded data for {ticker} has no close price column: {list(hist.columns)}"
        )
    prices = hist[column].copy()
    index = pd.DatetimeIndex(prices.index)
    if index.tz is not None:
        index = index.tz_localize(None)
    prices.index = index
    prices.index.name = "date"
    prices.name = ticker
    return prices


def download_price_series(
    ticker: str,
    start_date: datetime,
    end_date: datetime | None = None,
) -> pd.Series:
    """Download the daily adjusted close prices of a ticker.

    The result is the raw series as delivered by the data source; missing
    values and ordering are validated afterwards by ``build_price_series``.

    Args:
        ticker: Ticker symbol (e.g. "AAPL").
        start_date: First requested day.
        end_date: Last requested day, None for the latest available.

    Returns:
        Series of adjusted close prices indexed by date, named after the ticker.

    Raises:
        InvalidInputError: If inputs are invalid or no data was returned.
    """
    _validate_ticker_input(ticker)
    _validate_date_range(start_date, end_date)

    try:
        hist = _download_yfinance_data(ticker, start_date, end_date)
    except Exception as exc:
        logger.error("Error downloading data for ticker %s: %s", ticker, exc)
        raise

    if hist.empty:
        raise InvalidInputError(f"Empty data received for ticker {ticker}")

    prices = _extract_adjusted_close(hist, ticker)
    logger.info(
        "Downloaded %d prices for %s between %s and %s",
        len(prices),
        ticker,
        prices.index.min().date(),
        prices.index.max().date(),
    )
    return prices
