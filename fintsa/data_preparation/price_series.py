"""Price series ingestion.

Missing-value handling happens here, once: the raw series is either rejected
or explicitly cleaned, and every later stage works on complete data.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from fintsa.exceptions import InvalidInputError
from fintsa.utils import get_logger

logger = get_logger(__name__)


def _to_numeric(raw: pd.Series) -> pd.Series:
    """Convert values to float, turning unparseable entries into NaN."""
    numeric = pd.to_numeric(raw, errors="coerce").astype(float)
    return numeric.replace([np.inf, -np.inf], np.nan)


def _validate_index(prices: pd.Series) -> None:
    """Check that timestamps are strictly increasing.

    Raises:
        InvalidInputError: If the index has duplicates or is not sorted.
    """
    if isinstance(prices.index, pd.DatetimeIndex):
        if prices.index.hasnans:
            raise InvalidInputError("Price index contains missing timestamps")
    if not prices.index.is_monotonic_increasing or prices.index.has_duplicates:
        raise InvalidInputError("Price timestamps must be strictly increasing")


def build_price_series(
    raw: pd.Series | Iterable[float],
    *,
    name: str | None = None,
    drop_missing: bool = False,
) -> pd.Series:
    """Validate raw prices and return an immutable-by-convention PriceSeries.

    Args:
        raw: Raw prices, ideally a Series indexed by timestamps. Plain
            iterables get a positional integer index.
        name: Series name (defaults to the raw series name).
        drop_missing: If True, drop missing / non-numeric prices and log how
            many were removed. If False, any missing price is an error.

    Returns:
        Float Series with strictly increasing index.

    Raises:
        InvalidInputError: If values are missing (and not dropped), the
            index is not strictly increasing, or nothing is left.
    """
    series = raw.copy() if isinstance(raw, pd.Series) else pd.Series(list(raw))
    prices = _to_numeric(series)

    n_missing = int(prices.isna().sum())
    if n_missing:
        if not drop_missing:
            raise InvalidInputError(
                f"Price series contains {n_missing} missing or non-numeric values; "
                "pass drop_missing=True to remove them"
            )
        logger.warning("Dropping %d missing prices at ingestion", n_missing)
        prices = prices.dropna()

    if prices.empty:
        raise InvalidInputError("Price series is empty")

    _validate_index(prices)
    prices.name = name if name is not None else series.name
    return prices
