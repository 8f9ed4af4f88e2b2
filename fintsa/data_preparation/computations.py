"""Return computations on a validated price series."""

from __future__ import annotations

import numpy as np
import pandas as pd

from fintsa.exceptions import InvalidInputError
from fintsa.utils import get_logger, validate_series

logger = get_logger(__name__)

__all__ = [
    "compute_log_returns",
    "reconstruct_prices",
    "squared_returns",
]


def compute_log_returns(prices: pd.Series) -> pd.Series:
    """Compute log returns r[t] = ln(p[t]) - ln(p[t-1]).

    The first (undefined) return is dropped, so the result has one point
    fewer than the input and is indexed by the timestamps of prices 2..n.

    Args:
        prices: PriceSeries.

    Returns:
        ReturnSeries named ``log_return``.

    Raises:
        InvalidInputError: If fewer than 2 prices are supplied, any price is
            missing, or any price is <= 0 (log undefined).

    Examples:
        >>> compute_log_returns(pd.Series([100.0, 105.0, 102.9])).round(5).tolist()
        [0.04879, -0.0202]
    """
    if prices is None or len(prices) < 2:
        n = 0 if prices is None else len(prices)
        raise InvalidInputError(f"At least 2 prices are required, got {n}")
    p = validate_series(prices)
    if (p <= 0).any():
        n_bad = int((p <= 0).sum())
        raise InvalidInputError(f"Prices must be strictly positive ({n_bad} values <= 0)")

    log_prices = np.log(p.to_numpy())
    returns = pd.Series(np.diff(log_prices), index=p.index[1:], name="log_return")
    logger.debug("Computed %d log returns", len(returns))
    return returns


def reconstruct_prices(returns: pd.Series, initial_price: float) -> pd.Series:
    """Rebuild prices from log returns and the first price.

    Inverse of ``compute_log_returns``: ``p[t] = p[0] * exp(sum(r[1..t]))``.

    Args:
        returns: ReturnSeries.
        initial_price: Price preceding the first return (> 0).

    Returns:
        Series of ``len(returns) + 1`` prices with a positional index.
    """
    if initial_price <= 0:
        raise InvalidInputError(f"initial_price must be > 0, got {initial_price}")
    r = validate_series(returns).to_numpy()
    cumulative = np.concatenate(([0.0], np.cumsum(r)))
    values = float(initial_price) * np.exp(cumulative)
    return pd.Series(values, name="price")


def squared_returns(returns: pd.Series) -> pd.Series:
    """Squared log returns, a simple volatility proxy."""
    r = validate_series(returns)
    return (r**2).rename("squared_log_return")
