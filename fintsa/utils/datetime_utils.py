"""DateTime utilities for the project.

Provides date parsing for configuration values and date-range checks on
downloaded price data.
"""

from __future__ import annotations

from datetime import datetime

import pandas as pd

__all__ = [
    "normalize_timestamp_to_datetime",
    "parse_date_value",
]


def normalize_timestamp_to_datetime(timestamp: pd.Timestamp) -> pd.Timestamp:
    """Convert pandas Timestamp to timezone-naive datetime.

    Args:
        timestamp: Pandas Timestamp (may be timezone-aware or naive).

    Returns:
        Timezone-naive Timestamp object.
    """
    if timestamp.tzinfo is not None:
        return timestamp.tz_localize(None)
    return timestamp


def parse_date_value(value: object, *, context: str = "date") -> pd.Timestamp:
    """Parse a date given as string, datetime or Timestamp.

    Args:
        value: Date value ("2010-01-01", datetime, Timestamp).
        context: Description of the value for error messages.

    Returns:
        Timezone-naive Timestamp.

    Raises:
        ValueError: If the value cannot be parsed.

    Examples:
        >>> parse_date_value("2024-01-01")
        Timestamp('2024-01-01 00:00:00')
    """
    if isinstance(value, (str, datetime, pd.Timestamp)):
        try:
            ts = pd.Timestamp(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{context}: cannot parse date {value!r}") from exc
        if ts is pd.NaT:
            raise ValueError(f"{context}: cannot parse date {value!r}")
        return normalize_timestamp_to_datetime(ts)
    raise ValueError(f"{context}: unsupported type {type(value).__name__}")
