"""Validation utilities for series, files and parameters.

This module provides validation functions for:
- File existence validation
- Parameter validation (significance level)
- Series validation (numeric, finite, non-empty)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

from fintsa.exceptions import InsufficientDataError, InvalidInputError

__all__ = [
    "validate_alpha",
    "validate_file_exists",
    "validate_min_length",
    "validate_series",
    "as_finite_array",
]


def validate_file_exists(file_path: Path, file_name: str | None = None) -> None:
    """Validate that a file exists.

    Args:
        file_path: Path to the file to check.
        file_name: Optional name of the file for error message.
            If None, uses the file path.

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path.exists():
        if file_name is None:
            file_name = str(file_path)
        msg = f"{file_name} not found: {file_path}"
        raise FileNotFoundError(msg)


def validate_alpha(alpha: float) -> None:
    """Validate that a significance level lies strictly between 0 and 1.

    Raises:
        ValueError: If alpha is not in (0, 1).
    """
    if not 0 < alpha < 1:
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")


def validate_series(series: pd.Series | Iterable[float] | None) -> pd.Series:
    """Return a float Series, rejecting missing or infinite values.

    Missing values are handled once at ingestion, so every later stage
    receives complete data and treats a NaN as a caller error.

    Args:
        series: Input time series (Series, array or list).

    Returns:
        Series converted to float.

    Raises:
        InvalidInputError: If series is None, empty, non-numeric, or holds
            NaN / infinite values.
    """
    if series is None:
        raise InvalidInputError("series is None")
    s = series if isinstance(series, pd.Series) else pd.Series(list(series))
    try:
        s = s.astype(float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"series must be numeric: {exc}") from exc
    if s.empty:
        raise InvalidInputError("series is empty")
    if not np.isfinite(s.to_numpy()).all():
        raise InvalidInputError("series contains missing or infinite values")
    return s


def validate_min_length(series: pd.Series | np.ndarray, minimum: int, what: str) -> None:
    """Validate that a sample is large enough for a statistic.

    Raises:
        InsufficientDataError: If len(series) < minimum.
    """
    if len(series) < minimum:
        raise InsufficientDataError(
            f"{what} requires at least {minimum} observations, got {len(series)}"
        )


def as_finite_array(series: pd.Series | np.ndarray | Iterable[float]) -> np.ndarray:
    """Return the values of a validated series as a 1-D float array."""
    return validate_series(
        series if isinstance(series, pd.Series) else pd.Series(np.asarray(series, dtype=float))
    ).to_numpy(dtype=float)
