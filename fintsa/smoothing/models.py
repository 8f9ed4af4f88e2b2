"""Model specifications and fitted state of the exponential smoothing family.

Each variant is its own frozen dataclass: the ``*Spec`` classes describe what
to fit (parameters left as None are estimated), the ``*Model`` classes hold
the fitted parameters and the terminal state used for forecasting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
import pandas as pd

from fintsa.constants import SMOOTHING_DEFAULT_PERIOD, SMOOTHING_DEFAULT_SEASONAL_MODE

__all__ = [
    "ExponentialSmoothingModel",
    "ExponentialSmoothingSpec",
    "HoltModel",
    "HoltSpec",
    "HoltWintersModel",
    "HoltWintersSpec",
    "SESModel",
    "SESSpec",
]


# ============================================================================
# SPECIFICATIONS
# ============================================================================


@dataclass(frozen=True)
class SESSpec:
    """Simple exponential smoothing (level only)."""

    alpha: float | None = None


@dataclass(frozen=True)
class HoltSpec:
    """Holt's linear trend method (level + trend)."""

    alpha: float | None = None
    beta: float | None = None


@dataclass(frozen=True)
class HoltWintersSpec:
    """Holt-Winters method (level + trend + seasonal)."""

    period: int = SMOOTHING_DEFAULT_PERIOD
    seasonal_mode: str = SMOOTHING_DEFAULT_SEASONAL_MODE
    alpha: float | None = None
    beta: float | None = None
    gamma: float | None = None


ExponentialSmoothingSpec = Union[SESSpec, HoltSpec, HoltWintersSpec]


# ============================================================================
# FITTED MODELS
# ============================================================================


@dataclass(frozen=True)
class SESModel:
    """Fitted simple exponential smoothing.

    Attributes:
        alpha: Level smoothing parameter.
        level: Final level.
        fitted: One-step-ahead predictions (NaN where no prediction exists).
        sse: Sum of squared one-step-ahead errors.
    """

    alpha: float
    level: float
    fitted: pd.Series
    sse: float

    @property
    def name(self) -> str:
        return "SES"


@dataclass(frozen=True)
class HoltModel:
    """Fitted Holt linear trend model."""

    alpha: float
    beta: float
    level: float
    trend: float
    fitted: pd.Series
    sse: float

    @property
    def name(self) -> str:
        return "Holt"


@dataclass(frozen=True)
class HoltWintersModel:
    """Fitted Holt-Winters model.

    ``seasonal`` holds the last ``period`` seasonal indices in time order, so
    the forecast k steps ahead uses ``seasonal[(k - 1) % period]``.
    """

    alpha: float
    beta: float
    gamma: float
    level: float
    trend: float
    seasonal: np.ndarray
    period: int
    seasonal_mode: str
    fitted: pd.Series
    sse: float

    @property
    def name(self) -> str:
        return f"Holt-Winters ({self.seasonal_mode})"


ExponentialSmoothingModel = Union[SESModel, HoltModel, HoltWintersModel]
