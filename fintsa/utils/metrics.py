"""Statistical helpers shared by the test statistics."""

from __future__ import annotations

import numpy as np
from scipy.stats import chi2

__all__ = [
    "chi2_sf",
    "central_moment",
]


def chi2_sf(x: float, df: int) -> float:
    """Chi-square survival function P[X >= x].

    Args:
        x: Test statistic value.
        df: Degrees of freedom (must be >= 1).

    Returns:
        P-value (survival function value).
    """
    if df < 1:
        raise ValueError(f"Degrees of freedom must be >= 1, got {df}")
    return float(chi2.sf(x, df))


def central_moment(x: np.ndarray, order: int) -> float:
    """Central moment with divisor n (population moment)."""
    xc = x - float(np.mean(x))
    return float(np.mean(xc**order))
