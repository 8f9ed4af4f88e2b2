"""Statsmodels utilities for ARMA models.

Provides utilities for managing statsmodels-specific concerns such as warning
suppression during model fitting.
"""

from __future__ import annotations

import warnings

__all__ = ["suppress_statsmodels_warnings"]


def suppress_statsmodels_warnings() -> None:
    """Suppress common statsmodels warnings for ARMA models.

    Suppresses frequent but uninformative warnings emitted by statsmodels
    when fitting on daily trading data, whose DatetimeIndex has no regular
    frequency:
    - Lack of supported date index (when using integer indices)
    - Date index frequency information
    - General UserWarnings from the statsmodels module

    Convergence problems are not hidden: they are read from the optimizer
    output and raised as ``ConvergenceError``.

    Notes:
        - This function modifies the global warnings filter
        - Call it once per function that fits ARMA models
    """
    warnings.filterwarnings("ignore", category=UserWarning, module="statsmodels")
    warnings.filterwarnings("ignore", message=".*No supported index is available.*")
    warnings.filterwarnings("ignore", message=".*date index has been provided.*")
    warnings.filterwarnings("ignore", message=".*frequency information.*")
