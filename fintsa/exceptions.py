"""Error kinds raised by the analysis stages.

Every error is terminal for the stage that raises it and propagates to the
caller. The concrete classes also derive from ``ValueError`` or
``RuntimeError`` so callers catching the builtin kinds keep working.
"""

from __future__ import annotations

__all__ = [
    "AnalysisError",
    "InvalidInputError",
    "InsufficientDataError",
    "ConvergenceError",
    "InvalidPeriodError",
    "OptimizationError",
]


class AnalysisError(Exception):
    """Base class for all analysis failures."""


class InvalidInputError(AnalysisError, ValueError):
    """Malformed or unusable input (non-positive prices, bad orders, ...)."""


class InsufficientDataError(AnalysisError, ValueError):
    """Sample too small for the requested statistic or model."""


class ConvergenceError(AnalysisError, RuntimeError):
    """ARMA likelihood optimizer did not converge."""


class InvalidPeriodError(AnalysisError, ValueError):
    """Seasonal period incompatible with the series."""


class OptimizationError(AnalysisError, RuntimeError):
    """Smoothing-parameter search failed."""
