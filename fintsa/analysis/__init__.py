"""Distributional, autocorrelation and stationarity analysis."""

from __future__ import annotations

from fintsa.analysis.autocorrelation import (
    AutocorrelationResult,
    analyze_autocorrelation,
    compute_acf,
    compute_pacf,
    default_max_lag,
)
from fintsa.analysis.descriptive_stats import (
    DescriptiveStats,
    JarqueBeraResult,
    compute_descriptive_stats,
    jarque_bera_statistic,
    jarque_bera_test,
)
from fintsa.analysis.stationarity import (
    StationarityReport,
    adf_test,
    evaluate_stationarity,
    kpss_test,
)

__all__ = [
    "AutocorrelationResult",
    "DescriptiveStats",
    "JarqueBeraResult",
    "StationarityReport",
    "adf_test",
    "analyze_autocorrelation",
    "compute_acf",
    "compute_descriptive_stats",
    "compute_pacf",
    "default_max_lag",
    "evaluate_stationarity",
    "jarque_bera_statistic",
    "jarque_bera_test",
    "kpss_test",
]
