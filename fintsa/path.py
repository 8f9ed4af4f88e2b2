"""File and directory paths for the financial time-series study."""

from __future__ import annotations

from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# BASE DIRECTORIES
# ============================================================================

RESULTS_DIR = PROJECT_ROOT / "results"
PLOTS_DIR = PROJECT_ROOT / "plots"

# ============================================================================
# RESULTS FILES
# ============================================================================

ANALYSIS_REPORT_FILENAME = "analysis_report.json"
ANALYSIS_REPORT_FILE = RESULTS_DIR / ANALYSIS_REPORT_FILENAME

# ============================================================================
# PLOT FILE NAMES - joined with the configured plots directory at run time
# ============================================================================

# Returns
PRICE_PLOT_FILENAME = "price.png"
LOG_RETURNS_PLOT_FILENAME = "log_returns.png"
SQUARED_RETURNS_PLOT_FILENAME = "squared_returns.png"
RETURNS_HISTOGRAM_PLOT_FILENAME = "log_returns_histogram.png"
RETURNS_QQ_PLOT_FILENAME = "log_returns_qq.png"

# Autocorrelation
PRICE_ACF_PACF_PLOT_FILENAME = "price_acf_pacf.png"
RETURNS_ACF_PACF_PLOT_FILENAME = "log_returns_acf_pacf.png"

# ARMA
ARMA_RESIDUALS_ACF_PLOT_FILENAME = "arma_residuals_acf.png"

# Exponential smoothing
SEASONAL_SERIES_PLOT_FILENAME = "air_passengers.png"
SMOOTHING_FORECASTS_PLOT_FILENAME = "smoothing_forecasts.png"
