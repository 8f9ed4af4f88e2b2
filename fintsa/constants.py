"""Constants for the financial time-series study."""

from __future__ import annotations

from datetime import datetime

# ============================================================================
# DATA PIPELINE CONSTANTS
# ============================================================================

DEFAULT_TICKER: str = "AAPL"
DATA_FETCH_START_DATE = datetime(2010, 1, 1)

# yfinance column names
YF_CLOSE_COLUMN: str = "Close"
YF_ADJ_CLOSE_COLUMN: str = "Adj Close"

# Monthly AirPassengers totals in thousands, 1949-01 .. 1960-12
AIR_PASSENGERS_START: str = "1949-01-01"
AIR_PASSENGERS_FREQ: str = "MS"
AIR_PASSENGERS_PERIOD: int = 12

# ============================================================================
# DESCRIPTIVE STATISTICS & NORMALITY
# ============================================================================

STATS_MIN_OBSERVATIONS: int = 2
JARQUE_BERA_LOW_POWER_THRESHOLD: int = 30  # JB has poor power below ~30 obs
JARQUE_BERA_DF: int = 2
NORMAL_KURTOSIS: float = 3.0

# ============================================================================
# AUTOCORRELATION
# ============================================================================

ACF_PACF_DEFAULT_LAGS: int = 50
ACF_MIN_OBSERVATIONS: int = 2
ACF_CONFIDENCE_Z: float = 1.96

# ============================================================================
# STATIONARITY
# ============================================================================

STATIONARITY_DEFAULT_ALPHA: float = 0.05

# ============================================================================
# ARMA DEFAULTS
# ============================================================================

# White noise, AR(1) and MA(1) on log returns
ARMA_DEFAULT_ORDERS: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (1, 0, 0),
    (0, 0, 1),
)
ARMA_DEFAULT_TREND: str = "c"  # Constant (mean) term, returns are not demeaned
ARMA_DEFAULT_MAXITER: int = 200
ARMA_MIN_OBSERVATIONS: int = 10  # Added to p + q for the minimum sample size
ARMA_LJUNG_BOX_LAGS_DEFAULT: int = 10

# ============================================================================
# EXPONENTIAL SMOOTHING DEFAULTS
# ============================================================================

SMOOTHING_DEFAULT_HORIZON: int = 60  # Five years of monthly data
SMOOTHING_DEFAULT_PERIOD: int = AIR_PASSENGERS_PERIOD
SMOOTHING_DEFAULT_SEASONAL_MODE: str = "multiplicative"
SMOOTHING_SEASONAL_MODES: tuple[str, ...] = ("additive", "multiplicative")
SMOOTHING_MIN_SEASONS: int = 2
SMOOTHING_PARAM_BOUNDS: tuple[float, float] = (0.0, 1.0)
SMOOTHING_INIT_ALPHA: float = 0.3
SMOOTHING_INIT_BETA: float = 0.1
SMOOTHING_INIT_GAMMA: float = 0.1
SMOOTHING_MAXITER: int = 1000
SMOOTHING_FTOL: float = 1e-10

# Natural seasonal cycle for pandas frequency prefixes
FREQUENCY_NATURAL_PERIODS: dict[str, int] = {
    "M": 12,
    "MS": 12,
    "ME": 12,
    "Q": 4,
    "QS": 4,
    "QE": 4,
    "W": 52,
    "D": 7,
    "B": 5,
    "H": 24,
    "h": 24,
}

# ============================================================================
# VISUALIZATION CONSTANTS
# ============================================================================

PLOT_DPI: int = 150
PLOT_ALPHA_LIGHT: float = 0.3
PLOT_ALPHA_FILL: float = 0.2
LINEWIDTH_DEFAULT: float = 0.8
LINEWIDTH_BOLD: float = 2.0
RETURNS_HISTOGRAM_BINS: int = 50

COLOR_PRICE: str = "steelblue"
COLOR_RETURNS: str = "darkred"
COLOR_SQUARED_RETURNS: str = "darkgreen"
COLOR_HISTOGRAM: str = "lightblue"
COLOR_NORMAL_FIT: str = "red"
COLOR_ACTUAL: str = "black"
COLOR_SES: str = "darkgreen"
COLOR_HOLT: str = "red"
COLOR_HOLT_WINTERS: str = "blue"

FIGURE_SIZE_DEFAULT: tuple[int, int] = (10, 4)
FIGURE_SIZE_ACF_PACF: tuple[int, int] = (14, 4)
FIGURE_SIZE_RESIDUALS_ACF: tuple[int, int] = (15, 4)
FIGURE_SIZE_FORECASTS: tuple[int, int] = (12, 6)
FIGURE_SIZE_QQ: tuple[int, int] = (6, 6)

FONTSIZE_LABEL: int = 11
FONTSIZE_TITLE: int = 13

# ============================================================================
# GENERAL CONSTANTS
# ============================================================================

DATE_FORMAT_DEFAULT: str = "%Y-%m-%d"
REPORT_SEPARATOR_LENGTH: int = 70
