"""Single analysis pass: returns, distribution, autocorrelation, ARMA, smoothing.

Stages run in order and share an explicit ``AnalysisConfig``. A failing
stage is logged and its error re-raised; later stages are not run.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

import pandas as pd

from fintsa import visualization as viz
from fintsa.analysis import (
    AutocorrelationResult,
    DescriptiveStats,
    JarqueBeraResult,
    StationarityReport,
    analyze_autocorrelation,
    compute_descriptive_stats,
    evaluate_stationarity,
    jarque_bera_test,
)
from fintsa.arma import FittedARMAModel, ResidualDiagnostics, diagnose_residuals, fit_arma_model
from fintsa.config import AnalysisConfig
from fintsa.constants import COLOR_RETURNS, COLOR_SQUARED_RETURNS
from fintsa.data_fetching import download_price_series, load_air_passengers
from fintsa.data_preparation import build_price_series, compute_log_returns, squared_returns
from fintsa.forecast import Forecast
from fintsa.path import (
    ARMA_RESIDUALS_ACF_PLOT_FILENAME,
    LOG_RETURNS_PLOT_FILENAME,
    PRICE_ACF_PACF_PLOT_FILENAME,
    PRICE_PLOT_FILENAME,
    RETURNS_ACF_PACF_PLOT_FILENAME,
    RETURNS_HISTOGRAM_PLOT_FILENAME,
    RETURNS_QQ_PLOT_FILENAME,
    SEASONAL_SERIES_PLOT_FILENAME,
    SMOOTHING_FORECASTS_PLOT_FILENAME,
    SQUARED_RETURNS_PLOT_FILENAME,
)
from fintsa.reporting import log_summary, save_report
from fintsa.smoothing import (
    ExponentialSmoothingModel,
    HoltSpec,
    HoltWintersSpec,
    SESSpec,
    fit_smoothing,
    forecast_smoothing,
)
from fintsa.utils import get_logger

logger = get_logger(__name__)


@dataclass
class ReturnAnalysis:
    """Price series, log returns and their distributional summary."""

    prices: pd.Series
    returns: pd.Series
    stats: DescriptiveStats
    jarque_bera: JarqueBeraResult
    price_autocorrelation: AutocorrelationResult
    returns_autocorrelation: AutocorrelationResult
    price_stationarity: StationarityReport
    returns_stationarity: StationarityReport


@dataclass
class ArmaAnalysis:
    """Fitted ARMA models with their residual diagnostics, in fit order."""

    models: list[FittedARMAModel]
    diagnostics: list[ResidualDiagnostics]

    def best_by_aic(self) -> FittedARMAModel:
        return min(self.models, key=lambda m: m.aic)


@dataclass
class SmoothingAnalysis:
    """Smoothing models fitted on the seasonal series and their forecasts."""

    series: pd.Series
    models: list[ExponentialSmoothingModel]
    forecasts: list[Forecast]


@dataclass
class AnalysisResults:
    """Everything produced by one analysis pass."""

    config: AnalysisConfig
    returns: ReturnAnalysis
    arma: ArmaAnalysis
    smoothing: SmoothingAnalysis
    plot_paths: list[Path] = field(default_factory=list)
    report_path: Path | None = None


@contextmanager
def _stage(name: str) -> Iterator[None]:
    """Log stage boundaries; log and re-raise failures."""
    logger.info(f"=== {name} ===")
    try:
        yield
    except Exception as e:
        logger.error(f"Stage '{name}' failed: {type(e).__name__}: {e}")
        raise


# ============================================================================
# STAGES
# ============================================================================


def load_prices(config: AnalysisConfig) -> pd.Series:
    """Download adjusted closing prices and validate them."""
    raw = download_price_series(config.ticker, config.start_date, config.end_date)
    return build_price_series(raw, name=config.ticker, drop_missing=config.drop_missing)


def analyze_returns(prices: pd.Series, config: AnalysisConfig) -> ReturnAnalysis:
    """Log returns, moments, Jarque-Bera, ACF/PACF and stationarity."""
    returns = compute_log_returns(prices)
    stats = compute_descriptive_stats(returns)
    jb = jarque_bera_test(returns)
    return ReturnAnalysis(
        prices=prices,
        returns=returns,
        stats=stats,
        jarque_bera=jb,
        price_autocorrelation=analyze_autocorrelation(prices, config.acf_max_lag),
        returns_autocorrelation=analyze_autocorrelation(returns, config.acf_max_lag),
        price_stationarity=evaluate_stationarity(prices, alpha=config.alpha),
        returns_stationarity=evaluate_stationarity(returns, alpha=config.alpha),
    )


def analyze_arma(returns: pd.Series, config: AnalysisConfig) -> ArmaAnalysis:
    """Fit every configured ARMA order and diagnose its residuals."""
    models: list[FittedARMAModel] = []
    diagnostics: list[ResidualDiagnostics] = []
    for order in config.arma_orders:
        model = fit_arma_model(returns, order, maxiter=config.arma_maxiter)
        models.append(model)
        diagnostics.append(
            diagnose_residuals(
                model,
                lags=config.ljung_box_lags,
                acf_max_lag=config.acf_max_lag,
            )
        )
    return ArmaAnalysis(models=models, diagnostics=diagnostics)


def analyze_smoothing(series: pd.Series, config: AnalysisConfig) -> SmoothingAnalysis:
    """Fit SES, Holt and Holt-Winters on a seasonal series and forecast each."""
    specs = (
        SESSpec(),
        HoltSpec(),
        HoltWintersSpec(period=config.seasonal_period, seasonal_mode=config.seasonal_mode),
    )
    models = [fit_smoothing(series, spec) for spec in specs]
    forecasts = [
        forecast_smoothing(model, config.forecast_horizon, alpha=config.alpha) for model in models
    ]
    return SmoothingAnalysis(series=series, models=models, forecasts=forecasts)


def render_plots(results: AnalysisResults) -> list[Path]:
    """Write every figure of the pass to ``config.plots_dir``."""
    out = results.config.plots_dir
    ret = results.returns
    ticker = results.config.ticker
    paths = [
        viz.plot_series(
            ret.prices,
            out / PRICE_PLOT_FILENAME,
            title=f"{ticker} adjusted close",
            ylabel="Price",
        ),
        viz.plot_series(
            ret.returns,
            out / LOG_RETURNS_PLOT_FILENAME,
            title=f"{ticker} daily log returns",
            ylabel="Log return",
            color=COLOR_RETURNS,
            zero_line=True,
        ),
        viz.plot_series(
            squared_returns(ret.returns),
            out / SQUARED_RETURNS_PLOT_FILENAME,
            title=f"{ticker} squared log returns",
            ylabel="Squared log return",
            color=COLOR_SQUARED_RETURNS,
        ),
        viz.plot_returns_histogram(ret.returns, out / RETURNS_HISTOGRAM_PLOT_FILENAME),
        viz.plot_returns_qq(ret.returns, out / RETURNS_QQ_PLOT_FILENAME),
        viz.plot_acf_pacf(
            ret.price_autocorrelation, out / PRICE_ACF_PACF_PLOT_FILENAME, label="prices"
        ),
        viz.plot_acf_pacf(
            ret.returns_autocorrelation,
            out / RETURNS_ACF_PACF_PLOT_FILENAME,
            label="log returns",
        ),
        viz.plot_residual_acfs(results.arma.diagnostics, out / ARMA_RESIDUALS_ACF_PLOT_FILENAME),
        viz.plot_series(
            results.smoothing.series,
            out / SEASONAL_SERIES_PLOT_FILENAME,
            title="Monthly airline passengers",
            ylabel="Passengers (thousands)",
        ),
        viz.plot_forecast_comparison(
            results.smoothing.series,
            results.smoothing.forecasts,
            out / SMOOTHING_FORECASTS_PLOT_FILENAME,
        ),
    ]
    return paths


# ============================================================================
# ENTRY POINT
# ============================================================================


def run_analysis(
    config: AnalysisConfig,
    *,
    prices: pd.Series | None = None,
    seasonal_series: pd.Series | None = None,
    write_report: bool = True,
) -> AnalysisResults:
    """Run the full analysis pass.

    Args:
        config: Analysis settings.
        prices: Price series to analyze instead of downloading ``config.ticker``.
        seasonal_series: Seasonal series for smoothing (default: AirPassengers).
        write_report: Whether to write the JSON report.

    Returns:
        AnalysisResults.

    Raises:
        AnalysisError: Subclass raised by the failing stage.
    """
    with _stage("Data acquisition"):
        if prices is None:
            prices = load_prices(config)
        else:
            prices = build_price_series(
                prices, name=config.ticker, drop_missing=config.drop_missing
            )

    with _stage("Return analysis"):
        return_analysis = analyze_returns(prices, config)

    with _stage("ARMA modelling"):
        arma_analysis = analyze_arma(return_analysis.returns, config)

    with _stage("Exponential smoothing"):
        series = seasonal_series if seasonal_series is not None else load_air_passengers()
        smoothing_analysis = analyze_smoothing(series, config)

    results = AnalysisResults(
        config=config,
        returns=return_analysis,
        arma=arma_analysis,
        smoothing=smoothing_analysis,
    )

    if config.make_plots:
        with _stage("Plotting"):
            results.plot_paths = render_plots(results)

    log_summary(results)
    if write_report:
        with _stage("Report"):
            results.report_path = save_report(results)
    return results
