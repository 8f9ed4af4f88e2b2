"""Figures produced by the analysis pass.

Every function takes the data to draw plus an explicit output path, writes a
PNG and returns the path. Nothing here computes statistics: correlograms are
drawn from precomputed ``AutocorrelationResult`` objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd

from fintsa.analysis.autocorrelation import AutocorrelationResult
from fintsa.arma.diagnostics import ResidualDiagnostics
from fintsa.constants import (
    COLOR_ACTUAL,
    COLOR_HOLT,
    COLOR_HOLT_WINTERS,
    COLOR_PRICE,
    COLOR_SES,
    FIGURE_SIZE_ACF_PACF,
    FIGURE_SIZE_DEFAULT,
    FIGURE_SIZE_FORECASTS,
    FIGURE_SIZE_QQ,
    FIGURE_SIZE_RESIDUALS_ACF,
    FONTSIZE_LABEL,
    FONTSIZE_TITLE,
    LINEWIDTH_BOLD,
    LINEWIDTH_DEFAULT,
)
from fintsa.forecast import Forecast
from fintsa.utils import get_logger
from fintsa.visualization.plotting_utils import (
    add_grid,
    add_legend,
    add_prediction_band,
    add_zero_line,
    create_standard_figure,
    format_date_axis,
    plot_correlogram,
    plot_histogram_with_normal_overlay,
    plot_qq_normal,
    save_figure,
)

logger = get_logger(__name__)

_FORECAST_COLORS = (COLOR_SES, COLOR_HOLT, COLOR_HOLT_WINTERS)


def plot_series(
    series: pd.Series,
    output_path: str | Path,
    *,
    title: str,
    ylabel: str,
    color: str = COLOR_PRICE,
    zero_line: bool = False,
) -> Path:
    """Line plot of a time series (prices, returns, squared returns)."""
    fig, ax = create_standard_figure(figsize=FIGURE_SIZE_DEFAULT)
    ax.plot(series.index, series.to_numpy(), color=color, linewidth=LINEWIDTH_DEFAULT)
    if zero_line:
        add_zero_line(ax)
    ax.set_title(title, fontsize=FONTSIZE_TITLE, fontweight="bold")
    ax.set_ylabel(ylabel, fontsize=FONTSIZE_LABEL)
    add_grid(ax)
    if isinstance(series.index, pd.DatetimeIndex):
        format_date_axis(ax)
    return save_figure(fig, output_path)


def plot_returns_histogram(returns: pd.Series, output_path: str | Path) -> Path:
    """Density histogram of returns with the fitted normal curve."""
    fig, ax = create_standard_figure(figsize=FIGURE_SIZE_DEFAULT)
    mean, std = plot_histogram_with_normal_overlay(ax, returns)
    ax.set_title(
        f"Distribution of log returns (mean={mean:.5f}, sd={std:.5f})",
        fontsize=FONTSIZE_TITLE,
        fontweight="bold",
    )
    ax.set_xlabel("Log return", fontsize=FONTSIZE_LABEL)
    ax.set_ylabel("Density", fontsize=FONTSIZE_LABEL)
    add_legend(ax)
    add_grid(ax)
    return save_figure(fig, output_path)


def plot_returns_qq(returns: pd.Series, output_path: str | Path) -> Path:
    """Normal Q-Q plot of returns."""
    fig, ax = create_standard_figure(figsize=FIGURE_SIZE_QQ)
    plot_qq_normal(ax, returns)
    ax.set_title("Normal Q-Q plot of log returns", fontsize=FONTSIZE_TITLE, fontweight="bold")
    ax.set_xlabel("Theoretical quantiles", fontsize=FONTSIZE_LABEL)
    ax.set_ylabel("Sample quantiles", fontsize=FONTSIZE_LABEL)
    add_grid(ax)
    return save_figure(fig, output_path)


def plot_acf_pacf(
    result: AutocorrelationResult,
    output_path: str | Path,
    *,
    label: str,
) -> Path:
    """Side-by-side ACF (from lag 0) and PACF (from lag 1) panels."""
    fig, axes = create_standard_figure(1, 2, figsize=FIGURE_SIZE_ACF_PACF)
    plot_correlogram(
        axes[0],
        result.acf,
        np.arange(result.max_lag + 1),
        result.confidence_bound,
        title=f"ACF of {label}",
    )
    plot_correlogram(
        axes[1],
        result.pacf,
        np.arange(1, result.max_lag + 1),
        result.confidence_bound,
        title=f"PACF of {label}",
        ylabel="Partial ACF",
    )
    fig.tight_layout()
    return save_figure(fig, output_path)


def plot_residual_acfs(
    diagnostics: Sequence[ResidualDiagnostics],
    output_path: str | Path,
) -> Path:
    """One residual ACF panel per fitted ARMA model."""
    if not diagnostics:
        raise ValueError("At least one residual diagnostic is required")
    fig, axes = create_standard_figure(1, len(diagnostics), figsize=FIGURE_SIZE_RESIDUALS_ACF)
    axes = np.atleast_1d(axes)
    for ax, diag in zip(axes, diagnostics):
        acf = diag.residual_acf
        plot_correlogram(
            ax,
            acf.acf,
            np.arange(acf.max_lag + 1),
            acf.confidence_bound,
            title=f"{diag.model_name} residuals (LB p={diag.ljung_box.p_value:.3f})",
        )
    fig.tight_layout()
    return save_figure(fig, output_path)


def plot_forecast_comparison(
    series: pd.Series,
    forecasts: Sequence[Forecast],
    output_path: str | Path,
    *,
    title: str = "Exponential smoothing forecasts",
    ylabel: str = "Passengers (thousands)",
    shade_last_interval: bool = True,
) -> Path:
    """Observed series followed by each model's point forecast.

    With ``shade_last_interval`` the prediction band of the last forecast
    that carries bounds (Holt-Winters in the analysis pass) is shaded.
    """
    fig, ax = create_standard_figure(figsize=FIGURE_SIZE_FORECASTS)
    ax.plot(
        series.index,
        series.to_numpy(),
        color=COLOR_ACTUAL,
        linewidth=LINEWIDTH_BOLD / 2,
        label="Observed",
    )
    for i, fc in enumerate(forecasts):
        ax.plot(
            fc.values.index,
            fc.values.to_numpy(),
            color=_FORECAST_COLORS[i % len(_FORECAST_COLORS)],
            linewidth=LINEWIDTH_BOLD,
            label=fc.model_name,
        )
    banded = [
        (i, fc) for i, fc in enumerate(forecasts) if fc.lower is not None and fc.upper is not None
    ]
    if shade_last_interval and banded:
        i, fc = banded[-1]
        add_prediction_band(
            ax,
            fc.lower,
            fc.upper,
            color=_FORECAST_COLORS[i % len(_FORECAST_COLORS)],
            label=f"{fc.model_name} prediction interval",
        )
    ax.set_title(title, fontsize=FONTSIZE_TITLE, fontweight="bold")
    ax.set_ylabel(ylabel, fontsize=FONTSIZE_LABEL)
    add_legend(ax, loc="upper left")
    add_grid(ax)
    if isinstance(series.index, pd.DatetimeIndex):
        format_date_axis(ax)
    return save_figure(fig, output_path)
