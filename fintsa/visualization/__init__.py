"""Plotting sink: matplotlib figures written as PNG files."""

from __future__ import annotations

from fintsa.visualization.plots import (
    plot_acf_pacf,
    plot_forecast_comparison,
    plot_residual_acfs,
    plot_returns_histogram,
    plot_returns_qq,
    plot_series,
)
from fintsa.visualization.plotting_utils import (
    add_confidence_bands,
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

__all__ = [
    "add_confidence_bands",
    "add_grid",
    "add_legend",
    "add_prediction_band",
    "add_zero_line",
    "create_standard_figure",
    "format_date_axis",
    "plot_acf_pacf",
    "plot_correlogram",
    "plot_forecast_comparison",
    "plot_histogram_with_normal_overlay",
    "plot_qq_normal",
    "plot_residual_acfs",
    "plot_returns_histogram",
    "plot_returns_qq",
    "plot_series",
    "save_figure",
]
