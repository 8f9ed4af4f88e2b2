"""Common plotting utilities shared by the analysis plots.

These helpers keep figure creation, saving and axis decoration consistent
across the price, return, correlogram and forecast figures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, cast

import matplotlib.dates as mdates
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy import stats

from fintsa.constants import (
    COLOR_HISTOGRAM,
    COLOR_NORMAL_FIT,
    LINEWIDTH_BOLD,
    LINEWIDTH_DEFAULT,
    PLOT_ALPHA_FILL,
    PLOT_ALPHA_LIGHT,
    PLOT_DPI,
    RETURNS_HISTOGRAM_BINS,
)
from fintsa.utils import get_logger

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

logger = get_logger(__name__)
_DATE_AXIS_ROTATION = 45
_TEXTBOX_STYLE_DEFAULT = {"boxstyle": "round", "facecolor": "wheat", "alpha": 0.8}


# ============================================================================
# Figure creation and saving
# ============================================================================


def create_standard_figure(
    n_rows: int = 1,
    n_cols: int = 1,
    figsize: tuple[float, float] | None = None,
) -> tuple[Figure, Any]:
    """Create a matplotlib figure with a grid of subplots.

    Args:
        n_rows: Number of subplot rows.
        n_cols: Number of subplot columns.
        figsize: Figure size. If None, uses matplotlib defaults.

    Returns:
        Tuple of (figure, axes).
    """
    if figsize is not None:
        fig, axes = plt.subplots(n_rows, n_cols, figsize=figsize)
    else:
        fig, axes = plt.subplots(n_rows, n_cols)
    return fig, axes


def save_figure(
    fig: Figure,
    output_path: str | Path,
    *,
    dpi: int = PLOT_DPI,
    bbox_inches: str = "tight",
    close_after: bool = True,
) -> Path:
    """Save a figure, creating parent directories as needed.

    Args:
        fig: Figure to save.
        output_path: Output file path.
        dpi: Dots per inch for rasterized output.
        bbox_inches: Bounding box setting ('tight' or None).
        close_after: Close figure after saving.

    Returns:
        Path of the written file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches=bbox_inches)
    if close_after:
        plt.close(fig)
    logger.info(f"Saved plot to: {output_path}")
    return output_path


# ============================================================================
# Axis decoration
# ============================================================================


def format_date_axis(
    ax: Axes,
    *,
    rotation: float = _DATE_AXIS_ROTATION,
    ha: str = "right",
) -> None:
    """Format x-axis for dates with automatic year/month ticks."""
    locator = mdates.AutoDateLocator()
    ax.xaxis.set_major_locator(locator)
    ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))
    for label in ax.xaxis.get_majorticklabels():
        label.set_rotation(rotation)
        label.set_horizontalalignment(cast(Literal["left", "center", "right"], ha))


def add_zero_line(
    ax: Axes,
    *,
    color: str = "black",
    linewidth: float = LINEWIDTH_DEFAULT,
    linestyle: str = "--",
    alpha: float = 0.5,
) -> None:
    """Add horizontal line at y=0."""
    ax.axhline(0, color=color, linewidth=linewidth, linestyle=linestyle, alpha=alpha)


def add_confidence_bands(
    ax: Axes,
    bound: float,
    *,
    color: str = "blue",
    linestyle: str = "--",
    linewidth: float = 1.0,
    label: str | None = None,
) -> None:
    """Add horizontal bands at +-bound.

    Args:
        ax: Matplotlib axes.
        bound: Half-width of the band (e.g. 1.96 / sqrt(n)).
        color: Band color.
        linestyle: Line style.
        linewidth: Line width.
        label: Label for legend (applied to upper band only).
    """
    ax.axhline(bound, color=color, linestyle=linestyle, linewidth=linewidth, label=label)
    ax.axhline(-bound, color=color, linestyle=linestyle, linewidth=linewidth)


def add_prediction_band(
    ax: Axes,
    lower: pd.Series,
    upper: pd.Series,
    *,
    color: str = "blue",
    alpha: float = PLOT_ALPHA_FILL,
    label: str | None = None,
) -> None:
    """Shade the area between forecast interval bounds."""
    ax.fill_between(
        lower.index,
        lower.to_numpy(),
        upper.to_numpy(),
        color=color,
        alpha=alpha,
        label=label,
    )


def add_grid(ax: Axes, *, alpha: float = PLOT_ALPHA_LIGHT, linestyle: str = "--") -> None:
    """Add grid to axes with standard settings."""
    ax.grid(True, alpha=alpha, linestyle=linestyle)


def add_legend(ax: Axes, *, loc: str = "best", framealpha: float = 0.9, fontsize: int = 9) -> None:
    """Add legend to axes with standard settings."""
    ax.legend(loc=loc, framealpha=framealpha, fontsize=fontsize)


# ============================================================================
# Statistical plot components
# ============================================================================


def plot_correlogram(
    ax: Axes,
    values: np.ndarray,
    lags: np.ndarray,
    bound: float,
    *,
    title: str,
    ylabel: str = "ACF",
) -> None:
    """Draw a correlogram as vertical bars with +-bound significance lines."""
    ax.vlines(lags, 0.0, values, colors="black", linewidth=LINEWIDTH_BOLD / 2)
    add_zero_line(ax, alpha=1.0, linestyle="-")
    add_confidence_bands(ax, bound)
    ax.set_title(title)
    ax.set_xlabel("Lag")
    ax.set_ylabel(ylabel)
    ax.set_ylim(min(-1.0, float(np.min(values)) - 0.05), 1.05)


def plot_histogram_with_normal_overlay(
    ax: Axes,
    data: np.ndarray | pd.Series,
    *,
    bins: int = RETURNS_HISTOGRAM_BINS,
    hist_color: str = COLOR_HISTOGRAM,
    fit_color: str = COLOR_NORMAL_FIT,
) -> tuple[float, float]:
    """Plot a density histogram with the normal density of matching mean and std.

    Returns:
        Tuple of (mean, std) of the data.
    """
    values = np.asarray(data, dtype=float)
    values = values[np.isfinite(values)]
    if values.size == 0:
        logger.warning("No valid data for histogram")
        return (0.0, 0.0)

    mean = float(np.mean(values))
    std = float(np.std(values, ddof=1)) if values.size > 1 else 0.0
    ax.hist(
        values,
        bins=bins,
        density=True,
        alpha=0.7,
        color=hist_color,
        edgecolor="black",
        linewidth=0.5,
    )
    if std > 0:
        x_range = np.linspace(values.min(), values.max(), 500)
        ax.plot(
            x_range,
            stats.norm.pdf(x_range, mean, std),
            color=fit_color,
            linewidth=LINEWIDTH_BOLD,
            label="Normal fit",
        )
    return mean, std


def plot_qq_normal(ax: Axes, data: np.ndarray | pd.Series) -> float:
    """Plot sample quantiles against normal quantiles.

    Returns:
        Correlation coefficient between theoretical and sample quantiles.
    """
    values = np.asarray(data, dtype=float)
    values = values[np.isfinite(values)]
    if values.size < 2:
        logger.warning("No valid data for Q-Q plot")
        return 0.0

    (theoretical, ordered), (slope, intercept, corr) = stats.probplot(values, dist="norm")
    ax.scatter(theoretical, ordered, alpha=0.6, s=12, edgecolors="black", linewidths=0.3)
    ax.plot(theoretical, slope * theoretical + intercept, "r--", linewidth=LINEWIDTH_BOLD)
    ax.text(
        0.05,
        0.95,
        f"Correlation: {corr:.4f}",
        transform=ax.transAxes,
        fontsize=10,
        va="top",
        bbox=_TEXTBOX_STYLE_DEFAULT,
    )
    return float(corr)
