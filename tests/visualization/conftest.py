"""Pytest fixtures for visualization tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest


@pytest.fixture
def sample_figure_and_axes():
    """Provide a sample matplotlib figure and axes, closed after the test."""
    from fintsa.visualization.plotting_utils import create_standard_figure

    fig, ax = create_standard_figure(figsize=(6, 4))
    yield fig, ax
    plt.close(fig)
