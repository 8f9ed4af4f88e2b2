from __future__ import annotations

import numpy as np
import pytest
from scipy import stats

from fintsa.utils.metrics import central_moment, chi2_sf


def test_chi2_sf_matches_scipy() -> None:
    assert chi2_sf(5.99, 2) == pytest.approx(stats.chi2.sf(5.99, 2))
    assert chi2_sf(0.0, 3) == pytest.approx(1.0)


def test_chi2_sf_rejects_zero_df() -> None:
    with pytest.raises(ValueError):
        chi2_sf(1.0, 0)


def test_central_moment() -> None:
    x = np.array([1.0, 2.0, 3.0, 4.0])
    assert central_moment(x, 1) == pytest.approx(0.0)
    assert central_moment(x, 2) == pytest.approx(np.var(x))
