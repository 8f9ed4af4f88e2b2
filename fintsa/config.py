"""Explicit configuration passed to every analysis stage."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from fintsa.constants import (
    ACF_PACF_DEFAULT_LAGS,
    ARMA_DEFAULT_MAXITER,
    ARMA_DEFAULT_ORDERS,
    ARMA_LJUNG_BOX_LAGS_DEFAULT,
    DATA_FETCH_START_DATE,
    DEFAULT_TICKER,
    SMOOTHING_DEFAULT_HORIZON,
    SMOOTHING_DEFAULT_PERIOD,
    SMOOTHING_DEFAULT_SEASONAL_MODE,
    SMOOTHING_SEASONAL_MODES,
    STATIONARITY_DEFAULT_ALPHA,
)
from fintsa.path import PLOTS_DIR, RESULTS_DIR
from fintsa.utils import parse_date_value


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for one analysis pass.

    Attributes:
        ticker: Symbol downloaded from the data source.
        start_date: First requested trading day.
        end_date: Last requested trading day (None = today).
        drop_missing: Drop missing prices at ingestion instead of failing.
        acf_max_lag: Maximum lag for ACF/PACF of prices and returns.
        arma_orders: ARMA orders (p, 0, q) fitted on log returns.
        arma_maxiter: Iteration cap for the likelihood optimizer.
        ljung_box_lags: Number of lags h for residual Ljung-Box tests.
        alpha: Significance level for normality and stationarity verdicts.
        forecast_horizon: Steps forecast by the smoothing models.
        seasonal_period: Seasonal period for Holt-Winters.
        seasonal_mode: "multiplicative" or "additive".
        make_plots: Whether the plotting sink is invoked.
        results_dir: Directory of the JSON report.
        plots_dir: Directory of the PNG plots.
    """

    ticker: str = DEFAULT_TICKER
    start_date: datetime = DATA_FETCH_START_DATE
    end_date: datetime | None = None
    drop_missing: bool = False
    acf_max_lag: int = ACF_PACF_DEFAULT_LAGS
    arma_orders: tuple[tuple[int, int, int], ...] = ARMA_DEFAULT_ORDERS
    arma_maxiter: int = ARMA_DEFAULT_MAXITER
    ljung_box_lags: int = ARMA_LJUNG_BOX_LAGS_DEFAULT
    alpha: float = STATIONARITY_DEFAULT_ALPHA
    forecast_horizon: int = SMOOTHING_DEFAULT_HORIZON
    seasonal_period: int = SMOOTHING_DEFAULT_PERIOD
    seasonal_mode: str = SMOOTHING_DEFAULT_SEASONAL_MODE
    make_plots: bool = True
    results_dir: Path = field(default=RESULTS_DIR)
    plots_dir: Path = field(default=PLOTS_DIR)

    def __post_init__(self) -> None:
        if not self.ticker or not self.ticker.strip():
            raise ValueError("ticker must be a non-empty string")
        if self.end_date is not None and self.start_date >= self.end_date:
            raise ValueError(
                f"Invalid date range: start_date {self.start_date} >= end_date {self.end_date}"
            )
        if not 0 < self.alpha < 1:
            raise ValueError(f"alpha must be in (0, 1), got {self.alpha}")
        if self.acf_max_lag < 1:
            raise ValueError(f"acf_max_lag must be >= 1, got {self.acf_max_lag}")
        if self.ljung_box_lags < 1:
            raise ValueError(f"ljung_box_lags must be >= 1, got {self.ljung_box_lags}")
        if self.forecast_horizon < 1:
            raise ValueError(f"forecast_horizon must be >= 1, got {self.forecast_horizon}")
        if self.seasonal_mode not in SMOOTHING_SEASONAL_MODES:
            raise ValueError(
                f"seasonal_mode must be one of {SMOOTHING_SEASONAL_MODES}, "
                f"got {self.seasonal_mode!r}"
            )
        if not self.arma_orders:
            raise ValueError("arma_orders cannot be empty")
        for order in self.arma_orders:
            p, _, q = order
            if self.ljung_box_lags <= p + q:
                raise ValueError(
                    f"ljung_box_lags ({self.ljung_box_lags}) must exceed p + q "
                    f"for ARMA order {order}"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnalysisConfig:
        """Build a config from a JSON-like mapping.

        Dates are parsed from strings, paths from strings and ARMA orders
        from nested lists.

        Raises:
            KeyError: If the mapping contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise KeyError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**_coerce_values(data))

    def with_overrides(self, **overrides: Any) -> AnalysisConfig:
        """Return a copy with the non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        return replace(self, **_coerce_values(values))

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view of the config."""
        return {
            "ticker": self.ticker,
            "start_date": self.start_date.strftime("%Y-%m-%d"),
            "end_date": self.end_date.strftime("%Y-%m-%d") if self.end_date else None,
            "drop_missing": self.drop_missing,
            "acf_max_lag": self.acf_max_lag,
            "arma_orders": [list(order) for order in self.arma_orders],
            "arma_maxiter": self.arma_maxiter,
            "ljung_box_lags": self.ljung_box_lags,
            "alpha": self.alpha,
            "forecast_horizon": self.forecast_horizon,
            "seasonal_period": self.seasonal_period,
            "seasonal_mode": self.seasonal_mode,
            "make_plots": self.make_plots,
            "results_dir": str(self.results_dir),
            "plots_dir": str(self.plots_dir),
        }


def _coerce_values(values: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(values)
    for key in ("start_date", "end_date"):
        if out.get(key) is not None and not isinstance(out[key], datetime):
            out[key] = parse_date_value(out[key], context=key).to_pydatetime()
    for key in ("results_dir", "plots_dir"):
        if key in out:
            out[key] = Path(out[key])
    if "arma_orders" in out:
        out["arma_orders"] = tuple(
            (int(p), int(d), int(q)) for p, d, q in out["arma_orders"]
        )
    return out
