"""Fitting of exponential smoothing models.

Free smoothing parameters are estimated by minimizing the sum of squared
one-step-ahead errors with bounded L-BFGS-B. Parameters given in the spec
are held fixed.
"""

from __future__ import annotations

from typing import Callable, Sequence
import re
import warnings

import numpy as np
import pandas as pd
from scipy.optimize import minimize

from fintsa.constants import (
    FREQUENCY_NATURAL_PERIODS,
    SMOOTHING_FTOL,
    SMOOTHING_INIT_ALPHA,
    SMOOTHING_INIT_BETA,
    SMOOTHING_INIT_GAMMA,
    SMOOTHING_MAXITER,
    SMOOTHING_MIN_SEASONS,
    SMOOTHING_PARAM_BOUNDS,
    SMOOTHING_SEASONAL_MODES,
)
from fintsa.exceptions import InvalidInputError, InvalidPeriodError, OptimizationError
from fintsa.smoothing.models import (
    ExponentialSmoothingModel,
    ExponentialSmoothingSpec,
    HoltModel,
    HoltSpec,
    HoltWintersModel,
    HoltWintersSpec,
    SESModel,
    SESSpec,
)
from fintsa.smoothing.recursion import (
    FilterResult,
    holt_filter,
    holt_winters_filter,
    ses_filter,
)
from fintsa.utils import get_logger, validate_min_length, validate_series

logger = get_logger(__name__)

# Objective value returned when a recursion diverges (non-finite SSE)
_DIVERGED_PENALTY = 1e300


# ============================================================================
# VALIDATION
# ============================================================================


def _check_fixed_parameter(name: str, value: float | None) -> float | None:
    if value is None:
        return None
    low, high = SMOOTHING_PARAM_BOUNDS
    if not low <= float(value) <= high:
        raise InvalidInputError(f"{name} must be in [{low}, {high}], got {value}")
    return float(value)


def _frequency_prefix(index: pd.Index) -> str | None:
    """Base alias of the index frequency ("MS", "QE", "W", ...) or None."""
    if not isinstance(index, pd.DatetimeIndex):
        return None
    freq = index.freqstr
    if freq is None and len(index) >= 3:
        freq = pd.infer_freq(index)
    if freq is None:
        return None
    # Drop multiplier and anchor: "2W-SUN" -> "W", "QE-DEC" -> "QE"
    return re.sub(r"^\d+", "", freq).split("-")[0]


def validate_period(series: pd.Series, period: int) -> None:
    """Check that a seasonal period suits the series.

    Raises:
        InvalidPeriodError: If the period is < 2, the series holds fewer than
            two full periods, or the period neither divides nor is a multiple
            of the natural cycle of the index frequency.
    """
    if int(period) != period or period < 2:
        raise InvalidPeriodError(f"Seasonal period must be an integer >= 2, got {period}")
    period = int(period)
    needed = SMOOTHING_MIN_SEASONS * period
    if len(series) < needed:
        raise InvalidPeriodError(
            f"Holt-Winters with period {period} needs at least {needed} observations "
            f"({SMOOTHING_MIN_SEASONS} full seasons), got {len(series)}"
        )
    prefix = _frequency_prefix(series.index)
    natural = FREQUENCY_NATURAL_PERIODS.get(prefix) if prefix else None
    if natural is not None and natural % period != 0 and period % natural != 0:
        raise InvalidPeriodError(
            f"Seasonal period {period} is incompatible with the series frequency "
            f"{prefix!r} (natural cycle {natural})"
        )


# ============================================================================
# OPTIMIZATION
# ============================================================================


def _optimize_parameters(
    objective: Callable[[np.ndarray], float],
    x0: Sequence[float],
    names: Sequence[str],
    model_label: str,
) -> np.ndarray:
    """Minimize ``objective`` over the free parameters inside [0, 1].

    Raises:
        OptimizationError: If the optimizer raises or ends on a non-finite
            objective value.
    """
    bounds = [SMOOTHING_PARAM_BOUNDS] * len(x0)
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore",
            message="Values in x were outside bounds during a minimize step",
            category=RuntimeWarning,
        )
        try:
            result = minimize(
                objective,
                x0=np.asarray(x0, dtype=float),
                method="L-BFGS-B",
                bounds=bounds,
                options={"maxiter": SMOOTHING_MAXITER, "ftol": SMOOTHING_FTOL},
            )
        except (ValueError, FloatingPointError, ArithmeticError) as e:
            msg = f"{model_label} parameter search failed: {e}"
            logger.error(msg)
            raise OptimizationError(msg) from e

    if not np.isfinite(result.fun) or result.fun >= _DIVERGED_PENALTY:
        msg = f"{model_label} parameter search failed: {result.message}"
        logger.error(msg)
        raise OptimizationError(msg)
    if not result.success:
        logger.warning(
            "%s optimizer stopped early (%s); keeping best parameters %s",
            model_label,
            result.message,
            dict(zip(names, np.round(result.x, 4))),
        )
    return np.clip(np.asarray(result.x, dtype=float), *SMOOTHING_PARAM_BOUNDS)


def _resolve_parameters(
    fixed: dict[str, float | None],
    initial: dict[str, float],
    run: Callable[[dict[str, float]], FilterResult],
    model_label: str,
) -> dict[str, float]:
    """Return the full parameter set, estimating the entries left as None."""
    free = [name for name, value in fixed.items() if value is None]
    if not free:
        return {name: float(value) for name, value in fixed.items()}  # type: ignore[arg-type]

    def objective(x: np.ndarray) -> float:
        params = {**fixed, **dict(zip(free, x))}
        sse = run(params).sse  # type: ignore[arg-type]
        return sse if np.isfinite(sse) else _DIVERGED_PENALTY

    best = _optimize_parameters(objective, [initial[name] for name in free], free, model_label)
    return {**fixed, **dict(zip(free, (float(v) for v in best)))}  # type: ignore[dict-item]


# ============================================================================
# PUBLIC API
# ============================================================================


def fit_ses(series: pd.Series, spec: SESSpec | None = None) -> SESModel:
    """Fit simple exponential smoothing.

    Raises:
        InvalidInputError: If the series is malformed or alpha is out of [0, 1].
        InsufficientDataError: If fewer than 2 observations.
        OptimizationError: If the alpha search fails.
    """
    spec = spec or SESSpec()
    y = validate_series(series)
    validate_min_length(y, 2, "Simple exponential smoothing")
    values = y.to_numpy()

    params = _resolve_parameters(
        {"alpha": _check_fixed_parameter("alpha", spec.alpha)},
        {"alpha": SMOOTHING_INIT_ALPHA},
        lambda p: ses_filter(values, p["alpha"]),
        "SES",
    )
    state = ses_filter(values, params["alpha"])
    logger.info("SES fitted: alpha=%.4f, SSE=%.4f", params["alpha"], state.sse)
    return SESModel(
        alpha=params["alpha"],
        level=state.level,
        fitted=pd.Series(state.fitted, index=y.index, name="SES"),
        sse=state.sse,
    )


def fit_holt(series: pd.Series, spec: HoltSpec | None = None) -> HoltModel:
    """Fit Holt's linear trend method.

    Raises:
        InvalidInputError: If the series is malformed or a parameter is out of [0, 1].
        InsufficientDataError: If fewer than 3 observations.
        OptimizationError: If the parameter search fails.
    """
    spec = spec or HoltSpec()
    y = validate_series(series)
    validate_min_length(y, 3, "Holt smoothing")
    values = y.to_numpy()

    params = _resolve_parameters(
        {
            "alpha": _check_fixed_parameter("alpha", spec.alpha),
            "beta": _check_fixed_parameter("beta", spec.beta),
        },
        {"alpha": SMOOTHING_INIT_ALPHA, "beta": SMOOTHING_INIT_BETA},
        lambda p: holt_filter(values, p["alpha"], p["beta"]),
        "Holt",
    )
    state = holt_filter(values, params["alpha"], params["beta"])
    logger.info(
        "Holt fitted: alpha=%.4f, beta=%.4f, SSE=%.4f",
        params["alpha"],
        params["beta"],
        state.sse,
    )
    return HoltModel(
        alpha=params["alpha"],
        beta=params["beta"],
        level=state.level,
        trend=state.trend,
        fitted=pd.Series(state.fitted, index=y.index, name="Holt"),
        sse=state.sse,
    )


def fit_holt_winters(series: pd.Series, spec: HoltWintersSpec | None = None) -> HoltWintersModel:
    """Fit the Holt-Winters seasonal method.

    Args:
        series: Seasonal series with at least two full periods.
        spec: Period, seasonal mode and optionally fixed parameters.

    Returns:
        HoltWintersModel.

    Raises:
        InvalidInputError: If the series is malformed, the mode is unknown,
            a parameter is out of [0, 1] or a multiplicative series holds
            non-positive values.
        InvalidPeriodError: If the period does not suit the series.
        OptimizationError: If the parameter search fails.
    """
    spec = spec or HoltWintersSpec()
    if spec.seasonal_mode not in SMOOTHING_SEASONAL_MODES:
        raise InvalidInputError(
            f"seasonal_mode must be one of {SMOOTHING_SEASONAL_MODES}, got {spec.seasonal_mode!r}"
        )
    y = validate_series(series)
    validate_period(y, spec.period)
    values = y.to_numpy()
    if spec.seasonal_mode == "multiplicative" and (values <= 0).any():
        raise InvalidInputError("Multiplicative seasonality requires strictly positive values")

    period = int(spec.period)
    label = f"Holt-Winters ({spec.seasonal_mode})"
    params = _resolve_parameters(
        {
            "alpha": _check_fixed_parameter("alpha", spec.alpha),
            "beta": _check_fixed_parameter("beta", spec.beta),
            "gamma": _check_fixed_parameter("gamma", spec.gamma),
        },
        {"alpha": SMOOTHING_INIT_ALPHA, "beta": SMOOTHING_INIT_BETA, "gamma": SMOOTHING_INIT_GAMMA},
        lambda p: holt_winters_filter(
            values, p["alpha"], p["beta"], p["gamma"], period, spec.seasonal_mode
        ),
        label,
    )
    state = holt_winters_filter(
        values, params["alpha"], params["beta"], params["gamma"], period, spec.seasonal_mode
    )
    logger.info(
        "%s fitted: alpha=%.4f, beta=%.4f, gamma=%.4f, SSE=%.4f",
        label,
        params["alpha"],
        params["beta"],
        params["gamma"],
        state.sse,
    )
    return HoltWintersModel(
        alpha=params["alpha"],
        beta=params["beta"],
        gamma=params["gamma"],
        level=state.level,
        trend=state.trend,
        seasonal=state.seasonal,
        period=period,
        seasonal_mode=spec.seasonal_mode,
        fitted=pd.Series(state.fitted, index=y.index, name=label),
        sse=state.sse,
    )


def fit_smoothing(series: pd.Series, spec: ExponentialSmoothingSpec) -> ExponentialSmoothingModel:
    """Dispatch on the spec variant."""
    if isinstance(spec, SESSpec):
        return fit_ses(series, spec)
    if isinstance(spec, HoltSpec):
        return fit_holt(series, spec)
    if isinstance(spec, HoltWintersSpec):
        return fit_holt_winters(series, spec)
    raise InvalidInputError(f"Unknown exponential smoothing spec: {type(spec).__name__}")
