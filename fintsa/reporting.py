"""Report sink: human-readable log summary and JSON report of a pass."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from fintsa.constants import REPORT_SEPARATOR_LENGTH
from fintsa.path import ANALYSIS_REPORT_FILENAME
from fintsa.smoothing import HoltModel, HoltWintersModel, SESModel
from fintsa.utils import get_logger, save_json_pretty

if TYPE_CHECKING:
    from fintsa.pipeline import AnalysisResults

logger = get_logger(__name__)


def _smoothing_params(model: Any) -> dict[str, float]:
    if isinstance(model, HoltWintersModel):
        return {"alpha": model.alpha, "beta": model.beta, "gamma": model.gamma}
    if isinstance(model, HoltModel):
        return {"alpha": model.alpha, "beta": model.beta}
    if isinstance(model, SESModel):
        return {"alpha": model.alpha}
    raise TypeError(f"Unknown smoothing model: {type(model).__name__}")


def build_report(results: AnalysisResults) -> dict[str, Any]:
    """Collect the numeric results of a pass into a JSON-ready dict."""
    ret = results.returns
    stats = ret.stats
    jb = ret.jarque_bera
    alpha = results.config.alpha

    arma = []
    for model, diag in zip(results.arma.models, results.arma.diagnostics):
        lb = diag.ljung_box
        arma.append(
            {
                "model": model.name,
                "order": list(model.order),
                "params": model.params,
                "log_likelihood": model.log_likelihood,
                "aic": model.aic,
                "bic": model.bic,
                "sigma2": model.sigma2,
                "nobs": model.nobs,
                "ljung_box": {
                    "statistic": lb.statistic,
                    "p_value": lb.p_value,
                    "lags": lb.lags,
                    "df": lb.df,
                    "rejects_white_noise": lb.rejects_white_noise(alpha),
                },
                "residual_significant_acf_lags": diag.residual_acf.significant_acf_lags(),
            }
        )

    smoothing = []
    for model, fc in zip(results.smoothing.models, results.smoothing.forecasts):
        entry: dict[str, Any] = {
            "model": model.name,
            "params": _smoothing_params(model),
            "sse": model.sse,
            "forecast": fc.values,
            "forecast_lower": fc.lower,
            "forecast_upper": fc.upper,
        }
        if isinstance(model, HoltWintersModel):
            entry["period"] = model.period
            entry["seasonal_mode"] = model.seasonal_mode
        smoothing.append(entry)

    return {
        "config": results.config.to_dict(),
        "prices": {
            "n": int(ret.prices.size),
            "start": ret.prices.index[0],
            "end": ret.prices.index[-1],
            "stationarity": ret.price_stationarity.to_dict(),
            "significant_acf_lags": ret.price_autocorrelation.significant_acf_lags(),
        },
        "returns": {
            "descriptive_stats": {
                "n": stats.n,
                "mean": stats.mean,
                "std": stats.std,
                "skewness": stats.skewness,
                "kurtosis": stats.kurtosis,
                "excess_kurtosis": stats.excess_kurtosis,
                "min": stats.minimum,
                "max": stats.maximum,
            },
            "jarque_bera": {
                "statistic": jb.statistic,
                "p_value": jb.p_value,
                "is_normal": jb.is_normal(alpha),
            },
            "stationarity": ret.returns_stationarity.to_dict(),
            "significant_acf_lags": ret.returns_autocorrelation.significant_acf_lags(),
            "significant_pacf_lags": ret.returns_autocorrelation.significant_pacf_lags(),
        },
        "arma": arma,
        "best_arma_by_aic": results.arma.best_by_aic().name,
        "smoothing": smoothing,
        "plots": [str(p) for p in results.plot_paths],
    }


def log_summary(results: AnalysisResults) -> None:
    """Log a readable summary of the pass."""
    sep = "=" * REPORT_SEPARATOR_LENGTH
    ret = results.returns
    stats = ret.stats
    jb = ret.jarque_bera

    logger.info(sep)
    logger.info(f"ANALYSIS SUMMARY - {results.config.ticker}")
    logger.info(sep)
    logger.info(
        f"Log returns: n={stats.n}, mean={stats.mean:.6f}, sd={stats.std:.6f}, "
        f"skewness={stats.skewness:.4f}, kurtosis={stats.kurtosis:.4f}"
    )
    logger.info(
        f"Jarque-Bera: X-squared={jb.statistic:.2f}, df=2, p-value={jb.p_value:.4g} "
        f"({'normal' if jb.is_normal(results.config.alpha) else 'non-normal'})"
    )
    logger.info(
        f"Stationarity: prices={ret.price_stationarity.stationary}, "
        f"returns={ret.returns_stationarity.stationary}"
    )
    for model, diag in zip(results.arma.models, results.arma.diagnostics):
        lb = diag.ljung_box
        logger.info(
            f"{model.name}: AIC={model.aic:.2f}, BIC={model.bic:.2f}, "
            f"Ljung-Box Q={lb.statistic:.3f} (df={lb.df}, p={lb.p_value:.4f})"
        )
    for model in results.smoothing.models:
        params = ", ".join(f"{k}={v:.4f}" for k, v in _smoothing_params(model).items())
        logger.info(f"{model.name}: {params}, SSE={model.sse:.2f}")
    logger.info(sep)


def save_report(results: AnalysisResults, output_path: Path | None = None) -> Path:
    """Write the JSON report (default: ``<results_dir>/analysis_report.json``)."""
    path = output_path or results.config.results_dir / ANALYSIS_REPORT_FILENAME
    save_json_pretty(build_report(results), path)
    logger.info(f"Saved analysis report to: {path}")
    return path
