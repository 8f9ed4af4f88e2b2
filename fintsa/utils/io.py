"""File I/O utilities for the project.

Provides JSON reading and writing with validation and automatic directory
creation. Used by the configuration loader and the report sink.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from fintsa.utils.validation import validate_file_exists

__all__ = [
    "ensure_output_dir",
    "load_json_data",
    "save_json_pretty",
    "to_json_compatible",
]


def ensure_output_dir(path: Path) -> None:
    """Ensure parent directory exists for a given path.

    Args:
        path: File path whose parent directory should be created.
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def to_json_compatible(value: Any) -> Any:
    """Convert numpy / pandas values into plain JSON types.

    NaN and infinite floats become None so the output stays valid JSON.
    """
    if isinstance(value, dict):
        return {str(k): to_json_compatible(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(v) for v in value]
    if isinstance(value, np.ndarray):
        return [to_json_compatible(v) for v in value.tolist()]
    if isinstance(value, pd.Series):
        return {
            (k.strftime("%Y-%m-%d") if isinstance(k, pd.Timestamp) else str(k)): (
                to_json_compatible(v)
            )
            for k, v in value.items()
        }
    if isinstance(value, pd.Timestamp):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (np.bool_, bool)):
        return bool(value)
    if isinstance(value, (np.integer,)):
        return int(value)
    if isinstance(value, (np.floating, float)):
        f = float(value)
        return f if np.isfinite(f) else None
    return value


def load_json_data(
    path: Path | str,
    *,
    required_keys: list[str] | None = None,
) -> dict[str, Any]:
    """Load JSON file with validation of required keys.

    Args:
        path: Path to JSON file.
        required_keys: Keys that must exist in the loaded dict.

    Returns:
        Loaded dictionary.

    Raises:
        FileNotFoundError: If file doesn't exist.
        KeyError: If required keys are missing.
        ValueError: If the file does not hold a JSON object.
        json.JSONDecodeError: If file is not valid JSON.

    Examples:
        >>> config = load_json_data("config.json", required_keys=["ticker"])
    """
    path_obj = Path(path)
    validate_file_exists(path_obj, "JSON file")

    with open(path_obj) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path_obj.name} must contain a JSON object")

    if required_keys is not None:
        missing_keys = set(required_keys) - set(data.keys())
        if missing_keys:
            msg = f"Missing required keys in {path_obj.name}: {sorted(missing_keys)}"
            raise KeyError(msg)

    return data


def save_json_pretty(
    data: dict | list,
    output_path: Path | str,
    *,
    indent: int = 2,
    sort_keys: bool = False,
) -> Path:
    """Save JSON with pretty formatting and automatic directory creation.

    Args:
        data: Dictionary or list to save as JSON. numpy and pandas values
            are converted with ``to_json_compatible``.
        output_path: Path to save JSON file.
        indent: Indentation level for pretty printing.
        sort_keys: If True, sort dictionary keys alphabetically.

    Returns:
        Path of the written file.

    Examples:
        >>> save_json_pretty({"aic": -1234.5}, "results/metrics.json")
    """
    path_obj = Path(output_path)
    ensure_output_dir(path_obj)

    with open(path_obj, "w") as f:
        json.dump(to_json_compatible(data), f, indent=indent, sort_keys=sort_keys)

    return path_obj
