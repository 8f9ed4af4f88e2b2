"""Utility functions for validation, I/O and statistics.

This package provides modular utilities organized by functionality:
- validation: series, file, and parameter validation
- io: JSON read/write
- datetime_utils: date parsing
- metrics: chi-square survival function and moments
- statsmodels_utils: statsmodels warning suppression
"""

from __future__ import annotations

from fintsa.config_logging import get_logger

# DateTime utilities
from fintsa.utils.datetime_utils import normalize_timestamp_to_datetime, parse_date_value

# I/O utilities
from fintsa.utils.io import (
    ensure_output_dir,
    load_json_data,
    save_json_pretty,
    to_json_compatible,
)

# Metrics utilities
from fintsa.utils.metrics import central_moment, chi2_sf

# Statsmodels utilities
from fintsa.utils.statsmodels_utils import suppress_statsmodels_warnings

# Validation utilities
from fintsa.utils.validation import (
    as_finite_array,
    validate_alpha,
    validate_file_exists,
    validate_min_length,
    validate_series,
)

__all__ = [
    # get_logger from config_logging
    "get_logger",
    # Validation
    "as_finite_array",
    "validate_alpha",
    "validate_file_exists",
    "validate_min_length",
    "validate_series",
    # I/O
    "ensure_output_dir",
    "load_json_data",
    "save_json_pretty",
    "to_json_compatible",
    # DateTime
    "normalize_timestamp_to_datetime",
    "parse_date_value",
    # Metrics
    "central_moment",
    "chi2_sf",
    # Statsmodels
    "suppress_statsmodels_warnings",
]
