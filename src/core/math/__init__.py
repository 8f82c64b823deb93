"""
Core math modules

Статистические операторы над упорядоченными числовыми рядами.
"""

# Errors
from src.core.math.errors import (
    EmptySeries,
    InsufficientData,
    InvalidPeriod,
    LengthMismatch,
    NonFiniteValue,
    NonNumericValue,
    SeriesError,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    to_float,
    to_float_series,
    validate_periods,
)

# Moving Average
from src.core.math.moving_average import (
    MOVING_AVERAGE_MIN_PERIODS,
    ema,
    sma,
)

# Central Moment
from src.core.math.central_moment import (
    mean,
    std,
    stddev,
    var,
    variance,
)

# Volatility
from src.core.math.volatility import range_volatility

# Covariance
from src.core.math.covariance import (
    covar,
    covariance,
)

__all__ = [
    # Errors
    "SeriesError",
    "InvalidPeriod",
    "EmptySeries",
    "LengthMismatch",
    "InsufficientData",
    "NonNumericValue",
    "NonFiniteValue",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Functions
    "is_close",
    "is_valid_float",
    "to_float",
    "to_float_series",
    "validate_periods",
    # Moving Average
    "MOVING_AVERAGE_MIN_PERIODS",
    "sma",
    "ema",
    # Central Moment
    "mean",
    "variance",
    "stddev",
    "var",
    "std",
    # Volatility
    "range_volatility",
    # Covariance
    "covariance",
    "covar",
]
