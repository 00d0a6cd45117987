"""
Core math modules

Математические примитивы расчёта tan(x): константы, конверсия углов,
редукция диапазона, ряды Маклорена и политика неопределённого тангенса.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    EPS_TAN_UNDEFINED,
    MAX_SERIES_TERMS,
    PI,
    TWO_PI,
    # Checks
    is_near_zero,
    is_valid_float,
)

# Angles
from src.core.math.angles import normalize_radians, to_radians

# Series
from src.core.math.series import cos, sin

# Tangent
from src.core.math.tangent import tan

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_TAN_UNDEFINED",
    "MAX_SERIES_TERMS",
    "PI",
    "TWO_PI",
    # Numerical Safeguards — Checks
    "is_near_zero",
    "is_valid_float",
    # Angles
    "normalize_radians",
    "to_radians",
    # Series
    "cos",
    "sin",
    # Tangent
    "tan",
]
