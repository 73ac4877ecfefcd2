"""
Core math modules для построения диаграмм спроса и предложения

Математические примитивы с гарантией численной стабильности.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    CEIL_NOISE_ULPS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    ceil_with_tolerance,
    is_close,
    # Utilities
    clamp,
    # Validation
    validate_non_negative,
)

__all__ = [
    "CEIL_NOISE_ULPS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "is_valid_float",
    "ceil_with_tolerance",
    "is_close",
    "clamp",
    "validate_non_negative",
]
