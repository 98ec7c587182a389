"""
Core math modules

Численные примитивы с гарантией стабильности: epsilon-пороги,
float-сравнения и валидация параметров.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PIVOT,
    # Checks
    is_close,
    is_negligible_pivot,
    is_valid_float,
    # Validation
    validate_eps,
    validate_finite,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PIVOT",
    # Checks
    "is_close",
    "is_negligible_pivot",
    "is_valid_float",
    # Validation
    "validate_eps",
    "validate_finite",
]
