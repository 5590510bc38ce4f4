"""
Core math modules

Левые свёртки и численные проверки элементов контейнеров.
"""

# Folds
from src.core.math.folds import (
    EmptyFoldViolation,
    fold_product,
    fold_sum,
    left_fold,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_finite_element,
)

__all__ = [
    # Folds — Exceptions
    "EmptyFoldViolation",
    # Folds — Functions
    "left_fold",
    "fold_sum",
    "fold_product",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Functions
    "is_close",
    "is_finite_element",
]
