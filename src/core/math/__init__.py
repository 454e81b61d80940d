"""
Core math modules

Численные примитивы геометрического ядра: IEEE-754 деление, NaN-пропагирующие
min/max, epsilon-сравнения.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_GEOM_COMPARE_ABS,
    EPS_GEOM_COMPARE_REL,
    EPS_ORTHOGONALITY,
    # IEEE-754 arithmetic
    ieee_cos,
    ieee_divide,
    ieee_max,
    ieee_min,
    ieee_sin,
    # Checks and comparisons
    is_close,
    is_valid_float,
    is_zero,
)

__all__ = [
    # Epsilon constants
    "EPS_GEOM_COMPARE_ABS",
    "EPS_GEOM_COMPARE_REL",
    "EPS_ORTHOGONALITY",
    # IEEE-754 arithmetic
    "ieee_cos",
    "ieee_divide",
    "ieee_max",
    "ieee_min",
    "ieee_sin",
    # Checks and comparisons
    "is_close",
    "is_valid_float",
    "is_zero",
]
