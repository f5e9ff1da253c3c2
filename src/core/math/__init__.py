"""
Core math modules для vec2d

Численные примитивы для покомпонентных операций Vector2.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf predicates
    is_nan,
    is_valid_float,
    # IEEE-754 division
    ieee_divide,
    # Rounding
    floor_float,
    round_half_away_from_zero,
    # Epsilon comparisons
    is_close,
)

# Random Source
from src.core.math.random_source import (
    RandomSource,
    SeededRandomSource,
    SequenceRandomSource,
    default_random_source,
    resolve_random_source,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf predicates
    "is_nan",
    "is_valid_float",
    # Numerical Safeguards — IEEE-754 division
    "ieee_divide",
    # Numerical Safeguards — Rounding
    "floor_float",
    "round_half_away_from_zero",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Random Source — Types
    "RandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    # Random Source — Functions
    "default_random_source",
    "resolve_random_source",
]
