"""
Core math modules

Numeric primitives shared by every vector-family type.
"""

from src.core.math.numerical_safeguards import (
    INVERSE_SQRT_ITERATIONS,
    INVERSE_SQRT_MAGIC,
    INVERSE_SQRT_REL_TOL,
    MIN_NORMAL_FLOAT,
    inverse_sqrt,
    is_valid_float,
    magnitude_from_squared,
    require_finite,
)

__all__ = [
    # Constants
    "INVERSE_SQRT_ITERATIONS",
    "INVERSE_SQRT_MAGIC",
    "INVERSE_SQRT_REL_TOL",
    "MIN_NORMAL_FLOAT",
    # Finiteness
    "is_valid_float",
    "require_finite",
    # Inverse square root
    "inverse_sqrt",
    "magnitude_from_squared",
]
