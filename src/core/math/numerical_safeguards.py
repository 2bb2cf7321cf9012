"""
Numerical Safeguards — NumericCore

Numeric primitives shared by every vector-family type:
- finiteness validation of components (NaN/Inf are never stored)
- fast approximate inverse square root (bit-level initial guess + Newton)
- magnitude derived from the squared magnitude via inverse_sqrt

CRITICAL INVARIANTS:
1. require_finite returns its argument unchanged or raises ValueError
2. inverse_sqrt(0.0) == 0.0 (degenerate sentinel used by magnitude)
3. magnitude of the zero vector is exactly 0.0
"""

import math
import struct
import sys
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Magic constant of the 64-bit fast inverse square root
INVERSE_SQRT_MAGIC: Final[int] = 0x5FE6EC85E7DE30DA

# Newton–Raphson refinement steps after the bit-level guess.
# 4 steps bring normal-magnitude inputs to (near) machine precision.
INVERSE_SQRT_ITERATIONS: Final[int] = 4

# Relative tolerance of inverse_sqrt for normal-magnitude inputs
INVERSE_SQRT_REL_TOL: Final[float] = 1e-10

# Smallest positive normal double; squared magnitudes below it lose precision
MIN_NORMAL_FLOAT: Final[float] = sys.float_info.min

_DOUBLE: Final[struct.Struct] = struct.Struct("<d")
_INT64: Final[struct.Struct] = struct.Struct("<q")


# =============================================================================
# FINITENESS VALIDATION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check whether a float is valid (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if value is finite, False for NaN or Inf
    """
    return math.isfinite(value)


def require_finite(value: float) -> float:
    """
    Denote explicitly that a field requires a finite value.

    Called by every vector-family model on every component.

    Args:
        value: Value to check

    Returns:
        value unchanged

    Raises:
        ValueError: If value is NaN or infinite

    Examples:
        >>> require_finite(1.5)
        1.5
        >>> require_finite(float("nan"))  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: Given field requires a finite float, got nan
    """
    if not is_valid_float(value):
        raise ValueError(f"Given field requires a finite float, got {value}")
    return value


# =============================================================================
# FAST INVERSE SQUARE ROOT
# =============================================================================


def _double_to_bits(value: float) -> int:
    return _INT64.unpack(_DOUBLE.pack(value))[0]


def _bits_to_double(bits: int) -> float:
    return _DOUBLE.unpack(_INT64.pack(bits))[0]


def inverse_sqrt(x: float) -> float:
    """
    Approximate 1 / sqrt(x) with the fast inverse square root.

    Algorithm:
        bits = reinterpret(x) as int64
        y = reinterpret(INVERSE_SQRT_MAGIC - (bits >> 1)) as double
        repeat INVERSE_SQRT_ITERATIONS times: y = y * (1.5 - 0.5 * x * y * y)

    Degenerate inputs:
        - x == 0 returns 0.0 (callers treat it as "zero vector")
        - x == +inf returns 0.0 (limit of 1 / sqrt(x))

    Args:
        x: Non-negative value

    Returns:
        Approximation of 1 / sqrt(x), relative error below
        INVERSE_SQRT_REL_TOL for normal-magnitude inputs

    Raises:
        ValueError: If x is negative or NaN

    Examples:
        >>> round(inverse_sqrt(4.0), 12)
        0.5
        >>> inverse_sqrt(0.0)
        0.0
    """
    if math.isnan(x) or x < 0:
        raise ValueError(f"inverse_sqrt requires a non-negative value, got {x}")

    if x == 0 or math.isinf(x):
        return 0.0

    x_half = 0.5 * x
    bits = INVERSE_SQRT_MAGIC - (_double_to_bits(x) >> 1)
    result = _bits_to_double(bits)

    for _ in range(INVERSE_SQRT_ITERATIONS):
        result = result * (1.5 - x_half * result * result)

    return result


def magnitude_from_squared(magnitude2: float) -> float:
    """
    Derive a magnitude from its square through inverse_sqrt.

    magnitude = 1 / inverse_sqrt(magnitude2), except:
        - inverse_sqrt(...) == 0 and magnitude2 == 0 → 0.0 (zero vector)
        - inverse_sqrt(...) == 0 and magnitude2 == +inf → +inf (overflow)

    Args:
        magnitude2: Squared magnitude (sum of squared components)

    Returns:
        Magnitude
    """
    isqrt = inverse_sqrt(magnitude2)
    if isqrt == 0:
        return 0.0 if magnitude2 == 0 else math.inf

    return 1 / isqrt
