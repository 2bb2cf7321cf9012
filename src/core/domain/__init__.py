"""
Domain value objects.

Contains the unit converters (length, mass, speed) and the unordered Pair.
"""

from src.core.domain.pair import Pair
from src.core.domain.units import LengthUnit, MassUnit, SpeedUnit

__all__ = [
    # Units module
    "LengthUnit",
    "MassUnit",
    "SpeedUnit",
    # Pair
    "Pair",
]
