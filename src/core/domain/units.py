"""
Units — linear-scale unit conversion

Each member's value is its scale relative to the SI base unit
(meter, kilogram, meter per second):

    convert(source_unit, value) = value / source_unit.scale * self.scale

Conversions are linear, so converting A → B → A returns the original
value up to floating point.
"""

from enum import Enum


class _LinearUnit(Enum):
    """Enum whose value is a scale factor against the base unit."""

    @property
    def scale(self) -> float:
        return self.value

    def convert(self, source_unit: "_LinearUnit", value: float) -> float:
        """
        Convert value expressed in source_unit to this unit.

        Args:
            source_unit: Unit value is expressed in (same enum as self)
            value: Value to convert

        Returns:
            Value in this unit

        Raises:
            TypeError: If source_unit belongs to another unit family
        """
        if type(source_unit) is not type(self):
            raise TypeError(
                f"Cannot convert {type(source_unit).__name__} to {type(self).__name__}"
            )
        return value / source_unit.scale * self.scale

    def to_base(self, value: float) -> float:
        """Convert value in this unit to the base unit."""
        return value / self.scale


# =============================================================================
# LENGTH
# =============================================================================


class LengthUnit(_LinearUnit):
    """Units of length, base unit METER."""

    MICROMETER = 1000000
    MILLIMETER = 1000
    CENTIMETER = 100
    INCH = 39.3701
    YARD = 1.09361
    METER = 1
    KILOMETER = 0.001
    LIGHT_YEAR = 1.057e-13

    def to_meters(self, value: float) -> float:
        return self.to_base(value)


# =============================================================================
# MASS
# =============================================================================


class MassUnit(_LinearUnit):
    """Units of mass, base unit KILOGRAM."""

    MICROGRAM = 1e9
    MILLIGRAM = 1000000
    GRAIN = 15432.358
    GRAM = 1000
    POUND = 2.20462
    KILOGRAM = 1
    TON = 0.001
    IMPERIAL_TON = 0.000984207

    def to_kilograms(self, value: float) -> float:
        return self.to_base(value)


# =============================================================================
# SPEED
# =============================================================================


class SpeedUnit(_LinearUnit):
    """Units of speed, base unit METERS_PER_SECOND."""

    KILOMETERS_PER_HOUR = 3.6
    FEET_PER_SECOND = 3.28084
    MILES_PER_HOUR = 2.23694
    METERS_PER_SECOND = 1
    LIGHT_SPEED = 3.33555704e-9

    def to_meters_per_second(self, value: float) -> float:
        return self.to_base(value)
