"""
Vector — immutable 2/3/4-dimensional vectors

Immutable Pydantic models (frozen=True). Every operation returns a new
instance; components are validated finite at construction.

Vector is the shared capability (scalar arithmetic, magnitude, negate,
normalize). Vector-vector arithmetic only accepts an operand of exactly
the same type: there is no implicit widening between dimensions.
"""

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Iterable, Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import (
    MIN_NORMAL_FLOAT,
    inverse_sqrt,
    magnitude_from_squared,
    require_finite,
)
from src.geometry.serialization import TextSerializable

if TYPE_CHECKING:
    from src.geometry.quaternion import Quaternion
    from src.geometry.rotation import Rotation


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# VECTOR CAPABILITY
# =============================================================================


class Vector(TextSerializable, BaseModel, ABC):
    """
    Superclass of all vectors.

    Subclasses declare their fields, components() in field order and a
    positional constructor taking the same order.
    """

    model_config = {"frozen": True, "strict": True}  # Immutable, no str coercion

    @abstractmethod
    def components(self) -> tuple[float, ...]:
        """Components in field order."""

    @classmethod
    def from_components(cls, components: Iterable[float]):
        return cls(*components)

    def _same_type(self, other: object) -> bool:
        return type(other) is type(self)

    def _require_operand(self, other: object, operation: str) -> None:
        if not (_is_scalar(other) or self._same_type(other)):
            raise TypeError(
                f"Cannot {operation} {type(self).__name__} and {type(other).__name__}"
            )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other):
        """Add a scalar to every component, or a vector of the same type."""
        self._require_operand(other, "add")
        if _is_scalar(other):
            return self.from_components(c + other for c in self.components())
        return self.from_components(
            a + b for a, b in zip(self.components(), other.components())
        )

    def subtract(self, other):
        """Subtract a scalar from every component, or a vector of the same type."""
        self._require_operand(other, "subtract")
        if _is_scalar(other):
            return self.from_components(c - other for c in self.components())
        return self.from_components(
            a - b for a, b in zip(self.components(), other.components())
        )

    def multiply(self, s: float):
        """Multiply every component by a scalar."""
        if not _is_scalar(s):
            raise TypeError(f"Cannot multiply {type(self).__name__} by {type(s).__name__}")
        return self.from_components(c * s for c in self.components())

    def divide(self, s: float):
        """
        Divide every component by a scalar.

        Raises:
            ZeroDivisionError: When s is exactly zero
        """
        if not _is_scalar(s):
            raise TypeError(f"Cannot divide {type(self).__name__} by {type(s).__name__}")
        if s == 0:
            raise ZeroDivisionError("Cannot divide by zero.")
        return self.from_components(c / s for c in self.components())

    # -------------------------------------------------------------------------
    # Magnitude
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        return magnitude_from_squared(self.magnitude2())

    def magnitude2(self) -> float:
        """Squared magnitude. Prefer it wherever only comparison is needed."""
        return sum(c * c for c in self.components())

    def negate(self):
        return self.multiply(-1)

    def normalize(self):
        """
        Scale to unit magnitude.

        The zero vector normalizes to the zero vector. When the squared
        magnitude overflows to inf or falls below MIN_NORMAL_FLOAT, the
        vector is first divided by its largest absolute component.
        """
        largest = max(abs(c) for c in self.components())
        if largest == 0:
            return self.multiply(0.0)

        magnitude2 = self.magnitude2()
        if not MIN_NORMAL_FLOAT <= magnitude2 < math.inf:
            return self.divide(largest).normalize()

        return self.multiply(inverse_sqrt(magnitude2))

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not (_is_scalar(other) or self._same_type(other)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not (_is_scalar(other) or self._same_type(other)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not (_is_scalar(other) or self._same_type(other)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.divide(other)

    def __neg__(self):
        return self.negate()


# =============================================================================
# VECTOR2
# =============================================================================


class Vector2(Vector):
    """A two-dimensional vector."""

    TYPE_NAME: ClassVar[str] = "Vector2"
    FIELD_NAMES: ClassVar[tuple[str, ...]] = ("x", "y")

    ZERO: ClassVar["Vector2"]
    POSITIVE_X: ClassVar["Vector2"]
    POSITIVE_Y: ClassVar["Vector2"]
    NEGATIVE_X: ClassVar["Vector2"]
    NEGATIVE_Y: ClassVar["Vector2"]

    x: float = Field(..., description="X component")
    y: float = Field(..., description="Y component")

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x=x, y=y)

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        return require_finite(v)

    def components(self) -> tuple[float, float]:
        return (self.x, self.y)

    def dot(self, v: "Vector2") -> float:
        return self.x * v.x + self.y * v.y

    def multiply(self, other: Union[float, "Vector2"]) -> "Vector2":
        """
        Multiply by a scalar, or by another Vector2 as complex numbers.

        Complex multiplication: (x1*x2 - y1*y2, x1*y2 + y1*x2)
        """
        if isinstance(other, Vector2):
            return Vector2(
                self.x * other.x - self.y * other.y,
                self.x * other.y + self.y * other.x,
            )
        return super().multiply(other)

    def rotate(self, angle: float) -> "Vector2":
        """
        Rotate counter-clockwise by angle (radians).

        Multiplies by the unit complex number (cos θ, sin θ).
        """
        return self.multiply(Vector2(math.cos(angle), math.sin(angle)))

    def distance(self, v: "Vector2") -> float:
        return self.subtract(v).magnitude()

    def distance2(self, v: "Vector2") -> float:
        return self.subtract(v).magnitude2()


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.POSITIVE_X = Vector2(1.0, 0.0)
Vector2.POSITIVE_Y = Vector2(0.0, 1.0)
Vector2.NEGATIVE_X = Vector2(-1.0, 0.0)
Vector2.NEGATIVE_Y = Vector2(0.0, -1.0)


# =============================================================================
# VECTOR3
# =============================================================================


class Vector3(Vector):
    """A three-dimensional vector."""

    TYPE_NAME: ClassVar[str] = "Vector3"
    FIELD_NAMES: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    ZERO: ClassVar["Vector3"]
    POSITIVE_X: ClassVar["Vector3"]
    POSITIVE_Y: ClassVar["Vector3"]
    POSITIVE_Z: ClassVar["Vector3"]
    NEGATIVE_X: ClassVar["Vector3"]
    NEGATIVE_Y: ClassVar["Vector3"]
    NEGATIVE_Z: ClassVar["Vector3"]

    x: float = Field(..., description="X component")
    y: float = Field(..., description="Y component")
    z: float = Field(..., description="Z component")

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x=x, y=y, z=z)

    @field_validator("x", "y", "z")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        return require_finite(v)

    def components(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def dot(self, v: "Vector3") -> float:
        return self.x * v.x + self.y * v.y + self.z * v.z

    def cross(self, v: "Vector3") -> "Vector3":
        """Right-handed cross product of self and v."""
        return Vector3(
            self.y * v.z - self.z * v.y,
            self.z * v.x - self.x * v.z,
            self.x * v.y - self.y * v.x,
        )

    def distance(self, v: "Vector3") -> float:
        return self.subtract(v).magnitude()

    def distance2(self, v: "Vector3") -> float:
        return self.subtract(v).magnitude2()

    def rotate(self, rotation: Union["Rotation", "Quaternion"]) -> "Vector3":
        """
        Rotate by a Rotation or a rotation (unit) quaternion.

        Sandwich product: q * (0, v) * conjugate(q), vector part.

        Args:
            rotation: Rotation or rotation quaternion

        Returns:
            Rotated vector
        """
        from src.geometry.quaternion import Quaternion
        from src.geometry.rotation import Rotation

        if isinstance(rotation, Rotation):
            rotation = rotation.quaternion()
        if not isinstance(rotation, Quaternion):
            raise TypeError(f"Cannot rotate Vector3 by {type(rotation).__name__}")

        return rotation.multiply(self.quaternion()).multiply(rotation.conjugate()).vector()

    def quaternion(self) -> "Quaternion":
        """Embed as the pure quaternion (0, x, y, z)."""
        from src.geometry.quaternion import Quaternion

        return Quaternion(0.0, self.x, self.y, self.z)


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.POSITIVE_X = Vector3(1.0, 0.0, 0.0)
Vector3.POSITIVE_Y = Vector3(0.0, 1.0, 0.0)
Vector3.POSITIVE_Z = Vector3(0.0, 0.0, 1.0)
Vector3.NEGATIVE_X = Vector3(-1.0, 0.0, 0.0)
Vector3.NEGATIVE_Y = Vector3(0.0, -1.0, 0.0)
Vector3.NEGATIVE_Z = Vector3(0.0, 0.0, -1.0)


# =============================================================================
# VECTOR4
# =============================================================================


class Vector4(Vector):
    """A four-dimensional vector (w, x, y, z)."""

    TYPE_NAME: ClassVar[str] = "Vector4"
    FIELD_NAMES: ClassVar[tuple[str, ...]] = ("w", "x", "y", "z")

    ZERO: ClassVar["Vector4"]
    POSITIVE_W: ClassVar["Vector4"]
    POSITIVE_X: ClassVar["Vector4"]
    POSITIVE_Y: ClassVar["Vector4"]
    POSITIVE_Z: ClassVar["Vector4"]
    NEGATIVE_W: ClassVar["Vector4"]
    NEGATIVE_X: ClassVar["Vector4"]
    NEGATIVE_Y: ClassVar["Vector4"]
    NEGATIVE_Z: ClassVar["Vector4"]

    w: float = Field(..., description="W component")
    x: float = Field(..., description="X component")
    y: float = Field(..., description="Y component")
    z: float = Field(..., description="Z component")

    def __init__(self, w: float, x: float, y: float, z: float) -> None:
        super().__init__(w=w, x=x, y=y, z=z)

    @field_validator("w", "x", "y", "z")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        return require_finite(v)

    def components(self) -> tuple[float, float, float, float]:
        return (self.w, self.x, self.y, self.z)

    def distance(self, v: "Vector4") -> float:
        return self.subtract(v).magnitude()

    def distance2(self, v: "Vector4") -> float:
        return self.subtract(v).magnitude2()


Vector4.ZERO = Vector4(0.0, 0.0, 0.0, 0.0)
Vector4.POSITIVE_W = Vector4(1.0, 0.0, 0.0, 0.0)
Vector4.POSITIVE_X = Vector4(0.0, 1.0, 0.0, 0.0)
Vector4.POSITIVE_Y = Vector4(0.0, 0.0, 1.0, 0.0)
Vector4.POSITIVE_Z = Vector4(0.0, 0.0, 0.0, 1.0)
Vector4.NEGATIVE_W = Vector4(-1.0, 0.0, 0.0, 0.0)
Vector4.NEGATIVE_X = Vector4(0.0, -1.0, 0.0, 0.0)
Vector4.NEGATIVE_Y = Vector4(0.0, 0.0, -1.0, 0.0)
Vector4.NEGATIVE_Z = Vector4(0.0, 0.0, 0.0, -1.0)
