"""
Rotation — 3D rotation in axis/angle notation

Immutable Pydantic model (frozen=True) over (angle, x, y, z): angle in
radians (right-hand rule) around the axis (x, y, z). The stored axis may
be unnormalized; axis() normalizes on every read.

Rotation has no vector arithmetic: adding two axis/angle
tuples component-wise has no geometric meaning.
"""

import math
from typing import ClassVar, Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import require_finite
from src.geometry.quaternion import Quaternion
from src.geometry.serialization import TextSerializable
from src.geometry.vector import Vector3


class Rotation(TextSerializable, BaseModel):
    """Axis/angle rotation, convertible to and from a rotation quaternion."""

    TYPE_NAME: ClassVar[str] = "Rotation"
    FIELD_NAMES: ClassVar[tuple[str, ...]] = ("angle", "x", "y", "z")

    NO_ROTATION: ClassVar["Rotation"]

    angle: float = Field(..., description="Angle in radians")
    x: float = Field(..., description="Axis, X")
    y: float = Field(..., description="Axis, Y")
    z: float = Field(..., description="Axis, Z")

    model_config = {"frozen": True, "strict": True}  # Immutable, no str coercion

    def __init__(self, angle: float, x: float, y: float, z: float) -> None:
        super().__init__(angle=angle, x=x, y=y, z=z)

    @field_validator("angle", "x", "y", "z")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        return require_finite(v)

    @classmethod
    def of(cls, axis: Vector3, angle: float) -> "Rotation":
        """
        Create a rotation of angle radians around axis.

        Args:
            axis: Axis of rotation (need not be normalized)
            angle: Angle in radians, right-hand rule
        """
        return cls(angle, axis.x, axis.y, axis.z)

    def axis(self) -> Vector3:
        """Normalized axis of rotation."""
        return Vector3(self.x, self.y, self.z).normalize()

    def degrees(self) -> float:
        """Angle in degrees."""
        return math.degrees(self.angle)

    def scale(self, s: float) -> "Rotation":
        """
        Scale the stored angle linearly by s.

        Unlike Quaternion.scale(), no trigonometric round trip is involved;
        both agree only up to floating point.
        """
        return Rotation(self.angle * s, self.x, self.y, self.z)

    def rotate(self, other: Union["Rotation", Quaternion]) -> "Rotation":
        """
        Rotate this rotation by another rotation.

        Composition order: other * self, in quaternion form.

        Args:
            other: Rotation or rotation quaternion to apply

        Returns:
            Composed rotation
        """
        if isinstance(other, Rotation):
            other = other.quaternion()
        if not isinstance(other, Quaternion):
            raise TypeError(f"Cannot rotate Rotation by {type(other).__name__}")

        return other.multiply(self.quaternion()).rotation()

    def quaternion(self) -> Quaternion:
        """Rotation quaternion (cos(angle/2), axis * sin(angle/2))."""
        half_angle = self.angle / 2
        return Quaternion.of(math.cos(half_angle), self.axis().multiply(math.sin(half_angle)))


Rotation.NO_ROTATION = Rotation.of(Vector3.POSITIVE_Y, 0.0)
