"""
Quaternion — rotation of 3D vectors

Immutable Pydantic model (frozen=True) over (w, x, y, z): scalar part w,
vector part (x, y, z). Represents a rotation when of unit magnitude;
unit length is not enforced, keeping it is the caller's responsibility.

scale() and rotation() take acos(w) without clamping: a w outside [-1, 1]
(a non-unit quaternion, or rounding drift such as 1.0000000000000002
after composing rotations) raises ValueError naming the offending w.
"""

import math
from typing import TYPE_CHECKING, ClassVar, Union

from pydantic import Field, field_validator

from src.core.math.numerical_safeguards import inverse_sqrt, require_finite
from src.geometry.vector import Vector, Vector3, Vector4

if TYPE_CHECKING:
    from src.geometry.rotation import Rotation


def _half_angle(w: float) -> float:
    """acos(w), rejecting w outside the acos domain with a descriptive error."""
    if not -1 <= w <= 1:
        raise ValueError(
            f"Quaternion scalar part w={w!r} is outside [-1, 1]; not a unit rotation quaternion"
        )
    return math.acos(w)


class Quaternion(Vector):
    """
    Quaternion with the Vector capability plus Hamilton multiplication.

    Scalar arithmetic and component-wise add/subtract of two quaternions
    come from Vector; multiply() additionally accepts a Quaternion.
    """

    TYPE_NAME: ClassVar[str] = "Quaternion"
    FIELD_NAMES: ClassVar[tuple[str, ...]] = ("w", "x", "y", "z")

    IDENTITY: ClassVar["Quaternion"]

    w: float = Field(..., description="Scalar part")
    x: float = Field(..., description="Vector part, X")
    y: float = Field(..., description="Vector part, Y")
    z: float = Field(..., description="Vector part, Z")

    def __init__(self, w: float, x: float, y: float, z: float) -> None:
        super().__init__(w=w, x=x, y=y, z=z)

    @field_validator("w", "x", "y", "z")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        return require_finite(v)

    @classmethod
    def of(cls, w: float, v: Vector3) -> "Quaternion":
        """Build from a scalar part and a vector part."""
        return cls(w, v.x, v.y, v.z)

    @classmethod
    def from_vector4(cls, v: Vector4) -> "Quaternion":
        return cls(v.w, v.x, v.y, v.z)

    def components(self) -> tuple[float, float, float, float]:
        return (self.w, self.x, self.y, self.z)

    def vector(self) -> Vector3:
        """Vector part (x, y, z)."""
        return Vector3(self.x, self.y, self.z)

    # -------------------------------------------------------------------------
    # Quaternion algebra
    # -------------------------------------------------------------------------

    def multiply(self, other: Union[float, "Quaternion"]) -> "Quaternion":
        """
        Multiply by a scalar, or Hamilton product self * other.

        Hamilton product (order matters):
            w = w1*w2 - v1·v2
            v = w1*v2 + w2*v1 + v1 × v2
        """
        if isinstance(other, Quaternion):
            v1 = self.vector()
            v2 = other.vector()
            return Quaternion.of(
                self.w * other.w - v1.dot(v2),
                v2.multiply(self.w).add(v1.multiply(other.w)).add(v1.cross(v2)),
            )
        return super().multiply(other)

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> "Quaternion":
        """
        Conjugate scaled by the inverse magnitude.

        Reduces to the conjugate for unit quaternions.
        """
        return self.conjugate().multiply(inverse_sqrt(self.magnitude2()))

    def scale(self, s: float) -> "Quaternion":
        """
        Scale the rotation angle this quaternion represents by s.

        This is not a component-wise multiply: the half-angle θ = acos(w)
        becomes s*θ around the same axis.

        Args:
            s: Angle scale factor

        Returns:
            (cos(s*θ), axis * sin(s*θ)), or IDENTITY when w == 1
        """
        if self.w == 1:
            return Quaternion.IDENTITY

        half_angle = _half_angle(self.w)
        return Quaternion.of(
            math.cos(half_angle * s),
            self.vector().divide(math.sin(half_angle)).multiply(math.sin(half_angle * s)),
        )

    def rotation(self) -> "Rotation":
        """
        Convert a rotation quaternion to axis/angle notation.

        Returns:
            Rotation with angle 2*acos(w); NO_ROTATION when the angle is 0
        """
        from src.geometry.rotation import Rotation

        angle = 2 * _half_angle(self.w)
        if angle == 0:
            return Rotation.NO_ROTATION

        axis = self.vector().divide(angle / 2)
        return Rotation.of(axis, angle)


Quaternion.IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)
