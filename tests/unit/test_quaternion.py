"""
Tests for Quaternion

Checks:
1. Hamilton product (basis units, order, identity law)
2. Conjugate and inverse
3. Angle scaling (scale) including the w == 1 short-circuit
4. Conversion to axis/angle (rotation) including the zero-angle case
5. Inherited Vector capability (scalar arithmetic, normalize)
6. Non-unit quaternions outside the acos domain
"""

import math

import pytest
from pydantic import ValidationError

from src.core.math.numerical_safeguards import inverse_sqrt
from src.geometry import Quaternion, Rotation, Vector3, Vector4

I = Quaternion(0.0, 1.0, 0.0, 0.0)
J = Quaternion(0.0, 0.0, 1.0, 0.0)
K = Quaternion(0.0, 0.0, 0.0, 1.0)


def assert_quaternion_close(actual: Quaternion, expected: Quaternion, tol: float = 1e-12) -> None:
    assert actual.w == pytest.approx(expected.w, abs=tol)
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)


@pytest.fixture
def unit_quaternion() -> Quaternion:
    """Unit quaternion of a 1.2 rad rotation about (1, 2, 3)"""
    return Rotation(1.2, 1.0, 2.0, 3.0).quaternion()


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Construction helpers"""

    def test_of_scalar_and_vector(self) -> None:
        assert Quaternion.of(1.0, Vector3(2.0, 3.0, 4.0)) == Quaternion(1.0, 2.0, 3.0, 4.0)

    def test_from_vector4(self) -> None:
        q = Quaternion.from_vector4(Vector4(1.0, 2.0, 3.0, 4.0))
        assert q == Quaternion(1.0, 2.0, 3.0, 4.0)

    def test_vector_part(self) -> None:
        assert Quaternion(1.0, 2.0, 3.0, 4.0).vector() == Vector3(2.0, 3.0, 4.0)

    def test_identity(self) -> None:
        assert Quaternion.IDENTITY == Quaternion(1.0, 0.0, 0.0, 0.0)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Quaternion(float("nan"), 0.0, 0.0, 0.0)

    def test_immutable(self) -> None:
        with pytest.raises(ValidationError):
            Quaternion.IDENTITY.w = 0.0  # type: ignore


# =============================================================================
# HAMILTON PRODUCT
# =============================================================================


class TestHamiltonProduct:
    """multiply(Quaternion)"""

    def test_basis_units(self) -> None:
        """ij = k, jk = i, ki = j"""
        assert I.multiply(J) == K
        assert J.multiply(K) == I
        assert K.multiply(I) == J

    def test_order_matters(self) -> None:
        """ji = -k"""
        assert J.multiply(I) == Quaternion(0.0, 0.0, 0.0, -1.0)

    def test_squares_of_units(self) -> None:
        """i² = j² = k² = -1"""
        minus_one = Quaternion(-1.0, 0.0, 0.0, 0.0)
        assert I.multiply(I) == minus_one
        assert J.multiply(J) == minus_one
        assert K.multiply(K) == minus_one

    def test_general_product(self) -> None:
        """(1 + 2i + 3j + 4k)(5 + 6i + 7j + 8k) = -60 + 12i + 30j + 24k"""
        a = Quaternion(1.0, 2.0, 3.0, 4.0)
        b = Quaternion(5.0, 6.0, 7.0, 8.0)
        assert a.multiply(b) == Quaternion(-60.0, 12.0, 30.0, 24.0)

    def test_identity_law(self, unit_quaternion: Quaternion) -> None:
        """IDENTITY * q == q == q * IDENTITY"""
        assert Quaternion.IDENTITY.multiply(unit_quaternion) == unit_quaternion
        assert unit_quaternion.multiply(Quaternion.IDENTITY) == unit_quaternion

    def test_operator(self) -> None:
        """* between quaternions is the Hamilton product"""
        assert I * J == K
        assert 2.0 * I == Quaternion(0.0, 2.0, 0.0, 0.0)


# =============================================================================
# CONJUGATE & INVERSE
# =============================================================================


class TestConjugateInverse:
    """conjugate / inverse"""

    def test_conjugate(self) -> None:
        assert Quaternion(1.0, 2.0, -3.0, 4.0).conjugate() == Quaternion(1.0, -2.0, 3.0, -4.0)

    def test_unit_inverse_is_conjugate(self, unit_quaternion: Quaternion) -> None:
        """For unit q the inverse reduces to the conjugate"""
        assert_quaternion_close(unit_quaternion.inverse(), unit_quaternion.conjugate())

    def test_unit_inverse_cancels(self, unit_quaternion: Quaternion) -> None:
        """q * q⁻¹ ≈ IDENTITY"""
        assert_quaternion_close(
            unit_quaternion.multiply(unit_quaternion.inverse()), Quaternion.IDENTITY
        )

    def test_inverse_scales_conjugate(self) -> None:
        """inverse() = conjugate() * inverse_sqrt(magnitude2())"""
        q = Quaternion(1.0, 2.0, 3.0, 4.0)
        expected = q.conjugate().multiply(inverse_sqrt(30.0))
        assert q.inverse() == expected


# =============================================================================
# SCALE
# =============================================================================


class TestScale:
    """scale(s) scales the represented rotation angle"""

    def test_identity_short_circuit(self) -> None:
        """w == 1 returns IDENTITY"""
        assert Quaternion.IDENTITY.scale(5.0) == Quaternion.IDENTITY
        assert Quaternion(1.0, 0.5, 0.0, 0.0).scale(2.0) == Quaternion.IDENTITY

    def test_double_angle(self) -> None:
        """Scaling a π/2 rotation by 2 gives a π rotation about the same axis"""
        quarter = Rotation(math.pi / 2, 0.0, 0.0, 1.0).quaternion()
        half = Rotation(math.pi, 0.0, 0.0, 1.0).quaternion()
        assert_quaternion_close(quarter.scale(2.0), half)

    def test_half_angle(self) -> None:
        """Scaling by 0.5 halves the rotation angle"""
        q = Rotation(1.6, 0.0, 1.0, 0.0).quaternion()
        assert q.scale(0.5).rotation().angle == pytest.approx(0.8, abs=1e-12)

    def test_scale_zero_is_identity_rotation(self) -> None:
        """Scaling by 0 removes the rotation"""
        q = Rotation(1.0, 1.0, 0.0, 0.0).quaternion()
        assert_quaternion_close(q.scale(0.0), Quaternion.IDENTITY)

    def test_scale_is_not_componentwise(self) -> None:
        """scale() differs from multiply()"""
        q = Rotation(1.0, 1.0, 0.0, 0.0).quaternion()
        assert q.scale(2.0) != q.multiply(2.0)

    def test_non_unit_outside_acos_domain(self) -> None:
        """w > 1 is outside the acos domain"""
        with pytest.raises(ValueError):
            Quaternion(2.0, 0.0, 0.0, 0.0).scale(0.5)


# =============================================================================
# ROTATION CONVERSION
# =============================================================================


class TestRotationConversion:
    """rotation() converts to axis/angle"""

    def test_identity_is_no_rotation(self) -> None:
        """Zero angle returns the canonical NO_ROTATION"""
        assert Quaternion.IDENTITY.rotation() == Rotation.NO_ROTATION

    def test_angle_and_axis(self) -> None:
        """cos(θ/2) + sin(θ/2)·axis converts back to (θ, axis)"""
        angle = 1.0
        q = Quaternion(math.cos(angle / 2), 0.0, math.sin(angle / 2), 0.0)
        r = q.rotation()
        assert r.angle == pytest.approx(angle, abs=1e-12)
        axis = r.axis()
        assert axis.x == pytest.approx(0.0, abs=1e-12)
        assert axis.y == pytest.approx(1.0, abs=1e-12)
        assert axis.z == pytest.approx(0.0, abs=1e-12)

    def test_non_unit_outside_acos_domain(self) -> None:
        """w > 1 is outside the acos domain"""
        with pytest.raises(ValueError):
            Quaternion(1.5, 0.0, 0.0, 0.0).rotation()

    def test_rounding_drift_reports_w(self) -> None:
        """w one ulp above 1 raises a ValueError naming w, without clamping"""
        drifted = Quaternion(1.0000000000000002, 0.0, 0.0, 0.0)
        with pytest.raises(ValueError, match=r"w=1.0000000000000002 is outside \[-1, 1\]"):
            drifted.rotation()
        with pytest.raises(ValueError, match=r"outside \[-1, 1\]"):
            drifted.scale(0.5)
        with pytest.raises(ValueError, match=r"w=-1.0000000000000002"):
            Quaternion(-1.0000000000000002, 0.0, 0.0, 0.0).rotation()

    def test_domain_boundary_accepted(self) -> None:
        """w == -1 is a full turn, still inside the acos domain"""
        assert Quaternion(-1.0, 0.0, 0.0, 0.0).rotation().angle == pytest.approx(2 * math.pi)


# =============================================================================
# VECTOR CAPABILITY
# =============================================================================


class TestVectorCapability:
    """Scalar arithmetic and normalization inherited from Vector"""

    def test_scalar_arithmetic(self) -> None:
        q = Quaternion(1.0, 2.0, 3.0, 4.0)
        assert q.multiply(2.0) == Quaternion(2.0, 4.0, 6.0, 8.0)
        assert q.add(1.0) == Quaternion(2.0, 3.0, 4.0, 5.0)
        assert q.divide(2.0) == Quaternion(0.5, 1.0, 1.5, 2.0)
        assert q.negate() == Quaternion(-1.0, -2.0, -3.0, -4.0)

    def test_quaternion_addition(self) -> None:
        assert I.add(J) == Quaternion(0.0, 1.0, 1.0, 0.0)
        assert I + J - I == J

    def test_divide_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Quaternion.IDENTITY.divide(0.0)

    def test_normalize(self) -> None:
        q = Quaternion(1.0, 2.0, 3.0, 4.0).normalize()
        assert isinstance(q, Quaternion)
        assert q.magnitude() == pytest.approx(1.0, rel=1e-10)
