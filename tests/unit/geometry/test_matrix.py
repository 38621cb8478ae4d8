"""Tests for the affine Matrix."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from monoui.geometry import Matrix, Point, Vector

angles = st.floats(min_value=-2 * math.pi, max_value=2 * math.pi)


class TestMatrixConstruction:
    """Tests for Matrix factories."""

    def test_default_is_identity(self) -> None:
        """Test an argument-free Matrix is the identity."""
        assert Matrix() == Matrix.IDENTITY
        assert Matrix.IDENTITY.is_identity

    def test_translation(self) -> None:
        """Test translation from numbers and from a Vector."""
        assert Matrix.create_translation(3, 4) == Matrix(1, 0, 0, 1, 3, 4)
        assert Matrix.create_translation(Vector(3, 4)) == Matrix(1, 0, 0, 1, 3, 4)

    def test_scale(self) -> None:
        """Test uniform and non-uniform scale."""
        assert Matrix.create_scale(2) == Matrix(2, 0, 0, 2, 0, 0)
        assert Matrix.create_scale(2, 3) == Matrix(2, 0, 0, 3, 0, 0)

    def test_rotation_quarter_turn(self) -> None:
        """Test a quarter turn maps the x axis onto the y axis."""
        rotated = Matrix.create_rotation(math.pi / 2).transform(Point(1, 0))
        assert rotated.x == pytest.approx(0.0, abs=1e-12)
        assert rotated.y == pytest.approx(1.0)

    def test_skew_of_zero_is_identity(self) -> None:
        """Test zero skew angles change nothing."""
        assert Matrix.create_skew(0, 0).is_identity


class TestMatrixOperations:
    """Tests for transform, composition and inversion."""

    def test_transform_uses_row_vector_convention(self) -> None:
        """Test x' = x*m11 + y*m21 + m31 and y' = x*m12 + y*m22 + m32."""
        matrix = Matrix(1, 2, 3, 4, 5, 6)
        assert matrix.transform(Point(1, 1)) == Point(9, 12)

    def test_composition_applies_left_first(self) -> None:
        """Test (a * b) maps through a then b."""
        combined = Matrix.create_translation(1, 2) * Matrix.create_scale(2)
        assert combined.transform(Point(1, 1)) == Point(4, 6)

    def test_determinant(self) -> None:
        """Test determinant of the linear part."""
        assert Matrix(2, 0, 0, 4, 10, 20).determinant == 8.0
        assert Matrix(1, 2, 2, 4).determinant == 0.0

    def test_invert(self) -> None:
        """Test inversion of a scale plus translation."""
        inverse = Matrix(2, 0, 0, 4, 10, 20).invert()
        assert inverse == Matrix(0.5, 0, 0, 0.25, -5, -5)
        assert inverse.transform(Point(12, 24)) == Point(1, 1)

    def test_singular_matrix(self) -> None:
        """Test a singular matrix has no inverse."""
        singular = Matrix(1, 2, 2, 4)
        assert not singular.has_inverse
        assert singular.try_invert() is None
        with pytest.raises(ValueError, match="not invertible"):
            singular.invert()

    def test_str(self) -> None:
        """Test space-separated components."""
        assert str(Matrix.create_translation(1.5, 2)) == "1 0 0 1 1.5 2"

    @given(angles)
    def test_rotation_times_inverse_is_identity(self, radians: float) -> None:
        """Property: a rotation composed with its inverse is the identity."""
        rotation = Matrix.create_rotation(radians)
        product = rotation * rotation.invert()
        point = product.transform(Point(3, -7))
        assert point.x == pytest.approx(3.0)
        assert point.y == pytest.approx(-7.0)
