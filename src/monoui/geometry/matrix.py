"""Affine 2D transform for MonoUI.

Points are treated as row vectors, so a point maps as::

    x' = x * m11 + y * m21 + m31
    y' = x * m12 + y * m22 + m32

Composition with ``*`` applies the left operand first: ``a * b`` maps a point
through ``a`` and then through ``b``.
"""

from __future__ import annotations

import math
from typing import ClassVar

from pydantic import BaseModel

from monoui.geometry.primitives import Point, Vector
from monoui.utils.numeric import format_invariant, is_one, is_zero


class Matrix(BaseModel, frozen=True):
    """An affine transform: a 2x2 linear part plus a translation.

    Attributes:
        m11: Scale/rotation component, x to x.
        m12: Scale/rotation component, x to y.
        m21: Scale/rotation component, y to x.
        m22: Scale/rotation component, y to y.
        m31: Horizontal translation.
        m32: Vertical translation.
    """

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m31: float = 0.0
    m32: float = 0.0

    IDENTITY: ClassVar[Matrix]

    def __init__(
        self,
        m11: float = 1.0,
        m12: float = 0.0,
        m21: float = 0.0,
        m22: float = 1.0,
        m31: float = 0.0,
        m32: float = 0.0,
    ) -> None:
        super().__init__(m11=m11, m12=m12, m21=m21, m22=m22, m31=m31, m32=m32)

    @classmethod
    def create_translation(cls, x: float | Vector, y: float = 0.0) -> Matrix:
        """Create a translation by (x, y) or by a Vector."""
        if isinstance(x, Vector):
            x, y = x.x, x.y
        return cls(1.0, 0.0, 0.0, 1.0, x, y)

    @classmethod
    def create_scale(cls, x: float, y: float | None = None) -> Matrix:
        """Create a scale about the origin; a single factor scales uniformly."""
        return cls(x, 0.0, 0.0, x if y is None else y, 0.0, 0.0)

    @classmethod
    def create_rotation(cls, radians: float) -> Matrix:
        """Create a rotation about the origin, clockwise on a y-down surface."""
        cos = math.cos(radians)
        sin = math.sin(radians)
        return cls(cos, sin, -sin, cos, 0.0, 0.0)

    @classmethod
    def create_skew(cls, x_angle: float, y_angle: float) -> Matrix:
        """Create a skew transform from two angles in radians."""
        return cls(1.0, math.tan(y_angle), math.tan(x_angle), 1.0, 0.0, 0.0)

    @property
    def determinant(self) -> float:
        return self.m11 * self.m22 - self.m12 * self.m21

    @property
    def has_inverse(self) -> bool:
        return not is_zero(self.determinant)

    @property
    def is_identity(self) -> bool:
        return (
            is_one(self.m11)
            and is_zero(self.m12)
            and is_zero(self.m21)
            and is_one(self.m22)
            and is_zero(self.m31)
            and is_zero(self.m32)
        )

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(
            self.m11 * other.m11 + self.m12 * other.m21,
            self.m11 * other.m12 + self.m12 * other.m22,
            self.m21 * other.m11 + self.m22 * other.m21,
            self.m21 * other.m12 + self.m22 * other.m22,
            self.m31 * other.m11 + self.m32 * other.m21 + other.m31,
            self.m31 * other.m12 + self.m32 * other.m22 + other.m32,
        )

    def transform(self, point: Point) -> Point:
        """Map a point through this transform."""
        return Point(
            point.x * self.m11 + point.y * self.m21 + self.m31,
            point.x * self.m12 + point.y * self.m22 + self.m32,
        )

    def try_invert(self) -> Matrix | None:
        """Return the inverse transform, or None if the matrix is singular."""
        d = self.determinant
        if is_zero(d):
            return None
        return Matrix(
            self.m22 / d,
            -self.m12 / d,
            -self.m21 / d,
            self.m11 / d,
            (self.m21 * self.m32 - self.m22 * self.m31) / d,
            (self.m12 * self.m31 - self.m11 * self.m32) / d,
        )

    def invert(self) -> Matrix:
        """Return the inverse transform.

        Raises:
            ValueError: If the matrix is singular.
        """
        inverted = self.try_invert()
        if inverted is None:
            raise ValueError("Transform is not invertible.")
        return inverted

    def __str__(self) -> str:
        return " ".join(
            format_invariant(v)
            for v in (self.m11, self.m12, self.m21, self.m22, self.m31, self.m32)
        )


Matrix.IDENTITY = Matrix()
