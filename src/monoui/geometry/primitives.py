"""Geometry primitives for MonoUI.

This module provides immutable Pydantic models for two-dimensional vectors,
points, sizes and thickness insets. All components are doubles and follow
IEEE-754 semantics: equality is exact, and every type that needs a tolerant
comparison exposes a ``nearly_equals`` predicate.

Coordinates follow the UI convention where (0, 0) is the top-left corner,
x increases rightward and y increases downward.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel

from monoui.utils.numeric import are_close, format_invariant, ieee_divide

if TYPE_CHECKING:
    from monoui.geometry.matrix import Matrix


class Vector(BaseModel, frozen=True):
    """A 2D displacement.

    ``vector * vector`` is the dot product; use :meth:`multiply` and
    :meth:`divide` for component-wise products.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector]
    ONE: ClassVar[Vector]
    UNIT_X: ClassVar[Vector]
    UNIT_Y: ClassVar[Vector]

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x=x, y=y)

    @property
    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.squared_length)

    @property
    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def __neg__(self) -> Vector:
        return self.negate()

    def __add__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other: object) -> Vector | float:
        if isinstance(other, Vector):
            return Vector.dot(self, other)
        if isinstance(other, int | float):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector:
        if isinstance(other, int | float):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector:
        if isinstance(other, int | float):
            return Vector(ieee_divide(self.x, other), ieee_divide(self.y, other))
        return NotImplemented

    def nearly_equals(self, other: Vector) -> bool:
        """Check equality within the relative+absolute epsilon of ``are_close``."""
        return are_close(self.x, other.x) and are_close(self.y, other.y)

    def negate(self) -> Vector:
        return Vector(-self.x, -self.y)

    def normalize(self) -> Vector:
        """Return the unit vector in this direction.

        The zero vector normalizes to (NaN, NaN).
        """
        return self / self.length

    def abs(self) -> Vector:
        return Vector(abs(self.x), abs(self.y))

    def with_x(self, x: float) -> Vector:
        return Vector(x, self.y)

    def with_y(self, y: float) -> Vector:
        return Vector(self.x, y)

    def to_point(self) -> Point:
        """Convert to a Point with the same components."""
        return Point(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @staticmethod
    def dot(a: Vector, b: Vector) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def cross(a: Vector, b: Vector) -> float:
        """Z component of the 3D cross product of two planar vectors."""
        return a.x * b.y - a.y * b.x

    @staticmethod
    def multiply(a: Vector, b: Vector) -> Vector:
        """Component-wise product."""
        return Vector(a.x * b.x, a.y * b.y)

    @staticmethod
    def divide(a: Vector, b: Vector) -> Vector:
        """Component-wise quotient."""
        return Vector(ieee_divide(a.x, b.x), ieee_divide(a.y, b.y))

    @staticmethod
    def max(left: Vector, right: Vector) -> Vector:
        return Vector(max(left.x, right.x), max(left.y, right.y))

    @staticmethod
    def min(left: Vector, right: Vector) -> Vector:
        return Vector(min(left.x, right.x), min(left.y, right.y))

    @staticmethod
    def clamp(value: Vector, minimum: Vector, maximum: Vector) -> Vector:
        return Vector.min(Vector.max(value, minimum), maximum)

    @staticmethod
    def distance(value1: Vector, value2: Vector) -> float:
        return math.sqrt(Vector.distance_squared(value1, value2))

    @staticmethod
    def distance_squared(value1: Vector, value2: Vector) -> float:
        difference = value1 - value2
        return Vector.dot(difference, difference)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Vector from (x, y) tuple."""
        return cls(coord[0], coord[1])

    def __str__(self) -> str:
        return f"{format_invariant(self.x)}, {format_invariant(self.y)}"


Vector.ZERO = Vector(0, 0)
Vector.ONE = Vector(1, 1)
Vector.UNIT_X = Vector(1, 0)
Vector.UNIT_Y = Vector(0, 1)


class Point(BaseModel, frozen=True):
    """A 2D position.

    Points can be offset by a Vector or another Point, scaled by a number
    and mapped through an affine :class:`~monoui.geometry.matrix.Matrix`.

    Attributes:
        x: Horizontal position.
        y: Vertical position.
    """

    x: float = 0.0
    y: float = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x=x, y=y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __add__(self, other: object) -> Point:
        if isinstance(other, Point | Vector):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Point:
        if isinstance(other, Point | Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other: object) -> Point:
        from monoui.geometry.matrix import Matrix  # noqa: PLC0415

        if isinstance(other, Matrix):
            return other.transform(self)
        if isinstance(other, int | float):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Point:
        if isinstance(other, int | float):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Point:
        if isinstance(other, int | float):
            return Point(ieee_divide(self.x, other), ieee_divide(self.y, other))
        return NotImplemented

    def nearly_equals(self, other: Point) -> bool:
        """Check equality within the relative+absolute epsilon of ``are_close``."""
        return are_close(self.x, other.x) and are_close(self.y, other.y)

    def transform(self, matrix: Matrix) -> Point:
        """Map this point through an affine matrix."""
        return matrix.transform(self)

    def with_x(self, x: float) -> Point:
        return Point(x, self.y)

    def with_y(self, y: float) -> Point:
        return Point(self.x, y)

    def to_vector(self) -> Vector:
        """Convert to a Vector from the origin to this point."""
        return Vector(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @staticmethod
    def distance(value1: Point, value2: Point) -> float:
        """Euclidean distance between two points."""
        distance_squared = (value2.x - value1.x) * (value2.x - value1.x) + (
            value2.y - value1.y
        ) * (value2.y - value1.y)
        return math.sqrt(distance_squared)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(coord[0], coord[1])

    def __str__(self) -> str:
        return f"{format_invariant(self.x)}, {format_invariant(self.y)}"


class Size(BaseModel, frozen=True):
    """A 2D size representing width and height.

    Negative dimensions are tolerated as intermediate results of arithmetic;
    they are not rejected. ``Size.INFINITY`` is the unconstrained size used
    by layout measurement.

    Attributes:
        width: Horizontal extent.
        height: Vertical extent.
    """

    width: float = 0.0
    height: float = 0.0

    INFINITY: ClassVar[Size]

    def __init__(self, width: float = 0.0, height: float = 0.0) -> None:
        super().__init__(width=width, height=height)

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return ieee_divide(self.width, self.height)

    def __add__(self, other: object) -> Size:
        if isinstance(other, Size):
            return Size(self.width + other.width, self.height + other.height)
        if isinstance(other, Thickness):
            return self.inflate(other)
        return NotImplemented

    def __sub__(self, other: object) -> Size:
        if isinstance(other, Size):
            return Size(self.width - other.width, self.height - other.height)
        if isinstance(other, Thickness):
            return Size(
                self.width - (other.left + other.right),
                self.height - (other.top + other.bottom),
            )
        return NotImplemented

    def __mul__(self, other: object) -> Size:
        if isinstance(other, Vector):
            return Size(self.width * other.x, self.height * other.y)
        if isinstance(other, int | float):
            return Size(self.width * other, self.height * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Size | Vector:
        if isinstance(other, Size):
            return Vector(
                ieee_divide(self.width, other.width), ieee_divide(self.height, other.height)
            )
        if isinstance(other, Vector):
            return Size(ieee_divide(self.width, other.x), ieee_divide(self.height, other.y))
        if isinstance(other, int | float):
            return Size(ieee_divide(self.width, other), ieee_divide(self.height, other))
        return NotImplemented

    def constrain(self, constraint: Size) -> Size:
        """Return the component-wise minimum of this size and a constraint."""
        return Size(min(self.width, constraint.width), min(self.height, constraint.height))

    def inflate(self, thickness: Thickness) -> Size:
        """Grow by the thickness on every side."""
        return Size(
            self.width + thickness.left + thickness.right,
            self.height + thickness.top + thickness.bottom,
        )

    def deflate(self, thickness: Thickness) -> Size:
        """Shrink by the thickness on every side, flooring each dimension at 0."""
        return Size(
            max(0.0, self.width - thickness.left - thickness.right),
            max(0.0, self.height - thickness.top - thickness.bottom),
        )

    def nearly_equals(self, other: Size) -> bool:
        """Check equality within the relative+absolute epsilon of ``are_close``."""
        return are_close(self.width, other.width) and are_close(self.height, other.height)

    def with_width(self, width: float) -> Size:
        return Size(width, self.height)

    def with_height(self, height: float) -> Size:
        return Size(self.width, height)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, size: tuple[float, float]) -> Self:
        """Create Size from (width, height) tuple."""
        return cls(size[0], size[1])

    def __str__(self) -> str:
        return f"{format_invariant(self.width)}, {format_invariant(self.height)}"


Size.INFINITY = Size(math.inf, math.inf)


class Thickness(BaseModel, frozen=True):
    """Per-edge insets, as used for margins, paddings and borders.

    Can be built from one uniform length, a (horizontal, vertical) pair or
    all four edges in (left, top, right, bottom) order:

        >>> Thickness(2).to_tuple()
        (2.0, 2.0, 2.0, 2.0)
        >>> Thickness(1, 3).to_tuple()
        (1.0, 3.0, 1.0, 3.0)

    Attributes:
        left: Left inset.
        top: Top inset.
        right: Right inset.
        bottom: Bottom inset.
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def __init__(self, *lengths: float, **edges: float) -> None:
        if lengths and edges:
            raise TypeError("Thickness takes either positional lengths or edge keywords")
        if len(lengths) == 1:
            (uniform,) = lengths
            edges = {"left": uniform, "top": uniform, "right": uniform, "bottom": uniform}
        elif len(lengths) == 2:
            horizontal, vertical = lengths
            edges = {"left": horizontal, "top": vertical, "right": horizontal, "bottom": vertical}
        elif len(lengths) == 4:
            left, top, right, bottom = lengths
            edges = {"left": left, "top": top, "right": right, "bottom": bottom}
        elif lengths:
            raise TypeError(f"Thickness takes 1, 2 or 4 lengths, got {len(lengths)}")
        super().__init__(**edges)

    @property
    def is_uniform(self) -> bool:
        """True if all four edges are equal."""
        return self.left == self.right and self.top == self.bottom and self.right == self.bottom

    def __add__(self, other: object) -> Thickness:
        if isinstance(other, Thickness):
            return Thickness(
                self.left + other.left,
                self.top + other.top,
                self.right + other.right,
                self.bottom + other.bottom,
            )
        return NotImplemented

    def __sub__(self, other: object) -> Thickness:
        if isinstance(other, Thickness):
            return Thickness(
                self.left - other.left,
                self.top - other.top,
                self.right - other.right,
                self.bottom - other.bottom,
            )
        return NotImplemented

    def __mul__(self, other: object) -> Thickness:
        if isinstance(other, int | float):
            return Thickness(
                self.left * other,
                self.top * other,
                self.right * other,
                self.bottom * other,
            )
        return NotImplemented

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (left, top, right, bottom) tuple."""
        return (self.left, self.top, self.right, self.bottom)

    def __str__(self) -> str:
        return ",".join(format_invariant(v) for v in self.to_tuple())
