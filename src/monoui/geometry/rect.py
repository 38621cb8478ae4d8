"""Axis-aligned rectangle for MonoUI.

A Rect is an origin (x, y) plus a width and height. Width and height may be
negative; :meth:`Rect.normalize` produces the equivalent rectangle with
non-negative dimensions. The all-zero rectangle doubles as the "empty"
value: it is what :meth:`Rect.intersect` returns for disjoint inputs and
what :meth:`Rect.union` skips over.
"""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel

from monoui.geometry.primitives import Point, Size, Thickness, Vector
from monoui.utils.numeric import format_invariant, ieee_divide

if TYPE_CHECKING:
    from monoui.geometry.matrix import Matrix


class Rect(BaseModel, frozen=True):
    """A rectangle defined by its top-left corner and its dimensions.

    The region is defined as:
    - Top-left: (x, y)
    - Bottom-right: (x + width, y + height)

    Attributes:
        x: Left edge X coordinate.
        y: Top edge Y coordinate.
        width: Horizontal extent (may be negative before normalization).
        height: Vertical extent (may be negative before normalization).
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
    ) -> None:
        super().__init__(x=x, y=y, width=width, height=height)

    @classmethod
    def from_size(cls, size: Size) -> Self:
        """Create a Rect at the origin with the given size."""
        return cls(0.0, 0.0, size.width, size.height)

    @classmethod
    def from_position(cls, position: Point, size: Size) -> Self:
        """Create a Rect from its top-left corner and size."""
        return cls(position.x, position.y, size.width, size.height)

    @classmethod
    def from_corners(cls, top_left: Point, bottom_right: Point) -> Self:
        """Create a Rect spanning two corners.

        No ordering is enforced: a bottom_right above or left of top_left
        yields negative dimensions.
        """
        return cls(
            top_left.x,
            top_left.y,
            bottom_right.x - top_left.x,
            bottom_right.y - top_left.y,
        )

    @classmethod
    def from_tuple(cls, bbox: tuple[float, float, float, float]) -> Self:
        """Create Rect from (x, y, width, height) tuple."""
        return cls(bbox[0], bbox[1], bbox[2], bbox[3])

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        """Return the X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Return the Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.x, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def is_empty(self) -> bool:
        """True for the all-zero rectangle."""
        return self == Rect()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __mul__(self, other: object) -> Rect:
        if isinstance(other, Vector):
            return Rect(
                self.x * other.x,
                self.y * other.y,
                self.width * other.x,
                self.height * other.y,
            )
        if isinstance(other, int | float):
            return Rect(
                self.x * other,
                self.y * other,
                self.width * other,
                self.height * other,
            )
        return NotImplemented

    def __truediv__(self, other: object) -> Rect:
        if isinstance(other, Vector):
            return Rect(
                ieee_divide(self.x, other.x),
                ieee_divide(self.y, other.y),
                ieee_divide(self.width, other.x),
                ieee_divide(self.height, other.y),
            )
        return NotImplemented

    # ------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------

    def contains(self, target: Point | Rect) -> bool:
        """Check whether a point or rectangle lies inside this rectangle.

        Points are tested inclusively on all four edges. A rectangle is
        contained when both its top-left and bottom-right corners are.
        """
        if isinstance(target, Rect):
            return self.contains(target.top_left) and self.contains(target.bottom_right)
        return (
            self.x <= target.x <= self.x + self.width
            and self.y <= target.y <= self.y + self.height
        )

    def contains_exclusive(self, point: Point) -> bool:
        """Check containment with inclusive top/left and exclusive bottom/right edges.

        Adjacent rectangles sharing an edge never both claim a point.
        """
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def intersects(self, rect: Rect) -> bool:
        """Check if this rectangle overlaps another.

        Rectangles that merely touch along an edge do not intersect.
        """
        return (
            rect.x < self.right
            and self.x < rect.right
            and rect.y < self.bottom
            and self.y < rect.bottom
        )

    # ------------------------------------------------------------------
    # Derived rectangles
    # ------------------------------------------------------------------

    def intersect(self, rect: Rect) -> Rect:
        """Compute the overlap of two rectangles.

        Returns:
            The overlapping region, or the zero Rect if the overlap is empty
            or degenerate.
        """
        new_left = rect.x if rect.x > self.x else self.x
        new_top = rect.y if rect.y > self.y else self.y
        new_right = rect.right if rect.right < self.right else self.right
        new_bottom = rect.bottom if rect.bottom < self.bottom else self.bottom

        if new_right > new_left and new_bottom > new_top:
            return Rect(new_left, new_top, new_right - new_left, new_bottom - new_top)
        return Rect()

    def union(self, rect: Rect) -> Rect:
        """Compute the smallest rectangle covering both rectangles.

        A rectangle whose width and height are both exactly zero counts as
        empty, wherever it is positioned, and is skipped.
        """
        if self.width == 0 and self.height == 0:
            return rect
        if rect.width == 0 and rect.height == 0:
            return self

        x1 = min(self.x, rect.x)
        x2 = max(self.right, rect.right)
        y1 = min(self.y, rect.y)
        y2 = max(self.bottom, rect.bottom)
        return Rect.from_corners(Point(x1, y1), Point(x2, y2))

    @staticmethod
    def union_optional(left: Rect | None, right: Rect | None) -> Rect | None:
        """Union where None means "no rectangle"."""
        if left is None:
            return right
        if right is None:
            return left
        return left.union(right)

    def normalize(self) -> Rect:
        """Return the equivalent rectangle with non-negative width and height.

        Any NaN among x, y, width, height, right or bottom collapses the
        result to the zero Rect.
        """
        if any(
            math.isnan(v)
            for v in (self.right, self.bottom, self.x, self.y, self.height, self.width)
        ):
            return Rect()

        rect = self
        if rect.width < 0:
            x = self.x + self.width
            rect = rect.with_x(x).with_width(self.x - x)
        if rect.height < 0:
            y = self.y + self.height
            rect = rect.with_y(y).with_height(self.y - y)
        return rect

    def inflate(self, thickness: Thickness | float) -> Rect:
        """Grow each edge outward by the matching thickness component."""
        if not isinstance(thickness, Thickness):
            thickness = Thickness(thickness)
        return Rect.from_position(
            Point(self.x - thickness.left, self.y - thickness.top),
            self.size.inflate(thickness),
        )

    def deflate(self, thickness: Thickness | float) -> Rect:
        """Move each edge inward by the matching thickness component.

        Unlike :meth:`Size.deflate` the dimensions are not floored at zero,
        so over-deflating yields negative width or height.
        """
        if not isinstance(thickness, Thickness):
            thickness = Thickness(thickness)
        return Rect(
            self.x + thickness.left,
            self.y + thickness.top,
            self.width - thickness.left - thickness.right,
            self.height - thickness.top - thickness.bottom,
        )

    def center_rect(self, rect: Rect) -> Rect:
        """Position a rectangle's size centered within this rectangle."""
        return Rect(
            self.x + (self.width - rect.width) / 2,
            self.y + (self.height - rect.height) / 2,
            rect.width,
            rect.height,
        )

    def translate(self, offset: Vector) -> Rect:
        return Rect.from_position(self.position + offset, self.size)

    def transform_to_aabb(self, matrix: Matrix) -> Rect:
        """Bound this rectangle, mapped through an affine matrix, by an axis-aligned box.

        All four corners are transformed; the result spans their minimum and
        maximum coordinates.
        """
        points = (
            self.top_left.transform(matrix),
            self.top_right.transform(matrix),
            self.bottom_right.transform(matrix),
            self.bottom_left.transform(matrix),
        )
        left = sys.float_info.max
        right = -sys.float_info.max
        top = sys.float_info.max
        bottom = -sys.float_info.max
        for p in points:
            if p.x < left:
                left = p.x
            if p.x > right:
                right = p.x
            if p.y < top:
                top = p.y
            if p.y > bottom:
                bottom = p.y
        return Rect.from_corners(Point(left, top), Point(right, bottom))

    def with_x(self, x: float) -> Rect:
        return Rect(x, self.y, self.width, self.height)

    def with_y(self, y: float) -> Rect:
        return Rect(self.x, y, self.width, self.height)

    def with_width(self, width: float) -> Rect:
        return Rect(self.x, self.y, width, self.height)

    def with_height(self, height: float) -> Rect:
        return Rect(self.x, self.y, self.width, height)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    def __str__(self) -> str:
        return ", ".join(format_invariant(v) for v in self.to_tuple())
