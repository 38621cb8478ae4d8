"""Geometry module for MonoUI.

This package provides immutable two-dimensional value types consumed by
drawing and layout code.

Key Components:
    - Primitives: Vector, Point, Size, Thickness
    - Matrix: affine transform used to map points
    - Rect: axis-aligned rectangle with hit testing, intersection, union,
      normalization and bounding-box-under-transform

Example:
    from monoui.geometry import Matrix, Rect

    rect = Rect(0, 0, 10, 10)
    rect.intersect(Rect(5, 5, 10, 10))  # Rect(5, 5, 5, 5)
    rect.transform_to_aabb(Matrix.create_scale(2, 3))  # Rect(0, 0, 20, 30)
"""

from monoui.geometry.matrix import Matrix
from monoui.geometry.primitives import Point, Size, Thickness, Vector
from monoui.geometry.rect import Rect

__all__ = [
    "Matrix",
    "Point",
    "Rect",
    "Size",
    "Thickness",
    "Vector",
]
