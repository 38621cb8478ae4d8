"""Interfaces of the collaborators that consume MonoUI primitives.

Rendering backends and the layout system live outside this package. These
Protocols describe the surface they expose so that code producing points,
rectangles and colors can be typed against it; nothing here draws.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from monoui.colors.rgb import ColorRgb
from monoui.geometry.primitives import Point
from monoui.geometry.rect import Rect


@runtime_checkable
class DrawingContext(Protocol):
    """A surface that strokes and fills shapes described by primitives."""

    def draw_line(self, a: Point, b: Point, color: ColorRgb, thickness: float = 1.0) -> None:
        """Stroke a line segment from a to b."""
        ...

    def draw_rectangle(self, rect: Rect, color: ColorRgb, thickness: float = 1.0) -> None:
        """Stroke the outline of a rectangle."""
        ...

    def fill_rectangle(self, rect: Rect, color: ColorRgb) -> None:
        """Fill a rectangle with a solid color."""
        ...

    def draw_ellipse(self, rect: Rect, color: ColorRgb, thickness: float = 1.0) -> None:
        """Stroke the ellipse inscribed in a rectangle."""
        ...


@runtime_checkable
class RendererContext(Protocol):
    """What a renderer hands to controls while drawing a frame."""

    @property
    def services(self) -> Any:
        """Service locator for renderer-specific capabilities."""
        ...

    @property
    def drawing_context(self) -> DrawingContext: ...


@runtime_checkable
class Layoutable(Protocol):
    """An element with a mutable layout size."""

    width: float
    height: float
