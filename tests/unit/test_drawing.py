"""Tests for the drawing collaborator protocols."""

from __future__ import annotations

from typing import Any

from monoui.colors import ColorRgb
from monoui.drawing import DrawingContext, Layoutable, RendererContext
from monoui.geometry import Point, Rect


class RecordingContext:
    """Drawing context that records calls instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def draw_line(self, a: Point, b: Point, color: ColorRgb, thickness: float = 1.0) -> None:
        self.calls.append(("line", (a, b, color, thickness)))

    def draw_rectangle(self, rect: Rect, color: ColorRgb, thickness: float = 1.0) -> None:
        self.calls.append(("rectangle", (rect, color, thickness)))

    def fill_rectangle(self, rect: Rect, color: ColorRgb) -> None:
        self.calls.append(("fill", (rect, color)))

    def draw_ellipse(self, rect: Rect, color: ColorRgb, thickness: float = 1.0) -> None:
        self.calls.append(("ellipse", (rect, color, thickness)))


class FakeRenderer:
    def __init__(self) -> None:
        self.services: dict[str, object] = {}
        self.drawing_context = RecordingContext()


class Box:
    def __init__(self) -> None:
        self.width = 10.0
        self.height = 20.0


class TestProtocols:
    """Structural checks for the drawing protocols."""

    def test_recording_context_is_drawing_context(self) -> None:
        """Test a duck-typed context satisfies DrawingContext."""
        assert isinstance(RecordingContext(), DrawingContext)

    def test_renderer_context(self) -> None:
        """Test an object with services and a drawing context is a renderer."""
        renderer = FakeRenderer()
        assert isinstance(renderer, RendererContext)
        assert isinstance(renderer.drawing_context, DrawingContext)

    def test_layoutable(self) -> None:
        """Test width and height make an element layoutable."""
        assert isinstance(Box(), Layoutable)
        assert not isinstance(object(), Layoutable)

    def test_unrelated_object_is_not_drawing_context(self) -> None:
        """Test missing methods fail the runtime check."""
        assert not isinstance(Box(), DrawingContext)

    def test_primitives_flow_through_context(self) -> None:
        """Test primitives are passed to a context unchanged."""
        context = RecordingContext()
        bounds = Rect(0, 0, 10, 10).deflate(1)
        red = ColorRgb.parse("red")
        context.fill_rectangle(bounds, red)
        context.draw_line(bounds.top_left, bounds.bottom_right, red)

        assert context.calls == [
            ("fill", (Rect(1, 1, 8, 8), red)),
            ("line", (Point(1, 1), Point(9, 9), red, 1.0)),
        ]
