"""MonoUI primitives: immutable geometry and color value types.

Example:
    from monoui import ColorRgb, Rect

    red = ColorRgb.parse("rgba(255, 0, 0, 0.5)")
    overlap = Rect(0, 0, 10, 10).intersect(Rect(5, 5, 10, 10))
"""

from monoui.colors import ColorFormatError, ColorHsl, ColorHsv, ColorRgb
from monoui.geometry import Matrix, Point, Rect, Size, Thickness, Vector

__version__ = "0.1.0"

__all__ = [
    "ColorFormatError",
    "ColorHsl",
    "ColorHsv",
    "ColorRgb",
    "Matrix",
    "Point",
    "Rect",
    "Size",
    "Thickness",
    "Vector",
    "__version__",
]
