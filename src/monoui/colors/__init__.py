"""Color module for MonoUI.

Immutable color values in three interconvertible models, plus parsing of
CSS-like and hex color syntaxes.

Key Components:
    - ColorRgb: 32-bit ARGB color, the type drawing code consumes
    - ColorHsl / ColorHsv: cylindrical models with clamped components
    - ColorFormatError: raised by the ``parse`` methods

Example:
    from monoui.colors import ColorRgb

    ColorRgb.parse("#FFF")                 # ColorRgb(a=255, r=255, g=255, b=255)
    ColorRgb.parse("hsl(0, 100%, 50%)")    # pure red
    ColorRgb.try_parse("not a color")      # None
"""

from monoui.colors.exceptions import ColorFormatError
from monoui.colors.hsl import ColorHsl
from monoui.colors.hsv import ColorHsv
from monoui.colors.known_colors import KNOWN_COLORS, get_known_color, get_known_color_name
from monoui.colors.rgb import ColorRgb

__all__ = [
    "KNOWN_COLORS",
    "ColorFormatError",
    "ColorHsl",
    "ColorHsv",
    "ColorRgb",
    "get_known_color",
    "get_known_color_name",
]
