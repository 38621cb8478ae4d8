"""32-bit ARGB color for MonoUI.

ColorRgb is the canonical color type: drawing code consumes it, and the HSL
and HSV models convert to and from it. Parsing accepts, in this order:

1. ``#RGB``, ``#ARGB``, ``#RRGGBB`` or ``#AARRGGBB`` hex
2. ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``
3. ``hsl(...)`` / ``hsla(...)``, converted to RGB
4. ``hsv(...)`` / ``hsva(...)``, converted to RGB
5. A known color name such as ``CornflowerBlue``
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, Field

from monoui.colors.conversions import unit_rgb_to_hsl, unit_rgb_to_hsv
from monoui.colors.exceptions import ColorFormatError
from monoui.colors.known_colors import get_known_color, get_known_color_name
from monoui.colors.parsing import parse_byte, parse_unit, split_function, to_byte
from monoui.utils.logging import get_logger

if TYPE_CHECKING:
    from monoui.colors.hsl import ColorHsl
    from monoui.colors.hsv import ColorHsv

logger = get_logger(__name__)

_BYTE_TO_DOUBLE = 1.0 / 255

_HEX_RE = re.compile(r"[0-9a-fA-F]+")

# Shortest function syntax, e.g. "rgb(0,0,0)"
_MIN_FUNCTION_LENGTH = 10


class ColorRgb(BaseModel, frozen=True):
    """An 8-bit-per-channel color with alpha.

    Equality is exact on all four channels. The packed form is
    ``(a << 24) | (r << 16) | (g << 8) | b``.

    Attributes:
        a: Alpha channel (0 transparent, 255 opaque).
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    a: int = Field(0, ge=0, le=255, description="Alpha channel")
    r: int = Field(0, ge=0, le=255, description="Red channel")
    g: int = Field(0, ge=0, le=255, description="Green channel")
    b: int = Field(0, ge=0, le=255, description="Blue channel")

    def __init__(self, a: int = 0, r: int = 0, g: int = 0, b: int = 0) -> None:
        super().__init__(a=a, r=r, g=g, b=b)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> Self:
        return cls(a, r, g, b)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Self:
        """Create a fully opaque color."""
        return cls(0xFF, r, g, b)

    @classmethod
    def from_uint32(cls, value: int) -> Self:
        """Create a color from a packed ``0xAARRGGBB`` integer."""
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> ColorRgb:
        """Parse a color string.

        Raises:
            ColorFormatError: If the text matches none of the accepted syntaxes.
        """
        color = cls.try_parse(text)
        if color is None:
            logger.debug("Rejected color string", text=text, model="rgb")
            raise ColorFormatError(text)
        return color

    @classmethod
    def try_parse(cls, text: str | None) -> ColorRgb | None:
        """Parse a color string, returning None if it is not recognized.

        Surrounding whitespace is ignored. Prefix checks decide which syntax
        is attempted, so e.g. ``hsva(...)`` never reaches the name table.
        """
        if text is None:
            return None
        working = text.strip()
        if not working:
            return None

        if working[0] == "#":
            return cls._try_parse_hex(working[1:])

        prefix = working[:3].lower()
        if len(working) >= _MIN_FUNCTION_LENGTH:
            if prefix == "rgb":
                color = cls._try_parse_function(working)
                if color is not None:
                    return color
            elif prefix == "hsl":
                from monoui.colors.hsl import ColorHsl  # noqa: PLC0415

                hsl = ColorHsl.try_parse(working)
                if hsl is not None:
                    return hsl.to_rgb()
            elif prefix == "hsv":
                from monoui.colors.hsv import ColorHsv  # noqa: PLC0415

                hsv = ColorHsv.try_parse(working)
                if hsv is not None:
                    return hsv.to_rgb()

        return get_known_color(working)

    @classmethod
    def _try_parse_hex(cls, digits: str) -> ColorRgb | None:
        # Shorthand forms double every digit: "abc" -> "aabbcc"
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)

        if len(digits) == 6:
            alpha = 0xFF000000
        elif len(digits) == 8:
            alpha = 0
        else:
            return None

        if not _HEX_RE.fullmatch(digits):
            return None
        return cls.from_uint32(int(digits, 16) | alpha)

    @classmethod
    def _try_parse_function(cls, text: str) -> ColorRgb | None:
        components = split_function(text, "rgb")
        if components is None or len(components) not in (3, 4):
            return None

        red, green, blue = (parse_byte(c) for c in components[:3])
        if red is None or green is None or blue is None:
            return None

        if len(components) == 3:
            return cls(0xFF, red, green, blue)

        alpha = parse_unit(components[3])
        if alpha is None:
            return None
        return cls(to_byte(alpha), red, green, blue)

    # ------------------------------------------------------------------
    # Output and conversion
    # ------------------------------------------------------------------

    def to_uint32(self) -> int:
        """Pack into ``0xAARRGGBB``."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_string(self) -> str:
        """Return the known color name, or ``#aarrggbb`` in lowercase hex."""
        argb = self.to_uint32()
        return get_known_color_name(argb) or f"#{argb:08x}"

    def __str__(self) -> str:
        return self.to_string()

    def to_hsl(self) -> ColorHsl:
        return ColorRgb.rgb_to_hsl(self.r, self.g, self.b, self.a)

    def to_hsv(self) -> ColorHsv:
        return ColorRgb.rgb_to_hsv(self.r, self.g, self.b, self.a)

    @staticmethod
    def rgb_to_hsl(red: int, green: int, blue: int, alpha: int = 0xFF) -> ColorHsl:
        """Convert byte channels to HSL.

        The result is built without clamping; the conversion already
        produces in-range components.
        """
        from monoui.colors.hsl import ColorHsl  # noqa: PLC0415

        h, s, l = unit_rgb_to_hsl(  # noqa: E741
            _BYTE_TO_DOUBLE * red,
            _BYTE_TO_DOUBLE * green,
            _BYTE_TO_DOUBLE * blue,
        )
        return ColorHsl.unchecked(_BYTE_TO_DOUBLE * alpha, h, s, l)

    @staticmethod
    def rgb_to_hsv(red: int, green: int, blue: int, alpha: int = 0xFF) -> ColorHsv:
        """Convert byte channels to HSV, built without clamping."""
        from monoui.colors.hsv import ColorHsv  # noqa: PLC0415

        h, s, v = unit_rgb_to_hsv(
            _BYTE_TO_DOUBLE * red,
            _BYTE_TO_DOUBLE * green,
            _BYTE_TO_DOUBLE * blue,
        )
        return ColorHsv.unchecked(_BYTE_TO_DOUBLE * alpha, h, s, v)
