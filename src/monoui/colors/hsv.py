"""HSV (hue, saturation, value) color for MonoUI.

HSV is the model used by color pickers: value is the brightest channel and
saturation is chroma relative to that channel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, field_validator

from monoui.colors import conversions
from monoui.colors.exceptions import ColorFormatError
from monoui.colors.parsing import parse_number, parse_unit, split_function, to_byte
from monoui.colors.rgb import ColorRgb
from monoui.utils.logging import get_logger
from monoui.utils.numeric import clamp, format_invariant

if TYPE_CHECKING:
    from monoui.colors.hsl import ColorHsl

logger = get_logger(__name__)


class ColorHsv(BaseModel, frozen=True):
    """A color in the HSV cylindrical model.

    Clamping follows :class:`~monoui.colors.hsl.ColorHsl`: hue to
    ``[0, 360]`` with 360 folded to 0, everything else to ``[0, 1]``.

    Attributes:
        a: Alpha in [0, 1].
        h: Hue in degrees, [0, 360).
        s: Saturation in [0, 1].
        v: Value in [0, 1].
    """

    a: float = 0.0
    h: float = 0.0
    s: float = 0.0
    v: float = 0.0

    def __init__(
        self,
        a: float = 0.0,
        h: float = 0.0,
        s: float = 0.0,
        v: float = 0.0,
    ) -> None:
        super().__init__(a=a, h=h, s=s, v=v)

    @field_validator("a", "s", "v")
    @classmethod
    def _clamp_unit(cls, value: float) -> float:
        return clamp(value, 0.0, 1.0)

    @field_validator("h")
    @classmethod
    def _clamp_hue(cls, value: float) -> float:
        hue = clamp(value, 0.0, 360.0)
        return 0.0 if hue == 360.0 else hue

    @classmethod
    def unchecked(cls, a: float, h: float, s: float, v: float) -> Self:
        """Build a color without validation or clamping.

        Out-of-range components break the model's invariants; only use this
        with values produced by a conversion that guarantees the ranges.
        """
        return cls.model_construct(a=a, h=h, s=s, v=v)

    @classmethod
    def from_ahsv(cls, a: float, h: float, s: float, v: float) -> Self:
        return cls(a, h, s, v)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Self:
        return cls(1.0, h, s, v)

    @classmethod
    def from_rgb(cls, color: ColorRgb) -> ColorHsv:
        return color.to_hsv()

    @classmethod
    def parse(cls, text: str) -> ColorHsv:
        """Parse ``hsv(h, s, v)`` or ``hsva(h, s, v, a)``.

        Raises:
            ColorFormatError: If the text is not an HSV function.
        """
        color = cls.try_parse(text)
        if color is None:
            logger.debug("Rejected color string", text=text, model="hsv")
            raise ColorFormatError(text, model="HSV color")
        return color

    @classmethod
    def try_parse(cls, text: str | None) -> ColorHsv | None:
        """Same component rules as :meth:`ColorHsl.try_parse`."""
        if text is None:
            return None
        components = split_function(text, "hsv")
        if components is None or len(components) not in (3, 4):
            return None

        hue = parse_number(components[0])
        saturation = parse_unit(components[1])
        value = parse_unit(components[2])
        alpha = parse_unit(components[3]) if len(components) == 4 else 1.0
        if hue is None or saturation is None or value is None or alpha is None:
            return None
        return cls(alpha, conversions.wrap_hue(hue), saturation, value)

    def to_rgb(self) -> ColorRgb:
        return ColorHsv.hsv_to_rgb(self.h, self.s, self.v, self.a)

    def to_hsl(self) -> ColorHsl:
        return ColorHsv.hsv_to_hsl(self.h, self.s, self.v, self.a)

    @staticmethod
    def hsv_to_rgb(
        hue: float,
        saturation: float,
        value: float,
        alpha: float = 1.0,
    ) -> ColorRgb:
        """Convert HSV components to RGB, wrapping hue and clamping the rest."""
        r, g, b = conversions.hsv_to_unit_rgb(hue, saturation, value)
        return ColorRgb(to_byte(clamp(alpha, 0.0, 1.0)), to_byte(r), to_byte(g), to_byte(b))

    @staticmethod
    def hsv_to_hsl(
        hue: float,
        saturation: float,
        value: float,
        alpha: float = 1.0,
    ) -> ColorHsl:
        from monoui.colors.hsl import ColorHsl  # noqa: PLC0415

        h, s, l = conversions.hsv_to_hsl(hue, saturation, value)  # noqa: E741
        return ColorHsl(alpha, h, s, l)

    def to_string(self) -> str:
        """Format as ``hsva(H, S, V, A)`` with invariant number formatting."""
        parts = ", ".join(format_invariant(c) for c in (self.h, self.s, self.v, self.a))
        return f"hsva({parts})"

    def __str__(self) -> str:
        return self.to_string()
