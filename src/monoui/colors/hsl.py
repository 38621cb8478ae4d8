"""HSL (hue, saturation, lightness) color for MonoUI."""

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
    from monoui.colors.hsv import ColorHsv

logger = get_logger(__name__)


class ColorHsl(BaseModel, frozen=True):
    """A color in the HSL cylindrical model.

    The constructor clamps every component: hue to ``[0, 360]`` with 360
    folded to 0, the rest to ``[0, 1]``. :meth:`unchecked` skips clamping.

    Attributes:
        a: Alpha in [0, 1].
        h: Hue in degrees, [0, 360).
        s: Saturation in [0, 1].
        l: Lightness in [0, 1].
    """

    a: float = 0.0
    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741

    def __init__(
        self,
        a: float = 0.0,
        h: float = 0.0,
        s: float = 0.0,
        l: float = 0.0,  # noqa: E741
    ) -> None:
        super().__init__(a=a, h=h, s=s, l=l)

    @field_validator("a", "s", "l")
    @classmethod
    def _clamp_unit(cls, value: float) -> float:
        return clamp(value, 0.0, 1.0)

    @field_validator("h")
    @classmethod
    def _clamp_hue(cls, value: float) -> float:
        hue = clamp(value, 0.0, 360.0)
        return 0.0 if hue == 360.0 else hue

    @classmethod
    def unchecked(cls, a: float, h: float, s: float, l: float) -> Self:  # noqa: E741
        """Build a color without validation or clamping.

        The caller guarantees every component is already in range; passing
        out-of-range values produces a color that breaks the model's
        invariants.
        """
        return cls.model_construct(a=a, h=h, s=s, l=l)

    @classmethod
    def from_ahsl(cls, a: float, h: float, s: float, l: float) -> Self:  # noqa: E741
        return cls(a, h, s, l)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Self:  # noqa: E741
        """Create a fully opaque color."""
        return cls(1.0, h, s, l)

    @classmethod
    def from_rgb(cls, color: ColorRgb) -> ColorHsl:
        return color.to_hsl()

    @classmethod
    def parse(cls, text: str) -> ColorHsl:
        """Parse ``hsl(h, s, l)`` or ``hsla(h, s, l, a)``.

        Raises:
            ColorFormatError: If the text is not an HSL function.
        """
        color = cls.try_parse(text)
        if color is None:
            logger.debug("Rejected color string", text=text, model="hsl")
            raise ColorFormatError(text, model="HSL color")
        return color

    @classmethod
    def try_parse(cls, text: str | None) -> ColorHsl | None:
        """Parse an HSL function string, returning None if it is not valid.

        Hue is a bare number of degrees, wrapped into ``[0, 360)``.
        Saturation, lightness and alpha accept a fraction (``0.5``) or a
        percentage (``50%``). Either prefix accepts three or four components.
        """
        if text is None:
            return None
        components = split_function(text, "hsl")
        if components is None or len(components) not in (3, 4):
            return None

        hue = parse_number(components[0])
        saturation = parse_unit(components[1])
        lightness = parse_unit(components[2])
        alpha = parse_unit(components[3]) if len(components) == 4 else 1.0
        if hue is None or saturation is None or lightness is None or alpha is None:
            return None
        return cls(alpha, conversions.wrap_hue(hue), saturation, lightness)

    def to_rgb(self) -> ColorRgb:
        return ColorHsl.hsl_to_rgb(self.h, self.s, self.l, self.a)

    def to_hsv(self) -> ColorHsv:
        return ColorHsl.hsl_to_hsv(self.h, self.s, self.l, self.a)

    @staticmethod
    def hsl_to_rgb(
        hue: float,
        saturation: float,
        lightness: float,
        alpha: float = 1.0,
    ) -> ColorRgb:
        """Convert HSL components to RGB, wrapping hue and clamping the rest."""
        r, g, b = conversions.hsl_to_unit_rgb(hue, saturation, lightness)
        return ColorRgb(to_byte(clamp(alpha, 0.0, 1.0)), to_byte(r), to_byte(g), to_byte(b))

    @staticmethod
    def hsl_to_hsv(
        hue: float,
        saturation: float,
        lightness: float,
        alpha: float = 1.0,
    ) -> ColorHsv:
        """Convert HSL components to HSV directly, without going through RGB."""
        from monoui.colors.hsv import ColorHsv  # noqa: PLC0415

        h, s, v = conversions.hsl_to_hsv(hue, saturation, lightness)
        return ColorHsv(alpha, h, s, v)

    def to_string(self) -> str:
        """Format as ``hsva(H, S, L, A)``.

        The ``hsva`` label is kept for compatibility with existing consumers
        of this format even though the third component is lightness.
        """
        parts = ", ".join(format_invariant(v) for v in (self.h, self.s, self.l, self.a))
        return f"hsva({parts})"

    def __str__(self) -> str:
        return self.to_string()
