"""Color-space conversions between RGB, HSL and HSV.

These functions work on plain floats and return tuples; the color classes
wrap them. RGB channels are unit floats in ``[0, 1]``, hue is in degrees and
saturation, lightness and value are unit floats.

Functions taking a cylindrical color first wrap the hue into ``[0, 360)``
and clamp the remaining components into ``[0, 1]``.
"""

from __future__ import annotations

import math

from monoui.utils.numeric import clamp


def wrap_hue(hue: float) -> float:
    """Normalize a hue in degrees into ``[0, 360)``.

    Non-finite hues have no meaningful angle and map to 0.
    """
    if not math.isfinite(hue):
        return 0.0
    hue %= 360.0
    # A tiny negative hue can round up to exactly 360
    return 0.0 if hue >= 360.0 else hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r: Red in [0, 1]
        g: Green in [0, 1]
        b: Blue in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, l) with h in degrees [0, 360)
    """
    max_c = (r if r >= b else b) if r >= g else (g if g >= b else b)
    min_c = (r if r <= b else b) if r <= g else (g if g <= b else b)
    chroma = max_c - min_c

    if chroma == 0:
        h1 = 0.0
    elif max_c == r:
        # Shift by 6 so the modulo sees a non-negative operand
        h1 = ((g - b) / chroma + 6) % 6
    elif max_c == g:
        h1 = 2 + (b - r) / chroma
    else:
        h1 = 4 + (r - g) / chroma

    lightness = 0.5 * (max_c + min_c)
    saturation = 0.0 if chroma == 0 else chroma / (1 - abs(2 * lightness - 1))
    return 60 * h1, saturation, lightness


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Greyscale input (zero chroma) has no defined hue; it is reported as
    hue 0 and saturation 0.

    Returns:
        Tuple[float, float, float]: (h, s, v) with h in degrees [0, 360)
    """
    max_c = (r if r >= b else b) if r >= g else (g if g >= b else b)
    min_c = (r if r <= b else b) if r <= g else (g if g <= b else b)

    value = max_c
    chroma = max_c - min_c

    if chroma == 0:
        return 0.0, 0.0, value

    if r == max_c:
        hue = 60 * (g - b) / chroma
    elif g == max_c:
        hue = 120 + (60 * (b - r) / chroma)
    else:
        hue = 240 + (60 * (r - g) / chroma)

    if hue < 0.0:
        hue += 360.0

    return hue, chroma / value, value


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:  # noqa: E741
    """
    Convert HSL to unit RGB by hue sextant.

    Args:
        h: Hue in degrees (any real, wrapped)
        s: Saturation (clamped to [0, 1])
        l: Lightness (clamped to [0, 1])

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = wrap_hue(h)
    s = clamp(s, 0.0, 1.0)
    l = clamp(l, 0.0, 1.0)  # noqa: E741

    chroma = (1 - abs(2 * l - 1)) * s
    h1 = h / 60
    x = chroma * (1 - abs(h1 % 2 - 1))
    m = l - 0.5 * chroma

    if h1 < 1:
        r1, g1, b1 = chroma, x, 0.0
    elif h1 < 2:
        r1, g1, b1 = x, chroma, 0.0
    elif h1 < 3:
        r1, g1, b1 = 0.0, chroma, x
    elif h1 < 4:
        r1, g1, b1 = 0.0, x, chroma
    elif h1 < 5:
        r1, g1, b1 = x, 0.0, chroma
    else:
        r1, g1, b1 = chroma, 0.0, x

    return r1 + m, g1 + m, b1 + m


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to unit RGB by hexagonal decomposition.

    Args:
        h: Hue in degrees (any real, wrapped)
        s: Saturation (clamped to [0, 1])
        v: Value (clamped to [0, 1])

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = wrap_hue(h)
    s = clamp(s, 0.0, 1.0)
    v = clamp(v, 0.0, 1.0)

    chroma = s * v
    min_c = v - chroma

    if chroma == 0:
        return min_c, min_c, min_c

    sextant = min(int(h / 60), 5)
    fraction = h / 60 - sextant
    max_c = chroma + min_c
    rising = min_c + chroma * fraction
    falling = min_c + chroma * (1 - fraction)

    if sextant == 0:
        return max_c, rising, min_c
    if sextant == 1:
        return falling, max_c, min_c
    if sextant == 2:
        return min_c, max_c, rising
    if sextant == 3:
        return min_c, falling, max_c
    if sextant == 4:
        return rising, min_c, max_c
    return max_c, min_c, falling


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert HSL to HSV without going through RGB.

    Returns:
        Tuple[float, float, float]: (h, s, v)
    """
    h = wrap_hue(h)
    s = clamp(s, 0.0, 1.0)
    l = clamp(l, 0.0, 1.0)  # noqa: E741

    v = l + s * min(l, 1.0 - l)
    s_v = 0.0 if v <= 0 else 2.0 * (1.0 - l / v)
    return h, s_v, v


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV to HSL without going through RGB.

    Returns:
        Tuple[float, float, float]: (h, s, l)
    """
    h = wrap_hue(h)
    s = clamp(s, 0.0, 1.0)
    v = clamp(v, 0.0, 1.0)

    l = v * (1.0 - s / 2.0)  # noqa: E741
    s_l = 0.0 if l <= 0 or l >= 1 else (v - l) / min(l, 1.0 - l)
    return h, s_l, l
