"""Component parsing shared by the CSS-like color function syntaxes.

``rgb()``, ``hsl()`` and ``hsv()`` (and their alpha variants) share one
shape: a case-insensitive function name, parentheses, and three or four
comma-separated numeric components. Numbers use invariant formatting:
optional sign, digits with an optional ``.`` fraction, no exponent and no
thousands separator. Surrounding whitespace is ignored.
"""

from __future__ import annotations

import re

_NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)\s*")


def split_function(text: str, name: str) -> list[str] | None:
    """Split ``name(a, b, c)`` or ``namea(a, b, c, d)`` into raw components.

    Either prefix accepts either component count; callers decide whether
    three or four components are meaningful.

    Args:
        text: Candidate color string.
        name: Three-letter function name, e.g. ``"rgb"``.

    Returns:
        The untrimmed component strings, or None if the text is not a call
        of the named function.
    """
    working = text.strip()
    if not working or "," not in working:
        return None

    lowered = working.lower()
    if len(working) >= 11 and lowered.startswith(f"{name}a(") and working.endswith(")"):
        inner = working[len(name) + 2 : -1]
    elif len(working) >= 10 and lowered.startswith(f"{name}(") and working.endswith(")"):
        inner = working[len(name) + 1 : -1]
    else:
        return None
    return inner.split(",")


def parse_number(text: str) -> float | None:
    """Parse an invariant-culture decimal number, or return None."""
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def parse_unit(text: str) -> float | None:
    """Parse a fraction (``0.5``) or a percentage (``50%``) into a unit value.

    The percent sign must be the last non-blank character. No range check is
    done here; the color models clamp on construction.
    """
    stripped = text.strip()
    if stripped.endswith("%"):
        percentage = parse_number(stripped[:-1])
        return None if percentage is None else percentage / 100.0
    return parse_number(stripped)


def parse_byte(text: str) -> int | None:
    """Parse a channel given as an integer 0-255 or as a percentage of 255.

    Percentages are scaled to 0-255, rounded half to even and clamped to the
    byte range. Plain numbers must be integral and already in range.
    """
    stripped = text.strip()
    if stripped.endswith("%"):
        percentage = parse_number(stripped[:-1])
        if percentage is None:
            return None
        return to_byte(percentage / 100.0)

    value = parse_number(stripped)
    if value is None or not value.is_integer() or not 0 <= value <= 255:
        return None
    return int(value)


def to_byte(unit: float) -> int:
    """Scale a unit value to a byte: ``round(255 * unit)``, clamped to 0-255."""
    return min(255, max(0, round(255.0 * unit)))
