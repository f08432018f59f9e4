"""Color parsing for color tokens."""

import re

from ..core.models import RGBAColor

RGBA_PATTERN = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d.]+))?\)")
HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})?$", re.IGNORECASE)


def parse_color(text: str) -> RGBAColor | None:
    """
    Parse a CSS-style color string into 0-1 channels.

    Accepts "rgb(r, g, b)", "rgba(r, g, b, a)", "#rrggbb" and "#rrggbbaa"
    (the leading "#" is optional).

    Args:
        text: Color string

    Returns:
        RGBAColor, or None if the string is not a supported color
    """
    rgba_match = RGBA_PATTERN.search(text)
    if rgba_match:
        r, g, b, a = rgba_match.groups()
        return RGBAColor(
            r=int(r) / 255,
            g=int(g) / 255,
            b=int(b) / 255,
            a=float(a) if a else 1.0,
        )

    hex_match = HEX_PATTERN.match(text.strip())
    if hex_match:
        r, g, b, a = hex_match.groups()
        return RGBAColor(
            r=int(r, 16) / 255,
            g=int(g, 16) / 255,
            b=int(b, 16) / 255,
            a=int(a, 16) / 255 if a else 1.0,
        )

    return None
