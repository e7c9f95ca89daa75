"""
Palettesmith - Color Space Conversion

Converts between hex-encoded RGB strings, HSL triples and CSS-style RGB
strings. Hue is in integer degrees [0, 360), saturation and lightness are
integer percentages [0, 100].

Round trips hex -> HSL -> hex are lossy: both directions round to integers,
so a channel may drift by a few steps. This is accepted behavior.
Halves always round up, never to even.
"""

import colorsys
import math
import re
from typing import NamedTuple, Tuple

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")
RGB_STRING_PATTERN = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$")


class InvalidColorFormat(ValueError):
    """Raised when a color string is not a valid hex or RGB encoding."""
    pass


class HSL(NamedTuple):
    """Integer HSL triple."""
    h: int  # Hue [0, 360)
    s: int  # Saturation [0, 100]
    l: int  # Lightness [0, 100]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def normalize_hex(hex_color: str) -> str:
    """
    Validate a hex color and return its canonical form.

    Args:
        hex_color: Color as #RRGGBB or RRGGBB, any case

    Returns:
        Lowercase #rrggbb string

    Raises:
        InvalidColorFormat: If the input is not exactly 6 hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(f"Invalid hex color format: {hex_color!r}")
    match = HEX_PATTERN.match(hex_color.strip())
    if match is None:
        raise InvalidColorFormat(f"Invalid hex color format: {hex_color!r}")
    return "#" + match.group(1).lower()


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert hex color to RGB tuple.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        RGB tuple (r, g, b) with values 0-255
    """
    hex_clean = normalize_hex(hex_color)[1:]
    return tuple(int(hex_clean[i:i+2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as a canonical #rrggbb string."""
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise InvalidColorFormat(f"RGB channel out of range: {channel}")
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb_string(hex_color: str) -> str:
    """Convert hex color to a CSS-style "rgb(r, g, b)" string."""
    r, g, b = hex_to_rgb(hex_color)
    return f"rgb({r}, {g}, {b})"


def rgb_string_to_hex(rgb_string: str) -> str:
    """
    Convert a CSS-style "rgb(r, g, b)" string back to hex.

    Raises:
        InvalidColorFormat: If the string is malformed or a channel exceeds 255
    """
    match = RGB_STRING_PATTERN.match(rgb_string.strip())
    if match is None:
        raise InvalidColorFormat(f"Invalid rgb color format: {rgb_string!r}")
    r, g, b = (int(value) for value in match.groups())
    return rgb_to_hex(r, g, b)


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert hex color to integer HSL.

    Hue follows the six-sector formula keyed on the largest channel, with
    ties resolved red, then green, then blue.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        HSL triple with hue in [0, 360), saturation and lightness in [0, 100]

    Raises:
        InvalidColorFormat: If the input is not a valid hex color
    """
    r, g, b = (channel / 255.0 for channel in hex_to_rgb(hex_color))

    # colorsys orders the result as (H, L, S)
    h, l, s = colorsys.rgb_to_hls(r, g, b)

    # Rounding can push a hue just below 360 onto 360
    return HSL(
        h=round_half_up(h * 360) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def hsl_to_hex(hsl: HSL) -> str:
    """
    Convert integer HSL to hex.

    Args:
        hsl: HSL triple (hue degrees, saturation %, lightness %)

    Returns:
        Hex color string in format #rrggbb (lowercase)
    """
    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l / 100.0, s / 100.0)

    r_int = max(0, min(255, round_half_up(r * 255)))
    g_int = max(0, min(255, round_half_up(g * 255)))
    b_int = max(0, min(255, round_half_up(b * 255)))

    return rgb_to_hex(r_int, g_int, b_int)


def format_color(hex_color: str, fmt: str) -> str:
    """
    Render a stored hex color in the requested display format.

    Args:
        hex_color: Color in format #RRGGBB
        fmt: "hex" or "rgb"; anything else is treated as hex

    Returns:
        Canonical hex string or "rgb(r, g, b)" string
    """
    if fmt == "rgb":
        return hex_to_rgb_string(hex_color)
    return normalize_hex(hex_color)
