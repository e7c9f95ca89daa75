"""
Palettesmith - Color Harmony Engine

Derives related colors from a base color with hue rotations and lightness
steps in HSL space. Every generator returns canonical #rrggbb strings in
display order, with the base color normalized.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional

from .conversion import HSL, hex_to_hsl, hsl_to_hex, normalize_hex, round_half_up

ANALOGOUS_ANGLE = 30

# Lightness band for monochromatic ramps, avoiding near-black and near-white
MONO_MIN_L = 15
MONO_MAX_L = 85


class HarmonyRule(str, Enum):
    """Supported harmony rules, keyed by their request values."""
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"
    TRIADIC = "triad"
    DEFAULT = "default"  # One random color per draw

    @classmethod
    def parse(cls, value: Optional[str]) -> "HarmonyRule":
        """Map a request value onto a rule; unrecognized values fall back to DEFAULT."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.DEFAULT
        normalized = str(value).strip().lower()
        # Accept the spelled-out name alongside the request value
        if normalized == "triadic":
            return cls.TRIADIC
        try:
            return cls(normalized)
        except ValueError:
            return cls.DEFAULT


def rotate_hue(h: int, degrees: int) -> int:
    """
    Rotate a hue by the given degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation, may be negative

    Returns:
        Rotated hue wrapped into [0, 360)
    """
    return (h + degrees) % 360


def _with_hue(base: HSL, degrees: int) -> str:
    return hsl_to_hex(HSL(rotate_hue(base.h, degrees), base.s, base.l))


def generate_complementary_colors(base_hex: str) -> List[str]:
    """Return [base, base rotated by 180 degrees]."""
    base_hex = normalize_hex(base_hex)
    base = hex_to_hsl(base_hex)
    return [base_hex, _with_hue(base, 180)]


def generate_analogous_colors(base_hex: str) -> List[str]:
    """Return [base -30 degrees, base, base +30 degrees]."""
    base_hex = normalize_hex(base_hex)
    base = hex_to_hsl(base_hex)
    return [
        _with_hue(base, -ANALOGOUS_ANGLE),
        base_hex,
        _with_hue(base, ANALOGOUS_ANGLE),
    ]


def generate_triadic_colors(base_hex: str) -> List[str]:
    """Return [base, base +120 degrees, base +240 degrees]."""
    base_hex = normalize_hex(base_hex)
    base = hex_to_hsl(base_hex)
    return [base_hex, _with_hue(base, 120), _with_hue(base, 240)]


def monochromatic_lightness_steps(count: int) -> List[int]:
    """
    Lightness values for a monochromatic ramp.

    Args:
        count: Number of steps, at least 2

    Returns:
        Integers interpolated linearly from 15 to 85 inclusive
    """
    if count < 2:
        raise ValueError(f"Lightness ramp needs at least 2 steps, got {count}")
    span = MONO_MAX_L - MONO_MIN_L
    return [round_half_up(MONO_MIN_L + span * i / (count - 1)) for i in range(count)]


def generate_monochromatic_colors(base_hex: str, count: int = 3) -> List[str]:
    """
    Generate a lightness ramp sharing the base color's hue and saturation.

    Args:
        base_hex: Base color in format #RRGGBB
        count: Number of colors; 1 returns the base lightness only

    Returns:
        List of `count` hex colors, darkest first
    """
    if count < 1:
        raise ValueError(f"Monochromatic count must be at least 1, got {count}")

    base = hex_to_hsl(base_hex)
    if count == 1:
        return [hsl_to_hex(base)]

    return [
        hsl_to_hex(HSL(base.h, base.s, l))
        for l in monochromatic_lightness_steps(count)
    ]


def _generate_default(base_hex: str) -> List[str]:
    return [normalize_hex(base_hex)]


_FIXED_SIZE_HANDLERS: Dict[HarmonyRule, Callable[[str], List[str]]] = {
    HarmonyRule.COMPLEMENTARY: generate_complementary_colors,
    HarmonyRule.ANALOGOUS: generate_analogous_colors,
    HarmonyRule.TRIADIC: generate_triadic_colors,
    HarmonyRule.DEFAULT: _generate_default,
}


def generate_harmony(rule: HarmonyRule, base_hex: str, count: Optional[int] = None) -> List[str]:
    """
    Dispatch to the generator for a harmony rule.

    Args:
        rule: Harmony rule (or its request value)
        base_hex: Base color in format #RRGGBB
        count: Ramp length, only used by MONOCHROMATIC (defaults to 3)

    Returns:
        Ordered list of hex colors for the rule
    """
    rule = HarmonyRule.parse(rule)
    if rule is HarmonyRule.MONOCHROMATIC:
        return generate_monochromatic_colors(base_hex, 3 if count is None else count)
    return _FIXED_SIZE_HANDLERS[rule](base_hex)
