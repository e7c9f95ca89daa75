"""
Palettesmith Colors Module

Provides color space conversion, random color generation, harmony rules,
palette assembly and swatch rendering.
"""

from .conversion import (
    HSL, InvalidColorFormat, normalize_hex, hex_to_hsl, hsl_to_hex,
    hex_to_rgb, hex_to_rgb_string, rgb_string_to_hex, format_color, round_half_up,
)
from .random_color import generate_color
from .harmony import (
    HarmonyRule, rotate_hue, generate_complementary_colors, generate_analogous_colors,
    generate_triadic_colors, generate_monochromatic_colors, generate_harmony,
)
from .palette import PaletteBuilder, PaletteGenerationExhausted, format_palette

__all__ = [
    "HSL", "InvalidColorFormat", "normalize_hex", "hex_to_hsl", "hsl_to_hex",
    "hex_to_rgb", "hex_to_rgb_string", "rgb_string_to_hex", "format_color", "round_half_up",
    "generate_color",
    "HarmonyRule", "rotate_hue", "generate_complementary_colors", "generate_analogous_colors",
    "generate_triadic_colors", "generate_monochromatic_colors", "generate_harmony",
    "PaletteBuilder", "PaletteGenerationExhausted", "format_palette",
]
