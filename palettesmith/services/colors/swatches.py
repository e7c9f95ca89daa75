"""
Palettesmith - Swatch Rendering

Creates PNG swatch strips for palettes: one solid chip per color with its
display string printed underneath, in palette order.
"""

import base64
import io
from pathlib import Path
from typing import List, Union

from loguru import logger
from PIL import Image, ImageDraw

from .conversion import hex_to_rgb, rgb_string_to_hex

LABEL_HEIGHT = 16
BACKGROUND = (255, 255, 255)
LABEL_COLOR = (0, 0, 0)


def _to_hex(color: str) -> str:
    if color.strip().startswith("rgb"):
        return rgb_string_to_hex(color)
    return color


def create_color_chip(color: str, chip_size: int = 80) -> Image.Image:
    """
    Create a single color chip image.

    Args:
        color: Hex or "rgb(r, g, b)" color to render
        chip_size: Size of the square chip in pixels

    Returns:
        PIL Image of the color chip
    """
    rgb = hex_to_rgb(_to_hex(color))
    return Image.new('RGB', (chip_size, chip_size), rgb)


def create_palette_strip(
    colors: List[str],
    chip_size: int = 80,
    spacing: int = 4,
    include_labels: bool = True
) -> Image.Image:
    """
    Create a horizontal strip of chips, optionally labeled.

    Args:
        colors: Color strings in display order
        chip_size: Size of each chip in pixels
        spacing: Horizontal spacing between chips
        include_labels: Print each color string below its chip

    Returns:
        PIL Image of the strip
    """
    if not colors:
        raise ValueError("Empty palette provided")

    label_height = LABEL_HEIGHT if include_labels else 0
    width = len(colors) * chip_size + (len(colors) - 1) * spacing
    height = chip_size + label_height

    strip = Image.new('RGB', (width, height), BACKGROUND)
    draw = ImageDraw.Draw(strip)

    x_pos = 0
    for color in colors:
        strip.paste(create_color_chip(color, chip_size), (x_pos, 0))
        if include_labels:
            draw.text((x_pos + 2, chip_size + 2), color, fill=LABEL_COLOR)
        x_pos += chip_size + spacing

    logger.debug(f"Rendered palette strip with {len(colors)} colors, chip_size={chip_size}")
    return strip


def render_palette_swatch(colors: List[str], chip_size: int = 80, spacing: int = 4) -> str:
    """
    Render a palette as a base64-encoded PNG strip.

    Returns:
        Base64-encoded PNG image string
    """
    strip = create_palette_strip(colors, chip_size, spacing)

    buffer = io.BytesIO()
    strip.save(buffer, format='PNG')
    return base64.b64encode(buffer.getvalue()).decode('utf-8')


def save_palette_swatch(colors: List[str], path: Union[str, Path], chip_size: int = 80,
                        spacing: int = 4) -> Path:
    """Render a palette strip and write it to `path` as PNG."""
    path = Path(path)
    create_palette_strip(colors, chip_size, spacing).save(path, format='PNG')
    logger.debug(f"Saved palette swatch to {path}")
    return path
