"""
Unit tests for palette swatch rendering.
"""
import base64
import io

import pytest
from PIL import Image

from palettesmith.services.colors.swatches import (
    create_color_chip, create_palette_strip, render_palette_swatch, save_palette_swatch
)


class TestColorChip:
    """Test single chip rendering."""

    def test_hex_chip(self):
        chip = create_color_chip("#ff8000", chip_size=10)
        assert chip.size == (10, 10)
        assert chip.getpixel((5, 5)) == (255, 128, 0)

    def test_rgb_string_chip(self):
        chip = create_color_chip("rgb(10, 20, 30)", chip_size=10)
        assert chip.getpixel((0, 0)) == (10, 20, 30)


class TestPaletteStrip:
    """Test strip layout."""

    def test_layout_with_labels(self):
        strip = create_palette_strip(["#ff0000", "rgb(0, 255, 0)"], chip_size=10, spacing=2)
        assert strip.size == (22, 26)
        assert strip.getpixel((0, 0)) == (255, 0, 0)
        assert strip.getpixel((12, 0)) == (0, 255, 0)
        # Spacing column stays background
        assert strip.getpixel((10, 0)) == (255, 255, 255)

    def test_layout_without_labels(self):
        strip = create_palette_strip(["#0000ff"], chip_size=12, include_labels=False)
        assert strip.size == (12, 12)

    def test_empty_palette_raises(self):
        with pytest.raises(ValueError):
            create_palette_strip([])


class TestSwatchOutput:
    """Test PNG encoding."""

    def test_render_base64_png(self):
        encoded = render_palette_swatch(["#ff0000", "#00ff00"], chip_size=10)
        image = Image.open(io.BytesIO(base64.b64decode(encoded)))
        assert image.format == "PNG"
        assert image.size[0] == 2 * 10 + 4

    def test_save_to_file(self, tmp_path):
        path = save_palette_swatch(["#123456"], tmp_path / "swatch.png", chip_size=10)
        with Image.open(path) as image:
            assert image.getpixel((1, 1)) == (0x12, 0x34, 0x56)
