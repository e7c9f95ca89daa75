"""
Palettesmith Display Sinks
Receivers for rendered palettes: plain text for terminals, PNG swatches for files.
"""
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, TextIO, Union

from palettesmith.config import config
from palettesmith.services.colors.swatches import render_palette_swatch, save_palette_swatch


class DisplaySink(ABC):
    """Abstract receiver of an ordered sequence of color strings."""

    @abstractmethod
    def display(self, colors: List[str]) -> None:
        """Render one swatch per color, in order."""
        pass


class TextDisplaySink(DisplaySink):
    """Writes one color string per line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def display(self, colors: List[str]) -> None:
        for color in colors:
            self.stream.write(f"{color}\n")
        self.stream.flush()


class SwatchDisplaySink(DisplaySink):
    """Renders palettes as PNG strips, to a file when a path is given."""

    def __init__(self, path: Optional[Union[str, Path]] = None, chip_size: Optional[int] = None):
        self.path = Path(path) if path is not None else None
        self.chip_size = chip_size or config.CHIP_SIZE
        if not config.validate_chip_size(self.chip_size):
            raise ValueError(f"Invalid chip size: {self.chip_size}")

        # Base64 PNG of the most recent palette
        self.last_png_b64: Optional[str] = None

    def display(self, colors: List[str]) -> None:
        if self.path is not None:
            save_palette_swatch(colors, self.path, chip_size=self.chip_size)
        self.last_png_b64 = render_palette_swatch(colors, chip_size=self.chip_size)
