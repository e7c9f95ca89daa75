"""
Palettesmith Palette Session

Owns the current palette between requests. Palettes are stored as hex so the
display format can be switched without regenerating colors.
"""
import uuid
from datetime import datetime
from typing import List, Optional, Tuple

from palettesmith.schemas import ColorFormat, HSLModel, PaletteRequest, PaletteResponse
from palettesmith.services.colors.conversion import hex_to_hsl
from palettesmith.services.colors.harmony import HarmonyRule
from palettesmith.services.colors.palette import PaletteBuilder, format_palette
from palettesmith.services.display import DisplaySink
from palettesmith.utils.logging import get_logger


def generate_palette_id() -> str:
    """
    Generate a unique palette ID.

    Returns:
        ID string in format pal-YYYYmmddHHMMSS-xxxxxxxx
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    return f"pal-{timestamp}-{uuid.uuid4().hex[:8]}"


class PaletteSession:
    """Generates palettes and re-renders the current one on demand."""

    def __init__(self, builder: Optional[PaletteBuilder] = None):
        self.builder = builder or PaletteBuilder()
        self.palette_id: Optional[str] = None
        self.harmony: Optional[HarmonyRule] = None
        self.attempts = 0
        self._palette_hex: Tuple[str, ...] = ()

    @property
    def palette_hex(self) -> List[str]:
        """Copy of the stored hex palette."""
        return list(self._palette_hex)

    @property
    def has_palette(self) -> bool:
        return bool(self._palette_hex)

    def generate(self, request: PaletteRequest) -> PaletteResponse:
        """
        Build a new palette, replacing the current one.

        Args:
            request: Validated palette request

        Returns:
            Response with colors in the requested format
        """
        palette = self.builder.build_hex(request.harmony, request.count)

        self._palette_hex = tuple(palette)
        self.palette_id = generate_palette_id()
        self.harmony = request.harmony
        self.attempts = self.builder.last_attempts

        log = get_logger().for_palette(self.palette_id, request.harmony)
        log.info("Palette generated", extra={
            "count": request.count,
            "format": request.format.value,
        })
        return self._response(request.format)

    def show(self, fmt: ColorFormat = ColorFormat.HEX) -> List[str]:
        """
        Render the stored palette in a display format.

        Returns:
            New list of color strings; empty when nothing has been generated
        """
        return format_palette(self._palette_hex, ColorFormat(fmt).value)

    def render(self, sink: DisplaySink, fmt: ColorFormat = ColorFormat.HEX) -> List[str]:
        """Send the stored palette to a display sink and return what was sent."""
        colors = self.show(fmt)
        if colors:
            sink.display(colors)
        return colors

    def _response(self, fmt: ColorFormat) -> PaletteResponse:
        return PaletteResponse(
            palette_id=self.palette_id,
            harmony=self.harmony,
            format=fmt,
            colors=self.show(fmt),
            attempts=self.attempts,
            hsl=[HSLModel(**hex_to_hsl(color)._asdict()) for color in self._palette_hex],
        )
