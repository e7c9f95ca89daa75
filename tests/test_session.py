"""
Tests for palette sessions, request schemas and display sinks.
"""
import base64
import io
import re

import pytest
from pydantic import ValidationError

from palettesmith.schemas import ColorFormat, PaletteRequest
from palettesmith.services.colors.harmony import HarmonyRule
from palettesmith.services.colors.palette import PaletteBuilder
from palettesmith.services.display import DisplaySink, SwatchDisplaySink, TextDisplaySink
from palettesmith.services.session import PaletteSession

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class RecordingSink(DisplaySink):
    """Sink that keeps every palette it receives."""

    def __init__(self):
        self.received = []

    def display(self, colors):
        self.received.append(list(colors))


class TestPaletteRequest:
    """Test request parsing and validation."""

    def test_defaults(self):
        request = PaletteRequest()
        assert request.count == 5
        assert request.format is ColorFormat.HEX
        assert request.harmony is HarmonyRule.ANALOGOUS

    def test_harmony_request_values(self):
        assert PaletteRequest(harmony="triad").harmony is HarmonyRule.TRIADIC
        assert PaletteRequest(harmony="monochromatic").harmony is HarmonyRule.MONOCHROMATIC

    def test_unknown_harmony_falls_back(self):
        assert PaletteRequest(harmony="tetradic").harmony is HarmonyRule.DEFAULT

    def test_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            PaletteRequest(count=0)

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            PaletteRequest(format="cmyk")


class TestPaletteSession:
    """Test palette ownership and format switching."""

    def test_empty_session(self, session):
        sink = RecordingSink()
        assert not session.has_palette
        assert session.show(ColorFormat.RGB) == []
        assert session.render(sink) == []
        assert sink.received == []

    def test_generate_returns_requested_format(self, session):
        response = session.generate(PaletteRequest(count=4, format="rgb", harmony="triad"))

        assert response.format is ColorFormat.RGB
        assert response.harmony is HarmonyRule.TRIADIC
        assert len(response.colors) == 4
        assert all(color.startswith("rgb(") for color in response.colors)
        assert response.palette_id.startswith("pal-")
        assert response.attempts >= 2
        assert len(response.hsl) == 4

    def test_palette_stored_as_hex(self, session):
        session.generate(PaletteRequest(count=3, format="rgb", harmony="complementary"))
        assert session.has_palette
        assert all(HEX_RE.match(color) for color in session.palette_hex)

    def test_format_switch_does_not_regenerate(self, session):
        response = session.generate(PaletteRequest(count=5, format="hex", harmony="analogous"))
        stored = session.palette_hex

        rgb_first = session.show(ColorFormat.RGB)
        rgb_second = session.show("rgb")
        hex_again = session.show(ColorFormat.HEX)

        assert rgb_first == rgb_second
        assert hex_again == response.colors
        assert session.palette_hex == stored

    def test_palette_copy_is_detached(self, session):
        session.generate(PaletteRequest(count=2, harmony="complementary"))
        copy = session.palette_hex
        copy.append("#000000")
        assert len(session.palette_hex) == 2

    def test_generate_replaces_palette(self):
        session = PaletteSession(PaletteBuilder(seed=5))
        first = session.generate(PaletteRequest(count=3, harmony="triad"))
        second = session.generate(PaletteRequest(count=2, harmony="monochromatic"))

        assert session.palette_hex == second.colors
        assert len(session.palette_hex) == 2
        assert first.harmony is HarmonyRule.TRIADIC
        assert session.harmony is HarmonyRule.MONOCHROMATIC

    def test_render_sends_to_sink(self, session):
        session.generate(PaletteRequest(count=3, harmony="monochromatic"))
        sink = RecordingSink()

        sent = session.render(sink, ColorFormat.RGB)

        assert sink.received == [sent]
        assert sent == session.show(ColorFormat.RGB)


class TestDisplaySinks:
    """Test the bundled display sinks."""

    def test_text_sink_writes_one_line_per_color(self):
        stream = io.StringIO()
        TextDisplaySink(stream).display(["#ff0000", "rgb(0, 255, 0)"])
        assert stream.getvalue() == "#ff0000\nrgb(0, 255, 0)\n"

    def test_swatch_sink_writes_png(self, tmp_path):
        path = tmp_path / "palette.png"
        sink = SwatchDisplaySink(path, chip_size=16)

        sink.display(["#ff0000", "#00ff00", "#0000ff"])

        assert path.exists()
        assert path.read_bytes().startswith(b"\x89PNG")
        assert base64.b64decode(sink.last_png_b64).startswith(b"\x89PNG")

    def test_swatch_sink_without_path(self):
        sink = SwatchDisplaySink(chip_size=16)
        sink.display(["rgb(10, 20, 30)"])
        assert sink.last_png_b64

    def test_swatch_sink_rejects_bad_chip_size(self):
        with pytest.raises(ValueError):
            SwatchDisplaySink(chip_size=2)
