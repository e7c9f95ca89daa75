"""
Palettesmith - Palette Builder

Assembles palettes of exactly N distinct colors by repeatedly drawing a
random base color, expanding it with a harmony rule and keeping colors not
seen yet. Palettes are always built and stored as canonical hex; the
display format is applied as a final, pure step.
"""

import random
from typing import List, Optional

from palettesmith.config import config
from palettesmith.utils.logging import get_logger

from .conversion import format_color
from .harmony import HarmonyRule, generate_harmony, generate_monochromatic_colors
from .random_color import generate_color


class PaletteGenerationExhausted(RuntimeError):
    """Raised when a palette of the requested size could not be assembled."""

    def __init__(self, count: int, attempts: int, collected: int):
        self.count = count
        self.attempts = attempts
        self.collected = collected
        super().__init__(
            f"Palette generation exhausted after {attempts} attempts: "
            f"collected {collected} of {count} colors"
        )


def format_palette(hex_colors: List[str], fmt: str) -> List[str]:
    """
    Render a stored hex palette in a display format.

    Args:
        hex_colors: Palette as hex strings (not modified)
        fmt: "hex" or "rgb"

    Returns:
        New list of formatted color strings

    Raises:
        ValueError: If fmt is not a supported format
    """
    if not config.validate_format(fmt):
        raise ValueError(f"Unsupported color format: {fmt!r}")
    return [format_color(color, fmt) for color in hex_colors]


class PaletteBuilder:
    """Builds deduplicated harmony palettes from random base colors."""

    def __init__(self, max_attempts: Optional[int] = None, rng: Optional[random.Random] = None,
                 seed: Optional[int] = None):
        self.max_attempts = config.MAX_ATTEMPTS if max_attempts is None else max_attempts
        if not config.validate_max_attempts(self.max_attempts):
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

        if rng is None:
            rng = random.Random(config.SEED if seed is None else seed)
        self.rng = rng

        # Attempts used by the most recent build
        self.last_attempts = 0

    def build(self, harmony: HarmonyRule, count: int, fmt: str = "hex") -> List[str]:
        """
        Build a palette and render it in the requested format.

        Args:
            harmony: Harmony rule or its request value
            count: Number of colors, at least 1
            fmt: "hex" or "rgb"

        Returns:
            Ordered list of `count` distinct color strings
        """
        return format_palette(self.build_hex(harmony, count), fmt)

    def build_hex(self, harmony: HarmonyRule, count: int) -> List[str]:
        """
        Build a palette as canonical hex strings.

        Raises:
            ValueError: If count is below 1
            PaletteGenerationExhausted: If the attempt cap is reached
        """
        if not config.validate_count(count):
            raise ValueError(f"Palette count must be at least 1, got {count}")

        rule = HarmonyRule.parse(harmony)
        if rule is HarmonyRule.MONOCHROMATIC:
            palette = self._build_monochromatic(count)
        else:
            palette = self._build_with_retries(rule, count)

        log = get_logger().for_palette(harmony=rule)
        log.debug("Palette built", extra={
            "count": count,
            "attempts": self.last_attempts,
        })
        return palette

    def _build_monochromatic(self, count: int) -> List[str]:
        base_hex = generate_color("hex", self.rng)
        self.last_attempts = 1

        palette = generate_monochromatic_colors(base_hex, count)

        # Distinct lightness steps run out past 71 colors
        if len(set(palette)) != len(palette):
            raise PaletteGenerationExhausted(count, 1, len(set(palette)))
        return palette

    def _build_with_retries(self, rule: HarmonyRule, count: int) -> List[str]:
        palette: List[str] = []
        seen = set()
        attempts = 0

        while len(palette) < count:
            if attempts >= self.max_attempts:
                self.last_attempts = attempts
                log = get_logger().for_palette(harmony=rule)
                log.warning("Palette generation exhausted", extra={
                    "count": count,
                    "collected": len(palette),
                    "attempts": attempts,
                })
                raise PaletteGenerationExhausted(count, attempts, len(palette))

            attempts += 1
            base_hex = generate_color("hex", self.rng)
            for color in generate_harmony(rule, base_hex):
                if len(palette) < count and color not in seen:
                    palette.append(color)
                    seen.add(color)

        self.last_attempts = attempts
        return palette
