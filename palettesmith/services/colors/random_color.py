"""
Palettesmith - Random Color Generation

Uniform random colors in hex or RGB-string form. Not cryptographically
strong; callers that need reproducible or thread-confined draws pass their
own random.Random instance.
"""

import random
from typing import Optional

MAX_HEX_VALUE = 0xFFFFFF

_default_rng = random.Random()


def generate_color(fmt: str = "hex", rng: Optional[random.Random] = None) -> str:
    """
    Draw a uniformly random color.

    Args:
        fmt: "rgb" for an "rgb(r, g, b)" string, anything else for #rrggbb
        rng: Random source, defaults to the module-level generator

    Returns:
        Color string in the requested form
    """
    rng = rng or _default_rng

    if fmt == "rgb":
        r = rng.randint(0, 255)
        g = rng.randint(0, 255)
        b = rng.randint(0, 255)
        return f"rgb({r}, {g}, {b})"

    return f"#{rng.randint(0, MAX_HEX_VALUE):06x}"

