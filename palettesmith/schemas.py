"""
Palettesmith Schemas
Pydantic models for palette request/response validation.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from palettesmith.services.colors.harmony import HarmonyRule


class ColorFormat(str, Enum):
    """Display formats for palette colors."""
    HEX = "hex"
    RGB = "rgb"


class HSLModel(BaseModel):
    """Integer HSL triple."""
    h: int = Field(..., ge=0, lt=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation percentage")
    l: int = Field(..., ge=0, le=100, description="Lightness percentage")


class PaletteRequest(BaseModel):
    """Parameters for one palette generation."""
    count: int = Field(5, ge=1, description="Number of colors in the palette")
    format: ColorFormat = Field(ColorFormat.HEX, description="Display format ('hex' or 'rgb')")
    harmony: HarmonyRule = Field(
        HarmonyRule.ANALOGOUS,
        description="Harmony rule; unrecognized values fall back to one random color per draw"
    )

    @field_validator("harmony", mode="before")
    @classmethod
    def parse_harmony(cls, value):
        return HarmonyRule.parse(value)


class PaletteResponse(BaseModel):
    """A generated palette rendered in its display format."""
    palette_id: str = Field(..., description="Unique palette ID")
    harmony: HarmonyRule = Field(..., description="Harmony rule used")
    format: ColorFormat = Field(..., description="Display format of `colors`")
    colors: List[str] = Field(..., description="Ordered, deduplicated color strings")
    attempts: int = Field(..., ge=0, description="Random base colors drawn")
    hsl: List[HSLModel] = Field(default_factory=list, description="HSL of each color, in palette order")
