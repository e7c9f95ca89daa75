"""
Palettesmith Configuration
Manages environment variables and defaults for palette generation.
"""
import os
from typing import Literal, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Configuration class for Palettesmith."""

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTESMITH_LOG_LEVEL", "INFO")

    # Palette builder
    MAX_ATTEMPTS: int = int(os.environ.get("PALETTESMITH_MAX_ATTEMPTS", "10000"))
    SEED: Optional[int] = _optional_int("PALETTESMITH_SEED")

    # Request defaults
    DEFAULT_COUNT: int = int(os.environ.get("PALETTESMITH_DEFAULT_COUNT", "5"))
    DEFAULT_FORMAT: Literal["hex", "rgb"] = os.environ.get("PALETTESMITH_DEFAULT_FORMAT", "hex")
    DEFAULT_HARMONY: str = os.environ.get("PALETTESMITH_DEFAULT_HARMONY", "analogous")

    # Swatch rendering
    CHIP_SIZE: int = int(os.environ.get("PALETTESMITH_CHIP_SIZE", "80"))

    SUPPORTED_FORMATS = ["hex", "rgb"]

    @classmethod
    def validate_format(cls, fmt: str) -> bool:
        """Validate output format parameter."""
        return fmt in cls.SUPPORTED_FORMATS

    @classmethod
    def validate_count(cls, count: int) -> bool:
        """Validate palette size."""
        return count >= 1

    @classmethod
    def validate_max_attempts(cls, attempts: int) -> bool:
        """Validate builder attempt cap."""
        return attempts >= 1

    @classmethod
    def validate_chip_size(cls, chip_size: int) -> bool:
        """Validate swatch chip size."""
        return 8 <= chip_size <= 512


# Global config instance
config = Config()
