"""
Test configuration and fixtures for Palettesmith tests.
"""
import random

import pytest

from palettesmith.services.colors.palette import PaletteBuilder
from palettesmith.services.session import PaletteSession


class FixedRandom(random.Random):
    """Random source that always draws the same color."""

    def __init__(self, hex_value: int = 0x3366CC):
        super().__init__(0)
        self.hex_value = hex_value

    def randint(self, a, b):
        if b == 0xFFFFFF:
            return self.hex_value
        return a


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def builder(rng):
    """Palette builder with a seeded random source."""
    return PaletteBuilder(rng=rng)


@pytest.fixture
def session(builder):
    """Palette session backed by the seeded builder."""
    return PaletteSession(builder)


@pytest.fixture
def fixed_rng():
    """Random source that always yields #3366cc."""
    return FixedRandom()
