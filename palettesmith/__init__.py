"""
Palettesmith

Generates color palettes from color-theory harmony rules and hands them
to display sinks as hex or RGB strings.
"""

__version__ = "1.0.0"
