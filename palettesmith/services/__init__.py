"""
Palettesmith services: color math, palette assembly, sessions and display sinks.
"""
