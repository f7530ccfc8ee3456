"""palette-gen: colour palettes, WCAG contrast and colour-blindness simulation."""

__version__ = '0.1.0'
