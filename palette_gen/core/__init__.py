"""palette_gen.core — Colour maths layer.

Contains conversion, palette generation, WCAG analysis, colour-blindness
simulation, configuration and the shared types and errors.
This module has NO dependencies on palette_gen.formats or palette_gen.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
