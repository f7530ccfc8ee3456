"""Render a palette as a horizontal strip of solid colour blocks."""

import numpy as np
from PIL import Image

from palette_gen.core.convert import hex_to_rgb


def render_swatch(colours: list[str], cell_width: int = 120, height: int = 80) -> Image.Image:
    """One cell_width x height block per colour, left to right."""
    if not colours:
        raise ValueError('cannot render an empty palette')
    if cell_width < 1 or height < 1:
        raise ValueError(f'swatch cells must be at least 1x1, got {cell_width}x{height}')

    strip = np.zeros((height, cell_width * len(colours), 3), dtype=np.uint8)
    for i, colour in enumerate(colours):
        strip[:, i * cell_width : (i + 1) * cell_width] = hex_to_rgb(colour)
    return Image.fromarray(strip)
