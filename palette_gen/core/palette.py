"""Palette generation from a base colour and a colour-wheel style.

Each style applies five fixed offsets to the base colour's HSL: hue offsets
(degrees, wrapping modulo 360) for most styles, lightness offsets (clamped
to 0-100) for monochromatic. Optional jitter adds a uniform perturbation
per entry, bounded per style, drawn from an injected RandomSource.

Unknown styles are not an error: the palette degrades to just the base colour.
"""

from __future__ import annotations

import logging

from palette_gen.core import rng as rng_mod
from palette_gen.core.convert import hex_to_hsl, hex_to_rgb, hsl_to_hex, random_hex_color, rgb_to_hex
from palette_gen.core.rng import RandomSource
from palette_gen.core.types import HSL, Style

logger = logging.getLogger(__name__)

STYLE_DESCRIPTIONS: dict[Style, str] = {
    Style.ANALOGOUS: 'Colors next to each other on the color wheel; harmonious and pleasing.',
    Style.MONOCHROMATIC: 'Different shades and tints of the same hue; subtle and unified.',
    Style.COMPLEMENTARY: 'Colors opposite each other on the color wheel; high contrast.',
    Style.TRIADIC: 'Three colors evenly spaced on the color wheel; vibrant and balanced.',
    Style.TETRADIC: 'Four colors forming a rectangle on the color wheel; rich and diverse.',
}

# Lightness offsets for monochromatic, hue offsets (degrees) for the rest
STYLE_OFFSETS: dict[Style, tuple[int, ...]] = {
    Style.ANALOGOUS: (0, -30, 30, -60, 60),
    Style.MONOCHROMATIC: (-30, -15, 0, 15, 30),
    Style.COMPLEMENTARY: (0, 180, 150, 210, 30),
    Style.TRIADIC: (0, 120, 240, 110, 250),
    Style.TETRADIC: (0, 90, 180, 270, 45),
}

JITTER_RANGES: dict[Style, float] = {
    Style.ANALOGOUS: 10,
    Style.MONOCHROMATIC: 8,
    Style.COMPLEMENTARY: 12,
    Style.TRIADIC: 10,
    Style.TETRADIC: 8,
}

PALETTE_SIZE = 5


def to_style(style: Style | str) -> Style | None:
    """Return the Style for a name (case-insensitive), or None if unknown."""
    try:
        return Style(style.strip().lower() if isinstance(style, str) else style)
    except ValueError:
        return None


def palette_from_hsl(
    base: HSL,
    style: Style | str,
    jitter: bool = False,
    rng: RandomSource | None = None,
) -> list[str]:
    """Apply a style's offsets to an HSL base. Returns [] for an unknown style."""
    resolved = to_style(style)
    if resolved is None:
        return []

    source = rng_mod.resolve(rng) if jitter else None
    bound = JITTER_RANGES[resolved]

    colours = []
    for offset in STYLE_OFFSETS[resolved]:
        delta = float(offset)
        if source is not None:
            delta += rng_mod.uniform(source, -bound, bound)
        if resolved is Style.MONOCHROMATIC:
            light = max(0.0, min(100.0, base.l + delta))
            colours.append(hsl_to_hex(HSL(h=base.h % 360, s=base.s, l=light)))
        else:
            colours.append(hsl_to_hex(HSL(h=(base.h + delta) % 360, s=base.s, l=base.l)))
    return colours


def generate_related_palette(
    base: str,
    style: Style | str,
    jitter: bool = False,
    rng: RandomSource | None = None,
) -> list[str]:
    """Generate a 5-colour palette from a hex base colour.

    With jitter=False the result is fully deterministic. An unknown style
    returns a single-element list holding the (canonicalised) base colour.
    """
    if to_style(style) is None:
        logger.debug('unknown palette style %r, returning base colour only', style)
        return [rgb_to_hex(*hex_to_rgb(base))]
    palette = palette_from_hsl(hex_to_hsl(base), style, jitter=jitter, rng=rng)
    logger.debug('generated %s palette from %s: %s', style, base, palette)
    return palette


def generate_all_styles(
    base: str,
    jitter: bool = False,
    rng: RandomSource | None = None,
) -> dict[Style, list[str]]:
    """Palette for every style, in declaration order."""
    source = rng_mod.resolve(rng) if jitter else None
    return {style: generate_related_palette(base, style, jitter=jitter, rng=source) for style in Style}


def generate_random_palette(count: int = PALETTE_SIZE, rng: RandomSource | None = None) -> list[str]:
    """`count` independent uniformly random colours."""
    if count < 0:
        raise ValueError(f'count must be >= 0, got {count}')
    source = rng_mod.resolve(rng)
    return [random_hex_color(source) for _ in range(count)]
