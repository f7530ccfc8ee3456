"""Colour conversion: hex <-> RGB <-> HSL, colour names and free-form parsing.

Canonical colour form is '#RRGGBB', uppercase. Rounding is half-up
(floor(x + 0.5)) everywhere so that integer HSL values match what
browser colour pickers report.
"""

import logging
import math
import re

from palette_gen.core import rng as rng_mod
from palette_gen.core.errors import InvalidColorFormat
from palette_gen.core.rng import RandomSource
from palette_gen.core.types import HSL

logger = logging.getLogger(__name__)

NAMED_COLOURS: dict[str, str] = {
    'black': '#000000',
    'white': '#FFFFFF',
    'red': '#FF0000',
    'lime': '#00FF00',
    'green': '#008000',
    'blue': '#0000FF',
    'yellow': '#FFFF00',
    'cyan': '#00FFFF',
    'aqua': '#00FFFF',
    'magenta': '#FF00FF',
    'fuchsia': '#FF00FF',
    'silver': '#C0C0C0',
    'gray': '#808080',
    'grey': '#808080',
    'maroon': '#800000',
    'olive': '#808000',
    'purple': '#800080',
    'teal': '#008080',
    'navy': '#000080',
    'orange': '#FFA500',
    'pink': '#FFC0CB',
    'brown': '#A52A2A',
    'gold': '#FFD700',
    'indigo': '#4B0082',
    'violet': '#EE82EE',
    'coral': '#FF7F50',
    'salmon': '#FA8072',
    'tomato': '#FF6347',
    'crimson': '#DC143C',
    'khaki': '#F0E68C',
    'lavender': '#E6E6FA',
    'turquoise': '#40E0D0',
    'tan': '#D2B48C',
    'beige': '#F5F5DC',
    'chocolate': '#D2691E',
    'orchid': '#DA70D6',
    'plum': '#DDA0DD',
    'skyblue': '#87CEEB',
    'steelblue': '#4682B4',
    'slategray': '#708090',
    'mint': '#98FF98',
}

_HEX_RE = re.compile(r'^#?([0-9a-f]{6})$')
_HEX_DIGITS_RE = re.compile(r'^[0-9a-fA-F]{6}$')
_RGB_RE = re.compile(r'^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$')
_HSL_RE = re.compile(r'^hsl\(\s*(\d+)\s*,\s*(\d+)\s*%?\s*,\s*(\d+)\s*%?\s*\)$')


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def hex_to_rgb(hex_colour: str) -> tuple[int, int, int]:
    """Parse '#RRGGBB' / '#RGB' (hash optional) into (r, g, b)."""
    h = hex_colour.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if not _HEX_DIGITS_RE.match(h):
        raise InvalidColorFormat(hex_colour)
    num = int(h, 16)
    return (num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Round and clamp each channel to a byte, return '#RRGGBB'."""
    channels = [int(_clamp(round_half_up(c), 0, 255)) for c in (r, g, b)]
    return '#' + ''.join(f'{c:02X}' for c in channels)


def hex_to_hsl(hex_colour: str) -> HSL:
    """Convert hex to HSL with integer h (degrees), s and l (percent)."""
    r, g, b = hex_to_rgb(hex_colour)
    rn, gn, bn = r / 255, g / 255, b / 255
    hi, lo = max(rn, gn, bn), min(rn, gn, bn)
    h = s = 0.0
    light = (hi + lo) / 2
    if hi != lo:
        d = hi - lo
        s = d / (2 - hi - lo) if light > 0.5 else d / (hi + lo)
        if hi == rn:
            h = (gn - bn) / d + (6 if gn < bn else 0)
        elif hi == gn:
            h = (bn - rn) / d + 2
        else:
            h = (rn - gn) / d + 4
        h /= 6
    return HSL(
        h=round_half_up(h * 360) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(light * 100),
    )


def hsl_to_hex(hsl: HSL) -> str:
    """Convert HSL to hex via the chroma / hue-rotation formula."""
    h = hsl.h % 360
    s = _clamp(hsl.s, 0, 100) / 100
    light = _clamp(hsl.l, 0, 100) / 100
    a = s * min(light, 1 - light)

    def channel(n: int) -> float:
        k = (n + h / 30) % 12
        return 255 * (light - a * max(-1, min(k - 3, 9 - k, 1)))

    return rgb_to_hex(channel(0), channel(8), channel(4))


def parse_color(text: str) -> str:
    """Parse a named, hex, rgb() or hsl() colour string into '#RRGGBB'.

    Raises InvalidColorFormat if nothing matches. Out-of-range rgb()/hsl()
    components are clamped during conversion and logged as a warning.
    """
    value = text.strip().lower()

    if value in NAMED_COLOURS:
        return NAMED_COLOURS[value]

    m = _HEX_RE.match(value)
    if m:
        return '#' + m.group(1).upper()

    m = _RGB_RE.match(value)
    if m:
        r, g, b = (int(x) for x in m.groups())
        if max(r, g, b) > 255:
            logger.warning('rgb component out of range in %r, clamping to 255', text)
        return rgb_to_hex(r, g, b)

    m = _HSL_RE.match(value)
    if m:
        h, s, light = (int(x) for x in m.groups())
        if h >= 360 or s > 100 or light > 100:
            logger.warning('hsl component out of range in %r, wrapping hue and clamping s/l', text)
        return hsl_to_hex(HSL(h=h, s=s, l=light))

    raise InvalidColorFormat(text)


def random_hex_color(rng: RandomSource | None = None) -> str:
    """Uniformly sample a colour in [0x000000, 0xFFFFFF]."""
    source = rng_mod.resolve(rng)
    num = min(int(source.next_float() * 0x1000000), 0xFFFFFF)
    return f'#{num:06X}'
