"""Colour-blindness simulation.

Dichromacies (protanopia, deuteranopia, tritanopia) use a fixed 3x3 linear
transform on the RGB vector: new = M @ rgb, rounded half-up and clipped to
[0, 255]. Achromatopsia replaces every channel with Rec. 601 luma.
"""

from __future__ import annotations

import numpy as np

from palette_gen.core.convert import hex_to_rgb, rgb_to_hex
from palette_gen.core.types import ColorBlindnessType

MATRICES: dict[ColorBlindnessType, np.ndarray] = {
    ColorBlindnessType.PROTANOPIA: np.array(
        [
            [0.567, 0.433, 0.0],
            [0.558, 0.442, 0.0],
            [0.0, 0.242, 0.758],
        ]
    ),
    ColorBlindnessType.DEUTERANOPIA: np.array(
        [
            [0.625, 0.375, 0.0],
            [0.7, 0.3, 0.0],
            [0.0, 0.3, 0.7],
        ]
    ),
    ColorBlindnessType.TRITANOPIA: np.array(
        [
            [0.95, 0.05, 0.0],
            [0.0, 0.433, 0.567],
            [0.0, 0.475, 0.525],
        ]
    ),
}

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])


def _to_type(kind: ColorBlindnessType | str) -> ColorBlindnessType:
    try:
        return ColorBlindnessType(kind.strip().lower() if isinstance(kind, str) else kind)
    except ValueError:
        valid = ', '.join(t.value for t in ColorBlindnessType)
        raise ValueError(f'Unknown color blindness type: {kind!r}. Available: {valid}') from None


def simulate_color_blindness(colour: str, kind: ColorBlindnessType | str) -> str:
    """Return how `colour` appears under the given colour-vision deficiency."""
    cb_type = _to_type(kind)
    rgb = np.array(hex_to_rgb(colour), dtype=float)

    if cb_type is ColorBlindnessType.ACHROMATOPSIA:
        grey = float(LUMA_WEIGHTS @ rgb)
        return rgb_to_hex(grey, grey, grey)

    out = np.clip(np.floor(MATRICES[cb_type] @ rgb + 0.5), 0, 255).astype(int)
    return rgb_to_hex(int(out[0]), int(out[1]), int(out[2]))


def simulate_palette(colours: list[str], kind: ColorBlindnessType | str) -> list[str]:
    return [simulate_color_blindness(c, kind) for c in colours]


def simulate_all(colours: list[str]) -> dict[ColorBlindnessType, list[str]]:
    """Simulated palette for every deficiency type, in declaration order."""
    return {t: simulate_palette(colours, t) for t in ColorBlindnessType}
