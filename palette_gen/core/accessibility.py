"""WCAG 2.x relative luminance, contrast ratio and palette pair report."""

from __future__ import annotations

import math
from itertools import combinations

from palette_gen.core.convert import hex_to_rgb
from palette_gen.core.types import AccessibilityReport, AccessibilitySummary, ColorPair

# (level, size) -> minimum contrast ratio
WCAG_THRESHOLDS: dict[tuple[str, str], float] = {
    ('AA', 'normal'): 4.5,
    ('AA', 'large'): 3.0,
    ('AAA', 'normal'): 7.0,
    ('AAA', 'large'): 4.5,
}


def _round2(x: float) -> float:
    return math.floor(x * 100 + 0.5) / 100


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def get_relative_luminance(colour: str) -> float:
    r, g, b = hex_to_rgb(colour)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def get_contrast_ratio(c1: str, c2: str) -> float:
    """Contrast ratio in [1, 21]. Symmetric in its arguments."""
    l1 = get_relative_luminance(c1)
    l2 = get_relative_luminance(c2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def passes_wcag(ratio: float, level: str = 'AA', size: str = 'normal') -> bool:
    key = (level.upper(), size.lower())
    if key not in WCAG_THRESHOLDS:
        raise ValueError(f'Unknown WCAG level/size: {level}/{size}')
    return ratio >= WCAG_THRESHOLDS[key]


def meets_wcag_standards(c1: str, c2: str, level: str = 'AA', size: str = 'normal') -> bool:
    return passes_wcag(get_contrast_ratio(c1, c2), level, size)


def generate_accessibility_report(colours: list[str]) -> AccessibilityReport:
    """Contrast and WCAG flags for every unordered pair (i < j).

    Flags use the exact ratio; the stored contrast is rounded to 2 decimals.
    """
    pairs = []
    for c1, c2 in combinations(colours, 2):
        ratio = get_contrast_ratio(c1, c2)
        pairs.append(
            ColorPair(
                color1=c1,
                color2=c2,
                contrast=_round2(ratio),
                aa=passes_wcag(ratio, 'AA', 'normal'),
                aa_large=passes_wcag(ratio, 'AA', 'large'),
                aaa=passes_wcag(ratio, 'AAA', 'normal'),
                aaa_large=passes_wcag(ratio, 'AAA', 'large'),
            )
        )

    total = len(pairs)
    average = _round2(sum(p.contrast for p in pairs) / total) if total else 0.0
    summary = AccessibilitySummary(
        total_pairs=total,
        aa_compliant=sum(p.aa for p in pairs),
        aa_large_compliant=sum(p.aa_large for p in pairs),
        aaa_compliant=sum(p.aaa for p in pairs),
        aaa_large_compliant=sum(p.aaa_large for p in pairs),
        average_contrast=average,
    )
    return AccessibilityReport(color_pairs=pairs, summary=summary)


def top_contrast_pairs(report: AccessibilityReport, n: int = 3) -> list[ColorPair]:
    """The n highest-contrast pairs, ties kept in palette order."""
    return sorted(report.color_pairs, key=lambda p: -p.contrast)[:n]
