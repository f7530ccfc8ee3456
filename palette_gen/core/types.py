"""Shared types for palette-gen: HSL, Style, ColorBlindnessType, ExportFormat, reports, Exporter."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class HSL:
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float  # noqa: E741


class Style(str, Enum):
    ANALOGOUS = 'analogous'
    MONOCHROMATIC = 'monochromatic'
    COMPLEMENTARY = 'complementary'
    TRIADIC = 'triadic'
    TETRADIC = 'tetradic'


class ColorBlindnessType(str, Enum):
    PROTANOPIA = 'protanopia'
    DEUTERANOPIA = 'deuteranopia'
    TRITANOPIA = 'tritanopia'
    ACHROMATOPSIA = 'achromatopsia'


class ExportFormat(str, Enum):
    JSON = 'json'
    CSS = 'css'
    SCSS = 'scss'
    TAILWIND = 'tailwind'
    TEXT = 'text'
    ACCESSIBILITY = 'accessibility'
    COLORBLIND = 'colorblind'


@dataclass(frozen=True)
class ColorPair:
    """Contrast result for one unordered pair of palette colours."""

    color1: str
    color2: str
    contrast: float  # rounded to 2 decimals
    aa: bool  # AA normal text
    aa_large: bool
    aaa: bool  # AAA normal text
    aaa_large: bool


@dataclass(frozen=True)
class AccessibilitySummary:
    total_pairs: int = 0
    aa_compliant: int = 0
    aa_large_compliant: int = 0
    aaa_compliant: int = 0
    aaa_large_compliant: int = 0
    average_contrast: float = 0.0


@dataclass(frozen=True)
class AccessibilityReport:
    color_pairs: list[ColorPair] = field(default_factory=list)
    summary: AccessibilitySummary = field(default_factory=AccessibilitySummary)


@dataclass(frozen=True)
class ExportRequest:
    """Everything a format module needs to serialise a palette."""

    colors: list[str]
    base_color: str | None = None
    style: str | None = None


class Exporter:
    """A self-registering export format.

    Usage in a format module:

        exporter = Exporter(name='css', help='CSS custom properties')

        @exporter.render
        def render(request):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._render_fn: Callable[[ExportRequest], str] | None = None

    def render(self, fn: Callable[[ExportRequest], str]) -> Callable[[ExportRequest], str]:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def export(self, request: ExportRequest) -> str:
        """Run the format's render function."""
        if self._render_fn is None:
            raise RuntimeError(f'Exporter {self.name} has no render function')
        return self._render_fn(request)
