"""Tests for palette_gen.core.palette — style offsets, jitter and random palettes."""

import re

import pytest
from palette_gen.core.convert import hex_to_hsl
from palette_gen.core.palette import (
    JITTER_RANGES,
    STYLE_DESCRIPTIONS,
    STYLE_OFFSETS,
    generate_all_styles,
    generate_random_palette,
    generate_related_palette,
    palette_from_hsl,
)
from palette_gen.core.rng import NumpyRandom
from palette_gen.core.types import HSL, Style

HEX = re.compile(r'^#[0-9A-F]{6}$')
BASE = '#3498DB'  # hsl(204, 70%, 53%)


class CountingRandom:
    """Always returns the same value and counts draws."""

    def __init__(self, value: float = 0.5):
        self.value = value
        self.calls = 0

    def next_float(self) -> float:
        self.calls += 1
        return self.value


def hue_distance(a: float, b: float) -> float:
    d = abs(a - b) % 360
    return min(d, 360 - d)


class TestStyleTables:
    def test_every_style_has_description(self):
        assert set(STYLE_DESCRIPTIONS) == set(Style)

    def test_every_style_has_five_offsets(self):
        for style in Style:
            assert len(STYLE_OFFSETS[style]) == 5

    def test_offsets_unchanged(self):
        assert STYLE_OFFSETS[Style.ANALOGOUS] == (0, -30, 30, -60, 60)
        assert STYLE_OFFSETS[Style.MONOCHROMATIC] == (-30, -15, 0, 15, 30)
        assert STYLE_OFFSETS[Style.COMPLEMENTARY] == (0, 180, 150, 210, 30)
        assert STYLE_OFFSETS[Style.TRIADIC] == (0, 120, 240, 110, 250)
        assert STYLE_OFFSETS[Style.TETRADIC] == (0, 90, 180, 270, 45)

    def test_jitter_ranges_unchanged(self):
        assert JITTER_RANGES == {
            Style.ANALOGOUS: 10,
            Style.MONOCHROMATIC: 8,
            Style.COMPLEMENTARY: 12,
            Style.TRIADIC: 10,
            Style.TETRADIC: 8,
        }


class TestGenerateRelatedPalette:
    @pytest.mark.parametrize('style', list(Style))
    def test_five_well_formed_colours(self, style):
        palette = generate_related_palette(BASE, style)
        assert len(palette) == 5
        assert all(HEX.match(c) for c in palette)

    def test_accepts_style_name_string(self):
        assert generate_related_palette(BASE, 'Triadic') == generate_related_palette(BASE, Style.TRIADIC)

    def test_complementary_scenario(self):
        palette = generate_related_palette(BASE, 'complementary')
        expected_hues = [204, 24, 354, 54, 234]
        for colour, hue in zip(palette, expected_hues):
            assert hue_distance(hex_to_hsl(colour).h, hue) <= 2, colour

    def test_analogous_red_wraps_negative_hues(self):
        assert generate_related_palette('#FF0000', Style.ANALOGOUS) == [
            '#FF0000',
            '#FF0080',
            '#FF8000',
            '#FF00FF',
            '#FFFF00',
        ]

    def test_triadic_red_hits_primaries(self):
        assert generate_related_palette('#FF0000', Style.TRIADIC)[:3] == ['#FF0000', '#00FF00', '#0000FF']

    def test_monochromatic_varies_lightness(self):
        palette = generate_related_palette(BASE, Style.MONOCHROMATIC)
        lightness = [hex_to_hsl(c).l for c in palette]
        for got, want in zip(lightness, [23, 38, 53, 68, 83]):
            assert abs(got - want) <= 2
        assert lightness == sorted(lightness)

    def test_monochromatic_clamps_at_white(self):
        palette = generate_related_palette('#FFFFFF', Style.MONOCHROMATIC)
        assert palette[2:] == ['#FFFFFF', '#FFFFFF', '#FFFFFF']

    def test_black_gives_duplicates(self):
        assert generate_related_palette('#000000', Style.TETRADIC) == ['#000000'] * 5

    def test_unknown_style_returns_base_only(self):
        assert generate_related_palette('#3498db', 'pastel') == ['#3498DB']

    def test_deterministic_without_jitter(self):
        assert generate_related_palette(BASE, Style.TETRADIC) == generate_related_palette(BASE, Style.TETRADIC)


class TestPaletteFromHsl:
    @pytest.mark.parametrize('style', list(Style))
    def test_hue_rotation_by_360_is_invariant(self, style):
        base = HSL(204, 70, 53)
        rotated = HSL(204 + 360, 70, 53)
        assert palette_from_hsl(base, style) == palette_from_hsl(rotated, style)

    def test_unknown_style_is_empty(self):
        assert palette_from_hsl(HSL(0, 100, 50), 'pastel') == []


class TestJitter:
    def test_midpoint_draw_is_no_op(self):
        rng = CountingRandom(0.5)
        assert generate_related_palette(BASE, Style.ANALOGOUS, jitter=True, rng=rng) == generate_related_palette(
            BASE, Style.ANALOGOUS
        )
        assert rng.calls == 5

    def test_rng_untouched_without_jitter(self):
        rng = CountingRandom()
        generate_related_palette(BASE, Style.ANALOGOUS, rng=rng)
        assert rng.calls == 0

    def test_seeded_is_reproducible(self):
        a = generate_related_palette(BASE, Style.COMPLEMENTARY, jitter=True, rng=NumpyRandom(7))
        b = generate_related_palette(BASE, Style.COMPLEMENTARY, jitter=True, rng=NumpyRandom(7))
        assert a == b

    @pytest.mark.parametrize('style', [s for s in Style if s is not Style.MONOCHROMATIC])
    def test_hue_jitter_within_bounds(self, style):
        plain = generate_related_palette(BASE, style)
        rng = NumpyRandom(11)
        for _ in range(20):
            jittered = generate_related_palette(BASE, style, jitter=True, rng=rng)
            for p, j in zip(plain, jittered):
                assert hue_distance(hex_to_hsl(p).h, hex_to_hsl(j).h) <= JITTER_RANGES[style] + 2

    def test_lightness_jitter_within_bounds(self):
        plain = generate_related_palette(BASE, Style.MONOCHROMATIC)
        rng = NumpyRandom(5)
        for _ in range(20):
            jittered = generate_related_palette(BASE, Style.MONOCHROMATIC, jitter=True, rng=rng)
            for p, j in zip(plain, jittered):
                assert abs(hex_to_hsl(p).l - hex_to_hsl(j).l) <= JITTER_RANGES[Style.MONOCHROMATIC] + 2


class TestGenerateAllStyles:
    def test_covers_every_style(self):
        result = generate_all_styles(BASE)
        assert list(result) == list(Style)
        assert all(len(p) == 5 for p in result.values())

    def test_matches_individual_calls(self):
        result = generate_all_styles(BASE)
        for style, palette in result.items():
            assert palette == generate_related_palette(BASE, style)


class TestGenerateRandomPalette:
    def test_count(self):
        palette = generate_random_palette(8, NumpyRandom(1))
        assert len(palette) == 8
        assert all(HEX.match(c) for c in palette)

    def test_default_size(self):
        assert len(generate_random_palette(rng=NumpyRandom(2))) == 5

    def test_zero(self):
        assert generate_random_palette(0) == []

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            generate_random_palette(-1)

    def test_seeded_is_reproducible(self):
        assert generate_random_palette(5, NumpyRandom(9)) == generate_random_palette(5, NumpyRandom(9))
