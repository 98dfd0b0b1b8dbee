from __future__ import annotations

import pytest

from themem0d.color import HCT, RGBColor, hct_to_rgb, rgb_to_hct
from themem0d.palette.tones import (
    MISSING_TONE,
    TONE_LEVELS,
    chroma_factor,
    generate_tonal_palette,
)

SEED = HCT(hue=250.0, chroma=40.0, tone=45.0)


def test_every_tone_level_is_generated() -> None:
    palette = generate_tonal_palette(SEED)

    assert tuple(palette.tones) == TONE_LEVELS
    assert tuple(palette.hcts) == TONE_LEVELS
    assert len(palette.tones) == 13


def test_tones_hit_their_target_level() -> None:
    palette = generate_tonal_palette(SEED)

    tones = [palette.hcts[level].tone for level in TONE_LEVELS]
    assert tones == [float(level) for level in TONE_LEVELS]
    assert all(a < b for a, b in zip(tones, tones[1:]))


@pytest.mark.parametrize("level", [30, 40, 50, 60, 70, 80])
def test_mid_tones_keep_seed_hue_and_chroma(level) -> None:
    hct = generate_tonal_palette(SEED).hcts[level]

    assert hct.hue == SEED.hue
    assert hct.chroma == SEED.chroma


@pytest.mark.parametrize(
    "level, factor",
    [(0, 0.5), (10, 0.5), (20, 0.8), (90, 0.8), (95, 0.5), (99, 0.5), (100, 0.5)],
)
def test_chroma_is_attenuated_near_extremes(level, factor) -> None:
    hct = generate_tonal_palette(SEED).hcts[level]

    assert chroma_factor(level) == factor
    assert hct.chroma == pytest.approx(SEED.chroma * factor)
    assert hct.hue == SEED.hue


def test_extreme_attenuation_does_not_stack() -> None:
    # 0.5 replaces 0.8, it is never 0.4
    assert chroma_factor(10) == 0.5
    assert chroma_factor(95) == 0.5


def test_rgb_entries_match_converted_hcts() -> None:
    palette = generate_tonal_palette(SEED)

    for level in TONE_LEVELS:
        assert palette.tones[level] == hct_to_rgb(palette.hcts[level])


def test_gray_ramp_ends_at_black_and_white() -> None:
    palette = generate_tonal_palette(HCT(hue=0.0, chroma=0.0, tone=50.0))

    assert palette.tone(0).rgb == (0, 0, 0)
    assert palette.tone(100).rgb == (255, 255, 255)


def test_low_chroma_ramp_gets_lighter() -> None:
    palette = generate_tonal_palette(rgb_to_hct(RGBColor(90, 100, 110)))

    luminances = [palette.tone(level).luminance for level in TONE_LEVELS]
    assert luminances == sorted(luminances)


def test_missing_tone_returns_magenta_sentinel() -> None:
    palette = generate_tonal_palette(SEED)

    assert palette.tone(45) == RGBColor(255, 0, 255, 255)
    assert palette.tone(45) is MISSING_TONE
    assert palette[45].rgb == (255, 0, 255)


def test_indexing_matches_tone_lookup() -> None:
    palette = generate_tonal_palette(SEED)

    assert palette[80] == palette.tone(80) == palette.tones[80]


def test_generation_is_deterministic() -> None:
    assert generate_tonal_palette(SEED) == generate_tonal_palette(SEED)


def test_palette_is_read_only() -> None:
    palette = generate_tonal_palette(SEED)

    with pytest.raises(TypeError):
        palette.tones[45] = RGBColor(0, 0, 0)
