from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..color import HCT, RGBColor, hct_to_rgb

TONE_LEVELS = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)

# Returned for tone levels outside TONE_LEVELS so the mistake is visible
MISSING_TONE = RGBColor(255, 0, 255, 255)

# Chroma attenuation near the lightness extremes
EXTREME_CHROMA_FACTOR = 0.5  # tone <= 10 or tone >= 95
EDGE_CHROMA_FACTOR = 0.8  # tone <= 20 or tone >= 90


def chroma_factor(level):
    """Chroma multiplier applied to a seed at the given tone level."""
    if level <= 10 or level >= 95:
        return EXTREME_CHROMA_FACTOR
    if level <= 20 or level >= 90:
        return EDGE_CHROMA_FACTOR
    return 1.0


@dataclass(frozen=True)
class TonalPalette:
    """Fixed tone ladder generated from a single seed color.

    ``tones`` maps every level in TONE_LEVELS to its RGB color, ``hcts`` maps
    the same levels to the perceptual color that produced it.
    """

    seed: HCT
    tones: Mapping[int, RGBColor]
    hcts: Mapping[int, HCT]

    def tone(self, level):
        """Color at ``level``, or MISSING_TONE when the level isn't generated."""
        return self.tones.get(level, MISSING_TONE)

    def __getitem__(self, level):
        return self.tone(level)

    def __iter__(self):
        return iter(self.tones.items())


def generate_tonal_palette(seed):
    """Create the full 13-step tonal ramp from one seed, keeping its hue."""
    hcts = {}
    tones = {}
    for level in TONE_LEVELS:
        hct = HCT(
            hue=seed.hue,
            chroma=seed.chroma * chroma_factor(level),
            tone=float(level),
        )
        hcts[level] = hct
        tones[level] = hct_to_rgb(hct)

    return TonalPalette(
        seed=seed,
        tones=MappingProxyType(tones),
        hcts=MappingProxyType(hcts),
    )
