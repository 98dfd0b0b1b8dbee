import logging
from collections import namedtuple

from ..color import HCT, RGBColor, create_color, hct_to_rgb, hue_distance, rgb_to_hct
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

MIN_PALETTE_COLORS = 4

# Vibrancy weights: chroma dominates, closeness of tone to 50 breaks ties
CHROMA_WEIGHT = 0.7
TONE_WEIGHT = 0.3

# (low, high) circular hue distances that count as harmonious
HARMONY_BANDS = (
    (25.0, 35.0),  # analogous
    (115.0, 125.0),  # triadic
    (175.0, 185.0),  # complementary
)
MIN_TERTIARY_HUE_DISTANCE = 60.0

ColorMetric = namedtuple("ColorMetric", ["color", "hct", "vibrancy", "index"])
ThemeSeeds = namedtuple("ThemeSeeds", ["primary", "secondary", "tertiary", "neutral"])


def vibrancy(hct):
    """Score a color: high chroma and mid lightness are most vibrant"""
    tone_score = 1 - abs(hct.tone - 50) / 50
    return CHROMA_WEIGHT * (hct.chroma / 100) + TONE_WEIGHT * tone_score


def is_harmonious(hue1, hue2):
    """True if the hues are analogous, triadic or complementary."""
    distance = hue_distance(hue1, hue2)
    return any(low <= distance <= high for low, high in HARMONY_BANDS)


def _color_metrics(colors):
    metrics = []
    for index, value in enumerate(colors):
        if isinstance(value, HCT):
            hct = value
            color = hct_to_rgb(hct)
        else:
            color = value if isinstance(value, RGBColor) else create_color(*value)
            hct = rgb_to_hct(color)
        metrics.append(
            ColorMetric(color=color, hct=hct, vibrancy=vibrancy(hct), index=index)
        )
    return metrics


def select_seed_metrics(colors):
    """Pick the metric records for the primary/secondary/tertiary/neutral roles.

    Args:
        colors: Candidate colors (RGBColor, HCT or (r, g, b[, a]) tuples),
            in extraction order. At least MIN_PALETTE_COLORS are required.

    Returns:
        ThemeSeeds of ColorMetric records

    Raises:
        ConfigurationError: If fewer than MIN_PALETTE_COLORS colors are given
    """
    colors = list(colors)
    if len(colors) < MIN_PALETTE_COLORS:
        raise ConfigurationError(
            f"Palette must have at least {MIN_PALETTE_COLORS} colors for theme "
            f"generation, got {len(colors)}"
        )

    # Stable: equal vibrancy keeps extraction order
    by_vibrancy = sorted(_color_metrics(colors), key=lambda m: m.vibrancy, reverse=True)

    primary = by_vibrancy[0]

    secondary = next(
        (m for m in by_vibrancy[1:] if is_harmonious(primary.hct.hue, m.hct.hue)),
        None,
    )
    if secondary is None:
        logger.debug("No harmonious secondary hue, using second most vibrant color")
        secondary = by_vibrancy[1]

    tertiary = next(
        (
            m
            for m in by_vibrancy
            if m.index != secondary.index
            and hue_distance(m.hct.hue, primary.hct.hue) > MIN_TERTIARY_HUE_DISTANCE
            and hue_distance(m.hct.hue, secondary.hct.hue) > MIN_TERTIARY_HUE_DISTANCE
        ),
        None,
    )
    if tertiary is None:
        # May repeat the secondary when it was itself the third most vibrant
        logger.debug("No distinct tertiary hue, using third most vibrant color")
        tertiary = by_vibrancy[2]

    used = {primary.index, secondary.index, tertiary.index}
    by_chroma = sorted(by_vibrancy, key=lambda m: m.hct.chroma)
    neutral = next(m for m in by_chroma if m.index not in used)

    return ThemeSeeds(primary, secondary, tertiary, neutral)


def classify_palette(colors):
    """Select the four role seeds (as HCT) from an unordered palette."""
    metrics = select_seed_metrics(colors)
    return ThemeSeeds(*(m.hct for m in metrics))
