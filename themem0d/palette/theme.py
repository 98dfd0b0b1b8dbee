from dataclasses import dataclass

from .classifier import classify_palette
from .tones import TonalPalette, generate_tonal_palette

# (palette, tone) pairs behind every derived color of a dark theme
DERIVED_TONES = {
    "surface": ("neutral", 10),  # app backgrounds
    "surface_variant": ("neutral", 30),  # cards, dialogs
    "on_surface": ("neutral", 90),  # text on surface
    "on_surface_variant": ("neutral", 80),  # secondary text
    "primary_fixed": ("primary", 90),
    "on_primary_fixed": ("primary", 10),
}


@dataclass(frozen=True)
class ClassifiedTheme:
    """Material-style dark theme built from four tonal palettes.

    Surface and text colors are looked up from the palettes on access.
    """

    primary: TonalPalette
    secondary: TonalPalette
    tertiary: TonalPalette
    neutral: TonalPalette

    def derived(self, name):
        palette_name, level = DERIVED_TONES[name]
        return getattr(self, palette_name).tone(level)

    @property
    def surface(self):
        return self.derived("surface")

    @property
    def surface_variant(self):
        return self.derived("surface_variant")

    @property
    def on_surface(self):
        return self.derived("on_surface")

    @property
    def on_surface_variant(self):
        return self.derived("on_surface_variant")

    @property
    def primary_fixed(self):
        return self.derived("primary_fixed")

    @property
    def on_primary_fixed(self):
        return self.derived("on_primary_fixed")

    @property
    def palettes(self):
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "tertiary": self.tertiary,
            "neutral": self.neutral,
        }

    def template_context(self):
        """Field names templates use to reach the theme (``Theme.Primary``...)."""
        return {
            "Primary": self.primary,
            "Secondary": self.secondary,
            "Tertiary": self.tertiary,
            "Neutral": self.neutral,
            "Surface": self.surface,
            "SurfaceVariant": self.surface_variant,
            "OnSurface": self.on_surface,
            "OnSurfaceVariant": self.on_surface_variant,
            "PrimaryFixed": self.primary_fixed,
            "OnPrimaryFixed": self.on_primary_fixed,
        }


def assemble_theme(seeds):
    """Generate one tonal palette per seed and wrap them in a ClassifiedTheme."""
    return ClassifiedTheme(
        primary=generate_tonal_palette(seeds.primary),
        secondary=generate_tonal_palette(seeds.secondary),
        tertiary=generate_tonal_palette(seeds.tertiary),
        neutral=generate_tonal_palette(seeds.neutral),
    )


def build_theme(colors):
    """Classify a raw candidate palette and assemble the resulting theme.

    Raises:
        ConfigurationError: If the palette has fewer than four colors
    """
    return assemble_theme(classify_palette(colors))
