"""Perceptual (HCT) theme generation from wallpaper palettes."""

from .color import HCT, RGBColor, hct_to_rgb, rgb_to_hct
from .config import ThemeConfig
from .errors import ConfigurationError, TemplateRenderError, ThemeFileError, ThemeM0dError
from .palette import ClassifiedTheme, TonalPalette, build_theme, classify_palette

__version__ = "0.1.0"

__all__ = [
    "HCT",
    "ClassifiedTheme",
    "ConfigurationError",
    "RGBColor",
    "TemplateRenderError",
    "ThemeConfig",
    "ThemeFileError",
    "ThemeM0dError",
    "TonalPalette",
    "build_theme",
    "classify_palette",
    "hct_to_rgb",
    "rgb_to_hct",
]
