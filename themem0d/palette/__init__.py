from .classifier import ThemeSeeds, classify_palette, is_harmonious, select_seed_metrics
from .loader import MonitorTheme, load_monitor_themes
from .theme import ClassifiedTheme, assemble_theme, build_theme
from .tones import MISSING_TONE, TONE_LEVELS, TonalPalette, generate_tonal_palette

__all__ = [
    "ClassifiedTheme",
    "MISSING_TONE",
    "MonitorTheme",
    "TONE_LEVELS",
    "ThemeSeeds",
    "TonalPalette",
    "assemble_theme",
    "build_theme",
    "classify_palette",
    "generate_tonal_palette",
    "is_harmonious",
    "load_monitor_themes",
    "select_seed_metrics",
]
