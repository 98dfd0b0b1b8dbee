import json

from ..palette.theme import DERIVED_TONES


def theme_to_dict(theme, monitor=None, source_file=None):
    """Flatten a theme into hex strings keyed by role and tone.

    Palettes become ``{"primary": {"0": "#000000", "10": ...}, ...}`` and
    derived colors are top-level keys (``"surface": "#..."``).
    """
    data = {}
    for name, palette in theme.palettes.items():
        data[name] = {str(level): color.hex for level, color in palette}

    for name in DERIVED_TONES:
        data[name] = theme.derived(name).hex

    if monitor:
        data["_monitor"] = monitor

    if source_file:
        data["_wallpaper"] = source_file

    data["_note"] = (
        "13 tones per palette (0-100); surface/on_surface colors are dark theme "
        "lookups into the neutral and primary palettes"
    )
    return data


def export_theme_json(theme, filepath, monitor=None, source_file=None):
    """Export a classified theme as JSON with every tone and derived color.

    Args:
        theme: The ClassifiedTheme
        filepath: Output file path
        monitor: Monitor name for metadata
        source_file: Wallpaper path for metadata
    """
    data = theme_to_dict(theme, monitor=monitor, source_file=source_file)

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
