import json
from collections import namedtuple

from ..color import create_color
from ..errors import ThemeFileError

MonitorTheme = namedtuple("MonitorTheme", ["monitor", "wallpaper_location", "colors"])


def _parse_color(entry):
    try:
        return create_color(entry["R"], entry["G"], entry["B"], entry.get("A", 255))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ThemeFileError(f"Invalid palette color {entry!r}") from e


def parse_monitor_themes(data):
    """Convert decoded theme file JSON into MonitorTheme records.

    Args:
        data: List of ``{"monitor": ..., "theme": {"wallpaper_location": ...,
            "palletes": [{"R", "G", "B", "A"}, ...]}}`` objects

    Returns:
        list of MonitorTheme, in file order
    """
    if not isinstance(data, list):
        raise ThemeFileError("Theme file must contain a list of monitors")

    monitors = []
    for item in data:
        try:
            monitor = item["monitor"]
            theme = item["theme"]
        except (KeyError, TypeError) as e:
            raise ThemeFileError(f"Invalid monitor entry {item!r}") from e
        if not isinstance(theme, dict):
            raise ThemeFileError(f"Invalid theme for monitor {monitor!r}")

        # "palletes" is the key written by the generate command
        palletes = theme.get("palletes")
        if palletes is None:
            palletes = []
        elif not isinstance(palletes, list):
            raise ThemeFileError(f"Invalid palette for monitor {monitor!r}")
        colors = tuple(_parse_color(c) for c in palletes)
        monitors.append(
            MonitorTheme(
                monitor=str(monitor),
                wallpaper_location=theme.get("wallpaper_location", ""),
                colors=colors,
            )
        )
    return monitors


def load_monitor_themes(json_path):
    """Load the per-monitor candidate palettes from a theme file.

    Args:
        json_path: Path to ``currenttheme.tm0d``

    Returns:
        list of MonitorTheme

    Raises:
        ThemeFileError: If the file can't be read or isn't valid theme JSON
    """
    try:
        with open(json_path) as f:
            data = json.load(f)
    except OSError as e:
        raise ThemeFileError(f"Could not read theme file {json_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ThemeFileError(f"Could not parse theme file {json_path}: {e}") from e

    return parse_monitor_themes(data)
