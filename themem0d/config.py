import os
from dataclasses import dataclass, replace
from pathlib import Path

APP_DIR_NAME = os.path.join("Templates", "ThemeM0d")
THEME_FILE_NAME = "currenttheme.tm0d"
TEMPLATE_SUFFIX = ".tmpl"


@dataclass(frozen=True)
class ThemeConfig:
    """Filesystem locations used by the build, export and preview commands.

    Everything lives under ``~/Templates/ThemeM0d`` by default:

        currenttheme.tm0d   per-monitor candidate palettes
        Templates/          template sources
        Themes/<monitor>/   rendered output
    """

    home_dir: Path
    app_dir: Path
    templates_dir: Path
    themes_dir: Path
    theme_file: Path

    @classmethod
    def from_home(cls, home_dir):
        home_dir = Path(home_dir)
        app_dir = home_dir / APP_DIR_NAME
        return cls(
            home_dir=home_dir,
            app_dir=app_dir,
            templates_dir=app_dir / "Templates",
            themes_dir=app_dir / "Themes",
            theme_file=app_dir / THEME_FILE_NAME,
        )

    @classmethod
    def from_env(cls, home=None, **overrides):
        """Resolve the config from $HOME, applying any non-None path overrides."""
        if home is None:
            home = os.environ.get("HOME") or Path.home()
        config = cls.from_home(home)
        overrides = {k: Path(v) for k, v in overrides.items() if v is not None}
        return replace(config, **overrides) if overrides else config
