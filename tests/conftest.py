from __future__ import annotations

import json
import logging

import pytest

from themem0d.color import HCT
from themem0d.config import ThemeConfig

# Candidate palette roughly like an extracted wallpaper palette
WALLPAPER_COLORS = [
    (32, 40, 58, 255),
    (196, 120, 64, 255),
    (72, 110, 160, 255),
    (210, 200, 180, 255),
    (120, 140, 90, 255),
    (150, 60, 90, 255),
]


@pytest.fixture(autouse=True)
def _reset_themem0d_logger():
    yield
    logging.getLogger("themem0d").handlers.clear()


@pytest.fixture
def wallpaper_colors():
    return list(WALLPAPER_COLORS)


@pytest.fixture
def hct_candidates():
    """Candidates with vibrancy order A > B > C > D, A and C 30 degrees apart."""
    a = HCT(hue=30.0, chroma=60.0, tone=50.0)
    b = HCT(hue=200.0, chroma=45.0, tone=50.0)
    c = HCT(hue=60.0, chroma=30.0, tone=50.0)
    d = HCT(hue=300.0, chroma=10.0, tone=50.0)
    return {"A": a, "B": b, "C": c, "D": d}


def _palette_json(colors):
    return [{"R": r, "G": g, "B": b, "A": a} for r, g, b, a in colors]


@pytest.fixture
def theme_home(tmp_path):
    """A home directory with a theme file and a templates directory."""
    config = ThemeConfig.from_home(tmp_path)
    config.templates_dir.mkdir(parents=True)

    data = [
        {
            "monitor": "DP-1",
            "theme": {
                "wallpaper_location": "/wallpapers/forest.png",
                "palletes": _palette_json(WALLPAPER_COLORS),
            },
        },
        {
            "monitor": "HDMI-A-1",
            "theme": {
                "wallpaper_location": "/wallpapers/flat.png",
                "palletes": _palette_json(WALLPAPER_COLORS[:3]),
            },
        },
    ]
    config.theme_file.write_text(json.dumps(data, indent=2))
    return config
