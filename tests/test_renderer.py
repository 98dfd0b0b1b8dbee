from __future__ import annotations

import logging

import pytest

from themem0d.color import RGBColor
from themem0d.errors import ConfigurationError, TemplateRenderError
from themem0d.palette.loader import MonitorTheme
from themem0d.palette.theme import build_theme
from themem0d.render.helpers import to_hex, to_rgba, tone
from themem0d.render.renderer import TemplateRenderer, output_name


@pytest.fixture
def theme(wallpaper_colors):
    return build_theme(wallpaper_colors)


@pytest.fixture
def renderer():
    return TemplateRenderer()


def test_to_hex_is_lowercase_without_alpha() -> None:
    assert to_hex(RGBColor(171, 205, 239, 17)) == "#abcdef"


def test_to_rgba_passes_alpha_through() -> None:
    assert to_rgba(RGBColor(1, 2, 3), "0.85") == "rgba(1, 2, 3, 0.85)"
    assert to_rgba(RGBColor(1, 2, 3), "var(--a)") == "rgba(1, 2, 3, var(--a))"


def test_tone_helper_returns_sentinel_for_unknown_level(theme) -> None:
    assert tone(theme.primary, 45) == RGBColor(255, 0, 255, 255)
    assert tone(theme.primary, 80) == theme.primary.tone(80)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("kitty.conf.tmpl", "kitty.conf"),
        ("waybar.css", "waybar.css"),
        ("colors.tmpl.tmpl", "colors.tmpl"),
    ],
)
def test_output_name_strips_one_tmpl_suffix(name, expected) -> None:
    assert output_name(name) == expected


def test_render_monitor_and_derived_colors(renderer, theme) -> None:
    source = "monitor={{ Monitor }}\nbg={{ toHex(Theme.Surface) }}\n"

    result = renderer.render(theme, "DP-1", source)

    assert result == f"monitor=DP-1\nbg={theme.surface.hex}\n"


def test_render_tone_lookup_and_filters(renderer, theme) -> None:
    source = (
        "{{ toHex(tone(Theme.Primary, 80)) }} "
        "{{ Theme.Primary | tone(40) | toHex }} "
        "{{ Theme.OnSurface | toRgba('0.9') }}"
    )

    result = renderer.render(theme, "DP-1", source)

    p80 = theme.primary.tone(80)
    p40 = theme.primary.tone(40)
    on = theme.on_surface
    assert result == f"{p80.hex} {p40.hex} rgba({on.r}, {on.g}, {on.b}, 0.9)"


def test_render_missing_tone_is_visible_magenta(renderer, theme) -> None:
    assert renderer.render(theme, "DP-1", "{{ toHex(tone(Theme.Neutral, 45)) }}") == "#ff00ff"


def test_render_supports_palette_loops(renderer, theme) -> None:
    source = "{% for level, color in Theme.Secondary %}{{ level }} {% endfor %}"

    result = renderer.render(theme, "DP-1", source)

    assert result == "0 10 20 30 40 50 60 70 80 90 95 99 100 "


def test_render_keeps_trailing_newline(renderer, theme) -> None:
    assert renderer.render(theme, "DP-1", "plain\n") == "plain\n"


def test_syntax_error_raises_render_error(renderer, theme) -> None:
    with pytest.raises(TemplateRenderError, match="broken.tmpl"):
        renderer.render(theme, "DP-1", "{{ toHex(Theme.Surface }}", name="broken.tmpl")


def test_undefined_field_raises_render_error(renderer, theme) -> None:
    with pytest.raises(TemplateRenderError, match="Undefined"):
        renderer.render(theme, "DP-1", "{{ Theme.Background }}")


def test_runtime_error_raises_render_error(renderer, theme) -> None:
    with pytest.raises(TemplateRenderError):
        renderer.render(theme, "DP-1", "{{ toHex(Monitor) }}")


def test_render_monitor_skips_failing_template(renderer, wallpaper_colors, caplog) -> None:
    monitor = MonitorTheme("DP-1", "/wallpapers/forest.png", tuple(wallpaper_colors))
    templates = [
        ("a.conf.tmpl", "{{ Monitor }}"),
        ("broken.tmpl", "{% if %}"),
        ("c.css", "{{ toHex(Theme.PrimaryFixed) }}"),
    ]

    with caplog.at_level(logging.ERROR, logger="themem0d"):
        rendered = renderer.render_monitor(monitor, templates)

    assert set(rendered) == {"a.conf", "c.css"}
    assert rendered["a.conf"] == "DP-1"
    assert "broken.tmpl" in caplog.text


def test_render_monitor_rejects_short_palette(renderer, wallpaper_colors) -> None:
    monitor = MonitorTheme("DP-2", "", tuple(wallpaper_colors[:3]))

    with pytest.raises(ConfigurationError):
        renderer.render_monitor(monitor, [("a.tmpl", "x")])


def test_upper_case_channel_fields_render(renderer, theme) -> None:
    s = theme.surface
    source = "{{ Theme.Surface.R }},{{ Theme.Surface.G }},{{ Theme.Surface.B }},{{ Theme.Surface.A }}"

    assert renderer.render(theme, "DP-1", source) == f"{s.r},{s.g},{s.b},{s.a}"
