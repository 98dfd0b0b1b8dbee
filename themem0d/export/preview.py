import html as html_lib

from ..palette.theme import DERIVED_TONES

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Theme Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            background: #111111;
            color: #e0e0e0;
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 10px; font-weight: 400; }
        h2 {
            margin: 30px 0 15px 0;
            font-weight: 400;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
        }
        .monitor {
            border-radius: 12px;
            padding: 25px;
            margin-top: 30px;
        }
        .monitor-path { font-size: 12px; opacity: 0.7; margin-bottom: 20px; }
        .tone-row {
            display: grid;
            grid-template-columns: 110px repeat(13, 1fr);
            gap: 6px;
            margin-bottom: 6px;
        }
        .tone-label { font-size: 12px; align-self: center; }
        .tone {
            height: 48px;
            border-radius: 6px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 10px;
        }
        .palette-section {
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
        }
        .color-card {
            width: 160px;
            border-radius: 8px;
            overflow: hidden;
        }
        .color-swatch {
            height: 64px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 14px;
        }
        .color-info { padding: 10px; font-size: 11px; }
        .color-name { font-weight: 600; margin-bottom: 4px; }
        .color-hex { opacity: 0.7; }
        .sample-text { margin: 8px 0; }
    </style>
</head>
<body>
    <h1>ThemeM0d Preview</h1>
    {monitors}
</body>
</html>"""


def _text_color(color):
    return "#ffffff" if color.luminance < 0.5 else "#000000"


def make_tone_row(name, palette):
    cells = [f'<div class="tone-label">{name}</div>']
    for level, color in palette:
        cells.append(
            f'<div class="tone" style="background: {color.hex}; color: {_text_color(color)}" '
            f'title="{name} {level}: {color.hex}">{level}</div>'
        )
    return f'<div class="tone-row">{"".join(cells)}</div>'


def make_card(name, color):
    return f"""<div class="color-card" style="background: {color.hex}">
            <div class="color-swatch" style="color: {_text_color(color)}">Aa</div>
            <div class="color-info" style="color: {_text_color(color)}">
                <div class="color-name">{name}</div>
                <div class="color-hex">{color.hex}</div>
            </div>
        </div>"""


def make_monitor_section(monitor, theme, wallpaper=""):
    rows = "\n".join(make_tone_row(name, palette) for name, palette in theme.palettes.items())
    cards = "\n".join(make_card(name, theme.derived(name)) for name in DERIVED_TONES)
    return f"""<div class="monitor" style="background: {theme.surface.hex}; color: {theme.on_surface.hex}">
        <h2>{html_lib.escape(monitor)}</h2>
        <div class="monitor-path">{html_lib.escape(wallpaper)}</div>
        {rows}
        <h2>Surfaces</h2>
        <div class="palette-section">
            {cards}
        </div>
        <div style="background: {theme.surface_variant.hex}; padding: 20px; border-radius: 8px; margin-top: 20px">
            <p class="sample-text" style="color: {theme.on_surface.hex}">On surface text</p>
            <p class="sample-text" style="color: {theme.on_surface_variant.hex}">On surface variant text</p>
            <p class="sample-text" style="color: {theme.primary.tone(80).hex}">Primary accent</p>
            <p class="sample-text" style="color: {theme.secondary.tone(80).hex}">Secondary accent</p>
            <p class="sample-text" style="color: {theme.tertiary.tone(80).hex}">Tertiary accent</p>
        </div>
    </div>"""


def create_html_preview(entries, output_path):
    """Create an HTML preview of one or more monitor themes

    Args:
        entries: Iterable of (monitor, ClassifiedTheme, wallpaper_path)
        output_path: Destination HTML file
    """
    sections = "\n".join(
        make_monitor_section(monitor, theme, wallpaper) for monitor, theme, wallpaper in entries
    )
    html = PAGE_TEMPLATE.replace("{monitors}", sections)

    with open(output_path, "w") as f:
        f.write(html)
