"""Color helpers available inside templates as ``toHex``, ``toRgba`` and ``tone``."""


def to_hex(color):
    """``#rrggbb`` in lowercase, alpha dropped."""
    return f"#{color[0]:02x}{color[1]:02x}{color[2]:02x}"


def to_rgba(color, alpha):
    """CSS ``rgba()`` with the alpha string passed through untouched."""
    return f"rgba({color[0]}, {color[1]}, {color[2]}, {alpha})"


def tone(palette, level):
    # Unknown levels give MISSING_TONE instead of failing the render
    return palette.tone(level)


TEMPLATE_HELPERS = {
    "toHex": to_hex,
    "toRgba": to_rgba,
    "tone": tone,
}
