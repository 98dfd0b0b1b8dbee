"""RGB <-> HCT (hue, chroma, tone) conversion through CIE XYZ and CIE Lab."""

import math
from collections import namedtuple

import numpy as np

# sRGB -> XYZ, D65 reference white
SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)
D65_WHITE = np.array([0.95047, 1.0, 1.08883])

LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787
LAB_OFFSET = 16 / 116

# Absorbs float noise so an encoded 1.0 scales to 255, not 254
SCALE_EPSILON = 1e-3


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


class RGBColor(namedtuple("RGBColor", ["r", "g", "b", "a"], defaults=(255,))):
    """An 8-bit sRGB color with optional alpha."""

    __slots__ = ()

    @property
    def rgb(self):
        return (self.r, self.g, self.b)

    @property
    def hex(self):
        return rgb_to_hex(self.r, self.g, self.b)

    @property
    def luminance(self):
        return relative_luminance(self.r, self.g, self.b)

    # Upper-case channel names, as used by templates written for the Go tool
    @property
    def R(self):
        return self.r

    @property
    def G(self):
        return self.g

    @property
    def B(self):
        return self.b

    @property
    def A(self):
        return self.a


HCT = namedtuple("HCT", ["hue", "chroma", "tone"])


def create_color(r, g, b, a=255):
    """Create an RGBColor with every channel clamped to 0-255"""
    r, g, b, a = (max(0, min(255, int(v))) for v in (r, g, b, a))
    return RGBColor(r, g, b, a)


def _linearize(channels):
    return np.where(
        channels <= 0.04045,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )


def _delinearize(channels):
    channels = np.clip(channels, 0.0, 1.0)
    encoded = np.where(
        channels <= 0.0031308,
        channels * 12.92,
        1.055 * channels ** (1 / 2.4) - 0.055,
    )
    return np.where(channels >= 1.0, 1.0, encoded)


def _lab_f(t):
    return np.where(t > LAB_EPSILON, np.cbrt(t), LAB_KAPPA * t + LAB_OFFSET)


def _lab_f_inverse(f):
    cubed = f**3
    return np.where(cubed > LAB_EPSILON, cubed, (f - LAB_OFFSET) / LAB_KAPPA)


def rgb_to_lab(color):
    """Convert an RGBColor (or any r, g, b sequence) to CIE Lab."""
    r, g, b = color[:3]
    linear = _linearize(np.array([r, g, b], dtype=float) / 255.0)
    xyz = SRGB_TO_XYZ @ linear
    fx, fy, fz = _lab_f(xyz / D65_WHITE)
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def lab_to_rgb(l_star, a_star, b_star, alpha=255):
    """Convert CIE Lab back to an RGBColor, clamping out-of-gamut channels."""
    fy = (l_star + 16) / 116
    fx = a_star / 500 + fy
    fz = fy - b_star / 200
    xyz = _lab_f_inverse(np.array([fx, fy, fz])) * D65_WHITE
    srgb = _delinearize(XYZ_TO_SRGB @ xyz)
    # Truncate rather than round so existing themes keep identical values
    r, g, b = (int(v * 255 + SCALE_EPSILON) for v in np.clip(srgb, 0.0, 1.0))
    return RGBColor(r, g, b, alpha)


def rgb_to_hct(color):
    """Convert an RGBColor to HCT (hue degrees, chroma, tone = L*)."""
    l_star, a_star, b_star = rgb_to_lab(color)
    chroma = math.hypot(a_star, b_star)
    hue = math.degrees(math.atan2(b_star, a_star)) % 360.0
    if hue >= 360.0:
        hue = 0.0
    return HCT(hue=hue, chroma=chroma, tone=float(l_star))


def hct_to_rgb(hct, alpha=255):
    """Convert HCT back to an RGBColor; lossy at the gamut edges."""
    hue_rad = math.radians(hct.hue)
    a_star = hct.chroma * math.cos(hue_rad)
    b_star = hct.chroma * math.sin(hue_rad)
    return lab_to_rgb(hct.tone, a_star, b_star, alpha=alpha)


def hue_distance(hue1, hue2):
    """Circular distance between two hues, in [0, 180]"""
    diff = abs(hue1 - hue2) % 360.0
    return min(diff, 360.0 - diff)
