import colorsys
import math
from collections import namedtuple

import numpy as np
from PIL import ImageColor

Color = namedtuple("Color", ["hex", "rgb", "luminance"])


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def _to_8bit(c):
    """Scale a 0-1 channel to 0-255, rounding halves up."""
    return int(math.floor(c * 255 + 0.5))


def hsv_to_rgb(h, s, v):
    """Convert HSV (0-360, 0-1, 0-1) to rounded 8-bit RGB."""
    r, g, b = colorsys.hsv_to_rgb(h / 360, s, v)
    return tuple(_to_8bit(c) for c in (r, g, b))


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


def create_color(r, g, b):
    """Create a Color namedtuple with all representations"""
    r, g, b = int(r), int(g), int(b)
    r, g, b = max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b))
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        luminance=relative_luminance(r, g, b),
    )


def color_from_hex(hex_color):
    """Create a Color from a '#rrggbb' string"""
    return create_color(*hex_to_rgb(hex_color))


def named_color(name):
    """Create a Color from a CSS color keyword such as 'dodgerblue'."""
    r, g, b = ImageColor.getrgb(name)[:3]
    return create_color(r, g, b)


def with_hsv(color, saturation=None, value=None):
    """Keep a color's hue but replace its HSV saturation and/or value.

    Args:
        color: Source Color
        saturation: New saturation (0.0-1.0), or None to keep the current one
        value: New value (0.0-1.0), or None to keep the current one

    Returns:
        Color with the same hue
    """
    r, g, b = (c / 255 for c in color.rgb)
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    if saturation is not None:
        s = saturation
    if value is not None:
        v = value
    return create_color(*hsv_to_rgb(h * 360, s, v))


def _to_linear(rgb):
    c = np.asarray(rgb, dtype=np.float64) / 255.0
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def _from_linear(linear):
    # Out-of-range channels saturate at black/white
    linear = np.clip(linear, 0.0, 1.0)
    c = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1 / 2.4) - 0.055,
    )
    # Halves round up, not to even
    r, g, b = (int(v) for v in np.floor(c * 255.0 + 0.5))
    return create_color(r, g, b)


def lighten(color, factor):
    """Move a color toward white in linear light.

    factor=0 returns the color unchanged, factor=1 returns white. Negative
    factors scale the channels down instead.
    """
    linear = _to_linear(color.rgb)
    headroom = 1.0 - linear if factor >= 0 else linear
    return _from_linear(linear + np.maximum(headroom, 0.0) * factor)


def darken(color, factor):
    """Move a color toward black in linear light.

    factor=0 returns the color unchanged, factor=1 returns black. Negative
    factors push the channels toward white instead.
    """
    linear = _to_linear(color.rgb)
    headroom = linear if factor >= 0 else 1.0 - linear
    return _from_linear(linear - np.maximum(headroom, 0.0) * factor)
