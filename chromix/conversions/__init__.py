"""
Chromix HSV Conversions
=======================

RGB ↔ HSV conversion in two layers.

Unit-space math (no Color involved):
    unit_rgb_to_hsv(r, g, b) -> (h, s, v)
    hsv_to_unit_rgb(h, s, v) -> (r, g, b)
    np_unit_rgb_to_hsv(r, g, b) -> ndarray (..., 3)
    np_hsv_to_unit_rgb(h, s, v) -> ndarray (..., 3)

Color wrappers (8-bit channels):
    color_to_hsv(color) -> (h, s, v, a)
    hsv_to_color(h, s, v, a=None) -> Color
    rgb_to_hsv(r, g, b, a) -> (h, s, v, a)
    hsv_to_rgb(h, s, v, a) -> (r, g, b, a)

Hue is in degrees, [0, 360); saturation and value are in [0, 1]; alpha
stays an 8-bit integer and is never scaled.

Examples
--------
>>> from chromix.conversions import rgb_to_hsv, hsv_to_rgb
>>> rgb_to_hsv(255, 0, 0)
(0.0, 1.0, 1.0, 255)
>>> hsv_to_rgb(120, 1, 1)
(0, 255, 0, 255)
"""

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .wrapper import color_to_hsv, hsv_to_color, rgb_to_hsv, hsv_to_rgb

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'color_to_hsv',
    'hsv_to_color',
    'rgb_to_hsv',
    'hsv_to_rgb',
]
