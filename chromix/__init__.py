"""Chromix: 8-bit RGBA color values with arithmetic, comparison and HSV conversion."""

from .colors import (
    Color,
    default,
    add,
    sub,
    mul,
    div,
    equals,
    less_than,
    less_or_equal,
    greater_than,
    greater_or_equal,
    format_color,
)
from .conversions import (
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    color_to_hsv,
    hsv_to_color,
    rgb_to_hsv,
    hsv_to_rgb,
)
from .errors import ColorError, InvalidOperand, InvalidArgument

__version__ = "0.1.0"

__all__ = [
    # color value
    "Color",
    "default",
    # arithmetic and comparison
    "add",
    "sub",
    "mul",
    "div",
    "equals",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    "format_color",
    # conversions
    "unit_rgb_to_hsv",
    "np_unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "color_to_hsv",
    "hsv_to_color",
    "rgb_to_hsv",
    "hsv_to_rgb",
    # errors
    "ColorError",
    "InvalidOperand",
    "InvalidArgument",
]
