from __future__ import annotations
from typing import TYPE_CHECKING

from ..types.channel_types import CHANNEL_MAX
from ..types.color_types import ChannelTuple, HSVATuple, OptionalScalar, Scalar
from .to_hsv import unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb

if TYPE_CHECKING:
    from ..colors.color import Color


def color_to_hsv(color: Color) -> HSVATuple:
    """
    Convert a Color to ``(h, s, v, a)``.

    r, g and b are scaled to [0, 1] before conversion; alpha passes through
    as the 8-bit integer channel.
    """
    h, s, v = unit_rgb_to_hsv(
        color.r / CHANNEL_MAX,
        color.g / CHANNEL_MAX,
        color.b / CHANNEL_MAX,
    )
    return h, s, v, color.a


def hsv_to_color(h: Scalar, s: Scalar, v: Scalar, a: OptionalScalar = None) -> Color:
    """Build a Color from HSV; an omitted alpha defaults to 255."""
    from ..colors.color import Color  # local import to avoid cycles

    r, g, b = hsv_to_unit_rgb(h, s, v)
    return Color(r * CHANNEL_MAX, g * CHANNEL_MAX, b * CHANNEL_MAX, a)


def rgb_to_hsv(
    r: OptionalScalar = None,
    g: OptionalScalar = None,
    b: OptionalScalar = None,
    a: OptionalScalar = None,
) -> HSVATuple:
    """HSV of the Color built from these channels (omitted channels are 255)."""
    from ..colors.color import Color  # local import to avoid cycles

    return color_to_hsv(Color(r, g, b, a))


def hsv_to_rgb(h: Scalar, s: Scalar, v: Scalar, a: OptionalScalar = None) -> ChannelTuple:
    """Normalized ``(r, g, b, a)`` channels for an HSV color."""
    return hsv_to_color(h, s, v, a).value
