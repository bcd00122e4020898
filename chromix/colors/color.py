from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Sequence
import numpy as np

from ..errors import InvalidArgument
from ..types.channel_types import CHANNEL_NAMES, NUM_CHANNELS
from ..types.color_types import ChannelTuple, HSVATuple, Scalar, OptionalScalar
from ..utils import channel_or_default, normalize_channel, to_float


def _coerce(value: Any, name: str) -> float:
    try:
        return to_float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(
            f"Channel {name!r} expects a real number, got {value!r} "
            f"(a {type(value).__name__} value)"
        ) from exc


def _channel(value: OptionalScalar, name: str) -> int:
    raw = channel_or_default(value)
    return normalize_channel(_coerce(raw, name))


class Color:
    """
    An 8-bit RGBA color value.

    Every channel is an integer in ``[0, 255]``. Channels omitted at
    construction default to 255, so ``Color()`` is opaque white and
    ``Color(0)`` is ``(0, 255, 255, 255)``.

    Arithmetic operators always return a new Color. The per-channel
    mutators (``set_r``, ``add_g``, ``div_a``, ...) modify the receiver
    in place and return it for chaining.
    """
    __slots__ = ('_r', '_g', '_b', '_a')

    num_channels: ClassVar[int] = NUM_CHANNELS

    # Bound in chromix.colors.mutators
    set_r: Callable[..., Color]
    set_g: Callable[..., Color]
    set_b: Callable[..., Color]
    set_a: Callable[..., Color]
    set_alpha: Callable[..., Color]
    add_r: Callable[..., Color]
    add_g: Callable[..., Color]
    add_b: Callable[..., Color]
    add_a: Callable[..., Color]
    sub_r: Callable[..., Color]
    sub_g: Callable[..., Color]
    sub_b: Callable[..., Color]
    sub_a: Callable[..., Color]
    mul_r: Callable[..., Color]
    mul_g: Callable[..., Color]
    mul_b: Callable[..., Color]
    mul_a: Callable[..., Color]
    div_r: Callable[..., Color]
    div_g: Callable[..., Color]
    div_b: Callable[..., Color]
    div_a: Callable[..., Color]

    def __init__(
        self,
        r: OptionalScalar = None,
        g: OptionalScalar = None,
        b: OptionalScalar = None,
        a: OptionalScalar = None,
    ) -> None:
        self._r = _channel(r, "r")
        self._g = _channel(g, "g")
        self._b = _channel(b, "b")
        self._a = _channel(a, "a")

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_value(cls, value: Any) -> Color:
        """
        Wrap a foreign color representation.

        Accepts another Color (copied), any object exposing ``r``, ``g``,
        ``b`` (and optionally ``a``) attributes, or a sequence/array of
        three or four channel values.
        """
        if isinstance(value, Color):
            return value.copy()
        if all(hasattr(value, name) for name in CHANNEL_NAMES[:3]):
            return cls(value.r, value.g, value.b, getattr(value, "a", None))
        if isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, (str, bytes)):
            channels = list(value)
            if len(channels) not in (3, 4):
                raise InvalidArgument(
                    f"Color expects 3 or 4 channels, got {len(channels)}"
                )
            return cls(*channels)
        raise InvalidArgument(
            f"Cannot build a Color from {value!r} (a {type(value).__name__} value)"
        )

    @classmethod
    def from_hsv(cls, h: Scalar, s: Scalar, v: Scalar, a: OptionalScalar = None) -> Color:
        """Build a Color from hue in degrees, unit saturation and value, and an 8-bit alpha."""
        from ..conversions.wrapper import hsv_to_color  # local import to avoid cycles
        return hsv_to_color(h, s, v, a)

    def copy(self) -> Color:
        """Return an independent duplicate."""
        return self.__class__(self._r, self._g, self._b, self._a)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Color:
        return self.copy()

    def with_alpha(self, a: OptionalScalar = None) -> Color:
        """Return a new Color with these r, g, b channels and alpha ``a``."""
        return self.__class__(self._r, self._g, self._b, a)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    @property
    def a(self) -> int:
        return self._a

    @property
    def value(self) -> ChannelTuple:
        return (self._r, self._g, self._b, self._a)

    def to_array(self) -> np.ndarray:
        """Return the channels as a ``uint8`` array of shape ``(4,)``."""
        return np.array(self.value, dtype=np.uint8)

    def __iter__(self) -> Iterator[int]:
        return iter(self.value)

    def __len__(self) -> int:
        return self.num_channels

    # ------------------ CONVERSION ------------------
    def to_hsv(self) -> HSVATuple:
        """Return ``(h, s, v, a)``: hue in ``[0, 360)``, unit s and v, 8-bit alpha."""
        from ..conversions.wrapper import color_to_hsv  # local import to avoid cycles
        return color_to_hsv(self)

    # ------------------ REPRESENTATION ------------------
    def __str__(self) -> str:
        from .formatting import format_color
        return format_color(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(r={self._r}, g={self._g}, b={self._b}, a={self._a})"

    # Mutable value: equality is by channels, so instances are unhashable.
    __hash__ = None  # type: ignore[assignment]


def default() -> Color:
    """Return a fresh default Color (opaque white)."""
    return Color()
