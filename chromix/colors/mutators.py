"""
In-place per-channel mutators.

Unlike the arithmetic operators, these modify the receiving Color and
return that same instance so calls can be chained::

    >>> c = Color(10, 20, 30)
    >>> c.add_r(5).mul_g(2).set_a(128) is c
    True

``set_*`` accept any real number. ``add_*``, ``sub_*``, ``mul_*`` and
``div_*`` accept non-negative magnitudes only and raise InvalidArgument
otherwise. Every result is clamped to ``[0, 255]`` and rounded.
"""
import math
import operator
from typing import Callable

from ..errors import InvalidArgument
from ..types.channel_types import CHANNEL_NAMES
from ..types.color_types import is_scalar
from ..utils import normalize_channel, to_float
from .color import Color, _channel


def _check_magnitude(value: object, method: str) -> float:
    if not is_scalar(value):
        raise InvalidArgument(
            f"{method}() expects a non-negative number, got {value!r} "
            f"(a {type(value).__name__} value)"
        )
    value = to_float(value)
    if math.isnan(value) or value < 0:
        raise InvalidArgument(f"{method}() expects a non-negative number, got {value!r}")
    return value


def _divide(current: float, divisor: float) -> float:
    return 0.0 if divisor == 0 else current / divisor


def _setter(channel: str):
    slot = f"_{channel}"

    def setter(self: Color, value) -> Color:
        setattr(self, slot, _channel(value, channel))
        return self

    setter.__name__ = f"set_{channel}"
    setter.__doc__ = f"Set the {channel} channel in place and return self."
    return setter


def _mutator(channel: str, prefix: str, op: Callable[[float, float], float]):
    slot = f"_{channel}"
    name = f"{prefix}_{channel}"

    def mutator(self: Color, value) -> Color:
        magnitude = _check_magnitude(value, name)
        setattr(self, slot, normalize_channel(op(getattr(self, slot), magnitude)))
        return self

    mutator.__name__ = name
    mutator.__doc__ = f"Apply {prefix} to the {channel} channel in place and return self."
    return mutator


_OPERATIONS = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": _divide,
}

for _name in CHANNEL_NAMES:
    setattr(Color, f"set_{_name}", _setter(_name))
    for _prefix, _op in _OPERATIONS.items():
        setattr(Color, f"{_prefix}_{_name}", _mutator(_name, _prefix, _op))

Color.set_alpha = Color.set_a
