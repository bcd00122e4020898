from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from ..errors import InvalidOperand
from ..types.channel_types import NUM_CHANNELS
from ..types.color_types import RawChannels, Scalar, is_scalar
from ..utils import to_float
from .color import Color


@dataclass(frozen=True)
class ColorOperand:
    color: Color

    def channels(self) -> RawChannels:
        return tuple(float(c) for c in self.color.value)  # type: ignore[return-value]


@dataclass(frozen=True)
class ScalarOperand:
    scalar: Scalar

    def channels(self) -> RawChannels:
        return (to_float(self.scalar),) * NUM_CHANNELS  # type: ignore[return-value]


Operand = Union[ColorOperand, ScalarOperand]


def as_operand(value: object, operation: str) -> Operand:
    """
    Tag an arithmetic operand.

    A Color yields its own channels; a real number stands for a color with
    all four channels equal to it. Anything else raises InvalidOperand.
    """
    if isinstance(value, Color):
        return ColorOperand(value)
    if is_scalar(value):
        return ScalarOperand(value)  # type: ignore[arg-type]
    raise InvalidOperand(operation, value)
