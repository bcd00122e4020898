from __future__ import annotations
from typing import Tuple, Union
from numbers import Real

Scalar = int | float
ChannelTuple = Tuple[int, int, int, int]
RawChannels = Tuple[float, float, float, float]
HSVTuple = Tuple[float, float, float]
HSVATuple = Tuple[float, float, float, int]
OptionalScalar = Union[Scalar, None]


def is_scalar(value: object) -> bool:
    """
    Check whether a value may be used as a scalar operand.

    Any real number qualifies (including numpy scalars), except booleans.
    """
    return isinstance(value, Real) and not isinstance(value, bool)
