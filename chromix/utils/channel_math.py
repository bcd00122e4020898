import math
import warnings
from boundednumbers import clamp
from ..types.channel_types import CHANNEL_MIN, CHANNEL_MAX


def to_float(x) -> float:
    """
    Convert a real number to float.

    An integer too large for a float becomes an infinity of the same sign,
    which the channel clamp then maps to 0 or 255.
    """
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf


def clamp_channel(x: float) -> float:
    """Restrict ``x`` to the inclusive channel range ``[0, 255]``."""
    return float(clamp(to_float(x), float(CHANNEL_MIN), float(CHANNEL_MAX)))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties upward (``floor(x + 0.5)``)."""
    return int(math.floor(x + 0.5))


def normalize_channel(x: float) -> int:
    """
    Finalize a raw channel value: ``round_half_up(clamp_channel(x))``.

    NaN has no position in the channel range; it is coerced to 0 with a
    RuntimeWarning so that normalization never fails.
    """
    x = to_float(x)
    if math.isnan(x):
        warnings.warn("NaN channel value coerced to 0", RuntimeWarning, stacklevel=3)
        return CHANNEL_MIN
    return round_half_up(clamp_channel(x))
