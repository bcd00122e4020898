import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from ..types.channel_types import HUE_SECTOR_WIDTH, NUM_SECTORS


def _sector_channels(sector: int, v: float, p: float, q: float, t: float) -> Tuple[float, float, float]:
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Unit RGB from HSV.

    Input:
        h in degrees (any real; wrapped into one of six 60° sectors)
        s, v ∈ [0, 1]

    Output:
        r, g, b ∈ [0, 1] for in-range input
    """
    if s == 0:
        return v, v, v

    h = h / HUE_SECTOR_WIDTH
    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    return _sector_channels(int(i) % NUM_SECTORS, v, p, q, t)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized unit RGB from HSV.

    Args:
        h: hue in degrees, s, v: [0,1]; array-like or scalar

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    hp = h / HUE_SECTOR_WIDTH
    i = np.floor(hp)
    f = hp - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))
    sector = np.mod(i, NUM_SECTORS).astype(int)

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    achromatic = s == 0
    r = np.where(achromatic, v, r)
    g = np.where(achromatic, v, g)
    b = np.where(achromatic, v, b)

    return np.stack([r, g, b], axis=-1)
