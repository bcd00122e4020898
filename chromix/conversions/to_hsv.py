import numpy as np
from numpy import ndarray as NDArray
from ..types.channel_types import HUE_360, HUE_SECTOR_WIDTH
from ..types.color_types import HSVTuple


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    HSV from unit RGB.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]

    Pure black short-circuits to (0, 0, 0); achromatic colors get hue 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if max_c == 0:
        return 0.0, 0.0, 0.0

    s = delta / max_c

    if min_c == max_c:
        return 0.0, s, max_c

    if r == max_c:
        h = (g - b) / delta
    elif g == max_c:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h *= HUE_SECTOR_WIDTH
    if h < 0:
        h += HUE_360

    return h, s, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized HSV from unit RGB.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    V = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = V - m

    S = np.zeros_like(V)
    mask = V > 0
    S[mask] = delta[mask] / V[mask]

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    h = np.where(
        r == V,
        (g - b) / safe_delta,
        np.where(g == V, 2 + (b - r) / safe_delta, 4 + (r - g) / safe_delta),
    )
    h = np.where(chromatic, h * HUE_SECTOR_WIDTH, 0.0)
    h = np.where(h < 0, h + HUE_360, h)

    return np.stack([h, S, V], axis=-1)
