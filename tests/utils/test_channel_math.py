import math
import pytest
from chromix.utils import to_float, clamp_channel, round_half_up, normalize_channel, channel_or_default


def test_clamp_channel():
    assert clamp_channel(-1) == 0
    assert clamp_channel(300) == 255
    assert clamp_channel(12.3) == 12.3
    assert clamp_channel(0) == 0
    assert clamp_channel(255) == 255


def test_clamp_channel_infinities():
    assert clamp_channel(math.inf) == 255
    assert clamp_channel(-math.inf) == 0


@pytest.mark.parametrize("raw, expected", [
    (0.5, 1),
    (1.49, 1),
    (2.5, 3),
    (127.5, 128),
    (254.5, 255),
    (3.0, 3),
])
def test_round_half_up(raw, expected):
    result = round_half_up(raw)
    assert result == expected
    assert isinstance(result, int)


def test_normalize_channel():
    assert normalize_channel(-0.4) == 0
    assert normalize_channel(255.4) == 255
    assert normalize_channel(300.7) == 255
    assert normalize_channel(99.5) == 100
    assert isinstance(normalize_channel(10.2), int)


def test_normalize_channel_is_idempotent():
    for raw in (-10, 0.49, 12.5, 254.6, 1e9):
        once = normalize_channel(raw)
        assert normalize_channel(once) == once


def test_to_float_maps_huge_integers_to_infinity():
    assert to_float(10**400) == math.inf
    assert to_float(-10**400) == -math.inf
    assert to_float(3) == 3.0
    assert normalize_channel(10**400) == 255
    assert normalize_channel(-10**400) == 0


def test_normalize_channel_nan_warns():
    with pytest.warns(RuntimeWarning):
        assert normalize_channel(float("nan")) == 0


def test_channel_or_default():
    assert channel_or_default(None) == 255
    assert channel_or_default(0) == 0
    assert channel_or_default(12.5) == 12.5
