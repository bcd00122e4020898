import numpy as np
import pytest

from chromix.conversions import unit_rgb_to_hsv, np_unit_rgb_to_hsv, color_to_hsv, rgb_to_hsv
from chromix import Color
from ..samples import samples_rgb_hsv, samples_color_hsv


def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert h_out == pytest.approx(h_exp, abs=1e-9)
        assert s_out == pytest.approx(s_exp, abs=1e-9)
        assert v_out == pytest.approx(v_exp, abs=1e-9)


def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert hsv.shape == expected.shape
    assert np.allclose(hsv, expected, atol=1e-9)


def test_negative_hue_wraps():
    h, s, v = unit_rgb_to_hsv(1.0, 0.0, 0.5)
    assert h == pytest.approx(330.0)
    assert 0 <= h < 360


def test_black_short_circuit():
    assert color_to_hsv(Color(0, 0, 0, 0)) == (0, 0, 0, 0)
    assert unit_rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_achromatic_hue_is_zero():
    h, s, v, a = Color(128, 128, 128).to_hsv()
    assert (h, s) == (0.0, 0.0)
    assert v == pytest.approx(128 / 255)
    assert a == 255


def test_color_to_hsv_samples():
    for (r, g, b, a), (h_exp, s_exp, v_exp, a_exp) in samples_color_hsv.items():
        h, s, v, alpha = Color(r, g, b, a).to_hsv()

        assert h == pytest.approx(h_exp, abs=1e-9)
        assert s == pytest.approx(s_exp, abs=1e-9)
        assert v == pytest.approx(v_exp, abs=1e-9)
        assert alpha == a_exp
        assert isinstance(alpha, int)


def test_alpha_is_not_scaled():
    assert color_to_hsv(Color(10, 20, 30, 77))[3] == 77


def test_rgb_to_hsv_free_function():
    assert rgb_to_hsv(255, 0, 0) == (0.0, 1.0, 1.0, 255)
    assert rgb_to_hsv() == (0.0, 0.0, 1.0, 255)
    h, s, v, a = rgb_to_hsv(0, 0, 255, 12)
    assert (h, s, v, a) == (240.0, 1.0, 1.0, 12)


def test_hsv_ranges_over_grid():
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                h, s, v, _ = Color(r, g, b).to_hsv()
                assert 0 <= h < 360
                assert 0 <= s <= 1
                assert 0 <= v <= 1
