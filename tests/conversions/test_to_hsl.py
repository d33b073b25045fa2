from huelerp.conversions import rgb_to_hsl, unit_rgb_to_hsl, np_rgb_to_hsl, np_unit_rgb_to_hsl
from ..samples import samples_rgb_hsl
import numpy as np
import pytest


def test_rgb_to_hsl():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl(rgb)
        assert h == pytest.approx(h_exp, abs=1e-9)
        assert s == pytest.approx(s_exp, abs=1e-9)
        assert l == pytest.approx(l_exp, abs=1e-9)


def test_primary_colors_are_exact():
    assert rgb_to_hsl((255, 0, 0)) == (0.0, 100.0, 50.0)
    assert rgb_to_hsl((0, 0, 0)) == (0.0, 0.0, 0.0)
    assert rgb_to_hsl((255, 255, 255)) == (0.0, 0.0, 100.0)


def test_achromatic():
    for v in range(256):
        h, s, l = rgb_to_hsl((v, v, v))
        assert h == 0
        assert s == 0
        assert l == v / 255 * 100


def test_red_wins_ties_for_max():
    # red and green tie; the red branch is taken
    h, s, l = unit_rgb_to_hsl(1.0, 1.0, 0.0)
    assert h == pytest.approx(60.0)
    # red and blue tie; green < blue adds a full turn
    h, s, l = unit_rgb_to_hsl(1.0, 0.0, 1.0)
    assert h == pytest.approx(300.0)


def test_saturation_branch_on_lightness():
    # l > 0.5 uses range / (2 - max - min)
    h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.5)
    assert l == pytest.approx(0.75)
    assert s == pytest.approx(0.5 / 0.5)
    # l <= 0.5 uses range / (max + min)
    h, s, l = unit_rgb_to_hsl(0.5, 0.0, 0.0)
    assert l == pytest.approx(0.25)
    assert s == pytest.approx(1.0)


def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgb_to_hsl(the_matrix)
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=1e-9)


def test_numpy_matches_scalar():
    rng = np.random.default_rng(7)
    colors = rng.integers(0, 256, size=(500, 3))
    result = np_rgb_to_hsl(colors)
    expected = np.array([rgb_to_hsl(tuple(int(c) for c in row)) for row in colors])
    assert np.allclose(result, expected, atol=1e-9)


def test_np_unit_rgb_to_hsl_achromatic_has_no_nan():
    hsl = np_unit_rgb_to_hsl(np.array([0.0, 1.0, 0.5]), np.array([0.0, 1.0, 0.5]), np.array([0.0, 1.0, 0.5]))
    assert not np.isnan(hsl).any()
    assert np.array_equal(hsl[:, 0], [0.0, 0.0, 0.0])
    assert np.array_equal(hsl[:, 1], [0.0, 0.0, 0.0])
