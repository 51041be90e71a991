import numpy as np
import pytest

from hsluv_palette.colour_convert import (
    atan2_turns,
    cbrt_positive,
    cbrt_positive_array,
    forward_gamma,
    forward_gamma_array,
    forward_light,
    forward_light_array,
    hsl_to_rgb,
    lch_to_luv,
    linear_rgb_to_xyz,
    luv_to_lch,
    luv_to_xyz,
    reverse_gamma,
    reverse_gamma_array,
    reverse_light,
    reverse_light_array,
    xyz_to_linear_rgb,
    xyz_to_luv,
)
from hsluv_palette.constants import KAPPA


def test_cbrt_positive_matches_real_cube_root():
    for x in (1e-6, 0.001, 0.2, 1.0, 27.0, 1000.0):
        assert cbrt_positive(x) == pytest.approx(x ** (1.0 / 3.0), rel=5e-5)


def test_cbrt_positive_array_matches_scalar():
    xs = np.array([1e-6, 0.001, 0.2, 0.5, 1.0, 27.0])
    out = cbrt_positive_array(xs)
    assert out.shape == xs.shape
    np.testing.assert_allclose(out, [cbrt_positive(float(x)) for x in xs], rtol=1e-6)


def test_gamma_round_trip():
    for c in np.linspace(0.0, 1.0, 41):
        assert reverse_gamma(forward_gamma(float(c))) == pytest.approx(float(c), abs=1e-9)


def test_gamma_arrays_match_scalar():
    cs = np.linspace(0.0, 1.0, 17)
    np.testing.assert_allclose(forward_gamma_array(cs), [forward_gamma(float(c)) for c in cs])
    np.testing.assert_allclose(reverse_gamma_array(cs), [reverse_gamma(float(c)) for c in cs])


def test_light_curve_fixed_points():
    assert forward_light(0.0) == 0.0
    assert forward_light(1.0) == 1.0
    assert reverse_light(1.0) == 1.0
    assert forward_light(0.1) == pytest.approx(0.1)


def test_light_curve_is_nearly_inverted():
    for L in np.linspace(0.0, 1.0, 51):
        assert reverse_light(forward_light(float(L))) == pytest.approx(float(L), abs=2e-3)


def test_light_curve_arrays_match_scalar():
    ls = np.linspace(0.0, 1.0, 33)
    np.testing.assert_allclose(forward_light_array(ls), [forward_light(float(v)) for v in ls])
    np.testing.assert_allclose(reverse_light_array(ls), [reverse_light(float(v)) for v in ls])


def test_atan2_turns_quadrants():
    assert atan2_turns(0.0, 1.0) == 0.0
    assert atan2_turns(1.0, 0.0) == pytest.approx(0.25)
    assert atan2_turns(0.0, -1.0) == pytest.approx(0.5)
    assert atan2_turns(-1.0, 0.0) == pytest.approx(0.75)
    assert 0.0 <= atan2_turns(-1e-300, 1.0) < 1.0


def test_black_luv_is_zero():
    assert xyz_to_luv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert luv_to_xyz(0.0, 0.3, 0.3) == (0.0, 0.0, 0.0)


def test_white_point_has_no_chroma():
    L, U, V = xyz_to_luv(*linear_rgb_to_xyz(1.0, 1.0, 1.0))
    assert L == pytest.approx(1.0, abs=1e-4)
    assert U == pytest.approx(0.0, abs=1e-3)
    assert V == pytest.approx(0.0, abs=1e-3)


def test_dark_luminance_uses_linear_segment():
    L, U, V = xyz_to_luv(*linear_rgb_to_xyz(0.0, 0.0, 0.02))
    assert L == pytest.approx(KAPPA * 0.02 * 0.072175, rel=1e-5)
    assert V < 0.0
    xyz = linear_rgb_to_xyz(0.001, 0.0005, 0.002)
    np.testing.assert_allclose(luv_to_xyz(*xyz_to_luv(*xyz)), xyz, atol=1e-8)


def test_xyz_luv_round_trip():
    xyz = linear_rgb_to_xyz(0.2, 0.5, 0.7)
    back = luv_to_xyz(*xyz_to_luv(*xyz))
    np.testing.assert_allclose(back, xyz, atol=1e-4)


def test_rgb_xyz_round_trip():
    rgb = (0.1, 0.6, 0.9)
    np.testing.assert_allclose(xyz_to_linear_rgb(*linear_rgb_to_xyz(*rgb)), rgb, atol=1e-6)


def test_lch_round_trip():
    L, C, h = luv_to_lch(0.5, -0.2, 0.3)
    assert 0.0 <= h < 1.0
    np.testing.assert_allclose(lch_to_luv(L, C, h), (0.5, -0.2, 0.3), atol=1e-12)


def test_hsl_to_rgb():
    assert hsl_to_rgb(0.0, 1.0, 0.5) == (1.0, 0.0, 0.0)
    np.testing.assert_allclose(hsl_to_rgb(1.0 / 3.0, 1.0, 0.5), (0.0, 1.0, 0.0), atol=1e-12)
    assert hsl_to_rgb(0.7, 0.0, 0.25) == (0.25, 0.25, 0.25)
