import math

import numpy as np
import pytest

from hsluv_palette.gamut import (
    chroma_limit,
    chroma_limit_array,
    in_gamut,
    in_gamut_channels,
    intersect_length,
    limit_to_gamut,
    limit_to_gamut_channels,
)
from hsluv_palette.packing import WHITE, clamp_hsluv


def test_chroma_limit_vanishes_at_poles():
    for h in np.linspace(0.0, 1.0, 16, endpoint=False):
        assert chroma_limit(float(h), 0.0) == 0.0
        assert chroma_limit(float(h), 1.0) == 0.0
        assert chroma_limit(float(h), 0.9999) < 0.01


def test_chroma_limit_array_vanishes_at_poles():
    hues = np.linspace(0.0, 1.0, 256, endpoint=False)
    assert not chroma_limit_array(hues, 0.0).any()
    assert not chroma_limit_array(hues, 1.0).any()
    near_white = [chroma_limit_array(hues, L).max() for L in (0.99, 0.999, 0.9999)]
    assert near_white == sorted(near_white, reverse=True)
    assert near_white[-1] < 0.01


def test_chroma_limit_bounded_and_finite():
    for h in np.linspace(0.0, 1.0, 24, endpoint=False):
        for L in np.linspace(0.0, 1.0, 21):
            c = chroma_limit(float(h), float(L))
            assert math.isfinite(c)
            assert 0.0 <= c <= 1.85


def test_chroma_limit_hue_wraps():
    assert chroma_limit(1.3, 0.5) == pytest.approx(chroma_limit(0.3, 0.5))
    assert chroma_limit(-0.25, 0.5) == pytest.approx(chroma_limit(0.75, 0.5))


def test_chroma_limit_array_matches_scalar():
    hues = np.linspace(0.0, 1.0, 12, endpoint=False)
    for L in (0.0, 0.05, 0.3, 0.5, 0.8, 1.0):
        expected = [chroma_limit(float(h), L) for h in hues]
        np.testing.assert_allclose(chroma_limit_array(hues, L), expected, rtol=1e-9, atol=1e-12)


def test_chroma_limit_array_broadcasts():
    hues = np.array([[0.1], [0.6]])
    lights = np.array([0.2, 0.5, 0.7])
    out = chroma_limit_array(hues, lights)
    assert out.shape == (2, 3)
    assert out[1, 2] == pytest.approx(chroma_limit(0.6, 0.7))


def test_intersect_length_parallel_ray_is_unbounded():
    assert intersect_length(0.0, 1.0, 0.0, 1.0) == math.inf
    assert intersect_length(1.0, 0.0, 0.5, 2.0) == 2.0


def test_gamut_queries():
    assert in_gamut(WHITE)
    assert in_gamut(0xFEFFFFFF)
    assert limit_to_gamut(0x12345678) == 0x12345678
    assert in_gamut_channels(5.0, 0.5, 0.5)
    assert not in_gamut_channels(0.0, 1.5, 0.5)
    assert not in_gamut_channels(0.0, 0.5, -0.1)
    assert limit_to_gamut_channels(1.25, 2.0, -1.0, 1.0) == clamp_hsluv(1.25, 2.0, -1.0, 1.0)
