"""Tests for the tone curves."""

import numpy as np
import pytest

from ripplefield.core.params import ToneCurve
from ripplefield.core.tonemap import TONE_CURVES, aces, apply_tone_curve


@pytest.fixture
def hdr_colors():
    values = np.linspace(-1.0, 100.0, 300)
    return np.stack([values, values[::-1], np.roll(values, 50)], axis=-1)


class TestToneCurves:
    @pytest.mark.parametrize("curve", list(ToneCurve))
    def test_output_in_unit_range(self, curve, hdr_colors):
        out = apply_tone_curve(hdr_colors, curve)
        assert out.shape == hdr_colors.shape
        assert out.min() >= 0.0
        assert out.max() <= 1.0

    @pytest.mark.parametrize("curve", list(ToneCurve))
    def test_black_stays_black(self, curve):
        out = apply_tone_curve(np.zeros(3), curve)
        np.testing.assert_allclose(out, 0.0, atol=1e-9)

    def test_every_curve_registered(self):
        assert set(TONE_CURVES) == set(ToneCurve)

    def test_unknown_curve_uses_aces(self, hdr_colors):
        np.testing.assert_array_equal(apply_tone_curve(hdr_colors, 99), aces(hdr_colors))

    def test_aces_monotonic(self):
        x = np.linspace(0.0, 5.0, 500)
        assert np.all(np.diff(aces(x)) >= 0.0)

    def test_warm_film_warms(self):
        gray = np.full(3, 0.4)
        out = apply_tone_curve(gray, ToneCurve.WARM_FILM)
        assert out[0] > out[2]

    def test_cool_film_cools(self):
        gray = np.full(3, 0.4)
        out = apply_tone_curve(gray, ToneCurve.COOL_FILM)
        assert out[2] > out[0]
