"""Tests for the single-slot effect chain."""

import numpy as np
import pytest

from ripplefield.core.effects import (
    BLOOM_LUMA,
    BLOOM_THRESHOLD,
    apply_effect,
    bloom,
    chromatic_aberration,
    compute_bloom,
    film_noise,
)
from ripplefield.core.params import FilmEffect, ParameterSet, ToneCurve
from ripplefield.core.tonemap import apply_tone_curve


@pytest.fixture
def uv():
    return np.meshgrid(np.linspace(0, 1, 24), np.linspace(0, 1, 16))


@pytest.fixture
def color(uv):
    u, v = uv
    return np.stack([u, v, 1.0 - u], axis=-1)


class TestBloom:
    def test_dark_colors_unchanged(self):
        dark = np.random.rand(100, 3) * 0.15
        assert np.all(dark @ BLOOM_LUMA < BLOOM_THRESHOLD)
        np.testing.assert_array_equal(compute_bloom(dark), dark)

    def test_bright_colors_brightened(self):
        bright = np.full((4, 3), 0.8)
        assert np.all(compute_bloom(bright) > bright)

    def test_zero_intensity_is_identity(self, color):
        np.testing.assert_allclose(bloom(color, 0.0), color)


class TestFilmNoise:
    def test_intensity_capped(self, color, uv):
        u, v = uv
        capped = film_noise(color, u, v, 1.0, 1.0, 0.2)
        over = film_noise(color, u, v, 1.0, 1.0, 5.0)
        np.testing.assert_array_equal(capped, over)

    def test_grain_holds_for_a_film_frame(self, color, uv):
        u, v = uv
        a = film_noise(color, u, v, 0.0, 1.0, 0.1)
        b = film_noise(color, u, v, 0.01, 1.0, 0.1)
        np.testing.assert_array_equal(a, b)

    def test_grain_uses_real_time(self, color, uv):
        # Same real time at different wave speeds gives the same grain
        u, v = uv
        a = film_noise(color, u, v, 0.5, 1.0, 0.1)
        b = film_noise(color, u, v, 1.0, 2.0, 0.1)
        np.testing.assert_allclose(a, b)

    def test_grain_bounded(self, color, uv):
        u, v = uv
        out = film_noise(color, u, v, 3.0, 1.0, 0.2)
        assert np.max(np.abs(out - color)) <= 0.2 * 0.5 * 1.2 + 1e-9


class TestChromaticAberration:
    def test_scales_red_and_blue(self, color):
        out = chromatic_aberration(color, 0.01)
        np.testing.assert_allclose(out[..., 0], color[..., 0] * 0.95)
        np.testing.assert_allclose(out[..., 2], color[..., 2] * 0.95)
        np.testing.assert_array_equal(out[..., 1], color[..., 1])

    def test_input_not_modified(self, color):
        before = color.copy()
        chromatic_aberration(color, 0.02)
        np.testing.assert_array_equal(color, before)


class TestApplyEffect:
    @pytest.mark.parametrize("effect", [
        FilmEffect.NONE, FilmEffect.LENS_DISTORTION, FilmEffect.PIXELATION, 10, 42, -1,
    ])
    def test_passthrough(self, effect, color, uv):
        u, v = uv
        params = ParameterSet(film_effect=effect, lens_distortion=1.0, pixelation_size=8.0)
        np.testing.assert_array_equal(apply_effect(color, u, v, 1.0, params), color)

    @pytest.mark.parametrize("field, effect", [
        ("trail_blur", FilmEffect.TRAIL_BLUR),
        ("watercolor", FilmEffect.WATERCOLOR),
        ("glass_stripes_intensity", FilmEffect.FLUTED_GLASS),
    ])
    def test_zero_intensity_is_identity(self, field, effect, color, uv):
        u, v = uv
        params = ParameterSet(film_effect=effect, **{field: 0.0})
        np.testing.assert_array_equal(apply_effect(color, u, v, 2.0, params), color)

    @pytest.mark.parametrize("field, effect", [
        ("trail_blur", FilmEffect.TRAIL_BLUR),
        ("watercolor", FilmEffect.WATERCOLOR),
        ("glass_stripes_intensity", FilmEffect.FLUTED_GLASS),
        ("bloom_intensity", FilmEffect.BLOOM),
        ("film_noise_intensity", FilmEffect.FILM_NOISE),
    ])
    def test_active_effect_changes_color(self, field, effect, color, uv):
        u, v = uv
        params = ParameterSet(film_effect=effect, **{field: 0.15})
        out = apply_effect(color, u, v, 2.0, params)
        assert out.shape == color.shape
        assert not np.allclose(out, color)

    def test_tone_mapping(self, color, uv):
        u, v = uv
        params = ParameterSet(film_effect=FilmEffect.TONE_MAPPING, tone_mapping_lut=ToneCurve.VINTAGE)
        np.testing.assert_array_equal(
            apply_effect(color, u, v, 0.0, params),
            apply_tone_curve(color, ToneCurve.VINTAGE),
        )

    def test_single_color(self):
        params = ParameterSet(film_effect=FilmEffect.WATERCOLOR, watercolor=0.8)
        out = apply_effect(np.array([0.2, 0.5, 0.7]), 0.3, 0.4, 1.0, params)
        assert out.shape == (3,)
        assert np.all(np.isfinite(out))
