"""Tests for per-pixel field evaluation."""

from dataclasses import replace

import numpy as np
import pytest

from ripplefield.core.params import AnchorPalette, FilmEffect, ParameterSet, ToneCurve
from ripplefield.pipeline import evaluate, evaluate_field, pixel_grid, render_field

W, H = 24, 16


@pytest.fixture
def busy_params():
    return ParameterSet(
        wave_count=8,
        wave_amplitude=3.0,
        wave_twirl=0.1,
        twirl_sources=3,
        twirl_location=1,
        twirl_seed_x=2.0,
        twirl_seed_y=5.0,
        turbulence=0.3,
        direction_drift=0.5,
        blend_mode=3,
    )


class TestPixelGrid:
    def test_pixel_centres(self):
        u, v = pixel_grid(4, 2)
        np.testing.assert_allclose(u[0], [0.125, 0.375, 0.625, 0.875])
        np.testing.assert_allclose(v[:, 0], [0.25, 0.75])


class TestEvaluate:
    def test_returns_rgb_tuple(self, params, palette):
        rgb = evaluate((0.25, 0.75), 1.0, params, palette)
        assert isinstance(rgb, tuple) and len(rgb) == 3
        assert all(0.0 <= c <= 1.0 for c in rgb)

    def test_deterministic(self, busy_params, palette):
        a = evaluate((0.4, 0.6), 2.5, busy_params, palette)
        b = evaluate((0.4, 0.6), 2.5, busy_params, palette)
        assert a == b

    @pytest.mark.parametrize("row, col", [(0, 0), (7, 11), (15, 23)])
    def test_matches_rendered_pixel(self, busy_params, palette, row, col):
        frame = render_field(W, H, 1.7, busy_params, palette)
        rgb = evaluate(((col + 0.5) / W, (row + 0.5) / H), 1.7, busy_params, palette, (W, H))
        np.testing.assert_allclose(rgb, frame[row, col], atol=1e-9)

    def test_extreme_parameters_stay_finite(self, palette):
        params = ParameterSet(
            wave_count=12, wave_amplitude=10.0, wave_zoom=12.0, wave_twirl=0.2,
            twirl_sources=6, turbulence=1.0, noise_displacement=1.0,
            phase_randomness=3.0, amplitude_variation=3.0, direction_drift=2.0,
            brightness=1.0, contrast=2.0, saturation=3.0,
        )
        frame = evaluate_field(*pixel_grid(W, H), 1000.0, params, palette, (W, H))
        assert np.all(np.isfinite(frame))
        assert frame.min() >= 0.0 and frame.max() <= 1.0


class TestRenderField:
    def test_shape_and_range(self, params, palette):
        frame = render_field(W, H, 0.0, params, palette)
        assert frame.shape == (H, W, 3)
        assert frame.min() >= 0.0 and frame.max() <= 1.0

    def test_anchor_one_top_left(self, flat_params, palette):
        frame = render_field(W, H, 0.0, flat_params, palette)
        corners = palette.to_array()[:4]

        def nearest(rgb):
            return int(np.argmin(np.linalg.norm(corners - rgb, axis=1)))

        assert nearest(frame[0, 0]) == 0
        assert nearest(frame[0, -1]) == 1
        assert nearest(frame[-1, -1]) == 2
        assert nearest(frame[-1, 0]) == 3

    def test_uniform_palette_renders_flat(self, flat_params):
        pal = AnchorPalette(("#4080c0",) * 8)
        frame = render_field(W, H, 0.0, flat_params, pal)
        assert np.max(np.abs(frame - pal.to_array()[0])) < 0.03

    def test_unknown_effect_matches_none(self, busy_params, palette):
        none = render_field(W, H, 0.5, busy_params, palette)
        unknown = render_field(W, H, 0.5, replace(busy_params, film_effect=42), palette)
        np.testing.assert_array_equal(none, unknown)

    def test_unknown_tone_curve_matches_aces(self, busy_params, palette):
        mapped = replace(busy_params, film_effect=FilmEffect.TONE_MAPPING)
        aces = render_field(W, H, 0.5, replace(mapped, tone_mapping_lut=ToneCurve.ACES), palette)
        unknown = render_field(W, H, 0.5, replace(mapped, tone_mapping_lut=99), palette)
        np.testing.assert_array_equal(aces, unknown)

    def test_unknown_blend_mode_renders(self, busy_params, palette):
        frame = render_field(W, H, 0.5, replace(busy_params, blend_mode=17), palette)
        assert np.all(np.isfinite(frame))

    @pytest.mark.parametrize("effect", list(FilmEffect))
    def test_every_effect_renders(self, busy_params, palette, effect):
        params = replace(
            busy_params,
            film_effect=effect,
            film_noise_intensity=0.1,
            bloom_intensity=0.5,
            ca_amount=0.01,
            lens_distortion=0.8,
            pixelation_size=4.0,
            trail_blur=0.5,
            watercolor=0.5,
            glass_stripes_intensity=0.5,
        )
        frame = render_field(W, H, 0.25, params, palette)
        assert frame.shape == (H, W, 3)
        assert frame.min() >= 0.0 and frame.max() <= 1.0
