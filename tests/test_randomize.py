"""Tests for full and color-only randomization."""

from dataclasses import replace

import numpy as np
import pytest

from ripplefield.core.params import AnchorPalette, BlendMode, FilmEffect, ParameterSet, midpoint
from ripplefield.randomize import (
    pick_blend_mode,
    randomize,
    randomize_colors_only,
    regenerate_twirl_seeds,
)


@pytest.fixture
def styled_params():
    return ParameterSet(
        turbulence=0.4,
        noise_displacement=0.1,
        amplitude_variation=0.7,
        brightness=0.1,
        contrast=1.8,
        saturation=0.9,
        film_effect=FilmEffect.BLOOM,
        bloom_intensity=0.6,
        glass_stripes_intensity=0.5,
        tone_mapping_lut=4,
    )


class TestRandomize:
    def test_ranges(self, params):
        rng = np.random.default_rng(0)
        for _ in range(50):
            p, _ = randomize(params, rng)
            assert 4 <= p.wave_count <= 12
            assert 0.5 <= p.wave_amplitude <= 10.0
            assert 0.5 <= p.wave_zoom <= 12.0
            assert 0.1 <= p.wave_frequency <= 3.0
            assert 0.0 <= p.wave_twirl <= 0.2
            assert 0.2 <= p.wave_speed <= 3.0
            assert 0.0 <= p.phase_randomness <= 3.0
            assert 0.0 <= p.direction_drift <= 2.0
            assert 1 <= p.twirl_sources <= 6
            assert p.twirl_location in (0, 1, 2)
            assert p.blend_mode in (0, 1, 2, 3)
            assert 0.0 <= p.twirl_seed_x < 10.0
            assert 0.0 <= p.twirl_seed_y < 10.0

    def test_rounded_values(self, params):
        p, _ = randomize(params, np.random.default_rng(5))
        assert p.wave_amplitude == round(p.wave_amplitude, 2)
        assert p.wave_zoom == round(p.wave_zoom, 1)
        assert p.wave_twirl == round(p.wave_twirl, 3)

    def test_effects_reset(self, styled_params):
        p, _ = randomize(styled_params, np.random.default_rng(1))
        defaults = ParameterSet()
        assert p.film_effect == FilmEffect.NONE
        assert p.bloom_intensity == defaults.bloom_intensity
        assert p.glass_stripes_intensity == defaults.glass_stripes_intensity
        assert p.tone_mapping_lut == defaults.tone_mapping_lut

    def test_specials_and_grade_kept(self, styled_params):
        p, _ = randomize(styled_params, np.random.default_rng(2))
        assert p.turbulence == 0.4
        assert p.noise_displacement == 0.1
        assert p.amplitude_variation == 0.7
        assert (p.brightness, p.contrast, p.saturation) == (0.1, 1.8, 0.9)

    def test_palette_midpoints_derived(self, params):
        _, pal = randomize(params, np.random.default_rng(3))
        c = pal.corners
        assert pal.edges == (
            midpoint(c[0], c[1]),
            midpoint(c[1], c[2]),
            midpoint(c[2], c[3]),
            midpoint(c[3], c[0]),
        )

    def test_seeded_is_deterministic(self, params):
        a = randomize(params, np.random.default_rng(99))
        b = randomize(params, np.random.default_rng(99))
        assert a == b

    def test_input_unchanged(self, params):
        before = replace(params)
        randomize(params, np.random.default_rng(4))
        assert params == before


class TestBlendModePick:
    def test_dark_palette_avoids_multiply_and_overlay(self):
        dark = AnchorPalette(("#101010",) * 8)
        rng = np.random.default_rng(0)
        picks = {pick_blend_mode(dark, rng) for _ in range(200)}
        assert picks <= {BlendMode.SMOOTH, BlendMode.SCREEN}
        assert picks == {BlendMode.SMOOTH, BlendMode.SCREEN}

    def test_light_palette_uses_all_modes(self):
        light = AnchorPalette(("#e0e0e0",) * 8)
        rng = np.random.default_rng(0)
        picks = {pick_blend_mode(light, rng) for _ in range(200)}
        assert picks == {0, 1, 2, 3}


class TestColorsOnly:
    def test_returns_new_palette(self, params):
        pal = randomize_colors_only(params, np.random.default_rng(8))
        assert isinstance(pal, AnchorPalette)
        assert len(pal.colors) == 8

    def test_seeded_is_deterministic(self, params):
        a = randomize_colors_only(params, np.random.default_rng(8))
        b = randomize_colors_only(params, np.random.default_rng(8))
        assert a == b


class TestTwirlSeeds:
    def test_only_seeds_change(self, params):
        p = regenerate_twirl_seeds(params, np.random.default_rng(6))
        assert replace(p, twirl_seed_x=0.0, twirl_seed_y=0.0) == params
        assert (p.twirl_seed_x, p.twirl_seed_y) != (0.0, 0.0)
