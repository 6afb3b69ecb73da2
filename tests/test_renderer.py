"""Tests for the frame driver."""

from dataclasses import replace

import numpy as np
import pytest

from ripplefield.core.params import DEFAULT_PALETTE, ParameterSet
from ripplefield.renderer import FieldRenderer, RenderConfig


class TestFrameTime:
    def test_scaled_by_wave_speed(self):
        config = RenderConfig(fps=30, time_offset=1.0)
        renderer = FieldRenderer(ParameterSet(wave_speed=2.0), config=config)
        assert renderer.frame_time(15) == pytest.approx(3.0)

    def test_zero_speed_freezes_time(self):
        renderer = FieldRenderer(ParameterSet(wave_speed=0.0))
        assert renderer.frame_time(1000) == 0.0


class TestFieldRenderer:
    def test_defaults(self):
        renderer = FieldRenderer()
        assert renderer.params == ParameterSet()
        assert renderer.palette == DEFAULT_PALETTE
        assert (renderer.cfg.width, renderer.cfg.height, renderer.cfg.fps) == (1920, 1080, 60)

    def test_single_frame(self, small_config):
        renderer = FieldRenderer(config=small_config)
        frame = renderer.render_frame(0)
        assert frame.shape == (18, 32, 3)
        assert frame.dtype == np.uint8

    def test_static_without_speed(self, small_config):
        renderer = FieldRenderer(ParameterSet(wave_speed=0.0), config=small_config)
        frames = list(renderer.render_frames(3))
        np.testing.assert_array_equal(frames[0], frames[2])

    def test_animates_with_speed(self, small_config):
        renderer = FieldRenderer(ParameterSet(wave_speed=10.0), config=small_config)
        frames = list(renderer.render_frames(3))
        assert not np.array_equal(frames[0], frames[2])

    def test_still_matches_frame(self, small_config):
        renderer = FieldRenderer(ParameterSet(wave_speed=1.5), config=small_config)
        np.testing.assert_array_equal(
            renderer.render_still(renderer.frame_time(12)),
            renderer.render_frame(12),
        )

    def test_set_state(self, small_config, palette):
        renderer = FieldRenderer(config=small_config)
        before = renderer.render_frame(0)
        renderer.set_state(replace(renderer.params, wave_zoom=1.0), palette)
        assert renderer.palette == palette
        assert not np.array_equal(before, renderer.render_frame(0))

    def test_progress_callback(self, small_config):
        renderer = FieldRenderer(config=small_config)
        progress = []
        frames = list(renderer.render_frames(4, progress_callback=lambda c, t: progress.append((c, t))))
        assert len(frames) == 4
        assert progress == [(1, 4), (2, 4), (3, 4), (4, 4)]

    def test_generator_is_lazy(self, small_config):
        renderer = FieldRenderer(config=small_config)
        gen = renderer.render_frames(1000)
        frame = next(gen)
        assert frame.shape == (18, 32, 3)
