"""Tests for the final grade."""

import numpy as np

from ripplefield.core.colorgrade import final_grade, luma, to_uint8


class TestFinalGrade:
    def test_neutral_is_identity(self):
        color = np.random.rand(20, 30, 3)
        np.testing.assert_allclose(final_grade(color), color)

    def test_zero_saturation_is_gray(self):
        color = np.random.rand(50, 3)
        out = final_grade(color, saturation=0.0)
        np.testing.assert_allclose(out[:, 0], out[:, 1])
        np.testing.assert_allclose(out[:, 1], out[:, 2])

    def test_contrast_pivots_on_mid_gray(self):
        gray = np.full(3, 0.5)
        np.testing.assert_allclose(final_grade(gray, contrast=2.0), gray)

    def test_brightness_offsets(self):
        np.testing.assert_allclose(final_grade(np.full(3, 0.2), brightness=0.1), 0.3)

    def test_output_clamped(self):
        color = np.random.rand(100, 3) * 4.0 - 2.0
        out = final_grade(color, brightness=0.3, contrast=2.0, saturation=2.5)
        assert out.min() >= 0.0
        assert out.max() <= 1.0

    def test_single_color(self):
        out = final_grade((0.2, 0.4, 0.6), contrast=1.5, saturation=1.5)
        assert out.shape == (3,)


class TestHelpers:
    def test_luma_of_white(self):
        assert abs(float(luma(np.ones(3))) - 1.0) < 1e-9

    def test_to_uint8_rounds(self):
        out = to_uint8(np.array([0.0, 0.5, 1.0, 1.7, -0.2]))
        np.testing.assert_array_equal(out, [0, 128, 255, 255, 0])
        assert out.dtype == np.uint8
