"""Tests for PNG still export."""

import numpy as np
import pytest
from PIL import Image

from ripplefield.io.exporter import save_png


class TestSavePng:
    def test_round_trip(self, tmp_dir):
        frame = np.random.randint(0, 256, (24, 40, 3), dtype=np.uint8)
        path = save_png(frame, tmp_dir / "still.png")
        assert path.exists()
        with Image.open(path) as img:
            assert img.size == (40, 24)
            assert img.mode == "RGB"
            np.testing.assert_array_equal(np.asarray(img), frame)

    def test_creates_parent_dirs(self, tmp_dir):
        frame = np.zeros((4, 4, 3), dtype=np.uint8)
        path = save_png(frame, tmp_dir / "a" / "b" / "still.png")
        assert path.exists()

    def test_rejects_float_frame(self, tmp_dir):
        with pytest.raises(ValueError):
            save_png(np.zeros((4, 4, 3)), tmp_dir / "bad.png")

    def test_rejects_wrong_shape(self, tmp_dir):
        with pytest.raises(ValueError):
            save_png(np.zeros((4, 4), dtype=np.uint8), tmp_dir / "bad.png")
