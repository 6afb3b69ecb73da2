"""Tests for the FFmpeg video encoder."""

import shutil
import sys
from pathlib import Path

import numpy as np
import pytest

from ripplefield.io import encoder
from ripplefield.io.encoder import build_command, encode_video
from ripplefield.renderer import FieldRenderer, RenderConfig

requires_ffmpeg = pytest.mark.skipif(shutil.which("ffmpeg") is None, reason="ffmpeg not installed")


def _solid_frames(n: int, width: int, height: int, color=(128, 64, 200)):
    """Generate N solid-color frames."""
    frame = np.full((height, width, 3), color, dtype=np.uint8)
    for _ in range(n):
        yield frame.copy()


class TestBuildCommand:
    def test_raw_rgb_input(self):
        cmd = build_command(Path("out.mp4"), 320, 240, 30)
        assert cmd[0] == "ffmpeg"
        assert "rawvideo" in cmd and "rgb24" in cmd
        assert "320x240" in cmd
        assert cmd[-1] == "out.mp4"
        assert "libx264" in cmd

    def test_webm_uses_vp9(self):
        cmd = build_command(Path("out.webm"), 64, 64, 30)
        assert "libvpx-vp9" in cmd
        assert "-preset" not in cmd

    def test_quality_preset(self):
        cmd = build_command(Path("out.mp4"), 64, 64, 30, quality="fast")
        assert cmd[cmd.index("-crf") + 1] == "28"
        assert cmd[cmd.index("-preset") + 1] == "ultrafast"

    def test_unknown_quality_falls_back_to_high(self):
        cmd = build_command(Path("out.mp4"), 64, 64, 30, quality="bogus")
        assert cmd[cmd.index("-crf") + 1] == "18"

    def test_duration_limit(self):
        cmd = build_command(Path("out.mp4"), 64, 64, 30, duration=2.5)
        assert cmd[cmd.index("-t") + 1] == "2.5"

    def test_video_only(self):
        cmd = build_command(Path("out.mp4"), 64, 64, 30)
        assert cmd.count("-i") == 1
        assert "-c:a" not in cmd
        assert "-t" not in cmd


class TestEncoder:
    @requires_ffmpeg
    def test_produces_mp4(self, tmp_dir):
        output = tmp_dir / "test_output.mp4"
        result = encode_video(
            frame_iterator=_solid_frames(30, 320, 240),
            output_path=output,
            width=320,
            height=240,
            fps=30,
            quality="fast",
        )
        assert result.exists()
        assert result.stat().st_size > 0

    @requires_ffmpeg
    def test_progress_callback(self, tmp_dir):
        progress = []
        encode_video(
            frame_iterator=_solid_frames(15, 160, 120),
            output_path=tmp_dir / "test_progress.mp4",
            width=160,
            height=120,
            fps=30,
            quality="fast",
            total_frames=15,
            progress_callback=lambda c, t: progress.append((c, t)),
        )
        assert len(progress) == 15

    @requires_ffmpeg
    def test_rendered_frames(self, tmp_dir):
        renderer = FieldRenderer(config=RenderConfig(width=64, height=48, fps=24))
        output = encode_video(
            frame_iterator=renderer.render_frames(12),
            output_path=tmp_dir / "field.mp4",
            width=64,
            height=48,
            fps=24,
            quality="fast",
        )
        assert output.stat().st_size > 0

    def test_nonzero_exit_raises(self, tmp_dir, monkeypatch):
        failing = [sys.executable, "-c", "import sys; sys.stdin.buffer.read(); sys.exit(3)"]
        monkeypatch.setattr(encoder, "build_command", lambda *args, **kwargs: failing)
        with pytest.raises(RuntimeError, match="code 3"):
            encode_video(
                frame_iterator=_solid_frames(2, 16, 16),
                output_path=tmp_dir / "out.mp4",
                width=16,
                height=16,
            )
