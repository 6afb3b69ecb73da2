"""
FFmpeg video encoder.

Pipes raw RGB frames to ffmpeg via stdin. Frames go straight from numpy
arrays to the encoder.
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

# Quality presets: (preset, crf, pix_fmt)
QUALITY_PRESETS = {
    "high": ("slow", "18", "yuv444p"),
    "medium": ("medium", "23", "yuv420p"),
    "fast": ("ultrafast", "28", "yuv420p"),
}

# Container -> video codec args
CODECS = {
    ".mp4": ["-c:v", "libx264"],
    ".mov": ["-c:v", "libx264"],
    ".webm": ["-c:v", "libvpx-vp9", "-b:v", "0"],
}

VIDEO_SUFFIXES = tuple(CODECS)


def build_command(
    output_path: Path,
    width: int,
    height: int,
    fps: int,
    quality: str = "high",
    duration: float | None = None,
) -> list[str]:
    """ffmpeg argument list for a raw rgb24 stdin stream."""
    preset, crf, pix_fmt = QUALITY_PRESETS.get(quality, QUALITY_PRESETS["high"])
    video_args = CODECS.get(output_path.suffix.lower(), CODECS[".mp4"])

    cmd = [
        "ffmpeg", "-y",
        "-hide_banner", "-loglevel", "error",
        # Raw video input from pipe
        "-f", "rawvideo",
        "-pix_fmt", "rgb24",
        "-s", f"{width}x{height}",
        "-r", str(fps),
        "-i", "pipe:0",
    ]

    cmd += video_args
    if video_args[1] == "libx264":
        cmd += ["-preset", preset]
    cmd += ["-crf", crf, "-pix_fmt", pix_fmt]

    if duration is not None:
        cmd += ["-t", str(duration)]

    cmd.append(str(output_path))
    return cmd


def encode_video(
    frame_iterator: Iterator,
    output_path: Path,
    width: int = 1920,
    height: int = 1080,
    fps: int = 60,
    quality: str = "high",
    duration: float | None = None,
    total_frames: int | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> Path:
    """
    Encode frames to a video file.

    Args:
        frame_iterator: Yields (H, W, 3) uint8 numpy arrays.
        output_path: Output path; the suffix picks the codec (.mp4, .mov, .webm).
        width: Frame width.
        height: Frame height.
        fps: Frames per second.
        quality: "high", "medium", or "fast".
        duration: Optional output duration limit in seconds.
        total_frames: Total frame count for progress reporting.
        progress_callback: Optional callback(current_frame, total_frames).

    Returns:
        Path to the output file.

    Raises:
        RuntimeError: If ffmpeg exits with a non-zero status.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = build_command(output_path, width, height, fps, quality, duration)
    logger.debug("Running %s", " ".join(cmd))

    proc = subprocess.Popen(
        cmd,
        stdin=subprocess.PIPE,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )

    frame_count = 0
    try:
        for frame in frame_iterator:
            proc.stdin.write(frame.tobytes())
            frame_count += 1

            if progress_callback and total_frames:
                progress_callback(frame_count, total_frames)

    except BrokenPipeError:
        # ffmpeg quit early; its exit status below carries the reason
        logger.debug("ffmpeg closed its input after %d frames", frame_count)
    finally:
        if proc.stdin:
            try:
                proc.stdin.close()
            except BrokenPipeError:
                pass

    stderr = proc.stderr.read().decode("utf-8", errors="replace")
    proc.wait()

    if proc.returncode != 0:
        # Filter out common non-error ffmpeg messages
        error_lines = [
            line for line in stderr.split("\n")
            if "error" in line.lower() or "invalid" in line.lower()
        ]
        error_msg = "\n".join(error_lines[-5:]) if error_lines else stderr[-500:]
        raise RuntimeError(
            f"ffmpeg exited with code {proc.returncode}: {error_msg}"
        )

    return output_path
