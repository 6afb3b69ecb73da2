"""
Still image export.
"""

from pathlib import Path

import numpy as np
from PIL import Image


def save_png(frame: np.ndarray, output_path: str | Path, compress_level: int = 6) -> Path:
    """
    Write an (H, W, 3) uint8 RGB frame as PNG.

    Args:
        frame: Rendered frame.
        output_path: Destination file; parent directories are created.
        compress_level: zlib level passed to Pillow (0-9).

    Returns:
        Path to the written file.
    """
    frame = np.asarray(frame)
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) frame, got shape {frame.shape}")
    if frame.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 frame, got {frame.dtype}")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    img = Image.fromarray(np.ascontiguousarray(frame))
    img.save(output_path, "PNG", compress_level=compress_level)

    return output_path
