"""
Final color grade.

Brightness, contrast and saturation, applied unconditionally after the
effect chain, then conversion to 8-bit frames.
"""

import numpy as np

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])


def luma(color) -> np.ndarray:
    """Rec. 601 luma of an (..., 3) color array."""
    return np.asarray(color, dtype=np.float64) @ LUMA_WEIGHTS


def final_grade(
    color,
    brightness: float = 0.0,
    contrast: float = 1.0,
    saturation: float = 1.0,
) -> np.ndarray:
    """
    Apply the final adjustments and clamp.

    Args:
        color: (..., 3) float color.
        brightness: Additive offset (-1 to 1).
        contrast: Scale around mid gray (0 to 2).
        saturation: 0 = grayscale, 1 = unchanged, >1 boosts.

    Returns:
        (..., 3) float array in [0, 1].
    """
    color = np.asarray(color, dtype=np.float64) + brightness
    color = (color - 0.5) * contrast + 0.5

    gray = np.asarray(luma(color))[..., np.newaxis]
    color = gray + (color - gray) * saturation

    return np.clip(color, 0.0, 1.0)


def to_uint8(rgb: np.ndarray) -> np.ndarray:
    """[0, 1] float RGB to uint8, rounding to nearest."""
    return (np.clip(rgb, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)
