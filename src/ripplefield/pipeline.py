"""
Per-pixel field evaluation.

Runs one query point (or an array of them) through the distortion
pipeline, gradient interpolation, effect chain and final grade. The
evaluator is a pure function of its inputs: the same position, time,
parameters and palette always give the same color.
"""

from typing import Sequence

import numpy as np

from ripplefield.core.colorgrade import final_grade
from ripplefield.core.distortion import distort
from ripplefield.core.effects import apply_effect
from ripplefield.core.gradient import interpolate
from ripplefield.core.params import AnchorPalette, ParameterSet

DEFAULT_RESOLUTION = (1920, 1080)


def evaluate_field(
    u,
    v,
    time: float,
    params: ParameterSet,
    palette: AnchorPalette,
    resolution: Sequence[int] = DEFAULT_RESOLUTION,
) -> np.ndarray:
    """
    Evaluate many query points at once.

    Args:
        u, v: Normalized positions in [0, 1] (arrays of equal shape).
        time: Animation time (already scaled by wave speed).
        params: Parameter snapshot.
        palette: Anchor colors.
        resolution: (width, height) of the target surface.

    Returns:
        Float array of shape u.shape + (3,) in [0, 1].
    """
    resolution = (int(resolution[0]), int(resolution[1]))
    anchors = palette.to_array()

    d = distort(u, v, time, params, resolution)
    color = interpolate(d.sample_u, d.sample_v, d.wave, anchors, params.blend_mode)
    color = apply_effect(color, d.u, d.v, time, params)

    return final_grade(
        color,
        brightness=params.brightness,
        contrast=params.contrast,
        saturation=params.saturation,
    )


def evaluate(
    position: Sequence[float],
    time: float,
    params: ParameterSet,
    palette: AnchorPalette,
    resolution: Sequence[int] = DEFAULT_RESOLUTION,
) -> tuple[float, float, float]:
    """Color of a single query point as an (r, g, b) tuple in [0, 1]."""
    rgb = evaluate_field(position[0], position[1], time, params, palette, resolution)
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


def pixel_grid(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Pixel-centre UV coordinates.

    Row 0 is the top of the image, so anchor 1 lands top-left.
    """
    u = (np.arange(width, dtype=np.float64) + 0.5) / width
    v = (np.arange(height, dtype=np.float64) + 0.5) / height
    return np.meshgrid(u, v)


def render_field(
    width: int,
    height: int,
    time: float,
    params: ParameterSet,
    palette: AnchorPalette,
) -> np.ndarray:
    """(H, W, 3) float64 frame in [0, 1]."""
    u, v = pixel_grid(width, height)
    return evaluate_field(u, v, time, params, palette, (width, height))
